"""BDD tests for keyword recommendations."""

from catalogue.product.product import Product
from catalogue.recommendations import recommend
from protean.utils.globals import current_domain
from pytest_bdd import parsers, scenarios, then, when

scenarios("features/recommendations.feature")


@when(parsers.cfparse('a shopper asks for "{text}"'), target_fixture="picks")
def ask(text):
    return recommend(current_domain.repository_for(Product).list_all(), text=text)


@when(parsers.cfparse('a shopper browsing "{category}" asks for "{text}"'), target_fixture="picks")
def ask_in_category(text, category):
    return recommend(current_domain.repository_for(Product).list_all(), text=text, category=category)


@then(parsers.cfparse('the recommendations are "{names}"'))
def recommendations_are(picks, names):
    assert [p.name for p in picks] == [n.strip() for n in names.split(",")]


@then(parsers.cfparse("{count:d} different products are recommended"))
def n_different_products(picks, count):
    assert len({p.name for p in picks}) == count
