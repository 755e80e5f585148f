"""Schema management for domains backed by relational providers."""

from protean.domain import Domain
from sqlalchemy import create_engine

_RELATIONAL_PROVIDERS = ("sqlite", "postgresql")


def _register_models(domain: Domain, provider) -> None:
    # Touching `_dao` forces the SQLAlchemy model for each element to be
    # built and attached to the provider's metadata.
    for registry in (domain.registry.aggregates, domain.registry.entities):
        for _, record in registry.items():
            if record.cls.meta_.provider == provider.name:
                domain.repository_for(record.cls)._dao  # noqa: B018


def setup_db(domain: Domain) -> None:
    """Create tables for every relational provider of the domain."""
    with domain.domain_context():
        for _, provider in domain.providers.items():
            if provider.conn_info["provider"] in _RELATIONAL_PROVIDERS:
                engine = create_engine(provider.conn_info["database_uri"])
                _register_models(domain, provider)
                provider._metadata.create_all(engine)


def drop_db(domain: Domain) -> None:
    """Drop tables for every relational provider of the domain."""
    with domain.domain_context():
        for _, provider in domain.providers.items():
            if provider.conn_info["provider"] in _RELATIONAL_PROVIDERS:
                engine = create_engine(provider.conn_info["database_uri"])
                provider._metadata.drop_all(engine)


def reset_data(domain: Domain) -> None:
    """Wipe all rows and stored events of a domain (used between tests)."""
    with domain.domain_context():
        for _, provider in domain.providers.items():
            provider._data_reset()
        domain.event_store.store._data_reset()


def table_counts(domain: Domain) -> dict:
    """Row count per aggregate and entity of the domain, keyed by element name."""
    counts = {}
    with domain.domain_context():
        for registry in (domain.registry.aggregates, domain.registry.entities):
            for _, record in registry.items():
                dao = domain.repository_for(record.cls)._dao
                counts[record.cls.__name__] = dao.query.all().total
    return counts
