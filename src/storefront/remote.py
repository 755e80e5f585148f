"""Gateway from the storefront to the backend domains.

Every call enters the owning domain's context and returns detached records.
Domain failures surface as `RemoteRequestFailed` carrying a readable message.
"""

import json

import structlog
from protean.utils.globals import current_domain

from catalogue.product.management import AddProduct, RemoveProduct, UpdateProduct
from catalogue.product.product import Product
from identity.profile.management import CreateProfile, UpdateProfile
from identity.profile.profile import Profile
from ordering.order.order import Order
from ordering.order.placement import PlaceOrder
from storefront.auth import AuthClient
from storefront.context import remote_call
from storefront.errors import RemoteRequestFailed
from storefront.records import OrderItemRecord, OrderRecord, ProductRecord, ProfileRecord

logger = structlog.get_logger(__name__)

PRODUCT_FK_VIOLATION = (
    'insert or update on table "order_items" violates foreign key constraint "order_items_product_id_fkey"'
)


class RemoteDataService:
    """Table-scoped reads and writes over the catalogue, identity and ordering domains.

    The domains must already be initialized. `auth` exposes the identity
    domain's session operations.
    """

    def __init__(self, catalogue, identity, ordering, storage):
        self.catalogue = catalogue
        self.identity = identity
        self.ordering = ordering
        self.auth = AuthClient(identity, storage)

    # --- products ---

    def list_products(self) -> list[ProductRecord]:
        with remote_call(self.catalogue):
            products = current_domain.repository_for(Product).list_all()
            return [ProductRecord.from_product(p) for p in products]

    def browse_products(self, search=None, category=None, sort=None, limit=None) -> list[ProductRecord]:
        with remote_call(self.catalogue):
            products = current_domain.repository_for(Product).browse(
                search=search, category=category, sort=sort, limit=limit
            )
            return [ProductRecord.from_product(p) for p in products]

    def list_categories(self) -> list[str]:
        with remote_call(self.catalogue):
            return current_domain.repository_for(Product).categories()

    def fetch_products(self, product_ids) -> list[ProductRecord]:
        """One batched read for the given ids. Unknown ids are simply absent."""
        with remote_call(self.catalogue):
            products = current_domain.repository_for(Product).find_by_ids(product_ids)
            return [ProductRecord.from_product(p) for p in products]

    def get_product(self, product_id) -> ProductRecord:
        with remote_call(self.catalogue):
            return ProductRecord.from_product(current_domain.repository_for(Product).get(product_id))

    def add_product(self, **fields) -> str:
        with remote_call(self.catalogue):
            return current_domain.process(AddProduct(**fields), asynchronous=False)

    def update_product(self, product_id, **changes) -> None:
        with remote_call(self.catalogue):
            current_domain.process(UpdateProduct(product_id=product_id, **changes), asynchronous=False)

    def remove_product(self, product_id) -> None:
        with remote_call(self.catalogue):
            current_domain.process(RemoveProduct(product_id=product_id), asynchronous=False)

    # --- orders ---

    def place_order(self, user_id, lines) -> str:
        """Create an order and its line items in one unit of work.

        `lines` are `(product_id, quantity)` pairs. Every product must exist,
        otherwise nothing is written.
        """
        lines = list(lines)
        known = {record.id for record in self.fetch_products([pid for pid, _ in lines])}
        missing = [pid for pid, _ in lines if str(pid) not in known]
        if missing:
            logger.warning("order_rejected_unknown_products", user_id=str(user_id), product_ids=missing)
            raise RemoteRequestFailed(PRODUCT_FK_VIOLATION)

        items = [{"product_id": str(pid), "quantity": qty} for pid, qty in lines]
        with remote_call(self.ordering):
            return current_domain.process(
                PlaceOrder(user_id=user_id, items=json.dumps(items)),
                asynchronous=False,
            )

    def fetch_orders(self, user_id) -> list[OrderRecord]:
        """A user's orders, newest first, with line items joined to their products."""
        with remote_call(self.ordering):
            orders = current_domain.repository_for(Order).orders_for_user(user_id)
            raw = [
                (order, [(str(item.id), str(item.product_id), item.quantity) for item in order.line_items])
                for order in orders
            ]

        product_ids = {pid for _, items in raw for _, pid, _ in items}
        products = {record.id: record for record in self.fetch_products(product_ids)}

        return [
            OrderRecord(
                id=str(order.id),
                user_id=str(order.user_id),
                status=order.status,
                created_at=order.created_at,
                items=[
                    OrderItemRecord(id=item_id, product_id=pid, quantity=qty, product=products.get(pid))
                    for item_id, pid, qty in items
                ],
            )
            for order, items in raw
        ]

    # --- profiles ---

    def fetch_profile(self, user_id) -> ProfileRecord | None:
        with remote_call(self.identity):
            profiles = current_domain.repository_for(Profile)._dao.query.filter(id=str(user_id)).all().items
            return ProfileRecord.from_profile(profiles[0]) if profiles else None

    def insert_profile(self, profile: ProfileRecord) -> str:
        with remote_call(self.identity):
            command = CreateProfile(
                user_id=profile.id,
                email=profile.email,
                name=profile.name,
                is_admin=profile.is_admin,
                avatar=profile.avatar,
            )
            return current_domain.process(command, asynchronous=False)

    def update_profile(self, user_id, **changes) -> None:
        with remote_call(self.identity):
            current_domain.process(UpdateProfile(user_id=user_id, **changes), asynchronous=False)
