"""Admin product management for signed-in administrators."""

import structlog

from storefront.errors import (
    Forbidden,
    InvalidInput,
    OperationResult,
    StorefrontError,
    Unauthenticated,
    UnexpectedError,
)
from storefront.records import ProductRecord

logger = structlog.get_logger(__name__)


def validate_product_form(fields) -> None:
    if "name" in fields and not (fields.get("name") or "").strip():
        raise InvalidInput("Product name is required")
    price = fields.get("price")
    if price is None:
        return
    if isinstance(price, bool) or not isinstance(price, int | float):
        raise InvalidInput("Price must be a number")
    if price <= 0:
        raise InvalidInput("Price must be greater than zero")


class AdminCatalog:
    """Product CRUD gated on the holder's profile being an admin.

    Every operation returns an OperationResult; `products` holds the last
    successfully loaded listing, ordered by name.
    """

    def __init__(self, session, remote):
        self.session = session
        self.remote = remote
        self.products: list[ProductRecord] = []

    def _require_admin(self) -> None:
        if not self.session.is_authenticated:
            raise Unauthenticated("Not authenticated")
        if not self.session.is_admin:
            raise Forbidden()

    def _run(self, action, operation, **context) -> OperationResult:
        try:
            self._require_admin()
            operation()
        except StorefrontError as exc:
            logger.warning("admin_action_failed", action=action, reason=exc.reason, error=exc.message, **context)
            return OperationResult.failed(exc)
        except Exception:
            logger.exception("admin_action_crashed", action=action, **context)
            return OperationResult.failed(UnexpectedError())
        logger.info("admin_action_completed", action=action, **context)
        return OperationResult.ok()

    def load(self) -> OperationResult:
        def _load():
            self.products = self.remote.list_products()

        return self._run("load", _load)

    def add(self, **fields) -> OperationResult:
        def _add():
            if "name" not in fields:
                raise InvalidInput("Product name is required")
            validate_product_form(fields)
            self.remote.add_product(**fields)
            self.products = self.remote.list_products()

        return self._run("add", _add, name=fields.get("name"))

    def update(self, product_id, **fields) -> OperationResult:
        def _update():
            validate_product_form(fields)
            self.remote.update_product(product_id, **fields)
            self.products = self.remote.list_products()

        return self._run("update", _update, product_id=product_id)

    def remove(self, product_id) -> OperationResult:
        def _remove():
            self.remote.remove_product(product_id)
            self.products = [p for p in self.products if p.id != product_id]

        return self._run("remove", _remove, product_id=product_id)
