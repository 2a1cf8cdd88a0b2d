"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from storefront.application.load_catalog import LoadCatalogHandler
from storefront.application.persistence_bridge import CartPersistenceBridge
from storefront.application.store import Store
from storefront.infrastructure.config import Settings
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from storefront.infrastructure.persistence.json_storage import JsonFileStorage
from storefront.infrastructure.persistence.sample_catalog import SAMPLE_PRODUCTS


def product_repository(settings: Settings) -> JsonProductRepository:
    return JsonProductRepository(settings.data_dir / "products.json", seed=SAMPLE_PRODUCTS)


def order_repository(settings: Settings) -> JsonOrderRepository:
    return JsonOrderRepository(settings.data_dir / "orders.json")


def local_storage(settings: Settings) -> JsonFileStorage:
    return JsonFileStorage(settings.data_dir / "storage.json")


def catalog_loader(settings: Settings) -> LoadCatalogHandler:
    return LoadCatalogHandler(product_repository(settings), retries=settings.catalog_retries)


def start_store(settings: Settings) -> Store:
    """Application start-up: load the catalog, hydrate, then write through.

    Raises CatalogUnavailableError if the catalog cannot be loaded; the
    cart is not hydrated in that case.
    """
    store = Store()
    catalog_loader(settings).handle(store)

    bridge = CartPersistenceBridge(
        local_storage(settings),
        cart_key=settings.cart_key,
        favorites_key=settings.favorites_key,
    )
    bridge.hydrate(store)
    bridge.attach(store)
    return store
