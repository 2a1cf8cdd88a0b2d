"""Application service: Load Catalog use case.

The one asynchronous boundary in the original client: fetch the whole
catalog once and replace the store's product list with it. Transient
source failures are retried a fixed number of times.
"""

from __future__ import annotations

import logging

from storefront.application.store import Store
from storefront.domain.actions import SetError, SetLoading, SetProducts
from storefront.domain.exceptions import CatalogUnavailableError
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class LoadCatalogHandler:

    def __init__(self, product_repo: ProductRepository, retries: int = 2) -> None:
        self._product_repo = product_repo
        self._retries = max(0, retries)

    def handle(self, store: Store) -> None:
        """Load the catalog into ``store``.

        Raises CatalogUnavailableError once every attempt has failed;
        the message is also left in ``store.state.error``.
        """
        store.dispatch(SetLoading(True))
        try:
            for attempt in range(1, self._retries + 2):
                try:
                    products = self._product_repo.list_all()
                    break
                except CatalogUnavailableError as exc:
                    if attempt > self._retries:
                        store.dispatch(SetError(str(exc)))
                        raise
                    logger.warning(
                        "Catalog load failed (attempt %d of %d): %s",
                        attempt, self._retries + 1, exc,
                    )
            store.dispatch(SetProducts(tuple(products)))
            store.dispatch(SetError(None))
            logger.debug("Loaded %d products", len(products))
        finally:
            store.dispatch(SetLoading(False))
