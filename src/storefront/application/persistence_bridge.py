"""Persistence bridge: cart <-> local key-value slot.

Hydration happens once at startup and replays every stored entry
through ``AddToCart`` against the *current* catalog. After that the
bridge mirrors the cart (and favorites) back to storage on every
change, overwriting the slot each time.

Stored cart format::

    [{"productId": "1", "variantId": "1-standard", "quantity": 2}, ...]
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable

from storefront.application.store import Store
from storefront.domain.actions import AddToCart, AddToFavorites
from storefront.domain.model.cart import Cart
from storefront.domain.model.state import StoreState
from storefront.domain.repository.key_value_storage import KeyValueStorage

logger = logging.getLogger(__name__)

CART_KEY = "cart"
FAVORITES_KEY = "favorites"


class StoredCartFormatError(ValueError):
    """The stored cart blob does not have the expected shape."""


class CartPersistenceBridge:

    def __init__(
        self,
        storage: KeyValueStorage,
        cart_key: str = CART_KEY,
        favorites_key: str = FAVORITES_KEY,
    ) -> None:
        self._storage = storage
        self._cart_key = cart_key
        self._favorites_key = favorites_key

    # --- Startup --------------------------------------------------------------

    def hydrate(self, store: Store) -> None:
        """Rebuild cart and favorites from storage.

        Must run after the catalog has been loaded. Never raises for
        bad stored data: the slot is logged and ignored.
        """
        self._hydrate_cart(store)
        self._hydrate_favorites(store)

    def _hydrate_cart(self, store: Store) -> None:
        raw = self._storage.get(self._cart_key)
        if raw is None:
            return
        try:
            entries = parse_cart(raw)
        except (json.JSONDecodeError, StoredCartFormatError) as exc:
            logger.warning("Ignoring unreadable stored cart: %s", exc)
            return

        restored = 0
        for product_id, variant_id, quantity in entries:
            product = store.state.find_product(product_id)
            if product is None:
                logger.debug("Dropping stored cart item for missing product %r", product_id)
                continue
            before = store.state
            store.dispatch(AddToCart(product, variant_id, quantity))
            if store.state is not before:
                restored += 1
        logger.debug("Hydrated %d of %d stored cart items", restored, len(entries))

    def _hydrate_favorites(self, store: Store) -> None:
        raw = self._storage.get(self._favorites_key)
        if raw is None:
            return
        try:
            ids = json.loads(raw)
        except json.JSONDecodeError as exc:
            logger.warning("Ignoring unreadable stored favorites: %s", exc)
            return
        if not isinstance(ids, list):
            logger.warning("Ignoring stored favorites: expected a list")
            return
        for product_id in ids:
            if isinstance(product_id, str) and store.state.find_product(product_id):
                store.dispatch(AddToFavorites(product_id))

    # --- Write-through --------------------------------------------------------

    def attach(self, store: Store) -> Callable[[], None]:
        """Mirror every subsequent change to storage.

        Returns the unsubscribe callable.
        """

        def on_change(previous: StoreState, current: StoreState) -> None:
            if current.cart != previous.cart:
                self._storage.set(self._cart_key, serialize_cart(current.cart))
            if current.favorites != previous.favorites:
                self._storage.set(self._favorites_key, json.dumps(list(current.favorites)))

        return store.subscribe(on_change)


# --- Serialization ------------------------------------------------------------


def serialize_cart(cart: Cart) -> str:
    return json.dumps(
        [
            {
                "productId": item.product_id,
                "variantId": item.variant_id,
                "quantity": item.quantity,
            }
            for item in cart
        ]
    )


def parse_cart(raw: str) -> list[tuple[str, str, int]]:
    """Decode a stored cart into ``(product_id, variant_id, quantity)`` triples.

    Raises json.JSONDecodeError or StoredCartFormatError.
    """
    data = json.loads(raw)
    if not isinstance(data, list):
        raise StoredCartFormatError("expected a list of cart entries")

    entries: list[tuple[str, str, int]] = []
    for entry in data:
        if not isinstance(entry, dict):
            raise StoredCartFormatError(f"cart entry is not an object: {entry!r}")
        product_id = entry.get("productId")
        variant_id = entry.get("variantId")
        quantity = entry.get("quantity")
        if not isinstance(product_id, str) or not isinstance(variant_id, str):
            raise StoredCartFormatError(f"cart entry has no product/variant id: {entry!r}")
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise StoredCartFormatError(f"cart entry has an invalid quantity: {entry!r}")
        entries.append((product_id, variant_id, quantity))
    return entries
