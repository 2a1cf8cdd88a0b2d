"""The reducer: the single authority for store mutations.

``reduce(state, action)`` is pure, total and synchronous. It never
raises and never logs. Whenever an action changes nothing, the very
same state object is returned so callers can detect no-ops with ``is``.
"""

from __future__ import annotations

from dataclasses import replace

from storefront.domain.actions import (
    Action,
    AddProduct,
    AddToCart,
    AddToFavorites,
    ClearCart,
    DeleteProduct,
    RemoveFromCart,
    RemoveFromFavorites,
    SetError,
    SetLoading,
    SetProducts,
    UpdateCartItem,
    UpdateProduct,
)
from storefront.domain.model.cart import Cart, CartLineItem
from storefront.domain.model.state import StoreState


def reduce(state: StoreState, action: Action) -> StoreState:
    if isinstance(action, SetProducts):
        return replace(state, products=tuple(action.products))
    if isinstance(action, AddProduct):
        return _add_product(state, action)
    if isinstance(action, UpdateProduct):
        return _update_product(state, action)
    if isinstance(action, DeleteProduct):
        return _delete_product(state, action)
    if isinstance(action, AddToCart):
        return _add_to_cart(state, action)
    if isinstance(action, UpdateCartItem):
        return _update_cart_item(state, action)
    if isinstance(action, RemoveFromCart):
        return _remove_from_cart(state, action)
    if isinstance(action, ClearCart):
        if not state.cart.items:
            return state
        return replace(state, cart=Cart())
    if isinstance(action, AddToFavorites):
        if action.product_id in state.favorites:
            return state
        return replace(state, favorites=state.favorites + (action.product_id,))
    if isinstance(action, RemoveFromFavorites):
        if action.product_id not in state.favorites:
            return state
        return replace(
            state,
            favorites=tuple(f for f in state.favorites if f != action.product_id),
        )
    if isinstance(action, SetLoading):
        if state.loading == action.loading:
            return state
        return replace(state, loading=action.loading)
    if isinstance(action, SetError):
        if state.error == action.error:
            return state
        return replace(state, error=action.error)
    return state


# --- Catalog ------------------------------------------------------------------


def _add_product(state: StoreState, action: AddProduct) -> StoreState:
    if state.find_product(action.product.id) is not None:
        return _update_product(state, UpdateProduct(action.product))
    return replace(state, products=state.products + (action.product,))


def _update_product(state: StoreState, action: UpdateProduct) -> StoreState:
    if state.find_product(action.product.id) is None:
        return state
    return replace(
        state,
        products=tuple(
            action.product if p.id == action.product.id else p
            for p in state.products
        ),
    )


def _delete_product(state: StoreState, action: DeleteProduct) -> StoreState:
    if state.find_product(action.product_id) is None:
        return state
    return replace(
        state,
        products=tuple(p for p in state.products if p.id != action.product_id),
    )


# --- Cart ---------------------------------------------------------------------


def _add_to_cart(state: StoreState, action: AddToCart) -> StoreState:
    product = action.product
    variant = product.find_variant(action.variant_id)
    if variant is None:
        return state

    items = list(state.cart.items)
    index = state.cart.index_of(product.id, variant.id)
    if index is not None:
        # Merge in place: position reflects the first add
        existing = items[index]
        items[index] = replace(existing, quantity=existing.quantity + action.quantity)
    else:
        items.append(
            CartLineItem(
                product_id=product.id,
                variant_id=variant.id,
                quantity=action.quantity,
                product=product,
                variant=variant,
            )
        )
    return replace(state, cart=Cart(tuple(items)))


def _update_cart_item(state: StoreState, action: UpdateCartItem) -> StoreState:
    index = state.cart.index_of(action.product_id, action.variant_id)
    if index is None:
        return state
    if action.quantity < 1:
        return _remove_from_cart(
            state, RemoveFromCart(action.product_id, action.variant_id)
        )

    items = list(state.cart.items)
    items[index] = replace(items[index], quantity=action.quantity)
    return replace(state, cart=Cart(tuple(items)))


def _remove_from_cart(state: StoreState, action: RemoveFromCart) -> StoreState:
    key = (action.product_id, action.variant_id)
    remaining = tuple(item for item in state.cart.items if item.key != key)
    if len(remaining) == len(state.cart.items):
        return state
    return replace(state, cart=Cart(remaining))
