"""Action vocabulary consumed by the reducer.

Each action is a frozen dataclass carrying only the fields it needs.
``Action`` is the closed union of all of them; dispatching anything else
is a no-op.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from storefront.domain.model.product import Product


# --- Catalog ------------------------------------------------------------------


@dataclass(frozen=True)
class SetProducts:
    products: tuple[Product, ...]


@dataclass(frozen=True)
class AddProduct:
    product: Product


@dataclass(frozen=True)
class UpdateProduct:
    product: Product


@dataclass(frozen=True)
class DeleteProduct:
    product_id: str


# --- Cart ---------------------------------------------------------------------


@dataclass(frozen=True)
class AddToCart:
    """Add ``quantity`` units of one variant of ``product``.

    Callers must pass ``quantity >= 1``; the reducer trusts it.
    """

    product: Product
    variant_id: str
    quantity: int = 1


@dataclass(frozen=True)
class UpdateCartItem:
    product_id: str
    variant_id: str
    quantity: int


@dataclass(frozen=True)
class RemoveFromCart:
    product_id: str
    variant_id: str


@dataclass(frozen=True)
class ClearCart:
    pass


# --- Favorites ----------------------------------------------------------------


@dataclass(frozen=True)
class AddToFavorites:
    product_id: str


@dataclass(frozen=True)
class RemoveFromFavorites:
    product_id: str


# --- Status -------------------------------------------------------------------


@dataclass(frozen=True)
class SetLoading:
    loading: bool


@dataclass(frozen=True)
class SetError:
    error: str | None


Action = Union[
    SetProducts,
    AddProduct,
    UpdateProduct,
    DeleteProduct,
    AddToCart,
    UpdateCartItem,
    RemoveFromCart,
    ClearCart,
    AddToFavorites,
    RemoveFromFavorites,
    SetLoading,
    SetError,
]
