from dataclasses import dataclass
from typing import Iterable, Optional
from ..errors import QuantityLimitReached
from ..models.models import CartItem

@dataclass(frozen=True)
class AddToCartDecision:
    allowed: bool
    current_quantity: int
    message: Optional[str] = None

def find_cart_item(items: Iterable[CartItem], product_id: int) -> Optional[CartItem]:
    return next((item for item in items if item.product_id == product_id), None)

def check_add_to_cart(items: Iterable[CartItem], product_id: int, total_stock: int) -> AddToCartDecision:
    """Decide whether one more unit of a product fits in the cart."""
    item = find_cart_item(items, product_id)
    if item is None:
        # First unit always goes in as a new line
        return AddToCartDecision(allowed=True, current_quantity=0)

    if item.quantity + 1 > total_stock:
        return AddToCartDecision(
            allowed=False,
            current_quantity=item.quantity,
            message=str(QuantityLimitReached(item.quantity))
        )
    return AddToCartDecision(allowed=True, current_quantity=item.quantity)

def ensure_can_add(items: Iterable[CartItem], product_id: int, total_stock: int) -> None:
    decision = check_add_to_cart(items, product_id, total_stock)
    if not decision.allowed:
        raise QuantityLimitReached(decision.current_quantity)
