from dataclasses import dataclass, field
from typing import Any, List, Optional

@dataclass
class Product:
    id: int
    title: str
    description: str
    category: str
    brand: str
    price: float
    sale_price: float
    total_stock: int
    image: Optional[str] = None

    @property
    def on_sale(self) -> bool:
        return self.sale_price > 0

    @property
    def effective_price(self) -> float:
        return self.sale_price if self.on_sale else self.price

@dataclass
class Review:
    id: int
    product_id: int
    user_id: int
    user_name: str
    message: str
    rating: Any = None

@dataclass
class CartItem:
    product_id: int
    title: str
    price: float
    sale_price: float
    quantity: int

    @property
    def effective_price(self) -> float:
        return self.sale_price if self.sale_price > 0 else self.price

@dataclass
class Cart:
    user_id: int
    items: List[CartItem] = field(default_factory=list)

@dataclass
class FeatureImage:
    id: int
    image: str
