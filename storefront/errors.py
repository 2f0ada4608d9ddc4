class StorefrontError(Exception):
    pass

class QuantityLimitReached(StorefrontError):
    def __init__(self, current_quantity: int):
        self.current_quantity = current_quantity
        super().__init__(f"Only {current_quantity} quantity can be added for this item")

class ProductNotFound(StorefrontError):
    def __init__(self, product_id):
        self.product_id = product_id
        super().__init__(f"Product {product_id} not found")
