import os
from typing import List, Optional
import psycopg
from ..models.models import Product, Review, Cart, CartItem, FeatureImage
from ..utils.constants import SORT_OPTIONS, DEFAULT_SORT

PRODUCT_COLUMNS = "id, title, description, category, brand, price, sale_price, total_stock, image"

class Database:
    def __init__(self):
        self.DATABASE_URL = os.getenv('DATABASE_URL')
        if not self.DATABASE_URL:
            raise ValueError("DATABASE_URL environment variable is not set")

    def get_connection(self) -> psycopg.Connection:
        return psycopg.connect(
            self.DATABASE_URL,
            connect_timeout=30,
            application_name='storefront_bot'
        )

    def get_products(self, category: Optional[str] = None, brand: Optional[str] = None,
                     sort: str = DEFAULT_SORT) -> List[Product]:
        if sort not in SORT_OPTIONS:
            raise ValueError(f"Unknown sort option: {sort}")

        conditions = []
        params = []
        if category:
            conditions.append("category = %s")
            params.append(category)
        if brand:
            conditions.append("brand = %s")
            params.append(brand)
        where = f"WHERE {' AND '.join(conditions)}" if conditions else ""

        with self.get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    f"SELECT {PRODUCT_COLUMNS} FROM products {where} ORDER BY {SORT_OPTIONS[sort]}",
                    params
                )
                return [Product(*row) for row in cur.fetchall()]

    def get_product(self, product_id: int) -> Optional[Product]:
        with self.get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(f"SELECT {PRODUCT_COLUMNS} FROM products WHERE id = %s", (product_id,))
                row = cur.fetchone()
                return Product(*row) if row else None

    def get_feature_images(self) -> List[FeatureImage]:
        with self.get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute("SELECT id, image FROM feature_images ORDER BY id")
                return [FeatureImage(id=id, image=image) for id, image in cur.fetchall()]

    def get_reviews(self, product_id: int) -> List[Review]:
        with self.get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    """
                    SELECT id, product_id, user_id, user_name, message, rating
                    FROM reviews
                    WHERE product_id = %s
                    ORDER BY created_at, id
                    """,
                    (product_id,)
                )
                return [Review(*row) for row in cur.fetchall()]

    def add_review(self, product_id: int, user_id: int, user_name: str, message: str, rating: int) -> Review:
        with self.get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    """
                    INSERT INTO reviews (product_id, user_id, user_name, message, rating)
                    VALUES (%s, %s, %s, %s, %s) RETURNING id
                    """,
                    (product_id, user_id, user_name, message, rating)
                )
                review_id = cur.fetchone()[0]
                conn.commit()
                return Review(
                    id=review_id,
                    product_id=product_id,
                    user_id=user_id,
                    user_name=user_name,
                    message=message,
                    rating=rating
                )

    def _fetch_cart(self, cur: psycopg.Cursor, user_id: int) -> Cart:
        cur.execute(
            """
            SELECT p.id, p.title, p.price, p.sale_price, c.quantity
            FROM cart_items c
            JOIN products p ON c.product_id = p.id
            WHERE c.user_id = %s
            ORDER BY c.created_at, p.id
            """,
            (user_id,)
        )
        return Cart(user_id=user_id, items=[CartItem(*row) for row in cur.fetchall()])

    def get_cart(self, user_id: int) -> Cart:
        with self.get_connection() as conn:
            with conn.cursor() as cur:
                return self._fetch_cart(cur, user_id)

    def add_to_cart(self, user_id: int, product_id: int, quantity: int = 1) -> Cart:
        # Stock is checked by the caller, not here
        with self.get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    """
                    INSERT INTO cart_items (user_id, product_id, quantity)
                    VALUES (%s, %s, %s)
                    ON CONFLICT (user_id, product_id)
                    DO UPDATE SET quantity = cart_items.quantity + EXCLUDED.quantity
                    """,
                    (user_id, product_id, quantity)
                )
                conn.commit()
                return self._fetch_cart(cur, user_id)

    def remove_from_cart(self, user_id: int, product_id: int) -> Cart:
        with self.get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    "DELETE FROM cart_items WHERE user_id = %s AND product_id = %s",
                    (user_id, product_id)
                )
                conn.commit()
                return self._fetch_cart(cur, user_id)

# Initialize database instance
db = Database()
