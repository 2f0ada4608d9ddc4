from typing import Dict, List, Tuple
from telegram import InlineKeyboardButton, InlineKeyboardMarkup
from ..models.models import Cart, Product
from .constants import EMOJIS, CATEGORIES, BRANDS, SORT_LABELS, MAX_RATING
from .formatters import format_product_line

def create_product_keyboard(products: List[Product]) -> InlineKeyboardMarkup:
    """Create a keyboard with one button per product."""
    keyboard = [
        [InlineKeyboardButton(format_product_line(product), callback_data=f'product:{product.id}')]
        for product in products
    ]
    return InlineKeyboardMarkup(keyboard)

def create_listing_keyboard(products: List[Product], section: str, facet_id: str,
                            current_sort: str) -> InlineKeyboardMarkup:
    """Product buttons followed by a row of sort buttons for the same listing."""
    keyboard = [
        [InlineKeyboardButton(format_product_line(product), callback_data=f'product:{product.id}')]
        for product in products
    ]
    keyboard.append([
        InlineKeyboardButton(
            f"{EMOJIS['CONFIRM']} {label}" if sort == current_sort else label,
            callback_data=f'listing:{section}:{facet_id}:{sort}'
        )
        for sort, label in SORT_LABELS.items()
    ])
    return InlineKeyboardMarkup(keyboard)

def _facet_keyboard(facets: Dict[str, Tuple[str, str]], section: str) -> InlineKeyboardMarkup:
    buttons = [
        InlineKeyboardButton(f"{icon} {label}", callback_data=f'listing:{section}:{facet_id}')
        for facet_id, (label, icon) in facets.items()
    ]
    # Two buttons per row
    keyboard = [buttons[i:i + 2] for i in range(0, len(buttons), 2)]
    return InlineKeyboardMarkup(keyboard)

def create_category_keyboard() -> InlineKeyboardMarkup:
    return _facet_keyboard(CATEGORIES, 'category')

def create_brand_keyboard() -> InlineKeyboardMarkup:
    return _facet_keyboard(BRANDS, 'brand')

def create_banner_keyboard() -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup([[
        InlineKeyboardButton(EMOJIS['PREV'], callback_data='banner:prev'),
        InlineKeyboardButton(EMOJIS['NEXT'], callback_data='banner:next'),
    ]])

def create_product_details_keyboard(product: Product) -> InlineKeyboardMarkup:
    """Create the details keyboard; out-of-stock products get an inert button."""
    if product.total_stock == 0:
        cart_button = InlineKeyboardButton("Out of Stock", callback_data='noop')
    else:
        cart_button = InlineKeyboardButton(
            f"{EMOJIS['CART']} Add to Cart", callback_data=f'add_to_cart:{product.id}'
        )
    keyboard = [
        [cart_button],
        [InlineKeyboardButton(f"{EMOJIS['PENCIL']} Write a review", callback_data=f'review:{product.id}')],
        [InlineKeyboardButton(f"{EMOJIS['SHOPPING']} View cart", callback_data='view_cart')],
    ]
    return InlineKeyboardMarkup(keyboard)

def create_rating_keyboard() -> InlineKeyboardMarkup:
    keyboard = [[
        InlineKeyboardButton(f"{value}{EMOJIS['STAR']}", callback_data=f'rating:{value}')
        for value in range(1, MAX_RATING + 1)
    ]]
    return InlineKeyboardMarkup(keyboard)

def create_cart_keyboard(cart: Cart) -> InlineKeyboardMarkup:
    keyboard = [
        [InlineKeyboardButton(
            f"{EMOJIS['REMOVE']} Remove {item.title}",
            callback_data=f'remove_from_cart:{item.product_id}'
        )]
        for item in cart.items
    ]
    return InlineKeyboardMarkup(keyboard)
