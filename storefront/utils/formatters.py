from typing import List, Tuple
from ..models.models import Cart, Product, Review
from ..services.reviews import rating_value
from .constants import EMOJIS, CURRENCY, MAX_RATING, MAX_MESSAGE_LENGTH, MAX_REVIEWS_SHOWN

def message_length(text: str) -> int:
    """Length as Telegram counts it, in UTF-16 code units."""
    return len(text.encode('utf-16-le')) // 2

def fit_message(text: str, limit: int = MAX_MESSAGE_LENGTH) -> str:
    if message_length(text) <= limit:
        return text
    ellipsis = '…'
    text = text[:limit - 1]
    while message_length(text) > limit - 1:
        text = text[:-1]
    return text + ellipsis

def strike(text: str) -> str:
    """Strike text through with combining characters, no parse mode needed."""
    return ''.join(f"{char}\u0336" for char in text)

def format_price(amount) -> str:
    return f"{CURRENCY}{amount:.2f}"

def format_stars(rating: float) -> str:
    """Render a rating as filled and empty stars, rounding to the nearest star."""
    filled = max(0, min(MAX_RATING, int(rating + 0.5)))
    return EMOJIS['STAR'] * filled + EMOJIS['EMPTY_STAR'] * (MAX_RATING - filled)

def format_review(review: Review) -> str:
    initial = review.user_name[0].upper() if review.user_name else '?'
    value = rating_value(review.rating)
    rating = f"{value:.1f}" if value is not None else '-'
    return (
        f"[{initial}] {review.user_name}\n"
        f"{review.message}\n"
        f"{EMOJIS['STAR']} {rating}"
    )

def _format_reviews(shown: List[Review], total: int) -> str:
    text = "\n\nReviews:\n\n" + "\n\n".join(format_review(review) for review in shown)
    if total > len(shown):
        text += f"\n\n…and {total - len(shown)} more reviews"
    return text

def format_product_details(product: Product, reviews: List[Review], average: float) -> str:
    """
    Format the product details card with its reviews.
    Only the newest reviews are listed, and fewer still when they would push the
    card past Telegram's message limit.
    """
    price_line = format_price(product.price)
    if product.on_sale:
        price_line = f"{strike(price_line)}  {format_price(product.sale_price)}"

    text = (
        f"{EMOJIS['PRODUCT']} {product.title}\n\n"
        f"{product.description}\n\n"
        f"{EMOJIS['MONEY']} {price_line}\n"
        f"{format_stars(average)} ({average:.2f})"
    )

    if not reviews:
        return fit_message(text + "\n\nNo reviews yet.")

    # Reviews arrive oldest first
    shown = reviews[-MAX_REVIEWS_SHOWN:]
    while len(shown) > 1 and message_length(text + _format_reviews(shown, len(reviews))) > MAX_MESSAGE_LENGTH:
        shown = shown[1:]
    return fit_message(text + _format_reviews(shown, len(reviews)))

def format_product_line(product: Product) -> str:
    if product.on_sale:
        return f"{EMOJIS['PRODUCT']} {product.title} - {format_price(product.sale_price)}"
    return f"{EMOJIS['PRODUCT']} {product.title} - {format_price(product.price)}"

def format_cart_text(cart: Cart) -> Tuple[str, float]:
    """Format cart contents and calculate total."""
    if not cart.items:
        return f"{EMOJIS['CART']} Your cart is empty.", 0

    total = 0
    cart_lines = []

    for item in cart.items:
        subtotal = item.quantity * item.effective_price
        total += subtotal
        cart_lines.append(
            f"• {item.title}: {item.quantity} × {format_price(item.effective_price)} = {format_price(subtotal)}"
        )

    cart_text = f"{EMOJIS['CART']} Cart:\n" + "\n".join(cart_lines)
    cart_text += f"\n\n{EMOJIS['MONEY']} Total: {format_price(total)}"

    return cart_text, total
