import logging
from psycopg import Error
from telegram import Message, Update
from telegram.error import BadRequest
from telegram.ext import ContextTypes
from ..errors import ProductNotFound, QuantityLimitReached
from ..utils.constants import EMOJIS
from ..utils.keyboards import create_product_details_keyboard
from ..utils.formatters import format_product_details
from ..services.reviews import average_rating
from ..services.cart_guard import ensure_can_add
from ..database.database import db

logger = logging.getLogger(__name__)

async def send_product_details(message: Message, product_id: int) -> None:
    """Send the details card for a product, reviews included."""
    product = db.get_product(product_id)
    if product is None:
        raise ProductNotFound(product_id)

    reviews = db.get_reviews(product_id)
    text = format_product_details(product, reviews, average_rating(reviews))
    keyboard = create_product_details_keyboard(product)

    if product.image:
        # Captions are capped at 1024 chars, so the text goes separately
        try:
            await message.reply_photo(photo=product.image)
        except BadRequest as e:
            logger.warning(f"Could not send image for product {product_id}: {e}")
    await message.reply_text(text, reply_markup=keyboard)

async def handle_product_details(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    query = update.callback_query
    await query.answer()

    product_id = int(query.data.split(':')[1])
    try:
        await send_product_details(query.message, product_id)
    except ProductNotFound:
        await query.message.reply_text(f"{EMOJIS['WARNING']} This product is no longer available.")
    except Error as e:
        logger.error(f"Database error: {e}")
        await query.message.reply_text(f"{EMOJIS['ERROR']} Sorry, there was an error. Please try again.")

async def handle_add_to_cart(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    query = update.callback_query

    # Ignore repeated taps while an add is in flight
    if context.user_data.get('adding_to_cart'):
        await query.answer()
        return
    context.user_data['adding_to_cart'] = True

    product_id = int(query.data.split(':')[1])
    user_id = update.effective_user.id

    try:
        product = db.get_product(product_id)
        if product is None:
            await query.answer(f"{EMOJIS['WARNING']} This product is no longer available.", show_alert=True)
            return

        cart = db.get_cart(user_id)
        ensure_can_add(cart.items, product_id, product.total_stock)

        db.add_to_cart(user_id, product_id, quantity=1)
        await query.answer(f"{EMOJIS['CONFIRM']} Product is added to cart")

    except QuantityLimitReached as e:
        await query.answer(f"{EMOJIS['WARNING']} {e}", show_alert=True)
    except Error as e:
        logger.error(f"Database error: {e}")
        await query.answer(f"{EMOJIS['ERROR']} Sorry, there was an error adding to cart.", show_alert=True)
    finally:
        context.user_data['adding_to_cart'] = False

async def handle_out_of_stock(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    await update.callback_query.answer("Out of Stock")
