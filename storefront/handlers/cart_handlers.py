import logging
from psycopg import Error
from telegram import Update
from telegram.ext import ContextTypes
from ..utils.constants import EMOJIS
from ..utils.keyboards import create_cart_keyboard
from ..utils.formatters import format_cart_text
from ..database.database import db

logger = logging.getLogger(__name__)

async def command_cart(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    # Handle both direct command and callback query
    if update.callback_query:
        await update.callback_query.answer()
        message = update.callback_query.message
    else:
        message = update.message

    try:
        cart = db.get_cart(update.effective_user.id)
    except Error as e:
        logger.error(f"Database error: {e}")
        await message.reply_text(f"{EMOJIS['ERROR']} Sorry, there was an error loading your cart.")
        return

    cart_text, _ = format_cart_text(cart)
    await message.reply_text(cart_text, reply_markup=create_cart_keyboard(cart) if cart.items else None)

async def handle_remove_from_cart(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    query = update.callback_query
    await query.answer()

    product_id = int(query.data.split(':')[1])
    try:
        cart = db.remove_from_cart(update.effective_user.id, product_id)
    except Error as e:
        logger.error(f"Database error: {e}")
        await query.message.reply_text(f"{EMOJIS['ERROR']} Sorry, there was an error updating your cart.")
        return

    cart_text, _ = format_cart_text(cart)
    await query.edit_message_text(cart_text, reply_markup=create_cart_keyboard(cart) if cart.items else None)
