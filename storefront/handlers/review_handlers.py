import logging
from psycopg import Error
from telegram import Update
from telegram.ext import ContextTypes, ConversationHandler
from ..errors import ProductNotFound
from ..utils.constants import REVIEW_RATING, REVIEW_MESSAGE, EMOJIS, MAX_RATING
from ..utils.keyboards import create_rating_keyboard
from ..database.database import db
from .product_handlers import send_product_details

logger = logging.getLogger(__name__)

async def start_review(update: Update, context: ContextTypes.DEFAULT_TYPE):
    query = update.callback_query
    await query.answer()

    context.user_data['review_product'] = int(query.data.split(':')[1])
    context.user_data.pop('review_rating', None)

    await query.message.reply_text(
        f"{EMOJIS['STAR']} How would you rate this product?",
        reply_markup=create_rating_keyboard()
    )
    return REVIEW_RATING

async def handle_rating(update: Update, context: ContextTypes.DEFAULT_TYPE):
    query = update.callback_query
    await query.answer()

    rating = int(query.data.split(':')[1])
    if not 1 <= rating <= MAX_RATING:
        await query.message.reply_text(f"{EMOJIS['WARNING']} Please pick between 1 and {MAX_RATING} stars.")
        return REVIEW_RATING

    context.user_data['review_rating'] = rating
    await query.message.reply_text(f"{EMOJIS['PENCIL']} Write a review:")
    return REVIEW_MESSAGE

async def handle_review_message(update: Update, context: ContextTypes.DEFAULT_TYPE):
    message = update.message.text.strip()
    if not message:
        await update.message.reply_text(f"{EMOJIS['WARNING']} The review can't be empty.")
        return REVIEW_MESSAGE

    product_id = context.user_data.pop('review_product')
    rating = context.user_data.pop('review_rating')
    user = update.effective_user

    try:
        db.add_review(
            product_id=product_id,
            user_id=user.id,
            user_name=user.username or user.first_name,
            message=message,
            rating=rating
        )
        await update.message.reply_text(f"{EMOJIS['CONFIRM']} Review added successfully!")
        await send_product_details(update.message, product_id)
    except ProductNotFound:
        await update.message.reply_text(f"{EMOJIS['WARNING']} This product is no longer available.")
    except Error as e:
        logger.error(f"Database error: {e}")
        await update.message.reply_text(f"{EMOJIS['ERROR']} Sorry, there was an error saving your review. Please try again.")

    return ConversationHandler.END

async def cancel(update: Update, context: ContextTypes.DEFAULT_TYPE):
    context.user_data.pop('review_product', None)
    context.user_data.pop('review_rating', None)
    await update.message.reply_text(f"{EMOJIS['ERROR']} Operation cancelled.")
    return ConversationHandler.END
