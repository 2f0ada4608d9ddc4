import os
import logging
from dotenv import load_dotenv
from telegram import Update
from telegram.ext import (
    Application, CommandHandler, CallbackQueryHandler, MessageHandler,
    filters, ContextTypes, ConversationHandler
)

# Load environment variables before the package reads them
load_dotenv()

from storefront.utils.constants import REVIEW_RATING, REVIEW_MESSAGE
from storefront.handlers.home_handlers import start, handle_listing, handle_banner_navigation
from storefront.handlers.product_handlers import handle_product_details, handle_add_to_cart, handle_out_of_stock
from storefront.handlers.review_handlers import start_review, handle_rating, handle_review_message, cancel
from storefront.handlers.cart_handlers import command_cart, handle_remove_from_cart

# Enable logging
logging.basicConfig(format='%(asctime)s - %(name)s - %(levelname)s - %(message)s', level=logging.INFO)
logger = logging.getLogger(__name__)

async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    logger.error("Unhandled exception while processing an update", exc_info=context.error)

def build_application(token: str) -> Application:
    application = Application.builder().token(token).build()

    application.add_handler(CommandHandler("start", start))
    application.add_handler(CommandHandler("cart", command_cart))

    # Review conversation goes before the generic callbacks
    review_handler = ConversationHandler(
        entry_points=[CallbackQueryHandler(start_review, pattern='^review:')],
        states={
            REVIEW_RATING: [CallbackQueryHandler(handle_rating, pattern='^rating:')],
            REVIEW_MESSAGE: [MessageHandler(filters.TEXT & ~filters.COMMAND, handle_review_message)]
        },
        fallbacks=[CommandHandler('cancel', cancel)],
        allow_reentry=True
    )
    application.add_handler(review_handler)

    application.add_handler(CallbackQueryHandler(handle_banner_navigation, pattern='^banner:(prev|next)$'))
    application.add_handler(CallbackQueryHandler(handle_listing, pattern='^listing:'))
    application.add_handler(CallbackQueryHandler(handle_product_details, pattern='^product:'))
    application.add_handler(CallbackQueryHandler(handle_add_to_cart, pattern='^add_to_cart:'))
    application.add_handler(CallbackQueryHandler(handle_out_of_stock, pattern='^noop$'))
    application.add_handler(CallbackQueryHandler(command_cart, pattern='^view_cart$'))
    application.add_handler(CallbackQueryHandler(handle_remove_from_cart, pattern='^remove_from_cart:'))

    application.add_error_handler(error_handler)
    return application

def main():
    token = os.getenv('BOT_TOKEN')
    if not token:
        raise ValueError("BOT_TOKEN environment variable is not set")

    application = build_application(token)

    # Start the bot
    logger.info("Starting bot...")
    application.run_polling(allowed_updates=Update.ALL_TYPES)

if __name__ == '__main__':
    main()
