import logging
from psycopg import Error
from telegram import InputMediaPhoto, Update
from telegram.error import BadRequest
from telegram.ext import ContextTypes
from ..utils.constants import (
    EMOJIS, CATEGORIES, BRANDS, SORT_OPTIONS, DEFAULT_SORT, FEATURE_ROTATE_SECONDS
)
from ..utils.keyboards import (
    create_banner_keyboard, create_category_keyboard, create_brand_keyboard,
    create_product_keyboard, create_listing_keyboard
)
from ..services.carousel import next_slide, previous_slide
from ..database.database import db

logger = logging.getLogger(__name__)

def _banner_job_name(chat_id: int) -> str:
    return f'banner:{chat_id}'

def cancel_banner_rotation(context: ContextTypes.DEFAULT_TYPE, chat_id: int) -> None:
    for job in context.job_queue.get_jobs_by_name(_banner_job_name(chat_id)):
        job.schedule_removal()

def schedule_banner_rotation(context: ContextTypes.DEFAULT_TYPE, chat_id: int) -> None:
    """(Re)start the repeating banner job for a chat; no banners means no job."""
    cancel_banner_rotation(context, chat_id)
    if not context.chat_data.get('banners') or context.chat_data.get('banner_message_id') is None:
        return
    context.job_queue.run_repeating(
        rotate_banner,
        interval=FEATURE_ROTATE_SECONDS,
        first=FEATURE_ROTATE_SECONDS,
        chat_id=chat_id,
        name=_banner_job_name(chat_id)
    )

async def show_slide(context: ContextTypes.DEFAULT_TYPE, chat_id: int, index: int) -> None:
    banners = context.chat_data.get('banners', [])
    message_id = context.chat_data.get('banner_message_id')
    if not banners or message_id is None or index == context.chat_data.get('banner_index'):
        return

    await context.bot.edit_message_media(
        chat_id=chat_id,
        message_id=message_id,
        media=InputMediaPhoto(banners[index]),
        reply_markup=create_banner_keyboard()
    )
    # Only track the index once the banner on screen has changed
    context.chat_data['banner_index'] = index

async def rotate_banner(context: ContextTypes.DEFAULT_TYPE) -> None:
    job = context.job
    banners = context.chat_data.get('banners', [])
    if not banners:
        job.schedule_removal()
        return

    index = next_slide(context.chat_data.get('banner_index', 0), len(banners))
    try:
        await show_slide(context, job.chat_id, index)
    except BadRequest as e:
        # Banner message is gone or can't be edited anymore
        logger.warning(f"Stopping banner rotation for chat {job.chat_id}: {e}")
        job.schedule_removal()

async def handle_banner_navigation(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    query = update.callback_query
    await query.answer()

    banners = context.chat_data.get('banners', [])
    if not banners:
        return

    current = context.chat_data.get('banner_index', 0)
    if query.data == 'banner:prev':
        index = previous_slide(current, len(banners))
    else:
        index = next_slide(current, len(banners))

    try:
        await show_slide(context, update.effective_chat.id, index)
    except BadRequest as e:
        logger.warning(f"Could not switch banner: {e}")
        return
    # Manual navigation restarts the countdown
    schedule_banner_rotation(context, update.effective_chat.id)

async def start(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    chat_id = update.effective_chat.id

    try:
        feature_images = db.get_feature_images()
        products = db.get_products(sort=DEFAULT_SORT)
    except Error as e:
        logger.error(f"Database error: {e}")
        await update.message.reply_text(f"{EMOJIS['ERROR']} Sorry, the shop is unavailable right now. Please try again.")
        return

    await update.message.reply_text(f"{EMOJIS['WAVE']} Welcome to the shop!")

    context.chat_data['banners'] = [feature.image for feature in feature_images]
    context.chat_data['banner_index'] = 0
    context.chat_data.pop('banner_message_id', None)
    if feature_images:
        banner = await update.message.reply_photo(
            photo=feature_images[0].image,
            reply_markup=create_banner_keyboard()
        )
        context.chat_data['banner_message_id'] = banner.message_id
    # Drops a job left over from an earlier /start when there are no banners now
    schedule_banner_rotation(context, chat_id)

    await update.message.reply_text("Shop by Category", reply_markup=create_category_keyboard())
    await update.message.reply_text("Shop by Brand", reply_markup=create_brand_keyboard())

    if products:
        await update.message.reply_text(
            f"{EMOJIS['SHOPPING']} Feature Products",
            reply_markup=create_product_keyboard(products)
        )

async def handle_listing(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    query = update.callback_query
    await query.answer()

    # listing:<section>:<facet>[:<sort>]
    parts = query.data.split(':')
    section, facet_id = parts[1], parts[2]
    sort = parts[3] if len(parts) > 3 and parts[3] in SORT_OPTIONS else DEFAULT_SORT
    facets = CATEGORIES if section == 'category' else BRANDS
    label = facets.get(facet_id, (facet_id, ''))[0]

    try:
        products = db.get_products(sort=sort, **{section: facet_id})
    except Error as e:
        logger.error(f"Database error: {e}")
        await query.message.reply_text(f"{EMOJIS['ERROR']} Sorry, there was an error. Please try again.")
        return

    if not products:
        await query.message.reply_text(f"{EMOJIS['WARNING']} No products found for {label}.")
        return

    await query.message.reply_text(
        f"{EMOJIS['SHOPPING']} {label}: {len(products)} products",
        reply_markup=create_listing_keyboard(products, section, facet_id, sort)
    )
