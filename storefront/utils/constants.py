import os

# Conversation states
REVIEW_RATING, REVIEW_MESSAGE = range(2)

# Emojis for UI elements
EMOJIS = {
    'CART': '🛒',
    'MONEY': '💰',
    'PRODUCT': '💠',
    'CONFIRM': '✅',
    'WARNING': '⚠️',
    'ERROR': '❌',
    'PERSON': '👤',
    'SHOPPING': '🛍️',
    'PACKAGE': '📦',
    'ARROW': '🔽',
    'WAVE': '👋',
    'PLUS': '➕',
    'STAR': '⭐',
    'EMPTY_STAR': '☆',
    'PREV': '◀️',
    'NEXT': '▶️',
    'PENCIL': '✍️',
    'REMOVE': '🗑️',
}

# Shop by category
CATEGORIES = {
    'men': ('Men', '👕'),
    'women': ('Women', '👗'),
    'kids': ('Kids', '🧸'),
    'accessories': ('Accessories', '⌚'),
    'footwear': ('Footwear', '👟'),
}

# Shop by brand
BRANDS = {
    'nike': ('Nike', '✔️'),
    'adidas': ('Adidas', '🥾'),
    'puma': ('Puma', '🐆'),
    'levi': ("Levi's", '👖'),
    'zara': ('Zara', '🧥'),
    'h&m': ('H&M', '🛍️'),
}

# Listing sort options mapped to ORDER BY clauses
SORT_OPTIONS = {
    'price-lowtohigh': 'price ASC',
    'price-hightolow': 'price DESC',
    'title-atoz': 'title ASC',
    'title-ztoa': 'title DESC',
}
DEFAULT_SORT = 'price-lowtohigh'

SORT_LABELS = {
    'price-lowtohigh': 'Price ↑',
    'price-hightolow': 'Price ↓',
    'title-atoz': 'A-Z',
    'title-ztoa': 'Z-A',
}

MAX_RATING = 5

# Telegram rejects longer messages
MAX_MESSAGE_LENGTH = 4096
# Newest reviews shown on a details card
MAX_REVIEWS_SHOWN = 10

CURRENCY = os.getenv('CURRENCY', '$')
FEATURE_ROTATE_SECONDS = int(os.getenv('FEATURE_ROTATE_SECONDS', '15'))
