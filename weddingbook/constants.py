# constants.py
"""
Constants and configuration for the WeddingBook address book
"""

WEDDINGBOOK_VERSION = "0.3.1"

# Modern color scheme
COLORS = {
    'primary': '#2563eb',      # Modern blue
    'primary_light': '#60a5fa',
    'primary_dark': '#1d4ed8',
    'secondary': '#10b981',    # Modern green
    'accent': '#f59e0b',       # Amber
    'background': '#f8fafc',   # Light gray
    'surface': '#ffffff',      # White
    'text_primary': '#1e293b', # Dark slate
    'text_secondary': '#64748b', # Slate
    'border': '#e2e8f0',       # Light border
    'danger': '#ef4444',       # Red
}

# Application settings
APP_TITLE = "💍 WeddingBook"
WINDOW_WIDTH = 1100
WINDOW_HEIGHT = 700
LIST_WIDTH = 32  # Contact list width in characters

# Fonts
FONT_FAMILY = "Segoe UI"
NAME_FONT = (FONT_FAMILY, 18, "bold")
DETAIL_FONT = (FONT_FAMILY, 11)

# Details panel text
EMPTY_PLACEHOLDER = "No contact selected"
PHONE_PREFIX = "Phone: "
EMAIL_PREFIX = "Email: "
ADDRESS_PREFIX = "Address: "
TYPE_PREFIX = "Type: "
WEDDING_PREFIX = "Wedding: "
PRICE_PREFIX = "Price: "
BUDGET_PREFIX = "Budget: "
TAGS_PREFIX = "Tags: "
BULLET = "• "
MISSING_WEDDING_DATE = "-"
MISSING_LINKED_DATE = "—"

# PNG export
EXPORT_WIDTH = 520
EXPORT_PADDING = 24
EXPORT_LINE_SPACING = 6
