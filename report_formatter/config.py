"""Configuration settings for the report formatter."""

# Generation settings
DEFAULT_MODEL_NAME = "mistral"
DEFAULT_OLLAMA_HOST = "http://localhost:11434"
DEFAULT_MAX_RETRIES = 3
DEFAULT_RETRY_BASE_DELAY = 1.0  # Seconds, doubled after every failed attempt
RETRYABLE_STATUS_CODES = (429, 503)

# Output settings
DEFAULT_OUTPUT_PATH = "report.pdf"
SUPPORTED_FORMATS = ("pdf", "docx")

# Document structure
DEFAULT_TITLE = "Generated Report"
COVER_BANNER = "Academic Report"
TOC_HEADING = "Table of Contents"
FALLBACK_NOTICE = "Note: Using fallback content"
BULLET_GLYPH = "• "

# Font sizes (points)
BASE_FONT_SIZE = 12
BANNER_FONT_SIZE = 28
TITLE_FONT_SIZE = 20
DATE_FONT_SIZE = 14
NOTICE_FONT_SIZE = 12
TOC_HEADING_FONT_SIZE = 22
TOC_ENTRY_FONT_SIZE = 14
SECTION_HEADING_FONT_SIZE = 20
FOOTER_FONT_SIZE = 10
TOC_ENTRY_INDENT = 30

# Palette
BANNER_COLOR = "#2c3e50"
TITLE_COLOR = "#34495e"
DATE_COLOR = "#7f8c8d"
NOTICE_COLOR = "#e74c3c"
HEADING_COLOR = "#2c3e50"
BODY_COLOR = "#2c3e50"
FOOTER_COLOR = "#95a5a6"

# Vertical spacing, in lines of the current font
PARAGRAPH_SPACE = 0.5
BULLET_SPACE_BEFORE = 0.3
BULLET_SPACE_AFTER = 0.3
COVER_BANNER_SPACE = 1
COVER_TITLE_SPACE = 3
COVER_DATE_SPACE = 1
TOC_HEADING_SPACE = 2
TOC_ENTRY_SPACE = 0.8
SECTION_HEADING_SPACE = 1.5
LINE_HEIGHT_FACTOR = 1.2

# Page geometry (points)
PAGE_MARGIN = 60
FOOTER_OFFSET = 30  # Distance of the page number baseline from the bottom edge

# Fonts
BODY_FONT = "Helvetica"
