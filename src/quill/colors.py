"""quill color palette - single source of truth.

Every entry is a truecolor ``Style``; compose them with ``+`` or ``Style.and_``.
"""

from __future__ import annotations

from quill.style import DIM, ITALIC, Style, bg, fg

# =============================================================================
# RGB Values
# =============================================================================

PALETTE: dict[str, tuple[int, int, int]] = {
    "BLACK": (35, 35, 40),
    "GRAY": (110, 115, 125),
    "LIGHT_GRAY": (175, 180, 190),
    "CHARCOAL": (55, 70, 80),
    "SILVER": (190, 190, 190),
    "WHITE": (245, 245, 245),
    "RED": (220, 55, 70),
    "ORANGE": (255, 140, 0),
    "AMBER": (255, 195, 5),
    "YELLOW": (255, 215, 0),
    "GOLD": (210, 175, 55),
    "LIME": (190, 255, 0),
    "GREEN": (40, 165, 70),
    "MINT": (150, 250, 150),
    "TEAL": (55, 160, 160),
    "CYAN": (0, 190, 210),
    "SKY": (135, 205, 250),
    "BLUE": (0, 123, 255),
    "INDIGO": (75, 0, 130),
    "PURPLE": (110, 65, 195),
    "VIOLET": (150, 0, 210),
    "LAVENDER": (180, 125, 220),
    "PINK": (255, 105, 180),
    "ROSE": (255, 180, 195),
    "CORAL": (255, 130, 80),
    "BROWN": (140, 70, 20),
    "SAND": (195, 180, 130),
}

# =============================================================================
# Foreground Colors
# =============================================================================

BLACK = fg(*PALETTE["BLACK"])
GRAY = fg(*PALETTE["GRAY"])
LIGHT_GRAY = fg(*PALETTE["LIGHT_GRAY"])
CHARCOAL = fg(*PALETTE["CHARCOAL"])
SILVER = fg(*PALETTE["SILVER"])
WHITE = fg(*PALETTE["WHITE"])

RED = fg(*PALETTE["RED"])
ORANGE = fg(*PALETTE["ORANGE"])
AMBER = fg(*PALETTE["AMBER"])
YELLOW = fg(*PALETTE["YELLOW"])
GOLD = fg(*PALETTE["GOLD"])
LIME = fg(*PALETTE["LIME"])
GREEN = fg(*PALETTE["GREEN"])
MINT = fg(*PALETTE["MINT"])
TEAL = fg(*PALETTE["TEAL"])
CYAN = fg(*PALETTE["CYAN"])
SKY = fg(*PALETTE["SKY"])
BLUE = fg(*PALETTE["BLUE"])
INDIGO = fg(*PALETTE["INDIGO"])
PURPLE = fg(*PALETTE["PURPLE"])
VIOLET = fg(*PALETTE["VIOLET"])
LAVENDER = fg(*PALETTE["LAVENDER"])
PINK = fg(*PALETTE["PINK"])
ROSE = fg(*PALETTE["ROSE"])
CORAL = fg(*PALETTE["CORAL"])
BROWN = fg(*PALETTE["BROWN"])
SAND = fg(*PALETTE["SAND"])

# =============================================================================
# Background Colors
# =============================================================================

BG_BLACK = bg(*PALETTE["BLACK"])
BG_GRAY = bg(*PALETTE["GRAY"])
BG_LIGHT_GRAY = bg(*PALETTE["LIGHT_GRAY"])
BG_CHARCOAL = bg(*PALETTE["CHARCOAL"])
BG_SILVER = bg(*PALETTE["SILVER"])
BG_WHITE = bg(*PALETTE["WHITE"])

BG_RED = bg(*PALETTE["RED"])
BG_ORANGE = bg(*PALETTE["ORANGE"])
BG_AMBER = bg(*PALETTE["AMBER"])
BG_YELLOW = bg(*PALETTE["YELLOW"])
BG_GOLD = bg(*PALETTE["GOLD"])
BG_LIME = bg(*PALETTE["LIME"])
BG_GREEN = bg(*PALETTE["GREEN"])
BG_MINT = bg(*PALETTE["MINT"])
BG_TEAL = bg(*PALETTE["TEAL"])
BG_CYAN = bg(*PALETTE["CYAN"])
BG_SKY = bg(*PALETTE["SKY"])
BG_BLUE = bg(*PALETTE["BLUE"])
BG_INDIGO = bg(*PALETTE["INDIGO"])
BG_PURPLE = bg(*PALETTE["PURPLE"])
BG_VIOLET = bg(*PALETTE["VIOLET"])
BG_LAVENDER = bg(*PALETTE["LAVENDER"])
BG_PINK = bg(*PALETTE["PINK"])
BG_ROSE = bg(*PALETTE["ROSE"])
BG_CORAL = bg(*PALETTE["CORAL"])
BG_BROWN = bg(*PALETTE["BROWN"])
BG_SAND = bg(*PALETTE["SAND"])

# =============================================================================
# Semantic Aliases
# =============================================================================

INFO: Style = CYAN + ITALIC
SUCCESS: Style = GREEN
WARNING: Style = AMBER
ERROR: Style = RED
LOG: Style = SILVER + ITALIC
MUTED: Style = GRAY + DIM
