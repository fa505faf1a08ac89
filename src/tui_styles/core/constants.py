"""Shared constants for ANSI styling."""

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
RESET = f"{CSI}0m"

# SGR text attribute codes, in the order the renderer emits them
SGR_BOLD = 1
SGR_FAINT = 2
SGR_ITALIC = 3
SGR_UNDERLINE = 4
SGR_BLINK = 5
SGR_REVERSE = 7
SGR_STRIKETHROUGH = 9


def sgr(params: str | int) -> str:
    """Wrap SGR parameters in a full escape sequence."""
    return f"{CSI}{params}m"


# Named ANSI colors -> palette index (0-15)
COLORS_16 = {
    # Standard colors (30-37 fg, 40-47 bg)
    "black": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "magenta": 5,
    "cyan": 6,
    "white": 7,
    # Bright colors (90-97 fg, 100-107 bg)
    "bright-black": 8,
    "bright-red": 9,
    "bright-green": 10,
    "bright-yellow": 11,
    "bright-blue": 12,
    "bright-magenta": 13,
    "bright-cyan": 14,
    "bright-white": 15,
    # Aliases
    "gray": 8,
    "grey": 8,
    "bright-gray": 15,
    "bright-grey": 15,
}

# Block drawing characters used by the block borders
BLOCK = {
    "full": "█",         # Full block
    "upper": "▀",        # Upper half block
    "lower": "▄",        # Lower half block
    "left": "▌",         # Left half block
    "right": "▐",        # Right half block
    "quad_ul": "▘",      # Quadrant upper left
    "quad_ur": "▝",      # Quadrant upper right
    "quad_ll": "▖",      # Quadrant lower left
    "quad_lr": "▗",      # Quadrant lower right
    "three_ul": "▛",     # Quadrant upper left + upper right + lower left
    "three_ur": "▜",     # Quadrant upper left + upper right + lower right
    "three_ll": "▙",     # Quadrant upper left + lower left + lower right
    "three_lr": "▟",     # Quadrant upper right + lower left + lower right
}
