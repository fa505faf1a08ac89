"""Terminal background detection from environment variables."""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

# Explicit override: "light" or "dark"
TERM_BACKGROUND = "TERM_BACKGROUND"
# "fg;bg" palette indices exported by rxvt, Konsole and others
COLORFGBG = "COLORFGBG"


def is_light_terminal(environ: Optional[Mapping[str, str]] = None) -> bool:
    """
    Guess whether the terminal has a light background.

    TERM_BACKGROUND wins when set. Otherwise a COLORFGBG background index
    above 6 means light. Anything else is treated as dark.
    """
    env = os.environ if environ is None else environ

    if bg := env.get(TERM_BACKGROUND):
        light = bg.lower() == "light"
        logger.debug("%s=%r -> light=%s", TERM_BACKGROUND, bg, light)
        return light

    if colorfgbg := env.get(COLORFGBG):
        parts = colorfgbg.split(";")
        if len(parts) == 2:
            try:
                light = int(parts[1]) > 6
            except ValueError:
                logger.debug("ignoring malformed %s=%r", COLORFGBG, colorfgbg)
            else:
                logger.debug("%s=%r -> light=%s", COLORFGBG, colorfgbg, light)
                return light

    return False
