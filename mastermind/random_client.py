"""
- HTTP call with clear fallback
Get `length` random colors from random.org (as integers 0..5, one per Color).
If anything goes wrong (no internet, timeout, bad response), we fall back to a
local secure random generator so the game still works.
"""

import logging
from secrets import randbelow

import requests

from . import config
from .types import Code, Color

logger = logging.getLogger(__name__)

PALETTE = list(Color)  # index -> Color


def fetch_code(length: int = config.CODE_LENGTH) -> Code:
    params = {
        "num": length,                  # how many pegs we want
        "min": 0,
        "max": len(PALETTE) - 1,        # one number per color
        "col": 1,                       # one number per line
        "base": 10,
        "format": "plain",
        "rnd": "new",
    }

    try:
        response = requests.get(config.RANDOM_URL, params=params, timeout=config.RANDOM_TIMEOUT)
        response.raise_for_status()

        # The body looks like:
        #   0\n3\n1\n5\n
        numbers = [int(line) for line in response.text.splitlines() if line.strip()]

        if len(numbers) != length:
            raise ValueError(f"random.org returned {len(numbers)} values, expected {length}.")
        for value in numbers:
            if value < 0 or value >= len(PALETTE):
                raise ValueError(f"random.org number out of range 0..{len(PALETTE) - 1}.")

        return [PALETTE[value] for value in numbers]

    except (requests.RequestException, ValueError) as exc:
        logger.warning("random.org unavailable (%s); using local secure random", exc)
        return [PALETTE[randbelow(len(PALETTE))] for _ in range(length)]
