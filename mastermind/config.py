"""
Single place to read settings from the environment.
A local .env is loaded first (dev convenience); real deployments inject env vars.
"""

import logging
import os

from dotenv import load_dotenv

load_dotenv()

# Game defaults
CODE_LENGTH = int(os.getenv("CODE_LENGTH", "4"))
MAX_ATTEMPTS = int(os.getenv("MAX_ATTEMPTS", "10"))
if CODE_LENGTH <= 0 or MAX_ATTEMPTS <= 0:
    raise RuntimeError("CODE_LENGTH and MAX_ATTEMPTS must be positive integers.")

# Secret generation (random.org, with a local fallback)
RANDOM_URL = os.getenv("RANDOM_URL", "https://www.random.org/integers/")
RANDOM_TIMEOUT = float(os.getenv("RANDOM_TIMEOUT", "3.0"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
if not isinstance(logging.getLevelName(LOG_LEVEL), int):
    raise RuntimeError(f"LOG_LEVEL={LOG_LEVEL!r} is not a logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).")
