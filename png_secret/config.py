"""
Global configuration settings for png_secret.
"""
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


# Embedding format
CHANNELS = 4  # RGBA
SENTINEL = b"\x00"
DEFAULT_SCHEME = "naive"

# CLI defaults
DEFAULT_TEXT = "Hello World"
OUTPUT_SUFFIX = ".enc.png"
OUTPUT_FORMAT = "PNG"  # must stay lossless

# Logging settings
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
LOG_LEVEL = os.getenv("PNG_SECRET_LOG_LEVEL", "INFO").upper()
LOG_DIR = Path(os.environ["PNG_SECRET_LOG_DIR"]) if os.getenv("PNG_SECRET_LOG_DIR") else None
