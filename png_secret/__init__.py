"""
png_secret: hide bytes in the least significant bits of an image.
"""

__version__ = "0.1.0"
