"""
LSB steganography for RGBA images.

One message bit goes into the least significant bit of each channel sample,
in raster-scan order, and the message ends with a single zero byte.
"""

from png_secret.stego.errors import (
    PngSecretError,
    InputUnreadableError,
    CapacityViolationError,
    PersistFailureError,
    NoEmbeddedMessageError,
    NonTextPayloadError
)

from png_secret.stego.codecs import (
    SecretEncoder,
    SecretDecoder,
    NaiveEncoder,
    NaiveDecoder,
    byte_to_bits,
    get_encoder,
    get_decoder
)

from png_secret.stego.writer import SecretWriter
from png_secret.stego.reader import SecretReader

from png_secret.stego.pipeline import (
    EncodePipeline,
    DecodePipeline,
    default_output_path
)

__all__ = [
    'PngSecretError',
    'InputUnreadableError',
    'CapacityViolationError',
    'PersistFailureError',
    'NoEmbeddedMessageError',
    'NonTextPayloadError',
    'SecretEncoder',
    'SecretDecoder',
    'NaiveEncoder',
    'NaiveDecoder',
    'byte_to_bits',
    'get_encoder',
    'get_decoder',
    'SecretWriter',
    'SecretReader',
    'EncodePipeline',
    'DecodePipeline',
    'default_output_path'
]
