"""
Writer embedding an encoder's bitstream into the last bit of every RGBA sample.
"""
import logging
from pathlib import Path
from typing import Union

import numpy as np

from png_secret.stego import raster
from png_secret.stego.codecs import SecretEncoder
from png_secret.stego.errors import CapacityViolationError


logger = logging.getLogger("png_secret.stego.writer")


class SecretWriter:
    """
    Uses the least significant bit of each R, G, B and A sample to carry
    the message, in raster-scan order.

    The buffer is modified in place.
    """

    def __init__(self, buffer: np.ndarray, encoder: SecretEncoder, silent: bool = False) -> None:
        """
        Args:
            buffer: RGBA array of shape (height, width, 4), dtype uint8
            encoder: Encoder holding the message to embed
            silent: Suppress informational log lines
        """
        self.buffer = raster.check_raster(buffer)
        self.encoder = encoder
        self.silent = silent
        self.height, self.width = buffer.shape[:2]

        logger.debug(
            f"Image width {self.width}, Image Height {self.height}, "
            f"message length limit {self.message_limit} bytes"
        )

    @property
    def capacity_bits(self) -> int:
        return raster.capacity_bits(self.width, self.height)

    @property
    def message_limit(self) -> int:
        return raster.message_limit(self.width, self.height)

    def embed(self) -> int:
        """
        Overwrite sample LSBs with the encoder's bits.

        Samples past the end of the bitstream are left untouched.

        Returns:
            Number of samples written

        Raises:
            CapacityViolationError: If the bitstream is longer than the
                sample count. The buffer is not modified in that case.
        """
        bit_length = self.encoder.bit_length
        if bit_length > self.capacity_bits:
            raise CapacityViolationError(bit_length, self.capacity_bits)

        bits = np.fromiter(self.encoder.get_bitstream(), dtype=np.uint8, count=bit_length)
        samples = self.buffer.reshape(-1)[:bit_length]
        samples[:] = samples - (samples % 2) + bits

        logger.debug(f"Embedded {bit_length} bits into {self.capacity_bits} samples")
        return bit_length

    def write_image(self, destination: Union[str, Path]) -> Path:
        """
        Embed the message and save the result as PNG.

        Args:
            destination: Output file path

        Returns:
            The destination path

        Raises:
            CapacityViolationError: If the message does not fit
            PersistFailureError: If the file cannot be written
        """
        destination = Path(destination)
        self.embed()
        raster.save_raster(self.buffer, destination)
        if not self.silent:
            logger.info(f"Writing modified image to file {destination}")
        return destination
