"""
Reader recovering a message from the last bit of every RGBA sample.
"""
import logging

import numpy as np

from png_secret.stego import raster
from png_secret.stego.codecs import SecretDecoder
from png_secret.stego.errors import NoEmbeddedMessageError


logger = logging.getLogger("png_secret.stego.reader")


class SecretReader:
    """Reads samples in the order SecretWriter writes them."""

    def __init__(self, buffer: np.ndarray, decoder: SecretDecoder, silent: bool = False) -> None:
        self.buffer = raster.check_raster(buffer)
        self.decoder = decoder
        self.silent = silent
        self.height, self.width = buffer.shape[:2]

        logger.debug(f"Image width {self.width}, Image Height {self.height}")

    def read_image(self) -> bytes:
        """
        Rebuild bytes from each run of 8 sample LSBs, MSB first, up to the
        first zero byte.

        A trailing run shorter than 8 samples is ignored.

        Returns:
            The decoded message, sentinel excluded

        Raises:
            NoEmbeddedMessageError: If no zero byte is found
        """
        lsbs = self.buffer.reshape(-1) & 1
        whole_bytes = lsbs.size // 8
        packed = np.packbits(lsbs[:whole_bytes * 8], bitorder="big")

        sentinels = np.flatnonzero(packed == 0)
        if sentinels.size == 0:
            raise NoEmbeddedMessageError()

        message = packed[:sentinels[0]].tobytes()
        if not self.silent:
            logger.info(f"Found a {len(message)} byte message")
        return self.decoder.decode(message)
