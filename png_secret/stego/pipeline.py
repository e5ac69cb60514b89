"""
End-to-end encode and decode pipelines: image file in, image file or
message out.
"""
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from png_secret import config
from png_secret.core.base_pipeline import BasePipeline
from png_secret.stego import raster
from png_secret.stego.codecs import get_decoder, get_encoder
from png_secret.stego.errors import InputUnreadableError
from png_secret.stego.reader import SecretReader
from png_secret.stego.writer import SecretWriter


logger = logging.getLogger("png_secret.stego.pipeline")


def default_output_path(input_path: Union[str, Path]) -> Path:
    """
    Derive the encoded file name from the input, e.g. photo.jpg -> photo.enc.png.

    Args:
        input_path: Source image path

    Returns:
        Path next to the input with its last suffix replaced
    """
    input_path = Path(input_path)
    return input_path.with_name(input_path.stem + config.OUTPUT_SUFFIX)


class EncodePipeline(BasePipeline):
    """Embed a message into an image and save the result."""

    def __init__(
        self,
        input_path: Path,
        message: bytes,
        output_path: Optional[Path] = None,
        scheme: str = config.DEFAULT_SCHEME,
        silent: bool = False
    ) -> None:
        """
        Initialize the encode pipeline.

        Args:
            input_path: Cover image
            message: Secret bytes to embed
            output_path: Destination, defaults to default_output_path(input_path)
            scheme: Name of the registered encoder
            silent: Suppress informational log lines
        """
        super().__init__(input_path, output_path or default_output_path(input_path))
        self.message = bytes(message)
        self.encoder = get_encoder(scheme)
        self.silent = silent

    def validate_input(self) -> bool:
        if not self.input_path.is_file():
            logger.error(f"Input path does not exist: {self.input_path}")
            return False
        return True

    def run(self) -> Dict[str, Any]:
        """
        Returns:
            Dict with output_path, width, height, capacity_bytes and message_bytes

        Raises:
            InputUnreadableError: If the cover image cannot be read
            CapacityViolationError: If the message does not fit
            PersistFailureError: If the output cannot be written
        """
        if not self.validate_input():
            raise InputUnreadableError(self.input_path, "no such file")

        buffer = raster.load_raster(self.input_path)
        self.encoder.encode(self.message)

        writer = SecretWriter(buffer, self.encoder, silent=self.silent)
        writer.write_image(self.output_path)

        return {
            "output_path": self.output_path,
            "width": writer.width,
            "height": writer.height,
            "capacity_bytes": writer.message_limit,
            "message_bytes": len(self.message),
        }


class DecodePipeline(BasePipeline):
    """Extract a message from an image."""

    def __init__(
        self,
        input_path: Path,
        scheme: str = config.DEFAULT_SCHEME,
        silent: bool = False
    ) -> None:
        super().__init__(input_path)
        self.decoder = get_decoder(scheme)
        self.silent = silent

    def validate_input(self) -> bool:
        if not self.input_path.is_file():
            logger.error(f"Input path does not exist: {self.input_path}")
            return False
        return True

    def run(self) -> Dict[str, Any]:
        """
        Returns:
            Dict with message (bytes), width and height

        Raises:
            InputUnreadableError: If the image cannot be read
            NoEmbeddedMessageError: If the image carries no message
        """
        if not self.validate_input():
            raise InputUnreadableError(self.input_path, "no such file")

        buffer = raster.load_raster(self.input_path)
        reader = SecretReader(buffer, self.decoder, silent=self.silent)
        message = reader.read_image()

        return {
            "message": message,
            "width": reader.width,
            "height": reader.height,
        }
