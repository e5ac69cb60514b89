"""
Image file I/O. Every image is normalised to an (height, width, 4) uint8 RGBA
array before the writer or reader sees it.
"""
import io
import logging
import os
from pathlib import Path
import stat
import tempfile
from typing import Union

import numpy as np
from PIL import Image

from png_secret import config
from png_secret.stego.errors import InputUnreadableError, PersistFailureError


logger = logging.getLogger("png_secret.stego.raster")


def capacity_bits(width: int, height: int) -> int:
    """Number of samples, i.e. bits, an RGBA image of this size can carry."""
    return width * height * config.CHANNELS


def message_limit(width: int, height: int) -> int:
    """Longest message in bytes that still leaves room for the sentinel."""
    return max(0, capacity_bits(width, height) // 8 - len(config.SENTINEL))


def check_raster(buffer: np.ndarray) -> np.ndarray:
    """
    Validate a raster buffer.

    Args:
        buffer: Candidate array

    Returns:
        The same array, guaranteed C-contiguous so flat views alias it

    Raises:
        ValueError: If the array is not an RGBA uint8 image
    """
    if not isinstance(buffer, np.ndarray) or buffer.dtype != np.uint8:
        raise ValueError("Raster buffer must be a uint8 numpy array")
    if buffer.ndim != 3 or buffer.shape[2] != config.CHANNELS:
        raise ValueError(f"Raster buffer must have shape (height, width, {config.CHANNELS}), got {buffer.shape}")
    if not buffer.flags["C_CONTIGUOUS"]:
        raise ValueError("Raster buffer must be C-contiguous")
    return buffer


def load_raster(path: Union[str, Path]) -> np.ndarray:
    """
    Load any image Pillow understands as an RGBA sample array.

    Args:
        path: Path to the image file

    Returns:
        Array of shape (height, width, 4), dtype uint8

    Raises:
        InputUnreadableError: If the file is missing or cannot be decoded
    """
    path = Path(path)
    if not path.is_file():
        raise InputUnreadableError(path, "no such file")

    try:
        with Image.open(path) as img:
            logger.debug(f"Loaded {path} ({img.format}, mode {img.mode}, {img.width}x{img.height})")
            rgba = img.convert("RGBA")
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        raise InputUnreadableError(path, str(e)) from e

    return np.array(rgba, dtype=np.uint8)


def _target_mode(path: Path) -> int:
    """Permission bits for path: those of the file it replaces, else 0o666 minus the umask."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_atomic(path: Union[str, Path], data: bytes) -> None:
    """
    Write bytes so that path either holds all of data or is left as it was.

    Args:
        path: Destination file
        data: File contents

    Raises:
        PersistFailureError: If the file cannot be written
    """
    path = Path(path)
    tmp_name = None
    try:
        with tempfile.NamedTemporaryFile(
            dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", delete=False
        ) as tmp:
            tmp_name = tmp.name
            tmp.write(data)
        os.chmod(tmp_name, _target_mode(path))
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise PersistFailureError(path, str(e)) from e


def save_raster(buffer: np.ndarray, path: Union[str, Path]) -> None:
    """
    Save an RGBA sample array as PNG.

    The image is always PNG encoded, whatever the suffix of path, since any
    lossy format destroys the embedded bits.

    Args:
        buffer: Array of shape (height, width, 4), dtype uint8
        path: Destination file

    Raises:
        PersistFailureError: If encoding or writing fails
    """
    path = Path(path)
    if path.suffix.lower() != ".png":
        logger.warning(f"{path} does not end in .png; writing PNG data anyway")

    try:
        encoded = io.BytesIO()
        Image.fromarray(check_raster(buffer)).save(encoded, format=config.OUTPUT_FORMAT)
    except (OSError, ValueError) as e:
        raise PersistFailureError(path, f"encoding failed: {e}") from e

    write_atomic(path, encoded.getvalue())
