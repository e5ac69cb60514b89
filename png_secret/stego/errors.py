"""
Exceptions raised while embedding or extracting a secret.
"""
from pathlib import Path
from typing import Union


class PngSecretError(Exception):
    """Base class for all png_secret errors."""

    exit_code: int = 1


class InputUnreadableError(PngSecretError):
    """The input file is missing, not an image, or fails to decode."""

    def __init__(self, path: Union[str, Path], reason: str = "") -> None:
        self.path = Path(path)
        self.reason = reason
        message = f"The file {str(self.path)!r} couldn't be correctly read"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class CapacityViolationError(PngSecretError):
    """The message bitstream does not fit in the image samples."""

    def __init__(self, required: int, available: int) -> None:
        self.required = required
        self.available = available
        super().__init__(
            f"Message needs {required} bits but the image only has {available} samples"
        )


class PersistFailureError(PngSecretError):
    """An output file could not be written."""

    def __init__(self, path: Union[str, Path], reason: str = "") -> None:
        self.path = Path(path)
        self.reason = reason
        message = f"Saving file {str(self.path)!r} failed"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class NoEmbeddedMessageError(PngSecretError):
    """No sentinel byte was found before the samples ran out."""

    def __init__(self, message: str = "This image doesn't have embedded message!") -> None:
        super().__init__(message)


class NonTextPayloadError(PngSecretError):
    """Extracted bytes are not valid UTF-8."""

    def __init__(self, payload: bytes) -> None:
        self.payload = payload
        super().__init__(
            f"The message ({len(payload)} bytes) cannot be printed as text, use --dump to save it"
        )
