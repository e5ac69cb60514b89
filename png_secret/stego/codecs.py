"""
Encoders turn a secret into the bit sequence written to the image, decoders
post-process the bytes read back out.

The wire format is the message bytes followed by one zero byte. There is no
escaping, so a zero byte inside the message ends the extracted text early.
"""
from abc import ABC, abstractmethod
import logging
from typing import Dict, Iterator, List, Type

from png_secret import config


def byte_to_bits(byte: int) -> List[int]:
    """
    Split one byte into 8 bit values, most significant bit first.

    Args:
        byte: Integer in the range 0-255

    Returns:
        List of eight 0/1 integers
    """
    return [(byte >> shift) & 1 for shift in range(7, -1, -1)]


class SecretEncoder(ABC):
    """Base class for message encoders."""

    name: str = "base_encoder"

    def __init__(self) -> None:
        self.logger = logging.getLogger(f"png_secret.stego.codecs.{self.name}")

    @abstractmethod
    def encode(self, message: bytes) -> None:
        """
        Store the message to embed. The encoder carries the text.

        Args:
            message: Raw secret bytes
        """
        pass

    @abstractmethod
    def get_bitstream(self) -> Iterator[int]:
        """
        Yield the bits to write, one 0/1 value per image sample.
        """
        pass

    @property
    @abstractmethod
    def bit_length(self) -> int:
        """Number of bits get_bitstream() yields."""
        pass


class SecretDecoder(ABC):
    """
    Base class for decoders applied to extracted bytes.

    Decoders only see the byte sequence; how it was pulled out of the image
    is none of their business. Decryption or decompression would live here.
    """

    name: str = "base_decoder"

    @abstractmethod
    def decode(self, data: bytes) -> bytes:
        """
        Transform the extracted bytes.

        Args:
            data: Bytes read from the image, sentinel excluded

        Returns:
            The recovered message
        """
        pass


class NaiveEncoder(SecretEncoder):
    """Writes the message as-is, terminated by a single zero byte."""

    name: str = "naive"

    def __init__(self) -> None:
        super().__init__()
        self.text = config.SENTINEL

    def encode(self, message: bytes) -> None:
        message = bytes(message)
        zero_at = message.find(config.SENTINEL)
        if zero_at != -1:
            self.logger.warning(
                f"Message contains a zero byte at offset {zero_at}; "
                f"only the first {zero_at} bytes will be recoverable"
            )
        self.text = message + config.SENTINEL

    def get_text(self) -> bytes:
        """Return the stored bytes, sentinel included."""
        return self.text

    def get_bitstream(self) -> Iterator[int]:
        for byte in self.text:
            yield from byte_to_bits(byte)

    @property
    def bit_length(self) -> int:
        return len(self.text) * 8


class NaiveDecoder(SecretDecoder):
    """Identity decoder."""

    name: str = "naive"

    def decode(self, data: bytes) -> bytes:
        return data


ENCODERS: Dict[str, Type[SecretEncoder]] = {
    "naive": NaiveEncoder,
}

DECODERS: Dict[str, Type[SecretDecoder]] = {
    "naive": NaiveDecoder,
}


def get_encoder(name: str = config.DEFAULT_SCHEME) -> SecretEncoder:
    """Instantiate the encoder registered under name."""
    if name not in ENCODERS:
        raise ValueError(f"Unknown encoding scheme: {name}")
    return ENCODERS[name]()


def get_decoder(name: str = config.DEFAULT_SCHEME) -> SecretDecoder:
    """Instantiate the decoder registered under name."""
    if name not in DECODERS:
        raise ValueError(f"Unknown encoding scheme: {name}")
    return DECODERS[name]()
