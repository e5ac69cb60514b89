"""
Unit tests for embedding into and extracting from raster buffers.
"""

import hypothesis.strategies as st
import numpy as np
import pytest
from hypothesis import given, settings

from png_secret.stego.codecs import NaiveDecoder, NaiveEncoder
from png_secret.stego.errors import CapacityViolationError, NoEmbeddedMessageError
from png_secret.stego.reader import SecretReader
from png_secret.stego.writer import SecretWriter


def embed(buffer, message):
    encoder = NaiveEncoder()
    encoder.encode(message)
    SecretWriter(buffer, encoder, silent=True).embed()
    return buffer


def extract(buffer):
    return SecretReader(buffer, NaiveDecoder(), silent=True).read_image()


class TestSecretWriter:
    """Writing bits into sample LSBs."""

    def test_hi_scenario(self, white_raster):
        embed(white_raster, b"Hi")

        flat = white_raster.reshape(-1)
        expected_bits = [int(c) for c in "010010000110100100000000"]
        assert list(flat[:24] & 1) == expected_bits
        # upper seven bits untouched
        assert np.all(flat[:24] >> 1 == 0x7F)
        assert np.all(flat[24:] == 0xFF)

    def test_modifies_buffer_in_place(self, white_raster):
        original = white_raster
        writer = SecretWriter(white_raster, NaiveEncoder(), silent=True)
        writer.embed()
        assert writer.buffer is original
        assert np.all(original.reshape(-1)[:8] == 0xFE)

    def test_returns_samples_written(self, white_raster):
        encoder = NaiveEncoder()
        encoder.encode(b"abc")
        assert SecretWriter(white_raster, encoder, silent=True).embed() == 32

    def test_capacity_exact_fit(self):
        buffer = np.full((2, 2, 4), 0x81, dtype=np.uint8)  # 16 samples
        embed(buffer, b"\x7f")  # 16 bits with the sentinel

        assert list(buffer.reshape(-1) & 1) == [0, 1, 1, 1, 1, 1, 1, 1] + [0] * 8
        assert extract(buffer) == b"\x7f"

    def test_capacity_one_bit_over(self):
        buffer = np.full((2, 2, 4), 0x81, dtype=np.uint8)
        encoder = NaiveEncoder()
        encoder.encode(b"\x7f\x7f")

        with pytest.raises(CapacityViolationError) as exc_info:
            SecretWriter(buffer, encoder, silent=True).embed()

        assert exc_info.value.required == 24
        assert exc_info.value.available == 16
        # nothing was written
        assert np.all(buffer == 0x81)

    def test_capacity_counts_samples_not_pixels(self):
        writer = SecretWriter(np.zeros((3, 5, 4), dtype=np.uint8), NaiveEncoder(), silent=True)
        assert writer.capacity_bits == 60
        assert writer.message_limit == 6

    def test_idempotent(self, gradient_raster):
        first = embed(gradient_raster.copy(), b"same message")
        second = embed(gradient_raster.copy(), b"same message")
        assert np.array_equal(first, second)

        again = embed(first.copy(), b"same message")
        assert np.array_equal(first, again)

    @pytest.mark.parametrize("buffer", [
        np.zeros((4, 4, 3), dtype=np.uint8),
        np.zeros((4, 4), dtype=np.uint8),
        np.zeros((4, 4, 4), dtype=np.int16),
    ])
    def test_rejects_non_rgba_buffers(self, buffer):
        with pytest.raises(ValueError):
            SecretWriter(buffer, NaiveEncoder(), silent=True)

    def test_logs_written_file_unless_silent(self, white_raster, tmp_path, caplog):
        with caplog.at_level("INFO", logger="png_secret"):
            SecretWriter(white_raster.copy(), NaiveEncoder()).write_image(tmp_path / "loud.png")
        assert "Writing modified image to file" in caplog.text

        caplog.clear()
        with caplog.at_level("INFO", logger="png_secret"):
            SecretWriter(white_raster.copy(), NaiveEncoder(), silent=True).write_image(tmp_path / "quiet.png")
        assert caplog.text == ""

    def test_dimensions_logged_at_debug(self, white_raster, caplog):
        with caplog.at_level("DEBUG", logger="png_secret"):
            SecretWriter(white_raster, NaiveEncoder(), silent=True)
        assert "Image width 4, Image Height 4, message length limit 7 bytes" in caplog.text


class TestSecretReader:
    """Reading bytes back out of sample LSBs."""

    def test_hi_scenario(self, white_raster):
        embed(white_raster, b"Hi")
        assert extract(white_raster) == b"\x48\x69"

    def test_empty_message(self, white_raster):
        embed(white_raster, b"")
        assert extract(white_raster) == b""

    def test_untouched_buffer(self, white_raster):
        with pytest.raises(NoEmbeddedMessageError):
            extract(white_raster)

    def test_trailing_partial_byte_ignored(self):
        # 12 samples: one full byte of ones, then 4 zero LSBs that never complete a byte
        buffer = np.array([1] * 8 + [0] * 4, dtype=np.uint8).reshape(1, 3, 4)
        with pytest.raises(NoEmbeddedMessageError):
            extract(buffer)

    def test_stops_at_embedded_zero(self, gradient_raster):
        embed(gradient_raster, b"abc\x00def")
        assert extract(gradient_raster) == b"abc"

    def test_decoder_receives_payload(self, white_raster):
        class UpperDecoder(NaiveDecoder):
            def decode(self, data):
                return data.upper()

        embed(white_raster, b"hi")
        assert SecretReader(white_raster, UpperDecoder(), silent=True).read_image() == b"HI"

    @given(message=st.lists(st.integers(min_value=1, max_value=255), max_size=120).map(bytes))
    @settings(max_examples=100)
    def test_round_trip(self, message):
        buffer = np.full((16, 16, 4), 0x5A, dtype=np.uint8)
        embed(buffer, message)
        assert extract(buffer) == message
