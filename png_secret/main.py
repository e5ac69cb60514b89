"""
Main CLI interface for png_secret.
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from png_secret import config
from png_secret.core.log_manager import setup_logging
from png_secret.stego import raster
from png_secret.stego.errors import (
    InputUnreadableError,
    NoEmbeddedMessageError,
    NonTextPayloadError,
    PngSecretError
)
from png_secret.stego.pipeline import DecodePipeline, EncodePipeline


logger = logging.getLogger("png_secret.main")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        prog="png-secret",
        description="A simple tool to embed secret bytes in PNG images",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Hide the default message:
  png-secret -e -i cover.png

  # Hide a custom message under a chosen name:
  png-secret -e -i cover.png -o secret.png --text "meet at noon"

  # Hide the bytes of a file:
  png-secret -e -i cover.png --text-file notes.bin

  # Read a message back:
  png-secret -i cover.enc.png

  # Save a binary message to disk:
  png-secret -i cover.enc.png --dump payload.bin
"""
    )
    parser.add_argument(
        "-s", "--silent",
        action="store_true",
        help="reduce stdout print"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )
    parser.add_argument(
        "-e", "--encode",
        action="store_true",
        help="default to decode if not set"
    )
    message_group = parser.add_mutually_exclusive_group()
    message_group.add_argument(
        "--text",
        default=config.DEFAULT_TEXT,
        help="the secret you want to embed (default: %(default)r)"
    )
    message_group.add_argument(
        "--text-file",
        type=Path,
        help="embed the raw bytes of this file instead of --text"
    )
    parser.add_argument(
        "-i", "--input",
        type=Path,
        required=True,
        help="image file, converted to RGBA"
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        help=f"optional, output would be *{config.OUTPUT_SUFFIX} if skipped"
    )
    parser.add_argument(
        "-d", "--dump",
        type=Path,
        help="decode only: write the raw extracted bytes to this file"
    )

    return parser.parse_args(argv)


def read_message(args: argparse.Namespace) -> bytes:
    """
    Get the secret bytes from --text-file or --text.

    Raises:
        InputUnreadableError: If --text-file cannot be read
    """
    if args.text_file is not None:
        try:
            return args.text_file.read_bytes()
        except OSError as e:
            raise InputUnreadableError(args.text_file, e.strerror or str(e)) from e
    # undecodable argv bytes arrive as lone surrogates; embed the original bytes
    return args.text.encode("utf-8", "surrogateescape")


def encode_image(
    input_path: Path,
    message: bytes,
    output_path: Optional[Path] = None,
    silent: bool = False
) -> Path:
    """
    Embed message into the image at input_path.

    Args:
        input_path: Cover image
        message: Secret bytes
        output_path: Optional destination
        silent: Whether to suppress informational output

    Returns:
        Path of the written image
    """
    result = EncodePipeline(input_path, message, output_path=output_path, silent=silent).run()
    logger.debug(f"Encode finished: {result}")

    if not silent:
        print(
            f"Image width {result['width']}, Image Height {result['height']}, "
            f"message length limit {result['capacity_bytes']} bytes"
        )
        print(f"Output file: {result['output_path']}")
    return result["output_path"]


def decode_image(
    input_path: Path,
    dump_path: Optional[Path] = None,
    silent: bool = False
) -> bytes:
    """
    Extract and print the message hidden in the image at input_path.

    Args:
        input_path: Image to read
        dump_path: Optional file receiving the raw bytes
        silent: Whether to suppress informational output

    Returns:
        The extracted bytes

    Raises:
        NonTextPayloadError: If the bytes are not UTF-8 and no dump_path was given
    """
    result = DecodePipeline(input_path, silent=silent).run()
    message = result["message"]
    if not silent:
        print(f"Image width {result['width']}, Image Height {result['height']}")

    if dump_path is not None:
        raster.write_atomic(dump_path, message)
        if not silent:
            print(f"Raw message ({len(message)} bytes) written to {dump_path}")

    try:
        text = message.decode("utf-8")
    except UnicodeDecodeError:
        if dump_path is None:
            raise NonTextPayloadError(message)
        logger.warning("The message cannot be printed as text")
        return message

    if not silent:
        print("Here is the message:")
    print(text)
    return message


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    args = parse_args(argv)
    setup_logging(verbose=args.verbose, silent=args.silent)
    logger.debug(f"Arguments: {args}")

    try:
        if args.encode:
            if args.dump is not None:
                logger.warning("--dump is ignored when encoding")
            encode_image(args.input, read_message(args), args.output, args.silent)
        else:
            decode_image(args.input, args.dump, args.silent)
    except NoEmbeddedMessageError as e:
        print(e)
        return e.exit_code
    except PngSecretError as e:
        logger.debug("Run failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return e.exit_code

    return 0


def cli() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
