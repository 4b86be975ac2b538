"""Command-line entry point for SoundBind.

Resolves a sound id against the configured Filebin host and prints the URL
of its audio file:

    python -m soundbind resolve 3f2b8c1e-5d4a-4e6f-9a7b-1c2d3e4f5a6b
"""

import argparse
import logging
import sys
from typing import List, Optional
from uuid import UUID

import httpx

from .core.config import SoundBindConfig
from .core.errors import ResolutionError
from .resolution import ResolutionClient
from .utils.logger import setup_logger


def _parse_uuid(value: str) -> UUID:
    try:
        return UUID(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a valid UUID: {value}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="soundbind", description="Custom item sound tools")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--log-file", action="store_true", help="Also log to logs/")

    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve = subparsers.add_parser("resolve", help="Print the audio URL for a sound id")
    resolve.add_argument("sound_id", type=_parse_uuid, help="UUID of the uploaded sound")
    resolve.add_argument("--base-url", help="Filebin endpoint (overrides SOUNDBIND_FILEBIN_URL)")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for SoundBind."""
    args = build_parser().parse_args(argv)

    config = SoundBindConfig.from_env()
    setup_logger(verbose=args.verbose or config.verbose, save_to_file=args.log_file or config.save_logs)
    logger = logging.getLogger(__name__)

    if args.base_url:
        config.filebin_url = args.base_url

    with ResolutionClient.from_config(config) as client:
        try:
            asset = client.resolve(args.sound_id)
        except ResolutionError as e:
            logger.error(f"Could not resolve {args.sound_id}: {e}")
            return 1
        except httpx.HTTPError as e:
            logger.error(f"Request to {client.bin_url(args.sound_id)} failed: {e}")
            return 1

    print(asset.url)
    return 0


if __name__ == "__main__":
    sys.exit(main())
