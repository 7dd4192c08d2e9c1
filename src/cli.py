"""앨범 처리 CLI.

사용법:
    album-creator --conf album.json
    album-creator --conf album.json --dry-run
    cd src && python -m cli --conf album.json
"""

import argparse
import sys

from loguru import logger

from core.config import settings
from core.exceptions import AppException
from service.album_service import load_album, new_output_root, process_album
from utility.logger import setup_logger


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="album-creator",
        description="Convert every image of an album with GraphicsMagick and show the results.",
    )
    parser.add_argument("-c", "--conf", required=True, help="Path of the album configuration file")
    parser.add_argument(
        "--output-root",
        default=None,
        help="Output directory (must not exist). Defaults to a fresh directory under OUTPUT_PARENT.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Resolve the album and log the converter commands without running them",
    )
    parser.add_argument("--log-level", default=settings.LOG_LEVEL, help="Loguru log level")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logger(args.log_level)

    try:
        album = load_album(args.conf)
        output_root = args.output_root or new_output_root(settings)
        process_album(album, output_root, settings, dry_run=args.dry_run)
    except AppException as e:
        logger.error(f"{e.error_code}: {e.message}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
