"""Build blog data from Markdown posts.

Usage:
    python -m scripts.build                              # content/posts -> dist/blog-data.json
    python -m scripts.build --content-dir DIR -o FILE    # Custom paths
    python -m scripts.build --skip-invalid               # Warn and skip bad documents
"""

import argparse
import logging
import sys
from pathlib import Path

from techblog.config import get_settings
from techblog.services.builder import build
from techblog.services.errors import BuildError

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--content-dir",
        type=Path,
        default=settings.resolve(settings.content_dir),
        help="Directory searched recursively for *.md posts",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=settings.resolve(settings.artifact_path),
        help="Where to write blog-data.json",
    )
    parser.add_argument(
        "--skip-invalid",
        action="store_true",
        help="Skip documents with malformed front-matter instead of aborting",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    try:
        data = build(args.content_dir, args.output, skip_invalid=args.skip_invalid)
    except BuildError as e:
        logger.error("Build failed: %s", e)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print(f"Generated blog data with {len(data.posts)} posts")
    print(f"  Tags:   {len(data.tags)}")
    print(f"  Output: {args.output}")
    return 0


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    sys.exit(main())
