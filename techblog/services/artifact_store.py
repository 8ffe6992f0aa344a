"""Storage backends for the generated blog artifact.

The file store reads ``blog-data.json`` from local disk; the sample store
serves a built-in one-post artifact where no generated data is available.
Which one a loader uses is decided by configuration.
"""

import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Protocol

from pydantic import ValidationError

from techblog.models.blog import BlogData, Post, format_timestamp
from techblog.services.errors import ArtifactCorruptError, ArtifactMissingError

logger = logging.getLogger(__name__)

# Fixed once per process, like the artifact it stands in for
_SAMPLE_CREATED_AT = format_timestamp(datetime.now(timezone.utc))


def sample_blog_data() -> BlogData:
    """Return the built-in sample artifact (one placeholder post)."""
    return BlogData(
        posts=[
            Post(
                slug="hello-world",
                title="Hello World",
                date=_SAMPLE_CREATED_AT,
                updated=None,
                tags=["Sample"],
                excerpt="This is a sample post.",
                content=(
                    "<h1>Hello World</h1><p>This is a sample post. In a real build, "
                    "HTML generated from Markdown files would be displayed here.</p>"
                ),
            )
        ],
        tags={"Sample": ["hello-world"]},
        generated_at=_SAMPLE_CREATED_AT,
    )


class ArtifactStore(Protocol):
    def read(self) -> BlogData: ...


class SampleArtifactStore:
    """Always returns the sample artifact."""

    def read(self) -> BlogData:
        return sample_blog_data()


class FileArtifactStore:
    """Reads the artifact from a JSON file on local disk.

    The parsed artifact is cached against the file's mtime (nanoseconds) and
    size, so the file is only re-read after a new build replaces it.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self._cached: BlogData | None = None
        self._cached_key: tuple[int, int] | None = None

    def read(self) -> BlogData:
        """Load the artifact.

        Raises:
            ArtifactMissingError: The file does not exist.
            ArtifactCorruptError: The file is unreadable or not a valid artifact.
        """
        try:
            stat = os.stat(self.path)
        except FileNotFoundError as e:
            raise ArtifactMissingError(f"Blog data file not found at {self.path}") from e
        except OSError as e:
            raise ArtifactCorruptError(f"Cannot stat {self.path}: {e}") from e

        key = (stat.st_mtime_ns, stat.st_size)
        if self._cached is not None and key == self._cached_key:
            return self._cached

        logger.info("Loading blog data from %s", self.path)
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError as e:
            raise ArtifactMissingError(f"Blog data file not found at {self.path}") from e
        except OSError as e:
            raise ArtifactCorruptError(f"Cannot read {self.path}: {e}") from e

        try:
            data = BlogData.from_json(raw)
        except ValidationError as e:
            raise ArtifactCorruptError(
                f"Malformed blog data in {self.path}: {e.error_count()} errors"
            ) from e

        self._cached = data
        self._cached_key = key
        return data
