"""Blog data loader: always returns something renderable.

Reads the generated artifact through the configured store and falls back to
the sample artifact on any failure. The returned ``LoadResult`` records which
branch was taken so callers (and tests) can tell an expected absence from an
unexpected failure.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache

from techblog.config import Settings, get_settings
from techblog.models.blog import BlogData
from techblog.services.artifact_store import (
    ArtifactStore,
    FileArtifactStore,
    SampleArtifactStore,
    sample_blog_data,
)
from techblog.services.errors import ArtifactCorruptError, ArtifactMissingError

logger = logging.getLogger(__name__)


class DataSource(str, Enum):
    ARTIFACT = "artifact"
    SAMPLE_MISSING = "sample_missing"
    SAMPLE_CORRUPT = "sample_corrupt"
    SAMPLE_FALLBACK = "sample_fallback"

    @property
    def is_sample(self) -> bool:
        return self is not DataSource.ARTIFACT


@dataclass
class LoadResult:
    data: BlogData
    source: DataSource


class BlogDataLoader:
    """Loads blog data from a store, degrading to sample data on error.

    A loader without a store serves the sample store.
    """

    def __init__(self, store: ArtifactStore | None = None) -> None:
        self.store = store or SampleArtifactStore()

    def load_result(self) -> LoadResult:
        if isinstance(self.store, SampleArtifactStore):
            return LoadResult(self.store.read(), DataSource.SAMPLE_FALLBACK)

        try:
            return LoadResult(self.store.read(), DataSource.ARTIFACT)
        except ArtifactMissingError as e:
            logger.warning("%s; run the build first. Using sample data.", e)
            return LoadResult(sample_blog_data(), DataSource.SAMPLE_MISSING)
        except ArtifactCorruptError as e:
            logger.error("%s. Using sample data.", e)
            return LoadResult(sample_blog_data(), DataSource.SAMPLE_CORRUPT)
        except Exception as e:
            logger.error("Unexpected error loading blog data: %s", e)
            return LoadResult(sample_blog_data(), DataSource.SAMPLE_CORRUPT)

    def load(self) -> BlogData:
        return self.load_result().data


def create_loader(settings: Settings) -> BlogDataLoader:
    """Build a loader for the configured data source."""
    if settings.use_artifact_file:
        return BlogDataLoader(FileArtifactStore(settings.resolve(settings.artifact_path)))
    return BlogDataLoader(SampleArtifactStore())


@lru_cache
def get_blog_loader() -> BlogDataLoader:
    """Return the process-wide loader (lazy singleton)."""
    return create_loader(get_settings())


def load_blog_data() -> LoadResult:
    """Load blog data with the process-wide loader."""
    return get_blog_loader().load_result()
