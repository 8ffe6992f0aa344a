"""Exceptions raised by the build and artifact storage services."""

from pathlib import Path


class BuildError(Exception):
    """The blog data build cannot produce an artifact."""


class DocumentParseError(BuildError):
    """A content document has unusable front-matter."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class DuplicateSlugError(BuildError):
    """Two documents resolve to the same slug."""

    def __init__(self, slug: str, paths: list[Path]) -> None:
        self.slug = slug
        self.paths = paths
        joined = ", ".join(str(p) for p in paths)
        super().__init__(f"Duplicate slug {slug!r} in {joined}")


class ArtifactError(Exception):
    """The blog artifact could not be read."""


class ArtifactMissingError(ArtifactError):
    pass


class ArtifactCorruptError(ArtifactError):
    pass
