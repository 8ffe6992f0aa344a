"""Blog post and artifact data models.

Field names mirror the ``blog-data.json`` artifact written by the build step,
so existing artifacts load without migration.
"""

import json
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


def format_timestamp(dt: datetime) -> str:
    """Format a datetime as an artifact timestamp (UTC, milliseconds, ``Z``)."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(value: str) -> datetime:
    """Parse an artifact timestamp into an aware datetime."""
    dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


class Post(BaseModel):
    """A single rendered blog post."""

    # Unknown artifact keys are kept so the data feed passes them through
    model_config = ConfigDict(extra="allow")

    slug: str
    title: str
    date: str
    updated: str | None = None
    tags: list[str] = []
    excerpt: str
    content: str

    @property
    def published_at(self) -> datetime:
        return parse_timestamp(self.date)

    @property
    def updated_at(self) -> datetime | None:
        return parse_timestamp(self.updated) if self.updated else None


class BlogData(BaseModel):
    """The generated blog artifact: posts, tag index, and build time."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    posts: list[Post]
    tags: dict[str, list[str]] = {}
    generated_at: str = Field(alias="generatedAt")

    def to_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)

    @classmethod
    def from_json(cls, raw: str | bytes) -> "BlogData":
        return cls.model_validate_json(raw)
