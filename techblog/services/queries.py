"""Read-side queries over a loaded blog artifact: pagination, slug and tag lookup."""

import math
import re
from dataclasses import dataclass

from techblog.models.blog import BlogData, Post

DEFAULT_PER_PAGE = 10

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


@dataclass
class PostPage:
    """One page of the date-sorted post listing."""

    posts: list[Post]
    page: int
    per_page: int
    total_posts: int
    total_pages: int

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


def parse_page(raw: str | None) -> int:
    """Parse a ``page`` query value; anything without a positive leading integer is page 1."""
    if raw is None:
        return 1
    match = _LEADING_INT_RE.match(raw)
    if not match:
        return 1
    return max(1, int(match.group(1)))


def paginate(posts: list[Post], page: int, per_page: int = DEFAULT_PER_PAGE) -> PostPage:
    """Slice out 1-based *page* of *posts*.

    Pages past the end yield an empty list rather than an error.
    """
    if per_page <= 0:
        raise ValueError(f"per_page must be positive, got {per_page}")
    start = (page - 1) * per_page
    return PostPage(
        posts=posts[start : start + per_page],
        page=page,
        per_page=per_page,
        total_posts=len(posts),
        total_pages=math.ceil(len(posts) / per_page),
    )


def find_post(data: BlogData, slug: str) -> Post | None:
    return next((p for p in data.posts if p.slug == slug), None)


def posts_for_tag(data: BlogData, tag: str) -> list[Post]:
    """Return the posts indexed under *tag*, newest first.

    Unknown tags give an empty list. Slugs in the index that no longer match a
    post are dropped.
    """
    slugs = set(data.tags.get(tag, []))
    if not slugs:
        return []
    return [p for p in data.posts if p.slug in slugs]


def tag_counts(data: BlogData) -> dict[str, int]:
    """Number of resolvable posts per tag, in tag index order."""
    known = {p.slug for p in data.posts}
    counts = {tag: len(set(slugs) & known) for tag, slugs in data.tags.items()}
    return {tag: n for tag, n in counts.items() if n}
