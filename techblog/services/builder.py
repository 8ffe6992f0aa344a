"""Blog data builder: turns a directory of Markdown posts into one artifact.

Each ``*.md`` file under the content directory becomes one post: YAML
front-matter supplies metadata, the body is rendered to HTML, and every post's
tags are collected into a tag → slugs index. Posts are sorted newest first and
the whole thing is written as ``blog-data.json``.
"""

import logging
import re
from datetime import date, datetime, time, timezone
from pathlib import Path
from typing import Any

import frontmatter
import markdown

from techblog.models.blog import BlogData, Post, format_timestamp
from techblog.services.errors import DocumentParseError, DuplicateSlugError

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Untitled"
EXCERPT_LENGTH = 150
MARKDOWN_EXTENSIONS = ["fenced_code", "tables"]

# Markup characters dropped from auto-generated excerpts
_EXCERPT_STRIP_RE = re.compile(r"[#*`]")


def parse_document(text: str, path: Path) -> tuple[dict[str, Any], str]:
    """Split a document into its front-matter mapping and Markdown body."""
    try:
        post = frontmatter.loads(text)
    except Exception as e:
        raise DocumentParseError(path, f"invalid front-matter: {e}") from e
    return dict(post.metadata), post.content


def render_markdown(body: str) -> str:
    return markdown.markdown(body, extensions=MARKDOWN_EXTENSIONS)


def make_excerpt(body: str) -> str:
    """First 150 characters of the body with heading/emphasis/code marks removed."""
    return _EXCERPT_STRIP_RE.sub("", body[:EXCERPT_LENGTH]).strip() + "..."


def normalize_timestamp(value: Any, path: Path, field: str) -> str | None:
    """Convert a front-matter date value into an artifact timestamp.

    Accepts YAML dates and datetimes (naive values are UTC) as well as ISO-8601
    strings. Returns None for an empty value.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return format_timestamp(value)
    if isinstance(value, date):
        return format_timestamp(datetime.combine(value, time(), tzinfo=timezone.utc))
    if isinstance(value, str):
        try:
            return format_timestamp(datetime.fromisoformat(value.strip()))
        except ValueError as e:
            raise DocumentParseError(path, f"invalid {field} {value!r}") from e
    raise DocumentParseError(path, f"invalid {field} {value!r}")


def build_post(path: Path, text: str, now: datetime) -> Post:
    """Build a single post record from a document's raw text."""
    metadata, body = parse_document(text, path)

    slug = str(metadata.get("slug") or path.stem).strip()
    # Served as a single path segment under /{slug}
    if not slug or "/" in slug:
        raise DocumentParseError(path, f"invalid slug {slug!r}")

    tags = metadata.get("tags")
    published = normalize_timestamp(metadata.get("date"), path, "date")

    return Post(
        slug=slug,
        title=str(metadata.get("title") or DEFAULT_TITLE),
        date=published or format_timestamp(now),
        updated=normalize_timestamp(metadata.get("updated"), path, "updated"),
        tags=[str(t) for t in tags] if isinstance(tags, list) else [],
        excerpt=str(metadata.get("excerpt") or make_excerpt(body)),
        content=render_markdown(body),
    )


def find_documents(content_dir: Path) -> list[Path]:
    """Return every Markdown file under *content_dir*, in sorted path order."""
    if not content_dir.is_dir():
        logger.warning("Content directory not found: %s", content_dir)
        return []
    return sorted(p for p in content_dir.rglob("*.md") if p.is_file())


def build_blog_data(
    content_dir: Path,
    *,
    now: datetime | None = None,
    skip_invalid: bool = False,
) -> BlogData:
    """Build the blog artifact from every document under *content_dir*.

    Args:
        content_dir: Directory searched recursively for ``*.md`` files.
        now: Build time, used for ``generatedAt`` and for posts without a date.
        skip_invalid: Log and skip documents with unusable front-matter instead
            of aborting the build.

    Raises:
        DocumentParseError: A document could not be parsed (unless skipped).
        DuplicateSlugError: Two documents share a slug.
    """
    now = now or datetime.now(timezone.utc)

    posts: list[Post] = []
    tag_index: dict[str, list[str]] = {}
    sources: dict[str, Path] = {}

    for path in find_documents(content_dir):
        try:
            try:
                text = path.read_text(encoding="utf-8")
            except UnicodeDecodeError as e:
                raise DocumentParseError(path, f"not UTF-8 text: {e}") from e
            post = build_post(path, text, now)
        except DocumentParseError as e:
            if not skip_invalid:
                raise
            logger.warning("Skipping %s: %s", path, e.reason)
            continue

        if post.slug in sources:
            raise DuplicateSlugError(post.slug, [sources[post.slug], path])
        sources[post.slug] = path

        for tag in post.tags:
            tag_index.setdefault(tag, []).append(post.slug)
        posts.append(post)
        logger.debug("Processed %s -> %s", path, post.slug)

    # Stable sort: posts with equal dates keep walk order
    posts.sort(key=lambda p: p.published_at, reverse=True)

    return BlogData(posts=posts, tags=tag_index, generated_at=format_timestamp(now))


def write_blog_data(data: BlogData, output_path: Path) -> Path:
    """Serialize the artifact to *output_path*, creating parent directories."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(data.to_json(), encoding="utf-8")
    logger.info("Generated blog data with %d posts at %s", len(data.posts), output_path)
    return output_path


def build(content_dir: Path, output_path: Path, *, skip_invalid: bool = False) -> BlogData:
    """Build the artifact from *content_dir* and write it to *output_path*."""
    data = build_blog_data(content_dir, skip_invalid=skip_invalid)
    write_blog_data(data, output_path)
    return data
