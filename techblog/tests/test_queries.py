"""Tests for pagination, slug lookup and tag filtering: pure logic, no mocks needed."""

import math

import pytest

from techblog.models.blog import BlogData, Post
from techblog.services.queries import (
    find_post,
    paginate,
    parse_page,
    posts_for_tag,
    tag_counts,
)


def _make_post(slug: str, day: int, tags: list[str] | None = None) -> Post:
    return Post(
        slug=slug,
        title=slug.title(),
        date=f"2024-01-{day:02d}T00:00:00.000Z",
        tags=tags or [],
        excerpt="...",
        content=f"<p>{slug}</p>",
    )


def _make_data(count: int) -> BlogData:
    posts = [_make_post(f"post-{i}", 28 - i) for i in range(count)]
    return BlogData(posts=posts, tags={}, generated_at="2024-02-01T00:00:00.000Z")


class TestParsePage:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            (None, 1),
            ("", 1),
            ("abc", 1),
            ("3", 3),
            (" 2", 2),
            ("2abc", 2),
            ("0", 1),
            ("-4", 1),
        ],
    )
    def test_parse_page(self, raw, expected):
        assert parse_page(raw) == expected


class TestPaginate:
    def test_first_page(self):
        page = paginate(_make_data(25).posts, 1, 10)

        assert [p.slug for p in page.posts] == [f"post-{i}" for i in range(10)]
        assert page.total_posts == 25
        assert page.total_pages == 3
        assert not page.has_previous
        assert page.has_next

    def test_last_partial_page(self):
        page = paginate(_make_data(25).posts, 3, 10)

        assert [p.slug for p in page.posts] == [f"post-{i}" for i in range(20, 25)]
        assert page.has_previous
        assert not page.has_next

    def test_page_past_end_is_empty(self):
        page = paginate(_make_data(5).posts, 4, 10)

        assert page.posts == []
        assert page.total_pages == 1

    @pytest.mark.parametrize("total", [0, 1, 9, 10, 11, 27])
    @pytest.mark.parametrize("per_page", [1, 3, 10])
    def test_total_pages(self, total, per_page):
        page = paginate(_make_data(total).posts, 1, per_page)
        assert page.total_pages == math.ceil(total / per_page)

    def test_empty_collection(self):
        page = paginate([], 1)
        assert page.posts == []
        assert page.total_pages == 0
        assert not page.has_next

    def test_rejects_non_positive_per_page(self):
        with pytest.raises(ValueError):
            paginate([], 1, 0)


class TestFindPost:
    def test_found(self):
        data = _make_data(3)
        assert find_post(data, "post-1").slug == "post-1"

    def test_not_found(self):
        assert find_post(_make_data(3), "missing") is None

    def test_exact_match_only(self):
        assert find_post(_make_data(3), "POST-1") is None


class TestPostsForTag:
    def _tagged_data(self) -> BlogData:
        return BlogData(
            posts=[
                _make_post("newest", 20, ["Go"]),
                _make_post("middle", 10, ["Python"]),
                _make_post("oldest", 1, ["Go"]),
            ],
            # Insertion order from the build, not date order
            tags={"Go": ["oldest", "newest", "deleted"], "Python": ["middle"]},
            generated_at="2024-02-01T00:00:00.000Z",
        )

    def test_returns_posts_newest_first(self):
        posts = posts_for_tag(self._tagged_data(), "Go")
        assert [p.slug for p in posts] == ["newest", "oldest"]

    def test_drops_unresolvable_slugs(self):
        posts = posts_for_tag(self._tagged_data(), "Go")
        assert "deleted" not in [p.slug for p in posts]

    def test_unknown_tag_is_empty(self):
        assert posts_for_tag(self._tagged_data(), "Rust") == []

    def test_tag_counts_skip_unresolvable(self):
        assert tag_counts(self._tagged_data()) == {"Go": 2, "Python": 1}

    def test_tag_counts_drop_empty_tags(self):
        data = self._tagged_data()
        data.tags["Ghost"] = ["deleted"]
        assert "Ghost" not in tag_counts(data)
