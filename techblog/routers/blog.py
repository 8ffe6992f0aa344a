"""Blog pages: paginated listing, single posts, tag pages, and the raw data feed."""

import logging

from fastapi import APIRouter, Query
from fastapi.responses import HTMLResponse, JSONResponse

from techblog.config import get_settings
from techblog.services.loader import load_blog_data
from techblog.services.queries import (
    find_post,
    paginate,
    parse_page,
    posts_for_tag,
    tag_counts,
)
from techblog.services.render import (
    render_index_page,
    render_not_found_page,
    render_post_page,
    render_tag_page,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["blog"])


@router.get("/", response_class=HTMLResponse)
async def list_posts(page: str | None = Query(default=None)):
    """Paginated post listing, newest first."""
    settings = get_settings()
    data = load_blog_data().data

    post_page = paginate(data.posts, parse_page(page), settings.posts_per_page)
    return HTMLResponse(
        render_index_page(
            post_page,
            settings.blog_title,
            settings.social_links,
            tag_counts(data),
        )
    )


@router.get("/blog-data.json")
async def get_blog_data() -> JSONResponse:
    """Serve the loaded artifact unchanged."""
    return JSONResponse(content=load_blog_data().data.to_dict())


@router.get("/tag/{tag}", response_class=HTMLResponse)
async def list_posts_by_tag(tag: str):
    """Posts filed under a tag; an unknown tag is an empty page, not an error."""
    settings = get_settings()
    posts = posts_for_tag(load_blog_data().data, tag)
    return HTMLResponse(
        render_tag_page(tag, posts, settings.blog_title, settings.social_links)
    )


@router.get("/{slug}", response_class=HTMLResponse)
async def get_post(slug: str):
    """A single post by slug."""
    settings = get_settings()
    post = find_post(load_blog_data().data, slug)
    if post is None:
        logger.info("Post not found: %s", slug)
        return HTMLResponse(
            render_not_found_page(settings.blog_title, settings.social_links),
            status_code=404,
        )
    return HTMLResponse(
        render_post_page(post, settings.blog_title, settings.social_links)
    )
