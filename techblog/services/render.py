"""HTML rendering for blog pages.

Every page is a fragment wrapped in a shared layout. Titles, tags, excerpts
and error text are escaped; post ``content`` is HTML produced by the build and
is inserted as-is.
"""

from html import escape
from urllib.parse import quote

from techblog.models.blog import Post, parse_timestamp
from techblog.services.queries import PostPage

BUILD_COMMAND = "python -m scripts.build"

SOCIAL_ICON_PATHS = {
    "Twitter": (
        "M22 4s-.7 2.1-2 3.4c1.6 10-9.4 17.3-18 11.6 2.2.1 4.4-.6 6-2C3 15.5.5 9.6 3 5"
        "c2.2 2.6 5.6 4.1 9 4-.9-4.2 4-6.6 7-3.8 1.1 0 3-1.2 3-1.2z"
    ),
    "Twitch": "M21 2H3v16h5v4l4-4h5l4-4V2zm-10 9V7m5 4V7",
    "GitHub": (
        "M9 19c-5 1.5-5-2.5-7-3m14 6v-3.87a3.37 3.37 0 0 0-.94-2.61c3.14-.35 6.44-1.54 "
        "6.44-7A5.44 5.44 0 0 0 20 4.77 5.07 5.07 0 0 0 19.91 1S18.73.65 16 2.48a13.38 "
        "13.38 0 0 0-7 0C6.27.65 5.09 1 5.09 1A5.07 5.07 0 0 0 5 4.77a5.44 5.44 0 0 0-1.5 "
        "3.78c0 5.42 3.3 6.61 6.44 7A3.37 3.37 0 0 0 9 18.13V22"
    ),
}

STYLES = """
:root {
  --bg-color: #121212;
  --bg-color-light: #1e1e1e;
  --text-color: #88c9a1;
  --heading-color: #a0e6bc;
  --link-color: #7fdbda;
  --muted-color: #889488;
  --border-color: #2d2d2d;
  --tag-bg: #2a3b34;
  --code-bg: #1e2a24;
}
body {
  font-family: 'IBM Plex Sans JP', -apple-system, BlinkMacSystemFont, sans-serif;
  line-height: 1.6;
  color: var(--text-color);
  background-color: var(--bg-color);
  max-width: 800px;
  margin: 0 auto;
  padding: 20px;
}
header { margin-bottom: 40px; border-bottom: 1px solid var(--border-color); padding-bottom: 20px; }
.header-container { display: flex; justify-content: space-between; align-items: center; flex-wrap: wrap; }
.social-icons { display: flex; gap: 15px; align-items: center; margin-top: 10px; }
.social-icon { width: 24px; height: 24px; color: var(--text-color); transition: transform 0.2s ease; }
.social-icon:hover { transform: translateY(-2px); color: var(--heading-color); }
h1, h2, h3, h4, h5, h6 { color: var(--heading-color); font-weight: 600; }
h1 { margin: 0; font-size: 2.2rem; }
h2 { font-size: 1.8rem; }
a { color: var(--link-color); text-decoration: none; }
a:hover { text-decoration: underline; color: var(--heading-color); }
.post-item { margin-bottom: 30px; padding-bottom: 20px; border-bottom: 1px solid var(--border-color); }
.post-title { margin: 0 0 10px 0; }
.post-date { color: var(--muted-color); font-size: 0.9em; margin: 5px 0; }
.post-tags, .tag-cloud { display: flex; flex-wrap: wrap; gap: 8px; margin: 8px 0; }
.tag { background: var(--tag-bg); padding: 3px 8px; border-radius: 4px; font-size: 0.8em; }
.post-excerpt { margin: 10px 0; line-height: 1.7; }
.read-more { font-size: 0.9em; display: inline-block; margin-top: 8px; }
.pagination { display: flex; justify-content: space-between; align-items: center; margin-top: 40px; }
.back-link { display: inline-block; margin: 20px 0; }
.markdown-body {
  border-top: 1px solid var(--border-color);
  padding-top: 20px;
  margin-top: 20px;
  color: var(--text-color);
  background-color: transparent;
}
.markdown-body a { color: var(--link-color); }
.markdown-body h1, .markdown-body h2, .markdown-body h3 { color: var(--heading-color); border-bottom-color: var(--border-color); }
.markdown-body blockquote { color: var(--muted-color); border-left-color: var(--border-color); }
.markdown-body table tr { background-color: var(--bg-color); border-color: var(--border-color); }
.markdown-body table tr:nth-child(2n) { background-color: var(--bg-color-light); }
.markdown-body code, .markdown-body pre, code { background-color: var(--code-bg); font-family: 'IBM Plex Mono', monospace; }
.no-posts { background: var(--bg-color-light); padding: 20px; border-radius: 4px; margin: 20px 0; }
.tag-header p { margin: 0 0 10px 0; color: var(--muted-color); }
@media (max-width: 600px) {
  .header-container { flex-direction: column; align-items: flex-start; }
}
"""


def format_date(value: str) -> str:
    """Render an artifact timestamp as MM/DD/YYYY."""
    return parse_timestamp(value).strftime("%m/%d/%Y")


def tag_url(tag: str) -> str:
    return f"/tag/{quote(tag, safe='')}"


def post_url(slug: str) -> str:
    return f"/{quote(slug, safe='')}"


def render_layout(body: str, title: str = "Tech Blog") -> str:
    """Wrap a page fragment in the shared HTML document."""
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{escape(title)}</title>
<link rel="stylesheet" href="https://cdn.jsdelivr.net/npm/github-markdown-css@5.1.0/github-markdown.min.css">
<link rel="stylesheet" href="https://cdn.jsdelivr.net/npm/@ibm/plex@6.3.0/css/ibm-plex.min.css">
<link rel="icon" href="data:image/svg+xml,<svg xmlns=%22http://www.w3.org/2000/svg%22 viewBox=%220 0 100 100%22><text y=%22.9em%22 font-size=%2290%22>💠</text></svg>">
<style>{STYLES}</style>
</head>
<body>
{body}
</body>
</html>"""


def render_header(blog_title: str, social_links: dict[str, str]) -> str:
    icons = []
    for name, url in social_links.items():
        path = SOCIAL_ICON_PATHS.get(name)
        if not path:
            continue
        icons.append(
            f'<a href="{escape(url)}" target="_blank" title="{escape(name)}">'
            '<svg class="social-icon" viewBox="0 0 24 24" fill="none" stroke="currentColor" '
            'stroke-width="2" stroke-linecap="round" stroke-linejoin="round">'
            f'<path d="{path}"></path></svg></a>'
        )
    return f"""<header>
  <div class="header-container">
    <h1><a href="/">{escape(blog_title)}</a></h1>
    <div class="social-icons">{"".join(icons)}</div>
  </div>
</header>"""


def _render_dates(post: Post, published_label: str) -> str:
    dates = f"{published_label}: {format_date(post.date)}"
    if post.updated:
        dates += f' <span class="post-updated">(Updated: {format_date(post.updated)})</span>'
    return f'<div class="post-date">{dates}</div>'


def _render_tags(tags: list[str]) -> str:
    if not tags:
        return ""
    links = "".join(f'<a href="{tag_url(t)}" class="tag">{escape(t)}</a>' for t in tags)
    return f'<div class="post-tags">{links}</div>'


def render_post_item(post: Post, show_tags: bool = True) -> str:
    """Summary card used in listings."""
    url = post_url(post.slug)
    return f"""<article class="post-item">
  <h2 class="post-title"><a href="{url}">{escape(post.title)}</a></h2>
  {_render_dates(post, "Publication Date")}
  {_render_tags(post.tags) if show_tags else ""}
  <div class="post-excerpt">{escape(post.excerpt)}</div>
  <a href="{url}" class="read-more">Read more</a>
</article>"""


def render_pagination(page: PostPage) -> str:
    if page.total_pages <= 1:
        return ""
    prev_link = (
        f'<a href="/?page={page.page - 1}" class="prev">Previous Page</a>'
        if page.has_previous
        else ""
    )
    next_link = (
        f'<a href="/?page={page.page + 1}" class="next">Next Page</a>'
        if page.has_next
        else ""
    )
    return f"""<div class="pagination">
  {prev_link}
  <span class="page-info">Page {page.page} / {page.total_pages}</span>
  {next_link}
</div>"""


def render_tag_cloud(counts: dict[str, int]) -> str:
    if not counts:
        return ""
    links = "".join(
        f'<a href="{tag_url(tag)}" class="tag">{escape(tag)} ({n})</a>'
        for tag, n in counts.items()
    )
    return f'<nav class="tag-cloud">{links}</nav>'


def render_index_page(
    page: PostPage,
    blog_title: str,
    social_links: dict[str, str],
    tag_counts: dict[str, int] | None = None,
) -> str:
    if page.posts:
        items = "\n".join(render_post_item(p) for p in page.posts)
    else:
        items = f"""<div class="no-posts">
  <p>No posts yet.</p>
  <p>To add posts, create Markdown files in the <code>content/posts</code> directory and run <code>{BUILD_COMMAND}</code>.</p>
</div>"""
    body = f"""{render_header(blog_title, social_links)}
<main>
  {render_tag_cloud(tag_counts or {})}
  <div class="posts">
{items}
  </div>
  {render_pagination(page)}
</main>"""
    return render_layout(body, blog_title)


def render_post_page(post: Post, blog_title: str, social_links: dict[str, str]) -> str:
    body = f"""{render_header(blog_title, social_links)}
<article class="post">
  <div class="post-header">
    <a href="/" class="back-link">&larr; Back</a>
    <h1 class="post-title">{escape(post.title)}</h1>
    <div class="post-meta">
      {_render_dates(post, "Published")}
      {_render_tags(post.tags)}
    </div>
  </div>
  <div class="post-content markdown-body">
{post.content}
  </div>
  <footer class="post-footer">
    <a href="/" class="back-link">&larr; Back</a>
  </footer>
</article>"""
    return render_layout(body, f"{post.title} - {blog_title}")


def render_tag_page(
    tag: str, posts: list[Post], blog_title: str, social_links: dict[str, str]
) -> str:
    count = len(posts)
    if posts:
        items = "\n".join(render_post_item(p, show_tags=False) for p in posts)
    else:
        items = '<div class="no-posts"><p>No posts with this tag yet.</p></div>'
    body = f"""{render_header(blog_title, social_links)}
<main>
  <div class="tag-header">
    <h2>Tag: {escape(tag)}</h2>
    <p>{count} post{"" if count == 1 else "s"}</p>
    <a href="/" class="back-link">&larr; Back</a>
  </div>
  <div class="posts">
{items}
  </div>
</main>"""
    return render_layout(body, f"Tag: {tag} - {blog_title}")


def render_not_found_page(blog_title: str, social_links: dict[str, str]) -> str:
    body = f"""{render_header(blog_title, social_links)}
<h1>Post not found</h1>
<p>The post you're looking for doesn't exist or may have been removed.</p>
<a href="/" class="back-link">&larr; Back</a>"""
    return render_layout(body, "Post not found")


def render_error_page(message: str) -> str:
    body = f"""<h1>An error occurred</h1>
<p>An error occurred while rendering this page.</p>
<p>Error details: {escape(message)}</p>
<p>Solutions:</p>
<ol>
  <li>Run the build script to generate blog data: <code>{BUILD_COMMAND}</code></li>
  <li>Check that the blog data file exists and is valid JSON</li>
</ol>"""
    return render_layout(body, "Error")
