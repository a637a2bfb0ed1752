import textwrap
from pathlib import Path

import pytest

from folio.schemas.blog import Post


def write_post(directory: Path, slug: str, raw: str, suffix: str = ".md") -> Path:
    """Write a dedented markdown file into a content directory."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{slug}{suffix}"
    path.write_text(textwrap.dedent(raw).lstrip(), encoding="utf-8")
    return path


@pytest.fixture
def content_dir(tmp_path) -> Path:
    path = tmp_path / "content" / "blog"
    path.mkdir(parents=True)
    return path


def make_post(slug: str = "hello", **overrides) -> Post:
    fields = {
        "slug": slug,
        "title": slug.replace("-", " ").title(),
        "date": "2024-01-15",
        "excerpt": "",
        "tags": [],
        "content": "Hello",
        "readingTime": "1 min read",
    }
    fields.update(overrides)
    return Post(**fields)


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(self, list_posts_return=None, get_post_return=None):
        self._list_posts_return = list_posts_return or []
        self._get_post_return = get_post_return
        self.requested = []

    def list_posts(self):
        return self._list_posts_return

    def get_post(self, slug: str):
        self.requested.append(slug)
        return self._get_post_return


class FakeRenderer:
    """
    Renderer stand-in that records its input.
    """

    def __init__(self, html: str = "<p>rendered</p>"):
        self.html = html
        self.calls = []

    async def render(self, text: str) -> str:
        self.calls.append(text)
        return self.html


class FakeGitHubService:
    """
    Repository lister stand-in; counts calls to check caching.
    """

    def __init__(self, repos=None):
        self.repos = repos or []
        self.calls = []

    async def list_repositories(self, username: str):
        self.calls.append(username)
        return self.repos
