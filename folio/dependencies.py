from fastapi import Depends

from folio.repos.posts_repo import FilesystemPostsRepo
from folio.services.github_service import GitHubService
from folio.services.markdown_renderer import MarkdownRenderer
from folio.services.posts_service import PostsService
from folio.settings import Settings, settings


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def get_posts_repo(current_settings: Settings = Depends(get_settings)):
    return FilesystemPostsRepo(
        current_settings.content_root, extension=current_settings.POST_EXTENSION
    )


def get_posts_service(
    repo=Depends(get_posts_repo),
    current_settings: Settings = Depends(get_settings),
):
    return PostsService(repo=repo, words_per_minute=current_settings.WORDS_PER_MINUTE)


def get_markdown_renderer():
    return MarkdownRenderer()


def get_github_service(current_settings: Settings = Depends(get_settings)):
    return GitHubService(
        api_url=current_settings.GITHUB_API_URL,
        token=current_settings.GITHUB_TOKEN,
        timeout=current_settings.GITHUB_TIMEOUT_SECONDS,
        max_repos=current_settings.GITHUB_MAX_REPOS,
    )
