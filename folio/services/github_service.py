import logging
from typing import List, Optional

import httpx
from pydantic import ValidationError

from folio.schemas.github import Repository

logger = logging.getLogger(__name__)

GITHUB_ACCEPT = "application/vnd.github.v3+json"


class GitHubService:
    """
    Read-only client for the public GitHub REST API.

    Every call is time-boxed and degrades to an empty result on failure;
    callers never see an exception.
    """

    def __init__(
        self,
        api_url: str = "https://api.github.com",
        token: str = "",
        timeout: float = 10.0,
        max_repos: int = 200,
    ):
        self.api_url = api_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self.max_repos = max_repos

    def _headers(self) -> dict:
        headers = {"Accept": GITHUB_ACCEPT}
        if self.token:
            headers["Authorization"] = f"token {self.token}"
        return headers

    async def _get_json(self, path: str, params: Optional[dict] = None):
        async with httpx.AsyncClient(
            base_url=self.api_url,
            headers=self._headers(),
            timeout=httpx.Timeout(self.timeout),
        ) as client:
            response = await client.get(path, params=params)
            response.raise_for_status()
            return response.json()

    async def list_repositories(self, username: str) -> List[Repository]:
        if not username:
            return []
        try:
            payload = await self._get_json(
                f"/users/{username}/repos",
                params={"sort": "updated", "per_page": 100},
            )
            repos = [Repository.model_validate(item) for item in payload]
        except httpx.HTTPStatusError as e:
            logger.error(
                f"GitHub returned {e.response.status_code} listing repos for {username}"
            )
            return []
        except httpx.HTTPError as e:
            logger.error(f"Error fetching GitHub repositories for {username}: {e}")
            return []
        except (ValueError, TypeError, ValidationError) as e:
            logger.error(f"Unexpected GitHub payload for {username}: {e}")
            return []

        return select_repositories(repos, self.max_repos)

    async def get_user(self, username: str) -> Optional[dict]:
        if not username:
            return None
        try:
            return await self._get_json(f"/users/{username}")
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Error fetching GitHub user {username}: {e}")
            return None


def select_repositories(repos: List[Repository], limit: int) -> List[Repository]:
    """Drop dot-repos and undescribed repos, most starred first."""
    shown = [
        repo
        for repo in repos
        if not repo.name.startswith(".") and repo.description
    ]
    shown.sort(key=lambda repo: repo.stargazers_count, reverse=True)
    return shown[:limit]
