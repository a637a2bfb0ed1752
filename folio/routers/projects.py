import logging
import time
from typing import Dict, List, Optional, Tuple

from fastapi import APIRouter, Depends, Query

from folio import dependencies as deps
from folio.schemas.github import Repository
from folio.services.github_service import GitHubService
from folio.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()
_repo_cache: Dict[str, Tuple[float, List[Repository]]] = {}


@router.get("/projects", response_model=List[Repository])
async def list_projects(
    username: Optional[str] = Query(None, description="GitHub account to list"),
    service: GitHubService = Depends(deps.get_github_service),
    current_settings: Settings = Depends(deps.get_settings),
):
    """List public GitHub repositories, most starred first."""
    account = username or current_settings.GITHUB_USERNAME
    if not account:
        logger.info("No GitHub username configured, returning no projects")
        return []

    ttl = current_settings.GITHUB_CACHE_TTL_SECONDS
    cached = _get_cached(account, ttl)
    if cached is not None:
        return cached

    repos = await service.list_repositories(account)
    # failed fetches come back empty and are never cached
    if repos:
        _repo_cache[account] = (time.monotonic(), repos)
    return repos


def _get_cached(account: str, ttl: int) -> Optional[List[Repository]]:
    entry = _repo_cache.get(account)
    if not entry:
        return None
    stored_at, repos = entry
    if time.monotonic() - stored_at >= ttl:
        _repo_cache.pop(account, None)
        return None
    return repos


def clear_cache() -> None:
    _repo_cache.clear()
