import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from starlette.concurrency import run_in_threadpool

from folio import dependencies as deps
from folio.exceptions import ContentParseError
from folio.schemas.blog import PostDetail, PostSummary
from folio.services.markdown_renderer import MarkdownRenderer
from folio.services.posts_service import PostsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/posts", response_model=List[PostSummary])
def list_posts(service: PostsService = Depends(deps.get_posts_service)):
    """Get all posts metadata, newest first."""
    try:
        return [post.summary() for post in service.list_posts()]
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/{slug}", response_model=PostDetail)
async def get_post(
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
    renderer: MarkdownRenderer = Depends(deps.get_markdown_renderer),
):
    """Get a single post by slug, with its body rendered to HTML."""
    try:
        post = await run_in_threadpool(service.get_post, slug)
        if not post:
            raise HTTPException(status_code=404, detail="Post not found")
        html = await renderer.render(post.content)
        return PostDetail(**post.model_dump(), html=html)
    except HTTPException:
        raise
    except ContentParseError as e:
        logger.warning(str(e))
        raise HTTPException(status_code=422, detail="Post could not be parsed")
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")
