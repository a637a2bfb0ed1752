import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from folio.routers import posts, projects
from folio.settings import settings

# LOG_LEVEL applies to every folio.* logger
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    content_root = settings.content_root
    if content_root.is_dir():
        logger.info(f"Serving blog posts from {content_root}")
    else:
        logger.warning(f"Content directory {content_root} not found, blog is empty")
    yield


app = FastAPI(
    title="folio API",
    description="Portfolio and markdown blog content",
    lifespan=lifespan,
)

app.include_router(posts.router)
app.include_router(projects.router)


@app.get("/")
async def root():
    return {"message": "folio API is running"}
