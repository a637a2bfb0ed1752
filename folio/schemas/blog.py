from typing import List

from pydantic import BaseModel, Field


class PostSummary(BaseModel):
    slug: str
    title: str
    date: str
    excerpt: str = ""
    tags: List[str] = Field(default_factory=list)
    readingTime: str


class Post(PostSummary):
    content: str  # Markdown content without frontmatter

    def summary(self) -> PostSummary:
        return PostSummary(**self.model_dump(exclude={"content"}))


class PostDetail(Post):
    html: str
