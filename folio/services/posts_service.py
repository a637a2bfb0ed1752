import datetime
import logging
import math
import re
from pathlib import Path
from typing import List, Optional

import frontmatter
import yaml

from folio.exceptions import ContentParseError
from folio.schemas.blog import Post

logger = logging.getLogger(__name__)

# Average adult silent reading speed, words per minute
DEFAULT_WORDS_PER_MINUTE = 200

# YAML only recognizes zero-padded dates; "2024-1-5" arrives as a string
LOOSE_DATE_RE = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})$")


class PostsService:
    def __init__(self, repo, words_per_minute: int = DEFAULT_WORDS_PER_MINUTE):
        self.repo = repo
        self.words_per_minute = words_per_minute

    def list_posts(self) -> List[Post]:
        posts = []
        for path in self.repo.list_post_files():
            slug = self.repo.slug_for(path)
            try:
                posts.append(self._load(slug, path))
            except ContentParseError as e:
                logger.warning(f"Skipping post {slug}: {e.reason}")
            except OSError as e:
                logger.warning(f"Skipping unreadable post {slug}: {e}")

        # Two stable passes: slug ascending breaks ties of the date ordering
        posts.sort(key=lambda p: p.slug)
        posts.sort(key=lambda p: p.date, reverse=True)
        return posts

    def get_post(self, slug: str) -> Optional[Post]:
        path = self.repo.get_post_file(slug)
        if path is None:
            return None
        try:
            return self._load(slug, path)
        except OSError as e:
            logger.warning(f"Post {slug} could not be read: {e}")
            return None

    def _load(self, slug: str, path: Path) -> Post:
        try:
            raw = self.repo.read_text(path)
        except UnicodeDecodeError as e:
            raise ContentParseError(slug, f"not valid UTF-8 ({e.reason})") from e
        return parse_post(slug, raw, words_per_minute=self.words_per_minute)


def parse_post(
    slug: str, raw: str, *, words_per_minute: int = DEFAULT_WORDS_PER_MINUTE
) -> Post:
    """Parse one markdown file (frontmatter + body) into a Post."""
    try:
        parsed = frontmatter.loads(raw)
    except (yaml.YAMLError, ValueError) as e:
        raise ContentParseError(slug, f"malformed frontmatter ({e})") from e

    if not isinstance(parsed.metadata, dict):
        raise ContentParseError(slug, "frontmatter must be a mapping")

    metadata = _normalize_metadata(parsed.metadata, slug)
    return Post(
        slug=slug,
        content=parsed.content,
        readingTime=calculate_reading_time(parsed.content, words_per_minute),
        **metadata,
    )


def _normalize_metadata(metadata: dict, slug: str) -> dict:
    """Fill defaults and validate the recognized frontmatter keys."""
    title = metadata.get("title")
    if title is None or not str(title).strip():
        raise ContentParseError(slug, "missing required key 'title'")

    if metadata.get("date") is None:
        raise ContentParseError(slug, "missing required key 'date'")

    excerpt = metadata.get("excerpt")
    return {
        "title": str(title),
        "date": _convert_date(metadata["date"], slug),
        "excerpt": "" if excerpt is None else str(excerpt),
        "tags": _normalize_tags(metadata.get("tags")),
    }


def _normalize_tags(value) -> List[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple, set)):
        return [str(item) for item in value if item is not None]
    return [str(value)]


def _convert_date(value, slug: str) -> str:
    """Return a zero-padded ISO 8601 string so dates sort lexically."""
    # datetime before date: datetime is a date subclass
    if isinstance(value, datetime.datetime):
        return _datetime_to_iso(value)
    if isinstance(value, datetime.date):
        return value.isoformat()
    if isinstance(value, str):
        text = value.strip()
        try:
            return datetime.date.fromisoformat(text).isoformat()
        except ValueError:
            pass
        try:
            return _datetime_to_iso(datetime.datetime.fromisoformat(text))
        except ValueError:
            pass
        match = LOOSE_DATE_RE.match(text)
        if match:
            try:
                return datetime.date(*(int(part) for part in match.groups())).isoformat()
            except ValueError:
                pass
    raise ContentParseError(slug, f"invalid date {value!r}, expected ISO 8601")


def _datetime_to_iso(value: datetime.datetime) -> str:
    # aware values are stored in UTC, naive ones as written
    if value.tzinfo is not None:
        value = value.astimezone(datetime.timezone.utc)
    return value.isoformat()


def calculate_reading_time(
    text: str, words_per_minute: int = DEFAULT_WORDS_PER_MINUTE
) -> str:
    words = text.split()
    minutes = math.ceil(len(words) / words_per_minute) or 1
    return f"{minutes} min read"
