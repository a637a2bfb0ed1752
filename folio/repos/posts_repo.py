import logging
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)


class FilesystemPostsRepo:
    def __init__(self, content_root: Path, extension: str = ".md"):
        self.content_root = Path(content_root)
        self.extension = extension

    def list_post_files(self) -> List[Path]:
        if not self.content_root.is_dir():
            logger.info(f"Content directory {self.content_root} does not exist")
            return []
        return sorted(
            path
            for path in self.content_root.iterdir()
            if path.is_file()
            and path.name.endswith(self.extension)
            and self.slug_for(path)
        )

    def get_post_file(self, slug: str) -> Optional[Path]:
        if not self._is_valid_slug(slug):
            return None
        path = self.content_root / f"{slug}{self.extension}"
        return path if path.is_file() else None

    def slug_for(self, path: Path) -> str:
        return path.name.removesuffix(self.extension)

    @staticmethod
    def read_text(path: Path) -> str:
        # strict: bad bytes must surface, not be replaced
        return path.read_bytes().decode("utf-8-sig")

    @staticmethod
    def _is_valid_slug(slug: str) -> bool:
        if not slug or slug in (".", ".."):
            return False
        return "/" not in slug and "\\" not in slug and "\x00" not in slug
