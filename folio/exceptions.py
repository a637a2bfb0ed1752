class FolioError(Exception):
    """Base class for errors raised by the content pipeline."""


class ContentParseError(FolioError):
    """A post file exists but cannot be turned into a Post."""

    def __init__(self, slug: str, reason: str):
        self.slug = slug
        self.reason = reason
        super().__init__(f"Failed to parse post {slug}: {reason}")


class RenderError(FolioError):
    """Markdown conversion failed. Treated as a defect, not a content problem."""
