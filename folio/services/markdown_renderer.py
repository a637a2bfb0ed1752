import logging

from markdown_it import MarkdownIt
from mdit_py_plugins.tasklists import tasklists_plugin
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound
from starlette.concurrency import run_in_threadpool

from folio.exceptions import RenderError

logger = logging.getLogger(__name__)

_formatter = HtmlFormatter(nowrap=True)


def highlight_code(code: str, lang: str, attrs: str) -> str:
    """
    Pygments-highlight a fenced block. An empty return tells markdown-it to
    fall back to escaped plain text, which is what unknown languages get.
    """
    if not lang:
        return ""
    try:
        lexer = get_lexer_by_name(lang)
    except ClassNotFound:
        logger.debug(f"No lexer for fenced code language {lang!r}")
        return ""
    return highlight(code, lexer, _formatter)


def build_markdown_parser() -> MarkdownIt:
    # gfm-like: tables, ~~strikethrough~~ and bare-URL autolinks
    md = MarkdownIt("gfm-like", {"html": True, "highlight": highlight_code})
    md.use(tasklists_plugin)
    return md


class MarkdownRenderer:
    """
    Convert post bodies to HTML for direct embedding.

    Raw HTML already present in the markdown is passed through untouched:
    posts are authored by the site owner. Sanitize the output before
    accepting content from anyone else.
    """

    def __init__(self, parser: MarkdownIt | None = None):
        self.parser = parser or build_markdown_parser()

    async def render(self, text: str) -> str:
        return await run_in_threadpool(self.render_sync, text)

    def render_sync(self, text: str) -> str:
        try:
            html = self.parser.render(text)
        except Exception as e:
            logger.error(f"Markdown conversion failed: {e}")
            raise RenderError(str(e)) from e
        logger.debug(f"Rendered {len(text)} chars of markdown to {len(html)} chars")
        return html
