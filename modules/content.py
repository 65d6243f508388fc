"""
ContentRepository — directory-based article store.
Each article lives in blog/{file_name}/ as a post.md + data.json pair.
"""
import logging
import os
from typing import List, NamedTuple

from modules.errors import NotFound, ParseError
from modules.metadata import ArticleMetadata, parse_metadata

logger = logging.getLogger("content")

BODY_FILE = "post.md"
META_FILE = "data.json"


class Article(NamedTuple):
    body: str
    metadata: ArticleMetadata


def is_valid_article_id(article_id) -> bool:
    """True if the id is a single, non-hidden path segment."""
    if not isinstance(article_id, str) or not article_id:
        return False
    if article_id in (".", "..") or article_id.startswith("."):
        return False
    return not any(ch in article_id for ch in ("/", "\\", "\x00"))


class ContentRepository:
    def __init__(self, content_dir="blog", meta_ext=".json", include_hidden=False):
        self.content_dir = content_dir
        self.meta_ext = meta_ext
        self.include_hidden = include_hidden

    def _article_dir(self, article_id):
        if not is_valid_article_id(article_id):
            raise NotFound(f"Invalid article id {article_id!r}")
        root = os.path.realpath(self.content_dir)
        article_dir = os.path.realpath(os.path.join(root, article_id))
        if os.path.dirname(article_dir) != root:
            raise NotFound("Article path escapes content root", article_dir)
        return article_dir

    # ── Single article ──

    def fetch_article(self, article_id) -> Article:
        """Load body + metadata for one article. Both must load or NotFound."""
        article_dir = self._article_dir(article_id)
        body_path = os.path.join(article_dir, BODY_FILE)
        meta_path = os.path.join(article_dir, META_FILE)

        for path in (body_path, meta_path):
            if not os.path.isfile(path):
                raise NotFound("Article file missing", path)

        try:
            with open(body_path, "r", encoding="utf-8") as f:
                body = f.read()
            with open(meta_path, "rb") as f:
                raw_meta = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise NotFound(f"Article unreadable: {e}", article_dir) from e

        try:
            metadata = parse_metadata(raw_meta, meta_path)
        except ParseError as e:
            logger.warning(f"Bad metadata for [{article_id}]: {e}")
            raise NotFound("Article metadata invalid", meta_path) from e

        return Article(body, metadata)

    # ── Listing ──

    def _walk_metadata_files(self):
        """Yield metadata file paths under the content root, sorted, skipping dot entries."""
        def _raise(err):
            raise err

        for dirpath, dirnames, filenames in os.walk(self.content_dir, onerror=_raise):
            dirnames[:] = sorted(d for d in dirnames if not d.startswith("."))
            for fname in sorted(filenames):
                if fname.startswith(".") or not fname.endswith(self.meta_ext):
                    continue
                yield os.path.join(dirpath, fname)

    def list_articles(self, include_hidden=None) -> List[ArticleMetadata]:
        """Return metadata for every parseable article in the tree.

        A malformed record is logged and skipped; other I/O errors propagate.
        Hidden articles are left out unless include_hidden is set.
        """
        if include_hidden is None:
            include_hidden = self.include_hidden

        if not os.path.isdir(self.content_dir):
            logger.warning(f"Content root not found: {self.content_dir}")
            return []

        result = []
        skipped = 0
        for path in self._walk_metadata_files():
            if not os.path.isfile(os.path.join(os.path.dirname(path), BODY_FILE)):
                logger.warning(f"Skipping metadata without {BODY_FILE}: {path}")
                skipped += 1
                continue
            with open(path, "rb") as f:
                raw = f.read()
            try:
                meta = parse_metadata(raw, path)
            except ParseError as e:
                logger.warning(f"Skipping metadata: {e}")
                skipped += 1
                continue
            if meta.hidden and not include_hidden:
                continue
            result.append(meta)

        if skipped:
            logger.info(f"Listed {len(result)} articles, skipped {skipped} incomplete or malformed")
        return result
