"""
Content Module - Blog post discovery and summary loading

A ContentSource lists the available documents and reads the summary
metadata of each one. ContentCatalogLoader runs a single discovery pass
over a source and publishes the resulting ordered list of summaries.
Only the YAML front matter of a post is read; the markdown body is left
untouched.
"""

import logging
import threading
from pathlib import Path
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple

import yaml

from models import ContentSummary

logger = logging.getLogger(__name__)

FRONT_MATTER_DELIMITER = '---'


class ContentError(Exception):
    """Base error for content discovery"""


class MalformedDocumentError(ContentError):
    """A single document has a missing or invalid metadata header"""

    def __init__(self, handle, reason):
        self.handle = handle
        self.reason = reason
        super().__init__(f"Malformed document {handle}: {reason}")


def summary_from_metadata(metadata, handle=None) -> ContentSummary:
    """Build a ContentSummary from a parsed metadata mapping"""
    if not isinstance(metadata, Mapping):
        raise MalformedDocumentError(handle, 'metadata header is not a mapping')

    title = metadata.get('title')
    if title is None or not str(title).strip():
        raise MalformedDocumentError(handle, 'missing title')

    excerpt = metadata.get('excerpt')
    return ContentSummary(
        title=str(title).strip(),
        excerpt='' if excerpt is None else str(excerpt).strip()
    )


def read_front_matter(text: str, handle=None) -> dict:
    """
    Extract the YAML block between the leading '---' delimiters

    Args:
        text: Full document text
        handle: Document identifier used in error messages

    Returns:
        dict: Parsed metadata

    Raises:
        MalformedDocumentError: No header, unterminated header or invalid YAML
    """
    lines = text.lstrip('\ufeff').splitlines()
    if not lines or lines[0].strip() != FRONT_MATTER_DELIMITER:
        raise MalformedDocumentError(handle, 'no front matter header')

    for index, line in enumerate(lines[1:], start=1):
        if line.strip() == FRONT_MATTER_DELIMITER:
            header = '\n'.join(lines[1:index])
            break
    else:
        raise MalformedDocumentError(handle, 'unterminated front matter header')

    try:
        metadata = yaml.safe_load(header)
    except yaml.YAMLError as e:
        raise MalformedDocumentError(handle, f'invalid YAML: {e}') from e

    if metadata is None:
        return {}
    if not isinstance(metadata, dict):
        raise MalformedDocumentError(handle, 'metadata header is not a mapping')
    return metadata


class ContentSource:
    """Interface of a blog post location"""

    def list_documents(self) -> Sequence:
        raise NotImplementedError

    def read_metadata(self, handle) -> ContentSummary:
        raise NotImplementedError


class GlobContentSource(ContentSource):
    """Markdown files matching a glob pattern inside one directory"""

    def __init__(self, directory, pattern='*.md', encoding='utf-8'):
        self.directory = Path(directory)
        self.pattern = pattern
        self.encoding = encoding

    def list_documents(self) -> List[Path]:
        if not self.directory.is_dir():
            logger.info(f"Posts directory {self.directory} does not exist")
            return []
        return sorted(p for p in self.directory.glob(self.pattern) if p.is_file())

    def read_metadata(self, handle) -> ContentSummary:
        path = Path(handle)
        try:
            text = path.read_text(encoding=self.encoding)
        except UnicodeDecodeError as e:
            raise MalformedDocumentError(path.name, f'not valid {self.encoding}') from e
        return summary_from_metadata(read_front_matter(text, path.name), path.name)

    def __repr__(self):
        return f'GlobContentSource({str(self.directory)!r}, {self.pattern!r})'


class ManifestContentSource(ContentSource):
    """Embedded list of metadata mappings, one per post"""

    def __init__(self, entries: Iterable[Mapping]):
        self.entries = list(entries)

    def list_documents(self) -> List[int]:
        return list(range(len(self.entries)))

    def read_metadata(self, handle) -> ContentSummary:
        return summary_from_metadata(self.entries[handle], handle)

    def __repr__(self):
        return f'ManifestContentSource({len(self.entries)} entries)'


def create_content_source(config: Mapping) -> ContentSource:
    """Build the content source described by the application config"""
    manifest = config.get('POSTS_MANIFEST')
    if manifest is not None:
        return ManifestContentSource(manifest)
    return GlobContentSource(
        config.get('POSTS_DIRECTORY', 'posts'),
        config.get('POSTS_PATTERN', '*.md')
    )


class ContentCatalogLoader:
    """One-shot discovery of blog post summaries from a ContentSource."""

    def __init__(self, source: ContentSource):
        self.source = source
        self._posts: List[ContentSummary] = []
        self._lock = threading.Lock()
        self._ready = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def load(self) -> List[ContentSummary]:
        """
        Run one discovery pass over the source

        Malformed documents are skipped and logged. Any other failure
        discards the whole batch and returns an empty list.

        Returns:
            list: ContentSummary entries in discovery order
        """
        try:
            handles = self.source.list_documents()
            posts = []
            for handle in handles:
                try:
                    posts.append(self.source.read_metadata(handle))
                except MalformedDocumentError as e:
                    logger.warning(f"Skipping blog post: {e}")
            logger.info(f"Loaded {len(posts)} blog posts from {self.source!r}")
            return posts
        except Exception as e:
            logger.error(f"Error loading blog posts from {self.source!r}: {str(e)}")
            return []

    def _run(self):
        posts = self.load()
        # posts and readiness change together
        with self._lock:
            self._posts = posts
            self._ready.set()

    def start(self) -> 'ContentCatalogLoader':
        """Resolve the catalog on a background thread"""
        with self._lock:
            if self._thread is not None or self._ready.is_set():
                return self
            self._thread = threading.Thread(target=self._run, name='content-catalog-loader')
            self._thread.daemon = True
        self._thread.start()
        return self

    def load_now(self) -> List[ContentSummary]:
        """Resolve the catalog on the calling thread"""
        if not self._ready.is_set():
            self._run()
        return self.posts

    def snapshot(self) -> Tuple[bool, List[ContentSummary]]:
        """
        Readiness and posts read together

        Returns:
            tuple: (ready, posts), never ready with a stale empty list
        """
        with self._lock:
            return self._ready.is_set(), list(self._posts)

    @property
    def posts(self) -> List[ContentSummary]:
        with self._lock:
            return list(self._posts)

    @property
    def ready(self) -> bool:
        return self._ready.is_set()

    def wait(self, timeout: Optional[float] = None) -> bool:
        return self._ready.wait(timeout)


__all__ = [
    'ContentError',
    'MalformedDocumentError',
    'summary_from_metadata',
    'read_front_matter',
    'ContentSource',
    'GlobContentSource',
    'ManifestContentSource',
    'create_content_source',
    'ContentCatalogLoader'
]
