import logging

import pytest

from models import ContentSummary
from utils.content import (
    ContentCatalogLoader,
    ContentSource,
    GlobContentSource,
    MalformedDocumentError,
    ManifestContentSource,
    create_content_source,
    read_front_matter,
)

from .conftest import GatedSource


def test_read_front_matter_ignores_body():
    text = "---\ntitle: Hello\nexcerpt: Short\n---\n\n# Heading\n\n---\nmore: body\n"
    assert read_front_matter(text) == {"title": "Hello", "excerpt": "Short"}


@pytest.mark.parametrize("text", [
    "# No header\n",
    "---\ntitle: Never closed\n",
    "---\ntitle: [unbalanced\n---\n",
    "---\n- a\n- list\n---\n",
])
def test_read_front_matter_rejects_bad_headers(text):
    with pytest.raises(MalformedDocumentError):
        read_front_matter(text, "post.md")


def test_glob_source_lists_in_path_order(posts_dir, write_post):
    write_post("b.md", "Bravo")
    write_post("a.md", "Alpha")
    write_post("notes.txt", "Ignored")

    source = GlobContentSource(posts_dir)
    assert [p.name for p in source.list_documents()] == ["a.md", "b.md"]


def test_glob_source_missing_directory_is_empty(tmp_path):
    assert GlobContentSource(tmp_path / "missing").list_documents() == []


def test_glob_source_reads_summary(posts_dir, write_post):
    path = write_post("a.md", "Alpha", "First post")
    assert GlobContentSource(posts_dir).read_metadata(path) == ContentSummary("Alpha", "First post")


def test_glob_source_requires_title(posts_dir, write_post):
    path = write_post("a.md", "", raw="---\nexcerpt: No title\n---\nBody\n")
    with pytest.raises(MalformedDocumentError):
        GlobContentSource(posts_dir).read_metadata(path)


def test_load_empty_location(posts_dir):
    assert ContentCatalogLoader(GlobContentSource(posts_dir)).load() == []


def test_load_returns_every_well_formed_document(posts_dir, write_post):
    write_post("1.md", "One", "first")
    write_post("2.md", "Two", "second")
    write_post("3.md", "Three")

    posts = ContentCatalogLoader(GlobContentSource(posts_dir)).load()

    assert [p.title for p in posts] == ["One", "Two", "Three"]
    assert posts[2].excerpt == ""
    assert all(p.title for p in posts)


def test_load_skips_malformed_documents(posts_dir, write_post, caplog):
    write_post("1.md", "Good", "kept")
    write_post("2.md", "", raw="no front matter at all\n")

    with caplog.at_level(logging.WARNING, logger="utils.content"):
        posts = ContentCatalogLoader(GlobContentSource(posts_dir)).load()

    assert posts == [ContentSummary("Good", "kept")]
    assert "2.md" in caplog.text


class BrokenSource(ContentSource):
    def list_documents(self):
        raise OSError("location is not readable")


def test_load_batch_failure_degrades_to_empty(caplog):
    with caplog.at_level(logging.ERROR, logger="utils.content"):
        assert ContentCatalogLoader(BrokenSource()).load() == []
    assert "location is not readable" in caplog.text


def test_manifest_source():
    source = ManifestContentSource([
        {"title": "From manifest", "excerpt": "Embedded"},
        {"excerpt": "missing title"},
    ])
    assert ContentCatalogLoader(source).load() == [ContentSummary("From manifest", "Embedded")]


def test_create_content_source_prefers_manifest(posts_dir):
    assert isinstance(create_content_source({"POSTS_MANIFEST": []}), ManifestContentSource)

    source = create_content_source({"POSTS_DIRECTORY": str(posts_dir), "POSTS_PATTERN": "*.markdown"})
    assert isinstance(source, GlobContentSource)
    assert source.pattern == "*.markdown"


def test_start_publishes_posts_after_resolution():
    source = GatedSource([{"title": "Later", "excerpt": "async"}])
    catalog = ContentCatalogLoader(source)

    catalog.start()
    assert catalog.posts == []
    assert not catalog.ready

    source.release()
    assert catalog.wait(5)
    assert catalog.posts == [ContentSummary("Later", "async")]


def test_start_runs_discovery_once():
    calls = []

    class CountingSource(ManifestContentSource):
        def list_documents(self):
            calls.append(1)
            return super().list_documents()

    catalog = ContentCatalogLoader(CountingSource([{"title": "Only"}]))
    catalog.start()
    catalog.start()
    assert catalog.wait(5)
    catalog.start()
    catalog.load_now()
    assert len(calls) == 1


def test_snapshot_pairs_readiness_with_posts():
    source = GatedSource([{"title": "Only", "excerpt": "one"}])
    catalog = ContentCatalogLoader(source)
    catalog.start()

    assert catalog.snapshot() == (False, [])

    source.release()
    assert catalog.wait(5)
    assert catalog.snapshot() == (True, [ContentSummary("Only", "one")])


def test_load_now_resolves_inline():
    catalog = ContentCatalogLoader(ManifestContentSource([{"title": "Inline"}]))
    assert catalog.load_now() == [ContentSummary("Inline", "")]
    assert catalog.ready
