"""Pytest configuration and fixtures

Every app is built with the testing config and an isolated posts directory
under tmp_path, so tests never read the bundled posts.
"""

import re
import threading

import pytest

from app import create_app
from utils.content import ContentCatalogLoader, ContentSource
from utils.helpers import CATALOG_EXTENSION_KEY


POST_TEMPLATE = """---
title: {title}
excerpt: {excerpt}
---

Body of {title}.
"""


@pytest.fixture
def posts_dir(tmp_path):
    directory = tmp_path / "posts"
    directory.mkdir()
    return directory


@pytest.fixture
def write_post(posts_dir):
    """Write a markdown post with front matter into the posts directory"""

    def _write(filename, title, excerpt="", raw=None):
        path = posts_dir / filename
        text = raw if raw is not None else POST_TEMPLATE.format(title=title, excerpt=excerpt)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_app(posts_dir):
    def _make(**overrides):
        config = {"POSTS_DIRECTORY": str(posts_dir)}
        config.update(overrides)
        return create_app("testing", overrides=config)

    return _make


@pytest.fixture
def app(make_app):
    return make_app()


@pytest.fixture
def client(app):
    return app.test_client()


class GatedSource(ContentSource):
    """Source whose discovery pass blocks until release() is called"""

    def __init__(self, entries):
        self.entries = list(entries)
        self.gate = threading.Event()

    def release(self):
        self.gate.set()

    def list_documents(self):
        self.gate.wait(5)
        return list(range(len(self.entries)))

    def read_metadata(self, handle):
        from utils.content import summary_from_metadata
        return summary_from_metadata(self.entries[handle], handle)


@pytest.fixture
def gated_catalog(app):
    """Replace the app catalog with one that resolves only when released"""
    source = GatedSource([
        {"title": "First", "excerpt": "One"},
        {"title": "Second", "excerpt": "Two"},
    ])
    catalog = ContentCatalogLoader(source)
    app.extensions[CATALOG_EXTENSION_KEY] = catalog
    yield source, catalog
    source.release()


def body_classes(html):
    match = re.search(r'<body class="([^"]*)"', html)
    assert match, "page has no body class attribute"
    return match.group(1).split()


def blog_section(html):
    match = re.search(r'<section id="blog".*?</section>', html, re.S)
    assert match, "page has no blog section"
    return match.group(0)
