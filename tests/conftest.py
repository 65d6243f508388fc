import json
import os

import pytest

from app import create_app

TEMPLATE_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "templates")


def write_article(root, name, body="# Title", meta=None, raw_meta=None):
    """Create blog/{name}/post.md + data.json under root. Either file may be skipped with None."""
    article_dir = root / name
    article_dir.mkdir(parents=True, exist_ok=True)
    if body is not None:
        (article_dir / "post.md").write_text(body, encoding="utf-8")
    if raw_meta is not None:
        (article_dir / "data.json").write_text(raw_meta, encoding="utf-8")
    elif meta is not None:
        (article_dir / "data.json").write_text(json.dumps(meta), encoding="utf-8")
    return article_dir


def meta_for(name, title=None, posted="2024-01-01", hidden=False):
    return {"title": title or name.title(), "file_name": name, "posted": posted, "hidden": hidden}


@pytest.fixture
def content_root(tmp_path):
    root = tmp_path / "blog"
    root.mkdir()
    return root


@pytest.fixture
def client(content_root):
    app = create_app(content_dir=str(content_root), template_dir=TEMPLATE_DIR)
    app.config["TESTING"] = True
    return app.test_client()
