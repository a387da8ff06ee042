"""
conftest.py
-----------
Shared pytest fixtures for sitelint tests.

Provides fixtures for:
- Temporary site layouts (content/blog, content/projects, assets)
- Sample blog post and project documents
"""
import pytest
from pathlib import Path
from tempfile import TemporaryDirectory


LONG_BODY = (
    "This paragraph is long enough to pass every body length check. "
    "It talks about static sites, content pipelines, and the small "
    "frontmatter headers that sit at the top of each markdown file. "
    "It keeps going for a while so the trimmed length clears two hundred."
)


# ----- Path Fixtures -----

@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test file operations."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def site_root(tmp_dir):
    """Site root with empty blog and project sections and one image."""
    (tmp_dir / "content" / "blog").mkdir(parents=True)
    (tmp_dir / "content" / "projects").mkdir(parents=True)
    images = tmp_dir / "assets" / "images"
    images.mkdir(parents=True)
    (images / "cover.png").write_bytes(b"\x89PNG")
    return tmp_dir


@pytest.fixture
def blog_dir(site_root):
    return site_root / "content" / "blog"


@pytest.fixture
def projects_dir(site_root):
    return site_root / "content" / "projects"


# ----- Sample Content Fixtures -----

@pytest.fixture
def long_body():
    """Body text longer than both length thresholds."""
    return LONG_BODY


@pytest.fixture
def valid_blog_content():
    """Blog post that passes every rule."""
    return f"""---
title: "Hello, world"
date: 2024-01-15
excerpt: A first post
image: /assets/images/cover.png
tags: [python, static-sites]
---

{LONG_BODY}
"""


@pytest.fixture
def valid_project_content():
    """Project entry that passes every rule."""
    return f"""---
title: Site Generator
description: A tiny static site generator
technologies: [Python, Jinja2]
image: /assets/images/cover.png
demo_url: https://example.com/demo
github_url: https://github.com/example/generator
---

{LONG_BODY}
"""


@pytest.fixture
def valid_blog_file(blog_dir, valid_blog_content):
    file_path = blog_dir / "hello.md"
    file_path.write_text(valid_blog_content, encoding="utf-8")
    return file_path


@pytest.fixture
def valid_project_file(projects_dir, valid_project_content):
    file_path = projects_dir / "generator.md"
    file_path.write_text(valid_project_content, encoding="utf-8")
    return file_path
