"""Shared fixtures building throwaway docsite projects under ``tmp_path``."""

from __future__ import annotations

import typing as typ

import pytest

from docsite.config import load_site_config

if typ.TYPE_CHECKING:
    from pathlib import Path

    from docsite.config import SiteConfig

INDEX_MARKDOWN = """---
title: Introduction
description: Start here.
position: 1
---
Read the [setup guide](./guide/setup.md) next.

## Usage

```js[hello.js]
const greeting = "hi";
```

### Details

Plain `inline` code.
"""

SETUP_MARKDOWN = """---
position: 2
---
# Setup

```bash
pip install docsite
```

Back to the [introduction](../index.md#usage).
"""

HIDDEN_MARKDOWN = """---
title: Drafts
navigation: false
---
Nothing to see.
"""


def write_project(root: Path, config_text: str = "") -> Path:
    """Write a small content tree plus ``docsite.yaml`` and return the config path."""
    content = root / "content"
    (content / "guide").mkdir(parents=True)
    (content / "index.md").write_text(INDEX_MARKDOWN, encoding="utf-8")
    (content / "guide" / "setup.md").write_text(SETUP_MARKDOWN, encoding="utf-8")
    (content / "drafts.md").write_text(HIDDEN_MARKDOWN, encoding="utf-8")
    config_path = root / "docsite.yaml"
    config_path.write_text(config_text, encoding="utf-8")
    return config_path


@pytest.fixture
def project_config_path(tmp_path: Path) -> Path:
    """Return the config path of a freshly written sample project."""
    return write_project(tmp_path)


@pytest.fixture
def site_config(project_config_path: Path) -> SiteConfig:
    """Return the loaded configuration of the sample project."""
    return load_site_config(project_config_path)


@pytest.fixture
def make_project() -> typ.Callable[..., Path]:
    """Return the project writer so tests can pass their own config text."""
    return write_project
