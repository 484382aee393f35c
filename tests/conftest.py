from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Puts the 'src' directory on sys.path so the package imports uninstalled.
2. Provides shared project trees and configuration values.
"""

import os
import sys
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from codesummary.domain.config import ApiSettings, AppConfig  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_project(tmp_path: Path) -> Path:
    """
    Create a small project tree.

    Structure:
    /project
      /src
        app.py
        util.js
      /node_modules
        ignored.js
      /empty
      a.txt
      debug.log
      README
    """
    root = tmp_path / "project"
    root.mkdir()

    src = root / "src"
    src.mkdir()
    (src / "app.py").write_text("print('app')\n", encoding="utf-8")
    (src / "util.js").write_text("export const x = 1;\n", encoding="utf-8")

    modules = root / "node_modules"
    modules.mkdir()
    (modules / "ignored.js").write_text("ignored", encoding="utf-8")

    (root / "empty").mkdir()
    (root / "a.txt").write_text("hello", encoding="utf-8")
    (root / "debug.log").write_text("noise", encoding="utf-8")
    (root / "README").write_text("docs", encoding="utf-8")

    return root


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    out = tmp_path / "out"
    out.mkdir()
    return out


@pytest.fixture
def app_config(sample_project: Path, output_dir: Path) -> AppConfig:
    return AppConfig(root_path=str(sample_project), output_dir=str(output_dir))


@pytest.fixture
def api_settings() -> ApiSettings:
    return ApiSettings(
        api_key="sk-test",
        api_url="https://example.invalid/v1/chat/completions",
        model="test/model",
        site_url="https://example.org",
        site_name="Example",
        timeout=12.0,
    )
