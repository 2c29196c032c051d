"""Shared pytest fixtures for the Project Starter test suite.

Provides reusable fixtures for:
- Build parameters (defaults and a custom package)
- Small template trees written under ``tmp_path``
- The bundled template directory
"""

from __future__ import annotations

from pathlib import Path

import pytest

from starter.config import DEFAULT_TEMPLATE_DIR, BuildInfo


# ---------------------------------------------------------------------------
# Build parameters
# ---------------------------------------------------------------------------

@pytest.fixture
def default_info() -> BuildInfo:
    """BuildInfo with every default value."""
    return BuildInfo()


@pytest.fixture
def demo_info() -> BuildInfo:
    """BuildInfo whose package name is ``dev.appkr.demo``."""
    return BuildInfo(project_name="demo", group_name="dev.appkr", port_number="9090")


# ---------------------------------------------------------------------------
# Template trees
# ---------------------------------------------------------------------------

# First bytes of a zip archive, NUL bytes included.
ZIP_BYTES = b"PK\x03\x04\x14\x00\x08\x08\x08\x00\x00\x00!\x00\xff\xfe\x00\x00"


def write_tree(root: Path, files: dict[str, str | bytes]) -> Path:
    """Create *files* (relative path -> content) under *root*."""
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def template_root(tmp_path: Path) -> Path:
    """A three-file template tree: a Java source, a disguised binary and junk."""
    return write_tree(
        tmp_path / "templates",
        {
            "src/main/java/App.java.txt": (
                "package {{ package_name }};\n\nclass App {} // port {{ port_number }}\n"
            ),
            "README.binary": ZIP_BYTES,
            ".DS_Store": b"\x00\x00\x00\x01Bud1\x00",
        },
    )


@pytest.fixture
def dest_root(tmp_path: Path) -> Path:
    """Destination directory path (not created)."""
    return tmp_path / "out"


@pytest.fixture
def bundled_templates() -> Path:
    """The template directory shipped with the package."""
    assert DEFAULT_TEMPLATE_DIR.is_dir(), f"Bundled templates not found at {DEFAULT_TEMPLATE_DIR}"
    return DEFAULT_TEMPLATE_DIR
