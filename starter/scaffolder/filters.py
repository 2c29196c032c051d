"""Skip rules for template files."""

from __future__ import annotations

from pathlib import Path

from starter.config import BuildInfo


def should_skip(path: str | Path, config: BuildInfo) -> bool:
    """Return ``True`` if any skip token occurs anywhere in *path*.

    Matching is literal substring containment on the full path string; no
    globbing and no path-segment matching.
    """
    path_str = str(path)
    return any(token in path_str for token in config.skip_tokens)
