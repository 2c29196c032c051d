"""Binary/text classification of template files.

A file is rendered only when it is safe to treat as UTF-8 text.  Anything
else is copied byte-for-byte, so placeholders in a misclassified file would
survive literally; the checks below err towards "text" for ordinary source
files and towards "binary" for anything with NUL bytes or invalid UTF-8.
"""

from __future__ import annotations

from pathlib import Path

# Control bytes that legitimately appear in text files.
_TEXT_CONTROL_BYTES = frozenset(b"\t\n\r\f\b\x1b")

# Share of other control bytes above which a decodable file is still binary.
_CONTROL_RATIO_LIMIT = 0.30


def looks_binary(data: bytes) -> bool:
    """Classify raw file content."""
    if not data:
        return False
    if b"\x00" in data:
        return True
    try:
        data.decode("utf-8")
    except UnicodeDecodeError:
        return True

    control = sum(1 for byte in data if byte < 0x20 and byte not in _TEXT_CONTROL_BYTES)
    return control / len(data) > _CONTROL_RATIO_LIMIT


def is_binary(path: str | Path) -> bool:
    """Return ``True`` if the file at *path* must be copied rather than rendered."""
    return looks_binary(Path(path).read_bytes())
