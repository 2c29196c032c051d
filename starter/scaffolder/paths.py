"""Destination path calculation.

A template at ``{source}/src/main/java/Application.java`` lands at
``{dest}/src/main/java/dev/appkr/example/Application.java``: the package path
is inserted right after the language source root.  Files whose names end
with ``.binary`` lose that suffix; it only exists so that archive files such
as ``gradle-wrapper.jar`` are not picked up as dependencies when the starter
itself is packaged.
"""

from __future__ import annotations

from pathlib import Path

from starter.config import BuildInfo

SOURCE_MARKERS: tuple[str, ...] = ("src/main/java", "src/test/java")

SENTINEL_SUFFIX = ".binary"


def package_path(package_name: str) -> str:
    """Translate ``dev.appkr.demo`` into ``dev/appkr/demo``."""
    return "/".join(part for part in package_name.split(".") if part)


def _insert_after_marker(path_str: str, marker: str, segment: str) -> str:
    if not segment or marker not in path_str:
        return path_str
    return path_str.replace(marker, f"{marker}/{segment}")


def remap(
    source_path: str | Path,
    source_root: str | Path,
    dest_root: str | Path,
    config: BuildInfo,
) -> Path:
    """Compute where *source_path* is written inside *dest_root*.

    Args:
        source_path: A file under *source_root*.
        source_root: Root of the template tree.
        dest_root: Root of the generated project.
        config: Build parameters; only ``package_name`` is used.

    Returns:
        The destination file path.
    """
    source_str = Path(source_path).as_posix()
    root_str = Path(source_root).as_posix()
    dest_str = Path(dest_root).as_posix()

    if source_str.startswith(root_str):
        target = dest_str + source_str[len(root_str):]
    else:
        target = source_str

    segment = package_path(config.package_name)
    for marker in SOURCE_MARKERS:
        target = _insert_after_marker(target, marker, segment)

    if target.endswith(SENTINEL_SUFFIX):
        target = target[: -len(SENTINEL_SUFFIX)]

    return Path(target)
