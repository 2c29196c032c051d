"""Project Starter configuration.

Typed build parameters for a single generation run.  ``BuildInfo`` is frozen:
every update returns a new instance, so the materializer always sees one
consistent snapshot.  ``Settings`` holds the filesystem locations used by the
CLI.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

RUNTIME_IMAGES: dict[str, str] = {
    "1.8": "openjdk:8-jre-alpine",
    "11": "amazoncorretto:11-alpine-jdk",
    "17": "amazoncorretto:17-alpine-jdk",
}

DEFAULT_SKIP_TOKENS: tuple[str, ...] = (".DS_Store",)

# Names end up in directory paths and must not contain separators.
NAME_FORBIDDEN_CHARS: tuple[str, ...] = ("/", "\\")

# Source paths carrying example code contain one of these.
EXAMPLE_SKIP_TOKENS: tuple[str, ...] = ("Example", "/example/")

SPECIAL_VARIANT_DEFAULTS: dict[str, Any] = {
    "group_name": "com.vroong",
    "media_type": "application/vnd.vroong.private.v1+json",
    "skip_tokens": (".DS_Store",),
}

DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"
DEFAULT_TARGET_DIR = Path.home() / ".msa-starter"


def _merge_tokens(current: tuple[str, ...], extra: tuple[str, ...] | list[str]) -> tuple[str, ...]:
    """Append *extra* to *current*, keeping order and dropping duplicates."""
    merged = list(current)
    for token in extra:
        if token and token not in merged:
            merged.append(token)
    return tuple(merged)


def _env_flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "y", "on")


# ---------------------------------------------------------------------------
# Build parameters
# ---------------------------------------------------------------------------


class BuildInfo(BaseModel):
    """Parameters bound into the templates of a generated project.

    Project and group names may not contain path separators.  Other values
    are not validated beyond their types; a malformed port number is accepted
    here and only shows up once the generated project is built.
    """

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(default="example")
    group_name: str = Field(default="dev.appkr")
    port_number: str = Field(default="8080")
    media_type: str = Field(default="application/json")
    java_version: str = Field(default="17", description="Target runtime dialect")
    runtime_image: str = Field(default=RUNTIME_IMAGES["17"], description="Base execution image")
    reactive_project: bool = Field(default=False)
    special_variant: bool = Field(default=False)
    include_examples: bool = Field(default=True)
    skip_tokens: tuple[str, ...] = Field(default=DEFAULT_SKIP_TOKENS)

    @field_validator("project_name", "group_name")
    @classmethod
    def _no_path_separators(cls, value: str) -> str:
        found = [c for c in NAME_FORBIDDEN_CHARS if c in value]
        if found:
            raise ValueError(f"must not contain {' or '.join(repr(c) for c in found)}")
        return value

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def package_name(self) -> str:
        """Dotted package name, always derived from group and project names."""
        parts = [p for p in (self.group_name, self.project_name) if p]
        return ".".join(parts)

    def as_context(self) -> dict[str, Any]:
        """Return the template context for rendering."""
        return {
            "project_name": self.project_name,
            "group_name": self.group_name,
            "package_name": self.package_name,
            "port_number": self.port_number,
            "media_type": self.media_type,
            "java_version": self.java_version,
            "runtime_image": self.runtime_image,
            "reactive_project": self.reactive_project,
            "special_variant": self.special_variant,
            "include_examples": self.include_examples,
        }

    # ------------------------------------------------------------------
    # Updates (each returns a new instance)
    # ------------------------------------------------------------------

    def with_values(self, **changes: Any) -> "BuildInfo":
        """Return a validated copy with *changes* applied.

        Unlike ``model_copy(update=...)`` the result goes through the field
        validators.

        Raises:
            pydantic.ValidationError: If a changed value is rejected.
        """
        return type(self).model_validate({**self.model_dump(), **changes})

    def with_example_skip_tokens(self) -> "BuildInfo":
        """Return a copy whose skip tokens also exclude example code.

        Safe to call more than once: tokens already present are not added
        again.
        """
        return self.model_copy(
            update={"skip_tokens": _merge_tokens(self.skip_tokens, EXAMPLE_SKIP_TOKENS)}
        )

    def with_skip_tokens(self, tokens: list[str] | tuple[str, ...]) -> "BuildInfo":
        """Return a copy with *tokens* merged into the skip set."""
        return self.model_copy(update={"skip_tokens": _merge_tokens(self.skip_tokens, tokens)})

    def with_runtime(self, java_version: str) -> "BuildInfo":
        """Select a runtime dialect and its matching base image.

        Raises:
            ValueError: If *java_version* is not one of ``RUNTIME_IMAGES``.
        """
        try:
            image = RUNTIME_IMAGES[java_version]
        except KeyError:
            allowed = ", ".join(f"'{v}'" for v in RUNTIME_IMAGES)
            raise ValueError(f"Must be one of {allowed}!") from None
        return self.model_copy(update={"java_version": java_version, "runtime_image": image})

    def with_special_variant(self) -> "BuildInfo":
        """Switch to the special downstream variant and apply its defaults."""
        update = dict(SPECIAL_VARIANT_DEFAULTS)
        update["skip_tokens"] = _merge_tokens(self.skip_tokens, update["skip_tokens"])
        return self.model_copy(update={"special_variant": True, **update})

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the build parameters to a JSON file."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "BuildInfo":
        """Load previously-saved build parameters from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "BuildInfo":
        """Build a ``BuildInfo`` from environment variables.

        Recognised variables (all optional):
            STARTER_PROJECT_NAME, STARTER_GROUP_NAME, STARTER_PORT_NUMBER,
            STARTER_MEDIA_TYPE, STARTER_JAVA_VERSION, STARTER_REACTIVE,
            STARTER_INCLUDE_EXAMPLES, STARTER_SKIP_TOKENS.
        """
        kwargs: dict[str, Any] = {}
        for field_name in ("project_name", "group_name", "port_number", "media_type"):
            value = os.environ.get(f"STARTER_{field_name.upper()}")
            if value:
                kwargs[field_name] = value
        if os.environ.get("STARTER_REACTIVE"):
            kwargs["reactive_project"] = _env_flag(os.environ["STARTER_REACTIVE"])

        info = cls(**kwargs)

        if os.environ.get("STARTER_JAVA_VERSION"):
            info = info.with_runtime(os.environ["STARTER_JAVA_VERSION"].strip())

        tokens = os.environ.get("STARTER_SKIP_TOKENS", "")
        extra = [t.strip() for t in tokens.split(",") if t.strip()]
        if extra:
            info = info.with_skip_tokens(extra)

        if os.environ.get("STARTER_INCLUDE_EXAMPLES") and not _env_flag(
            os.environ["STARTER_INCLUDE_EXAMPLES"]
        ):
            info = info.model_copy(update={"include_examples": False}).with_example_skip_tokens()

        return info


# ---------------------------------------------------------------------------
# Filesystem settings
# ---------------------------------------------------------------------------


class Settings(BaseModel):
    """Where templates are read from and where the project is written."""

    template_dir: Path = Field(default=DEFAULT_TEMPLATE_DIR)
    target_dir: Path = Field(default=DEFAULT_TARGET_DIR)

    def template_root(self, info: BuildInfo) -> Path:
        """Return the template set matching the selected variant."""
        variant = "webflux" if info.reactive_project else "webmvc"
        return self.template_dir / variant

    @classmethod
    def from_env(cls) -> "Settings":
        """Build ``Settings`` from STARTER_TEMPLATE_DIR and STARTER_TARGET_DIR."""
        kwargs: dict[str, Any] = {}
        if os.environ.get("STARTER_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["STARTER_TEMPLATE_DIR"]).expanduser()
        if os.environ.get("STARTER_TARGET_DIR"):
            kwargs["target_dir"] = Path(os.environ["STARTER_TARGET_DIR"]).expanduser()
        return cls(**kwargs)
