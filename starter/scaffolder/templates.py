"""Jinja2 rendering of template files.

Provides the TemplateRenderer class which renders the text of a template
file against the build parameters of the project being generated.
Placeholders use Jinja2 expression syntax (``{{ package_name }}``) and are
resolved strictly: a placeholder with no matching build parameter fails the
file instead of leaking into the generated project.
"""

from __future__ import annotations

import asyncio
import re
from pathlib import Path
from typing import Any

from jinja2 import Environment, StrictUndefined, TemplateError

from starter.utils import atomic_write_text, file_mode, read_text_exact

from .errors import TemplateRenderError
from .paths import package_path


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders template text with a build-parameter context.

    Templates are arbitrary project files (Gradle scripts, Java sources,
    YAML, batch files), so the environment does no autoescaping and keeps
    whitespace exactly as written, including a trailing newline and CRLF
    line endings.
    """

    def __init__(self) -> None:
        self.env = Environment(
            undefined=StrictUndefined,
            autoescape=False,
            keep_trailing_newline=True,
        )
        # Register custom filters
        self.env.filters["pascal_case"] = _pascal_case_filter
        self.env.filters["package_path"] = package_path
        self.crlf_env = self.env.overlay(newline_sequence="\r\n")

    # -- String rendering --------------------------------------------------

    def render(
        self,
        source_text: str,
        context: dict[str, Any],
        *,
        source: Path | None = None,
    ) -> str:
        """Render *source_text* with the provided context.

        Text containing ``\\r\\n`` is rendered with CRLF line endings.

        Args:
            source_text: Template content.
            context: Variables available inside the template.
            source: Template path, used only in error messages.

        Raises:
            TemplateRenderError: If the text does not parse, references a
                placeholder missing from *context*, or an expression fails
                while it is evaluated.
        """
        env = self.crlf_env if "\r\n" in source_text else self.env
        try:
            template = env.from_string(source_text)
            return template.render(**context)
        except TemplateError as exc:
            raise TemplateRenderError(source or Path("<string>"), str(exc)) from exc
        except Exception as exc:
            message = f"{type(exc).__name__}: {exc}"
            raise TemplateRenderError(source or Path("<string>"), message) from exc

    # -- File-based rendering (async) --------------------------------------

    async def render_to_file(
        self,
        source: str | Path,
        destination: str | Path,
        context: dict[str, Any],
    ) -> Path:
        """Render the template at *source* and write it to *destination*.

        Parent directories are created automatically and the output gets the
        permission bits of the template.  Returns the output path.
        """
        src = Path(source)
        out = Path(destination)
        source_text = await asyncio.to_thread(read_text_exact, src)
        content = self.render(source_text, context, source=src)
        mode = await asyncio.to_thread(file_mode, src)
        await asyncio.to_thread(atomic_write_text, out, content, mode)
        return out


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

def _pascal_case_filter(value: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``SomeThing``."""
    parts = re.split(r"[-_.\s]+", value)
    return "".join(word[:1].upper() + word[1:] for word in parts if word)
