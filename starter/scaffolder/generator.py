"""Main scaffolding orchestrator.

Walks a template tree and materializes it as a new project: each file is
filtered against the skip tokens, relocated under the chosen package,
then rendered (text) or copied verbatim (binary).  Every file is reported
as soon as it is handled and a failure never stops the remaining files.
"""

from __future__ import annotations

import asyncio
import shutil
from dataclasses import dataclass
from pathlib import Path

from starter.config import BuildInfo
from starter.utils import list_files, print_error, print_success, reset_dir

from .content import is_binary
from .errors import DestinationResetError, TemplateRenderError
from .filters import should_skip
from .paths import remap
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Per-file outcome
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RenderResult:
    """Outcome of materializing one template file."""

    source: Path
    destination: Path
    error: BaseException | None = None
    binary: bool = False

    @property
    def success(self) -> bool:
        return self.error is None

    def describe(self) -> str:
        return f"{self.source} -> {self.destination}"


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Materializes a template tree into a project directory.

    The build parameters are read-only for the whole run; the generator never
    mutates them and holds no other state between files.
    """

    def __init__(self, config: BuildInfo) -> None:
        self.config = config
        self.renderer = TemplateRenderer()
        self.context = config.as_context()

    # -- Public API --------------------------------------------------------

    async def run(
        self,
        source_root: str | Path,
        dest_root: str | Path,
        *,
        cancel: asyncio.Event | None = None,
    ) -> list[RenderResult]:
        """Generate the project under *dest_root* from *source_root*.

        Args:
            source_root: Template tree to read.
            dest_root: Output directory.  It is deleted and recreated first.
            cancel: Optional event; once set, no further file is started.
                Files already written stay in place.

        Returns:
            One ``RenderResult`` per processed file, in walk order.

        Raises:
            DestinationResetError: If *dest_root* cannot be reset.  Nothing
                has been generated in that case.
        """
        source = Path(source_root)
        dest = Path(dest_root)

        try:
            await asyncio.to_thread(reset_dir, dest)
        except OSError as exc:
            raise DestinationResetError(dest, exc) from exc

        results: list[RenderResult] = []
        for path in list_files(source):
            if cancel is not None and cancel.is_set():
                break
            if should_skip(path, self.config):
                continue
            results.append(await self.process(path, source, dest))
        return results

    async def process(self, path: Path, source_root: Path, dest_root: Path) -> RenderResult:
        """Materialize a single template file and report the outcome."""
        target = remap(path, source_root, dest_root, self.config)
        binary = False

        try:
            await asyncio.to_thread(target.parent.mkdir, parents=True, exist_ok=True)
            binary = await asyncio.to_thread(is_binary, path)
            if binary:
                await asyncio.to_thread(shutil.copy, path, target)
            else:
                await self.renderer.render_to_file(path, target, self.context)
        except (OSError, UnicodeError, TemplateRenderError) as exc:
            result = RenderResult(source=path, destination=target, error=exc, binary=binary)
            print_error(result.describe(), exc)
            return result

        result = RenderResult(source=path, destination=target, binary=binary)
        print_success(result.describe())
        return result


def summarize(results: list[RenderResult]) -> dict[str, str]:
    """Count rendered, copied and failed files for the summary table."""
    rendered = sum(1 for r in results if r.success and not r.binary)
    copied = sum(1 for r in results if r.success and r.binary)
    failed = sum(1 for r in results if not r.success)
    return {
        "Rendered": str(rendered),
        "Copied": str(copied),
        "Failed": str(failed),
    }
