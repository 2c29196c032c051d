"""Project Starter scaffolder -- materializes a project from a template tree.

Quick usage::

    from starter.config import BuildInfo, Settings
    from starter.scaffolder import ProjectGenerator

    info = BuildInfo(project_name="orders", group_name="com.acme")
    settings = Settings()
    generator = ProjectGenerator(info)
    results = await generator.run(settings.template_root(info), settings.target_dir)
"""

from starter.scaffolder.content import is_binary
from starter.scaffolder.errors import DestinationResetError, StarterError, TemplateRenderError
from starter.scaffolder.filters import should_skip
from starter.scaffolder.generator import ProjectGenerator, RenderResult
from starter.scaffolder.paths import package_path, remap
from starter.scaffolder.templates import TemplateRenderer

__all__ = [
    "DestinationResetError",
    "ProjectGenerator",
    "RenderResult",
    "StarterError",
    "TemplateRenderError",
    "TemplateRenderer",
    "is_binary",
    "package_path",
    "remap",
    "should_skip",
]
