"""Interactive collection of build parameters.

Each ``ask_*`` function asks for one value and returns an updated copy of the
``BuildInfo`` it was given.  ``collect`` chains them in the order a user is
asked; the generator itself never prompts.
"""

from __future__ import annotations

from pydantic import ValidationError
from rich.prompt import Confirm, Prompt

from starter.config import RUNTIME_IMAGES, BuildInfo
from starter.utils import console, print_summary_table, print_warning


def ask_variant(info: BuildInfo) -> BuildInfo:
    choice = Prompt.ask(
        "A WebMVC/JPA project (m) or a WebFlux/R2DBC project (f)?",
        choices=["m", "f"],
        default="f" if info.reactive_project else "m",
        console=console,
    )
    return info.model_copy(update={"reactive_project": choice == "f"})


def ask_special_variant(info: BuildInfo) -> BuildInfo:
    if Confirm.ask("Is it a vroong project?", default=info.special_variant, console=console):
        return info.with_special_variant()
    return info


def ask_java_version(info: BuildInfo) -> BuildInfo:
    """Ask for the runtime dialect until a supported one is given."""
    while True:
        answer = Prompt.ask(
            f"Which java version will you choose ({'/'.join(RUNTIME_IMAGES)})?",
            default=info.java_version,
            console=console,
        )
        try:
            return info.with_runtime(answer.strip())
        except ValueError as exc:
            print_warning(str(exc))


def _ask_name(info: BuildInfo, question: str, field: str) -> BuildInfo:
    """Ask for a name field until the model accepts it."""
    while True:
        answer = Prompt.ask(question, default=getattr(info, field), console=console)
        try:
            return info.with_values(**{field: answer.strip()})
        except ValidationError as exc:
            print_warning(f"Invalid {field.replace('_', ' ')}: {exc.errors()[0]['msg']}")


def ask_project_name(info: BuildInfo) -> BuildInfo:
    return _ask_name(info, "What is the project name?", "project_name")


def ask_group_name(info: BuildInfo) -> BuildInfo:
    return _ask_name(info, "What is the group name?", "group_name")


def ask_port_number(info: BuildInfo) -> BuildInfo:
    answer = Prompt.ask("What is the web server port?", default=info.port_number, console=console)
    return info.model_copy(update={"port_number": answer.strip()})


def ask_media_type(info: BuildInfo) -> BuildInfo:
    answer = Prompt.ask(
        "What is the media type for request and response?",
        default=info.media_type,
        console=console,
    )
    return info.model_copy(update={"media_type": answer.strip()})


def ask_include_examples(info: BuildInfo) -> BuildInfo:
    if Confirm.ask("Include example codes?", default=info.include_examples, console=console):
        return info.model_copy(update={"include_examples": True})
    return info.model_copy(update={"include_examples": False}).with_example_skip_tokens()


COLLECTORS = (
    ask_variant,
    ask_special_variant,
    ask_java_version,
    ask_project_name,
    ask_group_name,
    ask_port_number,
    ask_media_type,
    ask_include_examples,
)


def collect(info: BuildInfo) -> BuildInfo:
    """Ask for every build parameter, starting from *info*."""
    for ask in COLLECTORS:
        info = ask(info)
    return info


def show(info: BuildInfo) -> None:
    """Print the build parameters as a table."""
    data = {key: str(value) for key, value in info.as_context().items()}
    data["skip_tokens"] = ", ".join(info.skip_tokens)
    print_summary_table(data, title="Build info")


def confirm(info: BuildInfo) -> bool:
    """Show the build parameters and ask whether to continue."""
    show(info)
    return Confirm.ask("Continue?", default=True, console=console)
