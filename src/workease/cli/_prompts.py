"""Clack-style interactive prompts using Rich + simple-term-menu."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import TypeVar

from rich.console import Console
from rich.markup import escape
from simple_term_menu import TerminalMenu

from workease.core.errors import ValidationError
from workease.generators.options import ProjectTemplate

_console = Console()

T = TypeVar("T")

DEFAULT_PROJECT_NAME = "my-workease-app"


def _print_bar() -> None:
    _console.print("[dim]│[/]")


def _clear_lines(n: int) -> None:
    """Move cursor up *n* lines and clear to end of screen."""
    sys.stdout.write(f"\033[{n}A\033[J")
    sys.stdout.flush()


def _ask(question: str) -> None:
    _console.print(f"[bold cyan]◆[/]  {question}")
    _print_bar()


def _settle(question: str, display: str, lines: int) -> None:
    """Replace the *lines* of an open prompt with its answered form."""
    _clear_lines(lines)
    _console.print(f"[bold green]◇[/]  {question}")
    _console.print(f"[dim]│[/]  {display}")
    _print_bar()


def _select(question: str, options: list[T], labels: list[str], default: T | None = None) -> T:
    """Single-choice menu; the cursor starts on *default* when it is one of *options*."""
    _ask(question)

    menu = TerminalMenu(
        labels,
        cursor_index=options.index(default) if default in options else 0,
        menu_cursor="│  ● ",
        menu_cursor_style=("fg_cyan", "bold"),
        menu_highlight_style=("fg_cyan",),
    )
    raw_index = menu.show()

    if raw_index is None:
        raise SystemExit(1)

    index = int(raw_index)
    _settle(question, f"[bold]{escape(labels[index])}[/]", 2)
    return options[index]


def _multi_select(
    question: str, options: list[T], labels: list[str], preselected: Sequence[T] = ()
) -> list[T]:
    """Checkbox variant of :func:`_select`. An empty selection is allowed."""
    _ask(question)

    menu = TerminalMenu(
        labels,
        multi_select=True,
        show_multi_select_hint=True,
        multi_select_select_on_accept=False,
        multi_select_empty_ok=True,
        preselected_entries=[i for i, o in enumerate(options) if o in preselected],
        menu_cursor="│  ",
        menu_cursor_style=("fg_cyan", "bold"),
        menu_highlight_style=("fg_cyan",),
    )
    raw = menu.show()

    if raw is None:
        raise SystemExit(1)

    indices = sorted(int(i) for i in (raw if isinstance(raw, tuple) else (raw,)))
    chosen = ", ".join(escape(labels[i]) for i in indices) if indices else "[dim]none[/]"
    _settle(question, chosen, 2)
    return [options[i] for i in indices]


_YES = ("y", "yes")
_NO = ("n", "no")


def _confirm(question: str, default: bool = True) -> bool:
    """Yes/no prompt. Anything other than an empty answer, yes or no is asked again."""
    suffix = " [Y/n] " if default else " [y/N] "
    while True:
        _ask(question)
        _console.print("[dim]│[/]  ", end="")
        answer = input(suffix).strip().lower()

        if answer in _YES or answer in _NO or not answer:
            break
        _clear_lines(3)
        _console.print(f"[bold yellow]▲[/]  Please answer y or n (got '{escape(answer)}').")

    result = default if not answer else answer in _YES
    _settle(question, "Yes" if result else "No", 3)
    return result


def _text(
    question: str,
    default: str | None = None,
    validate: Callable[[str], str] | None = None,
) -> str:
    """
    Display a clack-style free-text prompt.

    An empty answer takes *default*. When *validate* is given the answer is
    passed through it; a :class:`ValidationError` is shown and the question
    asked again.
    """
    suffix = f" ({default}) " if default else " "
    while True:
        _ask(question)
        _console.print("[dim]│[/]  ", end="")
        answer = input(suffix).strip() or (default or "")

        try:
            value = validate(answer) if validate is not None else answer
        except ValidationError as exc:
            _clear_lines(3)
            _console.print(f"[bold yellow]▲[/]  {escape(str(exc))}")
            continue

        _settle(question, escape(value), 3)
        return value


def prompt_template() -> ProjectTemplate:
    """Prompt user to choose a project template."""
    templates = list(ProjectTemplate)
    labels = [t.label for t in templates]
    return _select("Choose a project template", templates, labels, ProjectTemplate.FULLSTACK)


def prompt_install() -> bool:
    return _confirm("Install dependencies with npm?", default=True)


def prompt_name(
    question: str, validate: Callable[[str], str], default: str | None = None
) -> str:
    """Prompt for an artifact name, re-asking until *validate* accepts it."""
    return _text(question, default=default, validate=validate)


def prompt_text(question: str, default: str | None = None) -> str:
    return _text(question, default=default)


def prompt_choice(question: str, options: Sequence[T], default: T | None = None) -> T:
    """Single choice among enum members carrying a ``label``."""
    labels = [getattr(o, "label", str(o)) for o in options]
    return _select(question, list(options), labels, default)


def prompt_choices(question: str, options: Sequence[T], preselected: Sequence[T] = ()) -> list[T]:
    """Multiple choice among enum members carrying a ``label``."""
    return _multi_select(
        question,
        list(options),
        [getattr(o, "label", str(o)) for o in options],
        preselected,
    )


def prompt_confirm(question: str, default: bool = True) -> bool:
    return _confirm(question, default=default)


def confirm_overwrite(paths: Sequence[Path]) -> bool:
    """Ask before replacing files that already exist. Defaults to no."""
    _console.print("[bold yellow]▲[/]  These files already exist:")
    for path in paths:
        _console.print(f"[dim]│[/]  {escape(str(path))}")
    _print_bar()
    return _confirm("Overwrite them?", default=False)
