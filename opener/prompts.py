"""Terminal prompts: confirm, choose one, choose many.

All choices are shown as numbered lists and read with ``click.prompt``.
"""

from typing import Callable, Optional, Sequence, TypeVar

import click

T = TypeVar("T")


def confirm(message: str, default: bool = False) -> bool:
    return click.confirm(message, default=default)


def show_numbered(items: Sequence[T], label: Callable[[T], str] = str, indent: str = "  ") -> None:
    for i, item in enumerate(items, 1):
        click.echo(f"{indent}{i}. {label(item)}")


def choose_one(
    items: Sequence[T],
    message: str,
    label: Callable[[T], str] = str,
    default: Optional[int] = None,
) -> Optional[T]:
    """Numbered single choice. Entering 0 cancels and returns None."""
    show_numbered(items, label)
    choice = click.prompt(
        f"{message} (0 to cancel)",
        type=click.IntRange(0, len(items)),
        default=default,
    )
    if choice == 0:
        return None
    return items[choice - 1]


def parse_selection(answer: str, count: int) -> list[int]:
    """Turn "all", "none" or "1 3 4" / "1,3" into zero-based indices.

    Raises click.BadParameter for anything else.
    """
    answer = answer.strip().lower()
    if answer in ("", "all", "a"):
        return list(range(count))
    if answer in ("none", "n"):
        return []

    indices = []
    for token in answer.replace(",", " ").split():
        if not token.isdigit() or not 1 <= int(token) <= count:
            raise click.BadParameter(f"'{token}' is not a number between 1 and {count}")
        index = int(token) - 1
        if index not in indices:
            indices.append(index)
    return indices


def choose_many(items: Sequence[T], message: str, label: Callable[[T], str] = str) -> list[T]:
    """Numbered multiple choice, everything selected by default."""
    show_numbered(items, label)
    while True:
        answer = click.prompt(f"{message} (numbers, 'all' or 'none')", default="all")
        try:
            indices = parse_selection(answer, len(items))
        except click.BadParameter as e:
            click.echo(click.style(f"  {e.format_message()}", fg="red"))
            continue
        return [items[i] for i in indices]


def ask_text(message: str, default: str = "") -> str:
    return click.prompt(message, default=default, show_default=bool(default)).strip()
