"""Interactive yes/no gate in front of the switch."""

from __future__ import annotations

from typing import Callable


def ask(question: str, reader: Callable[[str], str] = input) -> str:
    """Read one line of input; a closed stream reads as an empty answer."""

    try:
        return reader(question)
    except EOFError:
        return ""


def confirm(target: str, force: bool = False, reader: Callable[[str], str] = input) -> bool:
    """Return True when forced or when the user answers exactly ``y``.

    The answer is stripped but not case-folded, so ``Y`` cancels.
    """
    if force:
        return True
    answer = ask(f'Are you sure you want to switch to "{target}"? (y/n): ', reader)
    return answer.strip() == "y"
