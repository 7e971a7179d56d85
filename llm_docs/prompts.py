"""Selection prompts: which packages to copy, and which variant of each.

The orchestrator only depends on the SelectionPrompt protocol, so the
interactive console prompt and the non-interactive AutoPrompt are
interchangeable.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Optional, Protocol, Sequence

from llm_docs.doc_catalog import Variant


class PromptCancelled(Exception):
    """The user closed the input stream while a prompt was waiting."""


@dataclass(frozen=True)
class Selection:
    """One package the user chose, with the documentation variant to copy."""

    name: str
    variant: Variant


class SelectionPrompt(Protocol):
    def choose_many(self, candidates: Sequence[str]) -> list[str]:
        """Return the chosen subset of candidates, in candidate order."""
        ...

    def choose_one(self, name: str, options: Sequence[Variant]) -> Variant:
        """Return exactly one of options for the given package."""
        ...


class AutoPrompt:
    """Non-interactive prompt: everything selected, one fixed variant."""

    def __init__(self, variant: Variant = Variant.FULL):
        self.variant = variant

    def choose_many(self, candidates: Sequence[str]) -> list[str]:
        return list(candidates)

    def choose_one(self, name: str, options: Sequence[Variant]) -> Variant:
        if self.variant in options:
            return self.variant
        return options[0]


_SPLIT = re.compile(r"[,\s]+")


class ConsolePrompt:
    """Numbered-menu prompt on the terminal.

    All candidates start out checked: pressing Enter accepts every one.
    """

    def __init__(self, input_fn: Optional[Callable[[str], str]] = None):
        self._input = input_fn or input

    def _ask(self, message: str) -> str:
        try:
            return self._input(message).strip()
        except EOFError:
            raise PromptCancelled("input closed")

    def choose_many(self, candidates: Sequence[str]) -> list[str]:
        if not candidates:
            return []

        print("\nSelect packages to copy documentation for:")
        for i, name in enumerate(candidates, start=1):
            print(f"  [x] {i}) {name}")

        while True:
            answer = self._ask("Numbers to copy (Enter = all, 'none' = skip): ")
            if not answer or answer.lower() == "all":
                return list(candidates)
            if answer.lower() == "none":
                return []

            picked = _parse_numbers(answer, len(candidates))
            if picked is None:
                print(f"  Please enter numbers between 1 and {len(candidates)}.")
                continue
            return [name for i, name in enumerate(candidates, start=1) if i in picked]

    def choose_one(self, name: str, options: Sequence[Variant]) -> Variant:
        print(f"\nSelect documentation version for {name}:")
        for i, option in enumerate(options, start=1):
            print(f"  {i}) {option.label}")

        while True:
            answer = self._ask("Choice: ").lower()
            for i, option in enumerate(options, start=1):
                if answer in (str(i), option.value):
                    return option
            print(f"  Please choose 1-{len(options)}.")


def _parse_numbers(answer: str, upper: int) -> set[int] | None:
    """Parse '1, 3 4' into {1, 3, 4}; None if any token is out of range."""
    picked: set[int] = set()
    for token in _SPLIT.split(answer):
        if not token:
            continue
        if not token.isdecimal() or not 1 <= int(token) <= upper:
            return None
        picked.add(int(token))
    return picked or None


def collect_selections(prompt: SelectionPrompt, candidates: Sequence[str]) -> list[Selection]:
    """Ask which candidates to copy, then one variant for each."""
    chosen = prompt.choose_many(candidates)

    selections: list[Selection] = []
    seen: set[str] = set()
    for name in chosen:
        if name in seen:
            continue
        seen.add(name)
        variant = prompt.choose_one(name, list(Variant))
        selections.append(Selection(name=name, variant=variant))
    return selections
