from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, List, Optional, Sequence, Tuple, TypeVar

from ..markup.base import Element

T = TypeVar("T")


def select_first_matching(root: Element, selectors: Sequence[str]) -> Optional[Tuple[str, List[Element]]]:
    """
    Try selectors in priority order; return the first one that matches anything, with all its matches.
    Priority is strict: a later selector is only consulted when every earlier one found nothing.
    """
    for selector in selectors:
        nodes = root.select(selector)
        if nodes:
            return selector, nodes
    return None


def clean_text(node: Element) -> str:
    return node.text().strip()


@dataclass(frozen=True)
class Rule(Generic[T]):
    """A selector paired with the reader that turns its match into a value."""

    selector: str
    read: Callable[[Element], Optional[T]]


class RuleChain(Generic[T]):
    """
    Ordered (selector, reader) pairs evaluated until one yields a value.
    A reader returning None passes the turn to the next rule.
    """

    def __init__(self, rules: Iterable[Rule[T]], default: T) -> None:
        self.rules = tuple(rules)
        self.default = default

    def evaluate(self, root: Element) -> T:
        for rule in self.rules:
            node = root.select_one(rule.selector)
            if node is None:
                continue
            value = rule.read(node)
            if value is not None:
                return value
        return self.default
