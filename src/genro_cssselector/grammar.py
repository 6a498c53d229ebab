# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Fragment grammar for compound selectors.

The grammar is a single ordered table of kind specs. The position of a kind
in the table is its rank, and the optional ``[:m]`` suffix is its upper bound:

    element[:1]  id[:1]  class  attr  pseudo_class  pseudo_element[:1]

A compound selector must list its fragments in rank order, and a kind with
an upper bound may not appear more times than the bound allows.
"""

from __future__ import annotations

import re
from enum import Enum


# Pattern for kind with optional upper bound: kind, kind[:m]
_KIND_PATTERN = re.compile(r'^([a-zA-Z_][a-zA-Z0-9_]*)\s*(?:\[:(\d+)\])?$')

# Alternate kind names, matching the fragment method aliases
_KIND_ALIASES: dict[str, str] = {
    'class_': 'class',
    'attribute': 'attr',
    'pseudoClass': 'pseudo_class',
    'pseudoElement': 'pseudo_element',
}


class FragmentKind(str, Enum):
    """The syntactic kinds of fragment a compound selector is made of."""

    ELEMENT = 'element'
    ID = 'id'
    CLASS = 'class'
    ATTRIBUTE = 'attr'
    PSEUDO_CLASS = 'pseudo_class'
    PSEUDO_ELEMENT = 'pseudo_element'

    @classmethod
    def coerce(cls, kind: FragmentKind | str) -> FragmentKind:
        """Return the member for ``kind``.

        Accepts members, their values ('attr', 'pseudo_class', ...) and the
        alias names the fragment methods answer to ('attribute',
        'pseudoClass', 'pseudoElement', 'class_').

        Raises:
            ValueError: If ``kind`` names no fragment kind.
        """
        if isinstance(kind, cls):
            return kind
        if isinstance(kind, str) and kind in _KIND_ALIASES:
            return cls(_KIND_ALIASES[kind])
        try:
            return cls(kind)
        except ValueError:
            raise ValueError(
                f"Unknown fragment kind: {kind!r}. "
                f"Valid kinds: {', '.join(k.value for k in cls)}"
            ) from None


class Combinator(str, Enum):
    """CSS combinators joining two selectors."""

    DESCENDANT = ' '
    CHILD = '>'
    NEXT_SIBLING = '+'
    SUBSEQUENT_SIBLING = '~'


def parse_kind_spec(spec: str) -> tuple[str, int | None]:
    """Parse a kind specification with an optional upper bound.

    Args:
        spec: Kind spec like 'class' (unbounded) or 'id[:1]' (at most once).

    Returns:
        Tuple of (kind_name, max_count); max_count is None when unbounded.

    Raises:
        ValueError: If spec format is invalid.

    Examples:
        >>> parse_kind_spec('class')
        ('class', None)
        >>> parse_kind_spec('element[:1]')
        ('element', 1)
    """
    match = _KIND_PATTERN.match(spec.strip())
    if not match:
        raise ValueError(f"Invalid kind specification: '{spec}'")

    name, max_str = match.groups()
    return name, int(max_str) if max_str is not None else None


class FragmentRule:
    """How one fragment kind is ranked, bounded and rendered."""

    __slots__ = ('kind', 'rank', 'prefix', 'suffix', 'max_count')

    def __init__(
        self,
        kind: FragmentKind,
        rank: int,
        prefix: str = '',
        suffix: str = '',
        max_count: int | None = None,
    ) -> None:
        self.kind = kind
        self.rank = rank
        self.prefix = prefix
        self.suffix = suffix
        self.max_count = max_count

    def __repr__(self) -> str:
        return (
            f"FragmentRule({self.kind.value!r}, rank={self.rank}, "
            f"max_count={self.max_count})"
        )

    def render(self, value: str) -> str:
        """Wrap ``value`` in this kind's delimiters."""
        return f"{self.prefix}{value}{self.suffix}"


# Rank order and cardinality of every fragment kind
FRAGMENT_ORDER: tuple[str, ...] = (
    'element[:1]',
    'id[:1]',
    'class',
    'attr',
    'pseudo_class',
    'pseudo_element[:1]',
)

_DELIMITERS: dict[FragmentKind, tuple[str, str]] = {
    FragmentKind.ELEMENT: ('', ''),
    FragmentKind.ID: ('#', ''),
    FragmentKind.CLASS: ('.', ''),
    FragmentKind.ATTRIBUTE: ('[', ']'),
    FragmentKind.PSEUDO_CLASS: (':', ''),
    FragmentKind.PSEUDO_ELEMENT: ('::', ''),
}


def _build_rules(order: tuple[str, ...]) -> dict[FragmentKind, FragmentRule]:
    rules: dict[FragmentKind, FragmentRule] = {}
    for rank, spec in enumerate(order):
        name, max_count = parse_kind_spec(spec)
        kind = FragmentKind.coerce(name)
        prefix, suffix = _DELIMITERS[kind]
        rules[kind] = FragmentRule(kind, rank, prefix, suffix, max_count)
    return rules


_RULES = _build_rules(FRAGMENT_ORDER)


def rule_for(kind: FragmentKind | str) -> FragmentRule:
    """Get the rule for a fragment kind."""
    return _RULES[FragmentKind.coerce(kind)]


def kind_order() -> list[FragmentKind]:
    """All fragment kinds, lowest rank first."""
    return sorted(_RULES, key=lambda kind: _RULES[kind].rank)
