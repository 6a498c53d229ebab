# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Selector fragment class."""

from __future__ import annotations

from typing import Any

from .grammar import FragmentKind, FragmentRule, rule_for


class Fragment:
    """One syntactic piece of a compound selector.

    Each fragment has:
    - kind: The FragmentKind (element, id, class, ...)
    - value: The payload without delimiters ('main' for '#main')

    Example:
        >>> frag = Fragment('class', 'container')
        >>> frag.kind
        <FragmentKind.CLASS: 'class'>
        >>> frag.render()
        '.container'
    """

    __slots__ = ('_kind', '_value')

    def __init__(self, kind: FragmentKind | str, value: str) -> None:
        """Initialize a Fragment.

        Args:
            kind: A FragmentKind or its value ('element', 'pseudo_class', ...).
            value: The fragment text, embedded verbatim at render time.

        Raises:
            TypeError: If value is not a string.
            ValueError: If kind names no fragment kind.
        """
        if not isinstance(value, str):
            raise TypeError(
                f"Fragment value must be a string, got {type(value).__name__}"
            )
        self._kind = FragmentKind.coerce(kind)
        self._value = value

    @property
    def kind(self) -> FragmentKind:
        """The fragment kind."""
        return self._kind

    @property
    def value(self) -> str:
        """The fragment text without delimiters."""
        return self._value

    def __repr__(self) -> str:
        return f"Fragment({self.kind.value!r}, {self.value!r})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Fragment):
            return NotImplemented
        return self.kind is other.kind and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.kind, self.value))

    @property
    def rule(self) -> FragmentRule:
        """The grammar rule for this fragment's kind."""
        return rule_for(self.kind)

    def render(self) -> str:
        """Return the fragment with its delimiters."""
        return self.rule.render(self.value)
