# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Selector values - compound selectors and their combinations.

A selector is one of two immutable shapes:

- CompoundSelector: an ordered run of fragments with no combinator,
  e.g. ``a#main.container[href]:focus``
- CombinedSelector: two selectors joined by a combinator,
  e.g. ``div#main + table#data``

Every append returns a new value and leaves the receiver untouched, so a
partial selector can be reused as the common prefix of several others:

    >>> base = CompoundSelector().element('li')
    >>> str(base.class_('odd')), str(base.class_('even'))
    ('li.odd', 'li.even')
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable, Iterator

from .base import FragmentFactory
from .exceptions import (
    DuplicateFragmentError,
    InvalidCombinatorError,
    OrderViolationError,
)
from .fragment import Fragment
from .grammar import Combinator, FragmentKind, rule_for

DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more than one time "
    "inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: element, id, "
    "class, attribute, pseudo-class, pseudo-element"
)

# Universal selector, ignored by specificity
UNIVERSAL = '*'


def coerce_combinator(combinator: Combinator | str) -> Combinator:
    """Return the Combinator for a member or one of ' ', '>', '+', '~'.

    Raises:
        InvalidCombinatorError: If combinator is not a CSS combinator.
    """
    if isinstance(combinator, Combinator):
        return combinator
    try:
        return Combinator(combinator)
    except ValueError:
        raise InvalidCombinatorError(
            f"Invalid combinator: {combinator!r}. "
            f"Valid combinators: {', '.join(repr(c.value) for c in Combinator)}"
        ) from None


class Selector(ABC):
    """Abstract base for selector values."""

    __slots__ = ()

    @abstractmethod
    def stringify(self) -> str:
        """Return the CSS text of the selector."""

    @abstractmethod
    def compounds(self) -> Iterator[CompoundSelector]:
        """Iterate the compound selectors, left to right."""

    def __str__(self) -> str:
        return self.stringify()

    def specificity(self) -> tuple[int, int, int]:
        """CSS specificity as (ids, classes, types).

        Classes counts class, attribute and pseudo-class fragments; types
        counts element and pseudo-element fragments. The universal selector
        ``*`` counts nothing. A combined selector sums its compounds.
        """
        ids = classes = types = 0
        for compound in self.compounds():
            for frag in compound.fragments:
                if frag.kind is FragmentKind.ID:
                    ids += 1
                elif frag.kind in (
                    FragmentKind.CLASS,
                    FragmentKind.ATTRIBUTE,
                    FragmentKind.PSEUDO_CLASS,
                ):
                    classes += 1
                elif frag.value != UNIVERSAL:
                    types += 1
        return ids, classes, types

    def combine(
        self, combinator: Combinator | str, other: Selector
    ) -> CombinedSelector:
        """Join this selector and ``other`` with ``combinator``."""
        return CombinedSelector(self, combinator, other)

    def descendant(self, other: Selector) -> CombinedSelector:
        """``self other``"""
        return self.combine(Combinator.DESCENDANT, other)

    def child(self, other: Selector) -> CombinedSelector:
        """``self > other``"""
        return self.combine(Combinator.CHILD, other)

    def next_sibling(self, other: Selector) -> CombinedSelector:
        """``self + other``"""
        return self.combine(Combinator.NEXT_SIBLING, other)

    def subsequent_sibling(self, other: Selector) -> CombinedSelector:
        """``self ~ other``"""
        return self.combine(Combinator.SUBSEQUENT_SIBLING, other)


class CompoundSelector(FragmentFactory, Selector):
    """An ordered run of fragments with no combinator.

    Fragments are kept in append order. Appending validates the new kind
    against the whole history:

    1. element, id and pseudo-element may occur at most once
       (DuplicateFragmentError)
    2. a kind may not follow a kind of higher rank in the order
       element, id, class, attribute, pseudo-class, pseudo-element
       (OrderViolationError)

    Uniqueness is checked before order. Since history is always in rank
    order, the rendered text is the concatenation of the fragments and is
    accumulated on each append.

    Example:
        >>> sel = CompoundSelector().element('a').attr('href$=".png"')
        >>> sel.pseudo_class('focus').stringify()
        'a[href$=".png"]:focus'
    """

    __slots__ = ('_fragments', '_text')

    def __init__(self) -> None:
        """Initialize an empty CompoundSelector."""
        self._fragments: tuple[Fragment, ...] = ()
        self._text = ''

    @classmethod
    def from_fragments(
        cls, fragments: Iterable[Fragment | tuple[FragmentKind | str, str]]
    ) -> CompoundSelector:
        """Build a compound by appending each fragment in turn.

        Args:
            fragments: Fragment instances or (kind, value) pairs.

        Raises:
            DuplicateFragmentError, OrderViolationError: As append().

        Example:
            >>> CompoundSelector.from_fragments([('element', 'p'), ('class', 'x')])
            CompoundSelector('p.x')
        """
        selector = cls()
        for item in fragments:
            if isinstance(item, Fragment):
                selector = selector.append(item.kind, item.value)
            else:
                kind, value = item
                selector = selector.append(kind, value)
        return selector

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._text!r})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, CompoundSelector):
            return NotImplemented
        return self._fragments == other._fragments

    def __hash__(self) -> int:
        return hash(self._fragments)

    @property
    def fragments(self) -> tuple[Fragment, ...]:
        """The fragments in append order."""
        return self._fragments

    @property
    def kinds(self) -> tuple[FragmentKind, ...]:
        """The fragment-kind history, oldest first."""
        return tuple(frag.kind for frag in self._fragments)

    def by_kind(self, kind: FragmentKind | str) -> list[Fragment]:
        """Get all fragments of the given kind, in append order."""
        kind = FragmentKind.coerce(kind)
        return [frag for frag in self._fragments if frag.kind is kind]

    def _check_append(self, kind: FragmentKind) -> None:
        """Validate appending ``kind`` to the current history.

        Raises:
            DuplicateFragmentError: If kind is bounded and already at its bound.
            OrderViolationError: If a higher-ranked kind is already present.
        """
        history = self.kinds
        rule = rule_for(kind)

        if rule.max_count is not None and history.count(kind) >= rule.max_count:
            raise DuplicateFragmentError(DUPLICATE_MESSAGE)

        max_rank = max((rule_for(k).rank for k in history), default=0)
        if rule.rank < max_rank:
            raise OrderViolationError(ORDER_MESSAGE)

    def append(self, kind: FragmentKind | str, value: str) -> CompoundSelector:
        """Return a new selector with a fragment of ``kind`` appended.

        Args:
            kind: A FragmentKind or its value ('element', 'class', ...).
            value: The fragment text without delimiters.

        Raises:
            TypeError: If value is not a string.
            ValueError: If kind names no fragment kind.
            DuplicateFragmentError: See class docstring.
            OrderViolationError: See class docstring.
        """
        frag = Fragment(kind, value)
        self._check_append(frag.kind)

        selector = type(self).__new__(type(self))
        selector._fragments = self._fragments + (frag,)
        selector._text = self._text + frag.render()
        return selector

    def stringify(self) -> str:
        """Return the accumulated CSS text."""
        return self._text

    def compounds(self) -> Iterator[CompoundSelector]:
        yield self


class CombinedSelector(Selector):
    """Two selectors joined by a combinator.

    Either side may itself be combined. Rendering puts one space on each
    side of the combinator symbol, so the descendant combinator renders as
    three spaces:

        >>> a, b = CompoundSelector().element('a'), CompoundSelector().element('b')
        >>> CombinedSelector(a, '>', b).stringify()
        'a > b'
        >>> CombinedSelector(a, ' ', b).stringify()
        'a   b'

    No fragment validation happens here; both sides were validated when
    they were built.
    """

    __slots__ = ('_left', '_combinator', '_right')

    def __init__(
        self,
        left: Selector,
        combinator: Combinator | str,
        right: Selector,
    ) -> None:
        """Initialize a CombinedSelector.

        Raises:
            TypeError: If left or right is not a Selector.
            InvalidCombinatorError: If combinator is not a CSS combinator.
        """
        for side in (left, right):
            if not isinstance(side, Selector):
                raise TypeError(
                    f"Can only combine selectors, got {type(side).__name__}"
                )
        self._left = left
        self._combinator = coerce_combinator(combinator)
        self._right = right

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self._left!r}, "
            f"{self._combinator.value!r}, {self._right!r})"
        )

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, CombinedSelector):
            return NotImplemented
        return (
            self._left == other._left
            and self._combinator is other._combinator
            and self._right == other._right
        )

    def __hash__(self) -> int:
        return hash((self._left, self._combinator, self._right))

    @property
    def left(self) -> Selector:
        return self._left

    @property
    def combinator(self) -> Combinator:
        return self._combinator

    @property
    def right(self) -> Selector:
        return self._right

    def stringify(self) -> str:
        return (
            f"{self._left.stringify()} {self._combinator.value} "
            f"{self._right.stringify()}"
        )

    def compounds(self) -> Iterator[CompoundSelector]:
        yield from self._left.compounds()
        yield from self._right.compounds()
