# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""SelectorBuilder - Facade for building CSS selectors."""

from __future__ import annotations

from .base import FragmentFactory
from .grammar import Combinator, FragmentKind
from .selector import CombinedSelector, CompoundSelector, Selector


class SelectorBuilder(FragmentFactory):
    """Entry point for building selectors.

    Each fragment method starts a new CompoundSelector from an empty one;
    combine() joins two existing selectors of any shape.

    Example:
        >>> css = SelectorBuilder()
        >>> css.id('main').class_('container').class_('editable').stringify()
        '#main.container.editable'
        >>> css.combine(
        ...     css.element('div').id('main'),
        ...     '+',
        ...     css.element('table').id('data'),
        ... ).stringify()
        'div#main + table#data'

    Names that are not identifiers in Python resolve dynamically:

        >>> getattr(css, 'class')('x').stringify()
        '.x'
        >>> css.pseudoClass('hover').stringify()
        ':hover'
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def append(self, kind: FragmentKind | str, value: str) -> CompoundSelector:
        """Start a new selector with a single fragment."""
        return CompoundSelector().append(kind, value)

    def combine(
        self,
        left: Selector,
        combinator: Combinator | str,
        right: Selector,
    ) -> CombinedSelector:
        """Join ``left`` and ``right`` with ``combinator``.

        Args:
            left: Any selector.
            combinator: A Combinator or one of ' ', '>', '+', '~'.
            right: Any selector.

        Raises:
            InvalidCombinatorError: If combinator is not a CSS combinator.
            TypeError: If left or right is not a Selector.
        """
        return CombinedSelector(left, combinator, right)

    def stringify(self, selector: Selector) -> str:
        """Return the CSS text of ``selector``."""
        return stringify(selector)


def stringify(selector: Selector) -> str:
    """Return the CSS text of ``selector``.

    Raises:
        TypeError: If selector is not a Selector.
    """
    if not isinstance(selector, Selector):
        raise TypeError(f"Expected a Selector, got {type(selector).__name__}")
    return selector.stringify()


# Default facade instance
css = SelectorBuilder()
