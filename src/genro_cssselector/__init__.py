# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-CssSelector - CSS selector strings with builder pattern validation.

A lightweight, zero-dependency library that builds compound and complex
CSS selectors fragment by fragment, enforcing the CSS order
element, id, class, attribute, pseudo-class, pseudo-element and the
uniqueness of element, id and pseudo-element.

Example:
    >>> from genro_cssselector import css
    >>> css.element('a').attr('href$=".png"').pseudo_class('focus').stringify()
    'a[href$=".png"]:focus'
"""

__version__ = "0.1.0"

from .builder import SelectorBuilder, css, stringify
from .exceptions import (
    DuplicateFragmentError,
    InvalidCombinatorError,
    OrderViolationError,
    SelectorError,
)
from .fragment import Fragment
from .grammar import Combinator, FragmentKind, FragmentRule, kind_order, rule_for
from .selector import CombinedSelector, CompoundSelector, Selector

__all__ = [
    # Builder
    "SelectorBuilder",
    "css",
    "stringify",
    # Selector classes
    "Selector",
    "CompoundSelector",
    "CombinedSelector",
    "Fragment",
    # Grammar
    "FragmentKind",
    "FragmentRule",
    "Combinator",
    "rule_for",
    "kind_order",
    # Exceptions
    "SelectorError",
    "DuplicateFragmentError",
    "OrderViolationError",
    "InvalidCombinatorError",
]
