# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Selector builder exceptions."""

from __future__ import annotations


class SelectorError(Exception):
    """Base exception for selector builder errors."""

    pass


class DuplicateFragmentError(SelectorError):
    """Raised when an element, id or pseudo-element is appended twice."""

    pass


class OrderViolationError(SelectorError):
    """Raised when a fragment is appended after a higher-ranked one."""

    pass


class InvalidCombinatorError(SelectorError, ValueError):
    """Raised when combine() receives an unknown combinator symbol."""

    pass
