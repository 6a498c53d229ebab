# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Decorator declaring fragment factory methods."""

from __future__ import annotations

from functools import wraps
from typing import Any, Callable

from .grammar import FragmentKind


def fragment(kind: FragmentKind | str, aliases: str = '') -> Callable:
    """Decorator turning a method stub into the factory for a fragment kind.

    The decorated function only provides the name, signature and docstring;
    the generated method calls ``self.append(kind, value)``. The kind is
    also stored on the method, and ``aliases`` adds further names,
    comma-separated, that resolve to it through ``__getattr__``. This is how
    names that are not valid Python identifiers for a ``def`` (``class``) or
    that follow another naming convention (``pseudoClass``) reach the
    method.

    Args:
        kind: The FragmentKind the method appends.
        aliases: Comma-separated extra names for the method.

    Example:
        >>> class MyFactory(FragmentFactory):
        ...     @fragment(FragmentKind.CLASS, aliases='class, cls')
        ...     def class_(self, value):
        ...         '''Class selector.'''
    """
    fragment_kind = FragmentKind.coerce(kind)
    alias_names = tuple(a.strip() for a in aliases.split(',') if a.strip())

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def method(self: Any, value: str) -> Any:
            return self.append(fragment_kind, value)

        method._fragment_kind = fragment_kind
        method._fragment_aliases = alias_names

        return method

    return decorator
