# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""FragmentFactory - Abstract base class for anything that appends fragments."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from .decorators import fragment
from .grammar import FragmentKind

if TYPE_CHECKING:
    from .selector import CompoundSelector


class FragmentFactory(ABC):
    """Abstract base class exposing one method per fragment kind.

    Subclasses implement append(); the six fragment methods below are
    generated by @fragment and call it with their kind. The builder facade appends onto an empty selector,
    a CompoundSelector appends onto itself.

    The class automatically builds a _fragment_methods dict mapping every
    method name and alias to the method via __init_subclass__, so that:

        >>> getattr(selector, 'class')('container')
        >>> selector.pseudoClass('hover')

    resolve to class_() and pseudo_class().
    """

    __slots__ = ()

    # Class-level dict mapping name or alias -> method name
    _fragment_methods: dict[str, str] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        """Build the _fragment_methods dict from @fragment decorated methods."""
        super().__init_subclass__(**kwargs)

        cls._fragment_methods = {}
        for klass in reversed(cls.__mro__):
            for name, method in vars(klass).items():
                if name.startswith('_'):
                    continue
                if getattr(method, '_fragment_kind', None) is None:
                    continue
                cls._fragment_methods[name] = name
                for alias in method._fragment_aliases:
                    cls._fragment_methods[alias] = name

    def __getattr__(self, name: str) -> Any:
        """Look up name in _fragment_methods and return the bound method."""
        if name.startswith('_'):
            raise AttributeError(
                f"'{type(self).__name__}' object has no attribute '{name}'"
            )

        method_name = type(self)._fragment_methods.get(name)
        if method_name is not None and method_name != name:
            return getattr(self, method_name)

        raise AttributeError(
            f"'{type(self).__name__}' has no fragment method '{name}'"
        )

    @abstractmethod
    def append(self, kind: FragmentKind | str, value: str) -> CompoundSelector:
        """Append a fragment of the given kind and return the new selector."""

    @fragment(FragmentKind.ELEMENT)
    def element(self, value: str) -> CompoundSelector:
        """Type selector: ``div``."""

    @fragment(FragmentKind.ID)
    def id(self, value: str) -> CompoundSelector:
        """Id selector: ``#main``."""

    @fragment(FragmentKind.CLASS, aliases='class')
    def class_(self, value: str) -> CompoundSelector:
        """Class selector: ``.container``."""

    @fragment(FragmentKind.ATTRIBUTE, aliases='attribute')
    def attr(self, value: str) -> CompoundSelector:
        """Attribute selector, value embedded verbatim: ``[href$=".png"]``."""

    @fragment(FragmentKind.PSEUDO_CLASS, aliases='pseudoClass')
    def pseudo_class(self, value: str) -> CompoundSelector:
        """Pseudo-class selector: ``:focus``."""

    @fragment(FragmentKind.PSEUDO_ELEMENT, aliases='pseudoElement')
    def pseudo_element(self, value: str) -> CompoundSelector:
        """Pseudo-element selector: ``::before``."""
