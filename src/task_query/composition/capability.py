"""
Capability Composition - Resolving Inherited Default Operations.

A capability is a class that declares operations and may supply default
implementations for some of them (marked with @default). A concrete class
composes one or more capabilities. When the same operation has defaults in
several of its capabilities, the choice is made once, when the class is
created:

    1. An implementation in the class body wins unconditionally. So does
       a non-default implementation inherited from a superclass.
    2. If one of the competing capabilities refines (subclasses) all the
       others, its default wins, whatever the order of the bases.
    3. Otherwise the composition is ambiguous and the class statement
       fails with AmbiguousComposition. The class must implement the
       operation itself; it may delegate to one parent by name:

           class Both(E, F):
               def do_sth(self):
                   return F.do_sth(self)
"""

from __future__ import annotations

import logging
from abc import ABC
from typing import Any, Callable, Dict, List, Type, TypeVar

from task_query.errors import AmbiguousComposition, InvalidArgument

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

_DEFAULT_MARKER = "__capability_default__"
_RESOLUTIONS = "__capability_resolutions__"


def default(func: F) -> F:
    """Mark a capability method as a default implementation."""
    setattr(func, _DEFAULT_MARKER, True)
    return func


def is_default(obj: Any) -> bool:
    return bool(getattr(obj, _DEFAULT_MARKER, False))


def _is_abstract(obj: Any) -> bool:
    return bool(getattr(obj, "__isabstractmethod__", False))


class Capability(ABC):
    """Base class for capability sets with default operations."""

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        _resolve_defaults(cls)


def _resolve_defaults(cls: type) -> None:
    resolutions: Dict[str, type] = {}

    for name in _default_names(cls):
        if name in cls.__dict__:
            continue

        providers = [k for k in cls.__mro__[1:] if name in k.__dict__]
        defaults = [k for k in providers if is_default(k.__dict__[name])]
        # An implementation refined by a default further down is shadowed
        implementations = [
            k for k in providers
            if not is_default(k.__dict__[name])
            and not _is_abstract(k.__dict__[name])
            and not any(k in d.__mro__ for d in defaults)
        ]

        if implementations:
            winner = implementations[0]
        elif len(defaults) <= 1:
            continue
        else:
            most_specific = [
                k for k in defaults
                if not any(other is not k and k in other.__mro__ for other in defaults)
            ]
            if len(most_specific) > 1:
                raise AmbiguousComposition(
                    cls.__name__, name, [k.__name__ for k in most_specific]
                )
            winner = most_specific[0]

        setattr(cls, name, winner.__dict__[name])
        resolutions[name] = winner.__dict__.get(_RESOLUTIONS, {}).get(name, winner)
        logger.debug(
            f"{cls.__name__}.{name} resolved to {resolutions[name].__name__}"
        )

    setattr(cls, _RESOLUTIONS, resolutions)


def _default_names(cls: type) -> List[str]:
    names: List[str] = []
    for klass in cls.__mro__[1:]:
        for name, attr in vars(klass).items():
            if is_default(attr) and name not in names:
                names.append(name)
    return names


def resolve_default(cls: Type[Any], name: str) -> type:
    """
    Report which class supplies operation `name` for cls.

    Raises:
        InvalidArgument: If no class in the hierarchy defines `name`
    """
    for klass in cls.__mro__:
        resolved = klass.__dict__.get(_RESOLUTIONS, {})
        if name in resolved:
            return resolved[name]
        if name in klass.__dict__:
            return klass
    raise InvalidArgument(f"{cls.__name__} has no operation '{name}'", field=name)


def default_of(owner: Type[Any], name: str) -> Callable[..., Any]:
    """
    The default implementation `owner` itself supplies for `name`.

    Use for qualified delegation: default_of(F, "do_sth")(self).

    Raises:
        InvalidArgument: If owner supplies no default named `name`
    """
    attr = owner.__dict__.get(name)
    if attr is None or not is_default(attr):
        raise InvalidArgument(
            f"{owner.__name__} supplies no default for '{name}'", field=name
        )
    return attr
