"""Shared dataclasses and errors for spies and stubs."""

from __future__ import annotations

import dataclasses
import inspect
import types
from collections.abc import Callable, Mapping
from typing import Any

_MISSING: Any = object()


def _is_slot(target: Any, name: str) -> bool:
    return isinstance(inspect.getattr_static(type(target), name, None), types.MemberDescriptorType)


class InvalidArgument(ValueError):
    """Raised when a factory is given a malformed object/method combination."""


@dataclasses.dataclass(frozen=True)
class CallRecord:
    args: tuple[Any, ...]
    kwargs: Mapping[str, Any]


@dataclasses.dataclass
class MethodBinding:
    """Patch point for a named method on a host object.

    ``original`` is the callable bound to ``target`` at capture time and is what
    a spy forwards to. ``raw`` is whatever sat in the host's own ``__dict__``
    under ``name`` (descriptors included), so restoring puts back exactly what
    was there. A value held in a ``__slots__`` slot counts as owned. When the
    host did not own the attribute the override is deleted instead, which lets
    lookup fall through to the class again.

    ``unbound`` marks a plain function patched on a class: calls made through an
    instance must pass that instance on as the receiver.
    """

    target: Any
    name: str
    original: Callable[..., Any]
    raw: Any = _MISSING
    unbound: bool = False

    @classmethod
    def capture(cls, target: Any, name: str) -> MethodBinding | None:
        """Return a binding for ``target.name`` or ``None`` if it is not callable."""
        original = getattr(target, name, None)
        if original is None or not callable(original):
            return None

        try:
            own = vars(target)
        except TypeError:
            own = {}
        raw = own.get(name, _MISSING)
        if raw is _MISSING and _is_slot(target, name):
            raw = original

        unbound = isinstance(target, type) and inspect.isfunction(inspect.getattr_static(target, name, None))
        return cls(
            target=target,
            name=name,
            original=original,
            raw=raw,
            unbound=unbound,
        )

    @property
    def owned(self) -> bool:
        return self.raw is not _MISSING

    def current(self) -> Any:
        return getattr(self.target, self.name)

    def install(self, handle: Callable[..., Any]) -> None:
        setattr(self.target, self.name, handle)

    def restore(self) -> None:
        if self.owned:
            setattr(self.target, self.name, self.raw)
        else:
            delattr(self.target, self.name)
