"""Spies: record calls while keeping the original behaviour."""

from __future__ import annotations

from typing import Any

from spystub.interceptor import Interceptor, resolve_binding
from spystub.logging_utils import DEFAULT_LOGGER, LoggingManager


class Spy(Interceptor):
    """Record calls and forward them to the captured original, if any."""

    kind = "spy"

    def dispatch(self, args: tuple[Any, ...], kwargs: dict[str, Any], receiver: Any = None) -> Any:
        if self.binding is None:
            return None
        if receiver is not None:
            return self.binding.original(receiver, *args, **kwargs)
        return self.binding.original(*args, **kwargs)


def create_standalone_spy(*, logger: LoggingManager = DEFAULT_LOGGER) -> Spy:
    """Return a spy that only records calls."""
    return Spy(logger=logger)


def create_bound_spy(
    target: Any,
    method_name: str,
    *,
    logger: LoggingManager = DEFAULT_LOGGER,
) -> Spy:
    """Replace ``target.method_name`` with a spy forwarding to the original."""
    binding = resolve_binding(target, method_name, logger=logger)
    return Spy(binding, logger=logger)


def create_spy(
    target: Any = None,
    method_name: str | None = None,
    *,
    logger: LoggingManager = DEFAULT_LOGGER,
) -> Spy:
    """Spy on ``target.method_name``, or return a bare recorder when called without arguments.

    Raises :class:`~spystub.types.InvalidArgument` when ``target`` is given
    without a method name or does not have a callable ``method_name``. A
    ``None`` target always gives a standalone recorder, whatever the method name.
    """
    if target is None:
        return create_standalone_spy(logger=logger)
    return create_bound_spy(target, method_name, logger=logger)
