"""Stubs: record calls and substitute a mock for the original."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from spystub.interceptor import MISSING_METHOD_NAME, Interceptor, resolve_binding
from spystub.logging_utils import DEFAULT_LOGGER, LoggingManager
from spystub.types import InvalidArgument, MethodBinding


class Stub(Interceptor):
    """Record calls and answer them with ``mock_fn``.

    The original method of a bound stub is kept only so :meth:`remove` can put
    it back; it is never called. Without a mock every call returns ``None``.
    """

    kind = "stub"

    def __init__(
        self,
        binding: MethodBinding | None = None,
        mock_fn: Callable[..., Any] | None = None,
        *,
        logger: LoggingManager = DEFAULT_LOGGER,
    ) -> None:
        self.mock_fn = mock_fn
        name = None
        if binding is None and mock_fn is not None:
            name = getattr(mock_fn, "__name__", None)
        super().__init__(binding, name=name, logger=logger)

    def dispatch(self, args: tuple[Any, ...], kwargs: dict[str, Any], receiver: Any = None) -> Any:  # noqa: ARG002
        if self.mock_fn is None:
            return None
        return self.mock_fn(*args, **kwargs)


def create_standalone_stub(
    mock_fn: Callable[..., Any] | None = None,
    *,
    logger: LoggingManager = DEFAULT_LOGGER,
) -> Stub:
    """Return a stub that answers calls with ``mock_fn`` (or ``None``)."""
    return Stub(mock_fn=mock_fn, logger=logger)


def create_bound_stub(
    target: Any,
    method_name: str,
    mock_fn: Callable[..., Any] | None = None,
    *,
    logger: LoggingManager = DEFAULT_LOGGER,
) -> Stub:
    """Replace ``target.method_name`` with a stub answering through ``mock_fn``."""
    binding = resolve_binding(target, method_name, logger=logger)
    return Stub(binding, mock_fn, logger=logger)


def create_stub(
    target: Any = None,
    method_name: str | None = None,
    mock_fn: Callable[..., Any] | None = None,
    *,
    logger: LoggingManager = DEFAULT_LOGGER,
) -> Stub:
    """Create a stub in whichever shape the arguments describe.

    ``create_stub()`` and ``create_stub(mock_fn)`` give standalone stubs;
    ``create_stub(target, method_name, mock_fn=None)`` patches the host object.
    A lone argument must be callable since it is taken as the mock. A ``None``
    target always gives a standalone stub, whatever the method name.
    """
    if target is None:
        return create_standalone_stub(mock_fn, logger=logger)
    if method_name is None:
        if mock_fn is not None or not callable(target):
            logger.debug("Rejected %r: no method name given", target)
            raise InvalidArgument(MISSING_METHOD_NAME)
        return create_standalone_stub(target, logger=logger)
    return create_bound_stub(target, method_name, mock_fn, logger=logger)
