"""Call recording shared by spies and stubs."""

from __future__ import annotations

import threading
import types
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from spystub.logging_utils import DEFAULT_LOGGER, LoggingManager
from spystub.types import CallRecord, InvalidArgument, MethodBinding

MISSING_METHOD_NAME = "Object passed but method is missing"

_HandleT = TypeVar("_HandleT", bound="Interceptor")


def missing_method_message(method_name: str) -> str:
    return f'Object does not have method "{method_name}"'


def readonly_method_message(method_name: str) -> str:
    return f'Object does not allow replacing method "{method_name}"'


def resolve_binding(
    target: Any,
    method_name: str | None,
    *,
    logger: LoggingManager = DEFAULT_LOGGER,
) -> MethodBinding:
    """Validate ``target``/``method_name`` and capture the method to intercept."""
    if not method_name:
        logger.debug("Rejected %r: no method name given", target)
        raise InvalidArgument(MISSING_METHOD_NAME)

    binding = MethodBinding.capture(target, method_name)
    if binding is None:
        logger.debug("Rejected %r: no callable attribute %r", target, method_name)
        raise InvalidArgument(missing_method_message(method_name))
    return binding


class Interceptor:
    """Callable that records every invocation before dispatching it.

    Subclasses decide what an invocation does once it has been recorded by
    overriding :meth:`dispatch`. When built with a :class:`MethodBinding` the
    handle installs itself on the host object and :meth:`remove` puts the
    original back. Removing only touches the host; the handle itself keeps
    recording when called directly.
    """

    kind = "interceptor"

    def __init__(
        self,
        binding: MethodBinding | None = None,
        *,
        name: str | None = None,
        logger: LoggingManager = DEFAULT_LOGGER,
    ) -> None:
        self.binding = binding
        self.name = name or (binding.name if binding else self.kind)
        self.logger = logger
        self.active = False
        self._lock = threading.Lock()
        self.call_count = 0
        self.call_args_log: list[tuple[Any, ...]] = []
        self.call_kwargs_log: list[Mapping[str, Any]] = []

        if binding is not None:
            try:
                binding.install(self)
            except (AttributeError, TypeError) as exc:
                self.logger.debug("Rejected %r: cannot replace %r (%s)", binding.target, binding.name, exc)
                raise InvalidArgument(readonly_method_message(binding.name)) from exc
            self.active = True
            self.logger.debug(
                "Installed %s %r on %r",
                self.kind,
                binding.name,
                binding.target,
            )
        else:
            self.logger.debug("Created standalone %s %r", self.kind, self.name)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        self._record(args, kwargs)
        return self.dispatch(args, kwargs)

    def __get__(self, instance: Any, owner: type | None = None) -> Any:  # noqa: ARG002
        if instance is None or self.binding is None or not self.binding.unbound:
            return self
        return types.MethodType(self._call_with_receiver, instance)

    def __repr__(self) -> str:
        mode = "bound" if self.binding is not None else "standalone"
        return f"<{type(self).__name__} {self.name!r} {mode} calls={self.call_count}>"

    def __enter__(self: _HandleT) -> _HandleT:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.remove()

    def _call_with_receiver(self, receiver: Any, *args: Any, **kwargs: Any) -> Any:
        # The receiver is not part of the recorded arguments.
        self._record(args, kwargs)
        return self.dispatch(args, kwargs, receiver=receiver)

    def dispatch(self, args: tuple[Any, ...], kwargs: dict[str, Any], receiver: Any = None) -> Any:  # noqa: ARG002
        """Run whatever the handle does after recording a call.

        ``receiver`` is the instance when the handle was reached through an
        instance of a patched class; it is ``None`` otherwise.
        """
        return None

    def _record(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        frozen_kwargs = types.MappingProxyType(dict(kwargs))
        with self._lock:
            self.call_count += 1
            self.call_args_log.append(args)
            self.call_kwargs_log.append(frozen_kwargs)

    @property
    def calls(self) -> list[CallRecord]:
        """Recorded calls pairing positional and keyword arguments."""
        with self._lock:
            return [
                CallRecord(args=args, kwargs=kwargs)
                for args, kwargs in zip(self.call_args_log, self.call_kwargs_log, strict=True)
            ]

    @property
    def original(self) -> Callable[..., Any] | None:
        return self.binding.original if self.binding else None

    def reset(self) -> None:
        """Clear the call counter and logs in place."""
        with self._lock:
            self.call_count = 0
            self.call_args_log.clear()
            self.call_kwargs_log.clear()
        self.logger.debug("Reset %s %r", self.kind, self.name)

    def remove(self) -> None:
        """Restore the host object's method; a no-op for standalone handles."""
        if self.binding is None or not self.active:
            return
        self.binding.restore()
        self.active = False
        self.logger.debug(
            "Restored %r on %r",
            self.binding.name,
            self.binding.target,
        )
