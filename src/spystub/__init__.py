"""Spies and stubs for intercepting function calls in unit tests."""

from spystub.interceptor import Interceptor
from spystub.report import print_call_log, render_call_log
from spystub.spy import Spy, create_bound_spy, create_spy, create_standalone_spy
from spystub.stub import Stub, create_bound_stub, create_standalone_stub, create_stub
from spystub.types import CallRecord, InvalidArgument, MethodBinding

__all__ = [
    "CallRecord",
    "Interceptor",
    "InvalidArgument",
    "MethodBinding",
    "Spy",
    "Stub",
    "create_bound_spy",
    "create_bound_stub",
    "create_spy",
    "create_standalone_spy",
    "create_standalone_stub",
    "create_stub",
    "print_call_log",
    "render_call_log",
]
