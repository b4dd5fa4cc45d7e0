"""Reusable test utilities and sample host objects for the test suite."""


class RecordingLogger:
    """In-memory logger capturing log messages and setup calls."""

    def __init__(self):
        self.messages: list[str] = []
        self.setup_calls: list[bool] = []

    def setup(self, verbose: bool, log_file: str | None = None) -> None:
        self.setup_calls.append(verbose)

    def log(self, msg: str, *args: object) -> None:
        self.messages.append(msg % args if args else msg)

    def debug(self, msg: str, *args: object) -> None:
        self.messages.append(f"DEBUG:{msg % args if args else msg}")


class Formatter:
    """Host object whose method mirrors the original JS fixtures."""

    def method(self, number, string):
        return f"foo-{number}-{string}"

    def no_args(self):
        return "foo"

    def explode(self, reason):
        raise RuntimeError(reason)


def mock_fn(number, string):
    return f"MOCK:{number} @@ {string}"
