# Askpw Entry Prompt — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Flow control signals used internally by askpw.

Signals inherit from `FlowSignal`, a subclass of `BaseException`, so they bypass
`except Exception` blocks on their way back to the dispatcher.

Signals:
- AbortSignal: The user declined to name an entry; stop without invoking anything.
"""


class FlowSignal(BaseException):
    """Base class for all flow control signals in askpw.

    These are not errors. They end the run early with a successful exit code.
    """


class AbortSignal(FlowSignal):
    """Raised when the resolved entry is empty."""

    def __init__(self, message: str = "empty entry name. aborting."):
        super().__init__(message)
