# Argline CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals raised by Argline.

Signals inherit from `FlowSignal`, a subclass of `BaseException`, so they pass
through `except Exception` blocks in the host application.

Signals:
- HelpSignal: Help was requested and has been rendered; stop processing.
"""


class FlowSignal(BaseException):
    """Base class for all flow control signals in Argline.

    These are not errors. They stop a decode pass early on user request.
    """


class HelpSignal(FlowSignal):
    """Raised after help output has been rendered."""

    def __init__(self, message: str = "Help signal received."):
        super().__init__(message)
