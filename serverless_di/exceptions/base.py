from typing import Any, Dict, Optional


class ServerlessDIError(Exception):
    """Root of every error raised while registering modules or writing tables.

    Attributes:
        message: What went wrong, without the context suffix
        original_error: Library exception this error was translated from, if any
        context: Key/value details such as the table or declaration involved
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None, context: Optional[Dict[str, Any]] = None):
        self.message = message
        self.original_error = original_error
        self.context = context or {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = ", ".join(f"{k}={v}" for k, v in self.context.items())
        return f"{self.message} (Context: {details})"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, context={self.context!r})"
