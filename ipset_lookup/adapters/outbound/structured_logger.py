"""Structured Logger - Level filtering and bound fields shared by logger adapters."""
from typing import Any


class StructuredLogger:
    """
    Base implementation of LoggerPort.

    Filters by level, merges bound context with per-call fields and hands
    the result to `_emit`, which subclasses implement for their sink.
    """

    LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}

    def __init__(self, level: str = "INFO", context: dict | None = None):
        self._level = self._level_value(level)
        self._context: dict[str, Any] = dict(context or {})

    @classmethod
    def _level_value(cls, level: str) -> int:
        return cls.LEVELS.get(level.upper(), cls.LEVELS["INFO"])

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log("DEBUG", message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log("INFO", message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log("WARNING", message, kwargs)

    def error(self, message: str, exception: Exception | None = None, **kwargs: Any) -> None:
        """Log an error message, adding the type and AWS error code of `exception`."""
        if exception:
            kwargs.update(self._exception_fields(exception))
        self._log("ERROR", message, kwargs)

    def set_level(self, level: str) -> None:
        self._level = self._level_value(level)

    def set_context(self, **kwargs: Any) -> None:
        self._context.update(kwargs)

    @property
    def context(self) -> dict[str, Any]:
        """Copy of the currently bound fields."""
        return dict(self._context)

    def _exception_fields(self, exception: Exception) -> dict[str, Any]:
        fields: dict[str, Any] = {"error_type": type(exception).__name__}
        error_code = getattr(exception, "error_code", None)
        if error_code:
            fields["error_code"] = error_code
        return fields

    def _log(self, level: str, message: str, fields: dict[str, Any]) -> None:
        if self.LEVELS[level] < self._level:
            return
        self._emit(level, message, {**self._context, **fields})

    def _emit(self, level: str, message: str, fields: dict[str, Any]) -> None:
        raise NotImplementedError
