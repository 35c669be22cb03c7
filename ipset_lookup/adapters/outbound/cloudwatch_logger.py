"""CloudWatch Logger Adapter - JSON log lines for the Lambda runtime."""
import json
from datetime import datetime, timezone
from typing import Any

from ipset_lookup.adapters.outbound.structured_logger import StructuredLogger

SERVICE_NAME = "waf-ipset-lookup"


class CloudWatchLogger(StructuredLogger):
    """
    LoggerPort adapter that prints one JSON object per line.

    The Lambda runtime ships stdout to CloudWatch Logs, where the fixed
    keys (level, message, request_id, ipset_name, scope) can be queried
    with Logs Insights.
    """

    def bind_lambda_context(self, context: Any) -> None:
        """
        Bind the invocation identifiers of a Lambda context object.

        Missing attributes are skipped, so a None context binds nothing.
        """
        for field, attribute in (
            ("request_id", "aws_request_id"),
            ("function_name", "function_name"),
            ("function_version", "function_version"),
        ):
            value = getattr(context, attribute, None)
            if value:
                self.set_context(**{field: value})

    def error(self, message: str, exception: Exception | None = None, **kwargs: Any) -> None:
        """Log an error; the exception text is kept for Insights queries."""
        if exception:
            kwargs["error"] = str(exception)
        super().error(message, exception=exception, **kwargs)

    def _emit(self, level: str, message: str, fields: dict[str, Any]) -> None:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "service": SERVICE_NAME,
            "level": level,
            "message": message,
            **fields,
        }
        print(json.dumps(log_entry, default=str))
