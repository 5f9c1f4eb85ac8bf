# portfolio/core/logging.py
"""
JSON logging for the portfolio service.

Every record is one JSON object on stdout. Context goes through
``extra={"extra": {...}}`` and is merged into the object after redaction.
The request id set by the HTTP middleware is attached automatically.
"""
import json
import logging
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

request_id_ctx: ContextVar[str] = ContextVar('request_id', default='')

SENSITIVE_FIELDS = frozenset({
    'password', 'password_hash', 'token', 'secret', 'authorization',
    'cookie', 'set-cookie', 'session',
})
REDACTED = '[REDACTED]'

# Third-party loggers that are noisy at INFO
QUIET_LOGGERS = {
    'uvicorn.access': logging.WARNING,
    'sqlalchemy.engine': logging.WARNING,
    'passlib': logging.ERROR,
    'httpx': logging.WARNING,
}


def redact(values: Mapping[str, Any]) -> Dict[str, Any]:
    """Copy of ``values`` with credential-bearing keys masked."""
    return {
        key: REDACTED if key.lower() in SENSITIVE_FIELDS else value
        for key, value in values.items()
    }


class StructuredFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            'timestamp': datetime.fromtimestamp(record.created, timezone.utc).isoformat().replace('+00:00', 'Z'),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'location': f"{record.module}.{record.funcName}:{record.lineno}",
        }

        request_id = request_id_ctx.get()
        if request_id:
            entry['request_id'] = request_id

        if record.exc_info and record.exc_info[0]:
            entry['exception'] = {
                'type': record.exc_info[0].__name__,
                'message': str(record.exc_info[1]),
                'traceback': self.formatException(record.exc_info),
            }

        context = getattr(record, 'extra', None)
        if isinstance(context, dict):
            entry.update(redact(context))

        return json.dumps(entry, default=str)


def setup_logging(log_level: str = "INFO", enable_sentry: bool = False, sentry_dsn: Optional[str] = None) -> None:
    """Route the root logger through ``StructuredFormatter`` and optionally start Sentry."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(StructuredFormatter())

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    for name, level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(level)

    if enable_sentry and sentry_dsn and sentry_dsn.strip():
        _init_sentry(sentry_dsn)


def _init_sentry(dsn: str) -> None:
    try:
        import sentry_sdk
        from sentry_sdk.integrations.logging import LoggingIntegration

        from portfolio.core.config import settings

        sentry_sdk.init(
            dsn=dsn,
            integrations=[LoggingIntegration(level=logging.INFO, event_level=logging.ERROR)],
            traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
            environment=settings.SENTRY_ENVIRONMENT,
            before_send=filter_sensitive_data,
        )
        logging.info("Sentry error tracking initialized")
    except Exception as e:
        logging.error(f"Failed to initialize Sentry: {str(e)}")


def filter_sensitive_data(event: Dict[str, Any], hint: Dict[str, Any]) -> Dict[str, Any]:
    """Sentry ``before_send`` hook: mask cookies, auth headers and login bodies."""
    request = event.get('request')
    if isinstance(request, dict):
        for part in ('headers', 'cookies', 'data'):
            if isinstance(request.get(part), dict):
                request[part] = redact(request[part])
    return event


def set_request_id(request_id: str) -> None:
    request_id_ctx.set(request_id)
