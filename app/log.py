import json
import logging
import sys
from contextvars import ContextVar
from typing import Any, Dict, Optional

import structlog

request_id_ctx: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def _add_request_id(_: logging.Logger, __: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    event_dict["request_id"] = request_id_ctx.get()
    return event_dict


def _rename_event_to_message(_: logging.Logger, __: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    if "event" in event_dict:
        event_dict["message"] = event_dict.pop("event")
    return event_dict


def _serialize_json(_: logging.Logger, __: str, event_dict: Dict[str, Any]) -> str:
    return json.dumps(event_dict, ensure_ascii=False, default=str)


def configure_logging(level: str = "INFO") -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level)

    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso", utc=True, key="timestamp"),
            structlog.processors.add_log_level,
            _add_request_id,
            _rename_event_to_message,
            structlog.processors.format_exc_info,
            _serialize_json,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
