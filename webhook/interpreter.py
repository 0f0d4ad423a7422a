"""
Map webhook round trips onto BackendOutcome.

Status codes used by the backend workflows:

    habit     200 saved          400 workflow ran, DB insert failed
    physique  211 saved          411 workflow ran, calculation failed
              200 saved (legacy) 400 workflow ran, generic failure
    chat      2xx reply          400 assistant could not answer

Transport failures (no HTTP response at all) are failures for every kind.
Anything not listed above is a generic failure.
"""

import json
import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

from webhook import messages
from webhook.errors import TransportError
from webhook.models import BackendOutcome, WebhookResponse

logger = logging.getLogger(__name__)

STATUS_OK = 200
STATUS_PHYSIQUE_SAVED = 211
STATUS_BAD_REQUEST = 400
STATUS_CALCULATION_FAILED = 411

ACK_FIELDS = ("persisted", "db_saved")


def _is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


def unwrap_body(body: Any) -> Any:
    """Automation tools often answer with a one-item list; use its first element."""
    if isinstance(body, list):
        return body[0] if body else None
    return body


def body_field(body: Any, key: str) -> Any:
    """Look up `key` in a dict body, falling back to a nested `data` dict."""
    body = unwrap_body(body)
    if not isinstance(body, dict):
        return None
    value = body.get(key)
    if value is None and isinstance(body.get("data"), dict):
        value = body["data"].get(key)
    return value


def reports_saved(kind: str, status_code: int) -> bool:
    """True for the statuses the interpret_* functions report as stored."""
    if kind == "habit":
        return _is_success(status_code)
    if kind == "physique":
        return status_code in (STATUS_PHYSIQUE_SAVED, STATUS_OK)
    return False


def has_persist_ack(response: WebhookResponse) -> bool:
    """True when the backend explicitly confirmed that the record was stored."""
    if response.status_code == STATUS_PHYSIQUE_SAVED:
        return True
    return any(body_field(response.body, key) is True for key in ACK_FIELDS)


def _text_or_none(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = value if isinstance(value, str) else str(value)
    text = text.strip()
    return text or None


# ---------------- Chart delegate URL ----------------


def build_chart_url(chart_data: Any, chart_service_url: str) -> str:
    """
    Return `{chart_service_url}?c=<encoded spec>` or "" when the spec is unusable.

    A string spec is forwarded as-is once it decodes as JSON; an already-decoded
    spec is serialised compactly.
    """
    if chart_data is None or chart_data == "":
        return ""

    if isinstance(chart_data, str):
        try:
            decoded = json.loads(chart_data)
        except ValueError:
            logger.warning(f"chart_data is not valid JSON, skipping chart: {chart_data[:80]!r}")
            return ""
        if not isinstance(decoded, dict):
            logger.warning("chart_data does not describe a chart object, skipping chart")
            return ""
        spec = chart_data.strip()
    elif isinstance(chart_data, dict):
        spec = json.dumps(chart_data, separators=(",", ":"), ensure_ascii=False)
    else:
        logger.warning(f"Unsupported chart_data type {type(chart_data).__name__}, skipping chart")
        return ""

    return f"{chart_service_url}?c={quote(spec, safe='')}"


# ---------------- Failures shared by all kinds ----------------


def transport_failure(error: TransportError, kind: str) -> BackendOutcome:
    text = messages.TIMEOUT_FAILURE if error.timed_out else messages.TRANSPORT_FAILURE
    if kind == "chat":
        return BackendOutcome(succeeded=False, user_message=text, assistant_text=messages.CHAT_APOLOGY)
    return BackendOutcome(
        succeeded=False,
        user_message=text,
        db_insert_succeeded=False,
        calculation_failed=False if kind == "physique" else None,
    )


# ---------------- Per-kind interpretation ----------------


def interpret_habit(response: WebhookResponse) -> BackendOutcome:
    code = response.status_code
    if _is_success(code):
        return BackendOutcome(
            succeeded=True,
            user_message=_text_or_none(body_field(response.body, "message")) or messages.HABIT_SAVED,
            db_insert_succeeded=True,
            status_code=code,
        )
    if code == STATUS_BAD_REQUEST:
        return BackendOutcome(
            succeeded=True,
            user_message=messages.HABIT_DB_FAILED,
            db_insert_succeeded=False,
            status_code=code,
        )
    logger.warning(f"Unexpected habit status {code}")
    return BackendOutcome(
        succeeded=False,
        user_message=messages.GENERIC_FAILURE,
        db_insert_succeeded=False,
        status_code=code,
    )


def interpret_physique(response: WebhookResponse, chart_service_url: str) -> BackendOutcome:
    code = response.status_code
    if code == STATUS_CALCULATION_FAILED:
        return BackendOutcome(
            succeeded=True,
            user_message=messages.PHYSIQUE_CALCULATION_FAILED,
            db_insert_succeeded=False,
            calculation_failed=True,
            status_code=code,
        )
    if code == STATUS_BAD_REQUEST:
        return BackendOutcome(
            succeeded=True,
            user_message=messages.PHYSIQUE_FAILED,
            db_insert_succeeded=False,
            calculation_failed=False,
            status_code=code,
        )
    if code in (STATUS_PHYSIQUE_SAVED, STATUS_OK):
        if code == STATUS_OK:
            logger.debug("Physique answered with legacy status 200")
        return BackendOutcome(
            succeeded=True,
            user_message=messages.PHYSIQUE_SAVED,
            assistant_text=_text_or_none(body_field(response.body, "ai_response")),
            chart_url=build_chart_url(body_field(response.body, "chart_data"), chart_service_url),
            db_insert_succeeded=True,
            calculation_failed=False,
            status_code=code,
        )
    logger.warning(f"Unexpected physique status {code}")
    return BackendOutcome(
        succeeded=False,
        user_message=messages.GENERIC_FAILURE,
        db_insert_succeeded=False,
        calculation_failed=False,
        status_code=code,
    )


def chat_reply_text(body: Any) -> Optional[str]:
    body = unwrap_body(body)
    if isinstance(body, str):
        return _text_or_none(body)
    for key in ("response", "message", "reply"):
        text = _text_or_none(body_field(body, key))
        if text:
            return text
    return None


def interpret_chat(response: WebhookResponse, assistant_name: str) -> BackendOutcome:
    code = response.status_code
    if _is_success(code):
        return BackendOutcome(
            succeeded=True,
            user_message=messages.CHAT_SENT,
            assistant_text=chat_reply_text(response.body) or messages.chat_received(assistant_name),
            status_code=code,
        )
    if code != STATUS_BAD_REQUEST:
        logger.warning(f"Unexpected chat status {code}")
    return BackendOutcome(
        succeeded=False,
        user_message=messages.CHAT_APOLOGY,
        assistant_text=messages.CHAT_APOLOGY,
        status_code=code,
    )


def outcome_summary(outcome: BackendOutcome) -> Dict[str, Any]:
    """Flat dict for logging."""
    return {
        "status": outcome.status_code,
        "succeeded": outcome.succeeded,
        "db": outcome.db_insert_succeeded,
        "calc_failed": outcome.calculation_failed,
        "chart": bool(outcome.chart_url),
    }
