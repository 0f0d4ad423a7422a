# webhook_config.py
"""
Central configuration for the webhook-backed tracker UI.

- WEBHOOK_URL / WEBHOOK_TEST_URL: production and test endpoints of the automation backend.
- USE_TEST_WEBHOOK: if True, talk to the test endpoint instead of production.
- WEBHOOK_TIMEOUT: HTTP timeout for habit and chat calls.
- WEBHOOK_LONG_TIMEOUT: HTTP timeout for physique calls (AI comment + chart take longer).
- PERSIST_ACK_DELAY: fallback wait when the backend does not acknowledge persistence.
- CHART_SERVICE_URL: external chart renderer that receives the chart spec as `c`.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from webhook.errors import ConfigError

DEFAULT_TIMEOUT = 10.0
DEFAULT_LONG_TIMEOUT = 60.0
DEFAULT_PERSIST_ACK_DELAY = 2.0
DEFAULT_CHART_SERVICE_URL = "https://quickchart.io/chart"
DEFAULT_ASSISTANT_NAME = "Abidin"


def _bool_env(env: Mapping[str, str], name: str, default: str = "false") -> bool:
    value = env.get(name, default).strip().lower()
    return value in {"1", "true", "yes", "y"}


def _float_env(env: Mapping[str, str], name: str, default: float) -> float:
    try:
        return float(env.get(name, default))
    except ValueError:
        return default


@dataclass(frozen=True)
class WebhookConfig:
    base_url: str
    use_test: bool = False
    timeout: float = DEFAULT_TIMEOUT
    long_timeout: float = DEFAULT_LONG_TIMEOUT
    persist_ack_delay: float = DEFAULT_PERSIST_ACK_DELAY
    chart_service_url: str = DEFAULT_CHART_SERVICE_URL
    assistant_name: str = DEFAULT_ASSISTANT_NAME
    log_level: str = "INFO"


def load_webhook_config(env: Optional[Mapping[str, str]] = None) -> WebhookConfig:
    """
    Build a WebhookConfig from environment variables.

    Exactly one of the two endpoint URLs is selected here, once. A missing URL
    is a startup error: there is nothing useful the UI can do without it.
    """
    if env is None:
        env = os.environ

    use_test = _bool_env(env, "USE_TEST_WEBHOOK", "false")
    url_var = "WEBHOOK_TEST_URL" if use_test else "WEBHOOK_URL"
    base_url = (env.get(url_var) or "").strip()
    if not base_url:
        raise ConfigError(f"Webhook URL environment variable {url_var} is not set")

    return WebhookConfig(
        base_url=base_url,
        use_test=use_test,
        timeout=_float_env(env, "WEBHOOK_TIMEOUT", DEFAULT_TIMEOUT),
        long_timeout=_float_env(env, "WEBHOOK_LONG_TIMEOUT", DEFAULT_LONG_TIMEOUT),
        persist_ack_delay=max(
            0.0, _float_env(env, "PERSIST_ACK_DELAY", DEFAULT_PERSIST_ACK_DELAY)
        ),
        chart_service_url=(
            env.get("CHART_SERVICE_URL") or DEFAULT_CHART_SERVICE_URL
        ).rstrip("/"),
        assistant_name=env.get("ASSISTANT_NAME") or DEFAULT_ASSISTANT_NAME,
        log_level=(env.get("LOG_LEVEL") or "INFO").upper(),
    )
