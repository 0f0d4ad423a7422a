import logging
import time
from typing import Callable, Optional

from webhook import interpreter
from webhook.base import WebhookClient
from webhook.encoder import encode_chat, encode_habit, encode_physique
from webhook.errors import TransportError
from webhook.models import BackendOutcome, HabitRecord, MeasurementRecord, WebhookResponse
from webhook_config import WebhookConfig

logger = logging.getLogger(__name__)


class TrackerService:
    """
    One round trip per user action: encode -> GET -> interpret.

    The client and the configuration are passed in; nothing here is global.
    `sleep` is the wait used when the backend does not acknowledge persistence.
    """

    def __init__(
        self,
        client: WebhookClient,
        config: WebhookConfig,
        sleep: Optional[Callable[[float], None]] = None,
    ):
        self.client = client
        self.config = config
        self.sleep = sleep or time.sleep

    def _wait_for_persistence(self, response: WebhookResponse, kind: str) -> None:
        # Successful writes finish asynchronously on the backend. Prefer its
        # acknowledgement; without one, give it a fixed head start.
        if not interpreter.reports_saved(kind, response.status_code):
            return
        if interpreter.has_persist_ack(response):
            logger.debug(f"{kind}: backend acknowledged persistence")
            return
        delay = self.config.persist_ack_delay
        if delay > 0:
            logger.debug(f"{kind}: no persistence acknowledgement, waiting {delay}s")
            self.sleep(delay)

    def send_habit(self, record: HabitRecord) -> BackendOutcome:
        params = encode_habit(record)
        try:
            response = self.client.get(params, timeout=self.config.timeout)
        except TransportError as e:
            logger.warning(f"Habit data send failed: {e}")
            return interpreter.transport_failure(e, "habit")

        self._wait_for_persistence(response, "habit")
        outcome = interpreter.interpret_habit(response)
        logger.info(f"Habit outcome: {interpreter.outcome_summary(outcome)}")
        return outcome

    def send_physique(self, record: MeasurementRecord) -> BackendOutcome:
        params = encode_physique(record)
        try:
            response = self.client.get(params, timeout=self.config.long_timeout)
        except TransportError as e:
            logger.warning(f"Physique data send failed: {e}")
            return interpreter.transport_failure(e, "physique")

        self._wait_for_persistence(response, "physique")
        outcome = interpreter.interpret_physique(response, self.config.chart_service_url)
        logger.info(f"Physique outcome: {interpreter.outcome_summary(outcome)}")
        return outcome

    def send_chat(self, text: str) -> BackendOutcome:
        params = encode_chat(text)
        try:
            response = self.client.get(params, timeout=self.config.timeout)
        except TransportError as e:
            logger.warning(f"Chat message send failed: {e}")
            return interpreter.transport_failure(e, "chat")

        outcome = interpreter.interpret_chat(response, self.config.assistant_name)
        logger.info(f"Chat outcome: {interpreter.outcome_summary(outcome)}")
        return outcome

    def close(self) -> None:
        self.client.close()


def build_service(config: WebhookConfig) -> TrackerService:
    return TrackerService(WebhookClient(config.base_url), config)
