class WebhookError(Exception):
    """Base class for errors raised by the webhook layer."""


class ConfigError(WebhookError):
    """The webhook endpoint is not configured. Raised at startup."""


class TransportError(WebhookError):
    """The round trip to the webhook did not produce an HTTP response."""

    def __init__(self, message: str, timed_out: bool = False):
        super().__init__(message)
        self.timed_out = timed_out
