import logging

import gradio as gr

logger = logging.getLogger(__name__)


class Notifier:
    """Notification channel passed to the view callbacks. The base class only logs."""

    def success(self, title: str, message: str = "") -> None:
        logger.info(f"{title} {message}".strip())

    def warning(self, title: str, message: str = "") -> None:
        logger.warning(f"{title} {message}".strip())

    def error(self, title: str, message: str = "") -> None:
        logger.error(f"{title} {message}".strip())


class GradioNotifier(Notifier):
    """Shows notifications as Gradio toasts in the browser."""

    def success(self, title: str, message: str = "") -> None:
        super().success(title, message)
        gr.Info(_join(title, message))

    def warning(self, title: str, message: str = "") -> None:
        super().warning(title, message)
        gr.Warning(_join(title, message))

    def error(self, title: str, message: str = "") -> None:
        # gr.Error would abort the event and hide its outputs.
        super().error(title, message)
        gr.Warning(_join(title, message))


def _join(title: str, message: str) -> str:
    return f"{title} {message}".strip()
