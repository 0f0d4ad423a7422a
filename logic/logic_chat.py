import logging

import gradio as gr

from chat_transcript import ChatTranscript
from webhook.service import TrackerService
from .notifier import Notifier

logger = logging.getLogger(__name__)


def chat_submit_action(user_input: str, transcript: ChatTranscript):
    """
    First half of a send: append the user turn as `sending` and lock the input.

    Returns (transcript, chatbot, chat_input, send button).
    """
    text = (user_input or "").strip()
    if not text or transcript.pending() is not None:
        return transcript, transcript.to_messages(), gr.update(), gr.update()

    transcript.submit(text)
    return (
        transcript,
        transcript.to_messages(),
        gr.update(value="", interactive=False),
        gr.update(interactive=False),
    )


def chat_resolve_action(
    service: TrackerService,
    notifier: Notifier,
    transcript: ChatTranscript,
):
    """
    Second half of a send: call the webhook for the pending turn and record the reply.

    Returns (transcript, chatbot, chat status, chat_input, send button). When
    another event is already delivering the pending turn, nothing is sent.
    """
    turn = transcript.claim_pending()
    if turn is None:
        # Still in flight elsewhere: leave the controls locked.
        in_flight = transcript.pending() is not None
        controls = gr.update() if in_flight else gr.update(interactive=True)
        return transcript, transcript.to_messages(), gr.update(), controls, controls

    outcome = service.send_chat(turn.text)
    transcript.resolve(turn, outcome)

    status = ""
    if not outcome.succeeded:
        notifier.error("Message not delivered.", outcome.user_message)
        status = f"⚠️ {outcome.user_message}"
        logger.info(f"Chat turn failed (status={outcome.status_code})")

    return (
        transcript,
        transcript.to_messages(),
        status,
        gr.update(interactive=True),
        gr.update(interactive=True),
    )


def start_new_chat_action(greeting: str):
    transcript = ChatTranscript(greeting)
    return transcript, transcript.to_messages(), ""
