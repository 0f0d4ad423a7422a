from typing import Any

import gradio as gr

from webhook.encoder import habit_command
from webhook.models import HabitRecord
from webhook.service import TrackerService
from .notifier import Notifier


def habit_preview(study: bool, project: bool, sport: bool, social: bool, note: str) -> str:
    """Live 'Format:' line under the habit form."""
    record = HabitRecord(study, project, sport, social, note or "note")
    return f"**Format:** `{habit_command(record)}`  \n1 = done, 0 = not done"


def habit_submit_action(
    service: TrackerService,
    notifier: Notifier,
    study: bool,
    project: bool,
    sport: bool,
    social: bool,
    note: str,
):
    """
    Gradio callback: send today's habits.

    Returns (status markdown, study, project, sport, social, note). The form is
    reset only when the backend stored the record.
    """
    record = HabitRecord(study, project, sport, social, note or "")
    outcome = service.send_habit(record)

    unchanged: Any = gr.update()
    if outcome.fully_succeeded:
        notifier.success("Saved!", outcome.user_message)
        return (
            f"✅ {outcome.user_message}",
            False,
            False,
            False,
            False,
            "",
        )

    if outcome.succeeded:
        notifier.warning("Not saved.", outcome.user_message)
        status = f"⚠️ {outcome.user_message}"
    else:
        notifier.error("Error!", outcome.user_message)
        status = f"❌ {outcome.user_message}"
    return status, unchanged, unchanged, unchanged, unchanged, unchanged
