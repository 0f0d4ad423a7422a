from typing import Any, List

import gradio as gr

from webhook.encoder import bmi, bmi_category, physique_command
from webhook.interpreter import build_chart_url
from webhook.models import BackendOutcome, MeasurementRecord, coerce_number
from webhook.service import TrackerService
from .notifier import Notifier

STEP_SENDING = "📤 Sending your measurements... {assistant} is processing them, this can take a minute."
STEP_SENT = "📤 Measurements sent"
STEP_PROCESSED = "⚙️ Data processed by the workflow"
STEP_SAVED = "💾 Saved to the database"
STEP_AI = "✅ AI comment received!"
STEP_CHART = "📈 Chart ready!"

DEMO_AI_RESPONSE = (
    "Your BMI comes out at 23.2, which sits right in the normal range. "
    "Body fat looks to be around 15% with roughly 60 kg of lean mass. "
    "Don't overdo it, but keep your training regular!"
)

DEMO_CHART_SPEC = {
    "type": "line",
    "data": {
        "labels": ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"],
        "datasets": [
            {
                "label": "Weight",
                "data": [70, 71, 70.5, 72, 71.5, 71, 70.8],
                "borderColor": "blue",
                "fill": False,
            }
        ],
    },
    "options": {"plugins": {"title": {"display": True, "text": "Weekly Progress"}}},
}


def bmi_display(weight: Any, height: Any) -> str:
    value = bmi(coerce_number(weight), coerce_number(height))
    if value <= 0:
        return "**BMI:** enter weight and height"
    return f"**BMI:** {value:.1f} ({bmi_category(value)})"


def physique_preview(weight, height, waist, neck, hip, shoulder, chest, note) -> str:
    record = MeasurementRecord(weight, height, waist, neck, hip, shoulder, chest, note or "note")
    return (
        f"**Format:** `{physique_command(record)}`  \n"
        "Weekly measurements are recommended. The system calculates BMI, "
        "body fat and lean mass automatically."
    )


def chart_markdown(chart_url: str) -> str:
    if not chart_url:
        return ""
    return f"### 📈 Progress chart\n\n![Physique progress chart]({chart_url})"


def ai_markdown(assistant_name: str, text: str) -> str:
    if not text:
        return ""
    return f"### 🤖 {assistant_name}'s comment\n\n{text}"


def completed_steps(outcome: BackendOutcome) -> List[str]:
    """Steps the workflow actually reported, in pipeline order."""
    if outcome.status_code is None:
        return []
    steps = [STEP_SENT, STEP_PROCESSED]
    if outcome.db_insert_succeeded:
        steps.append(STEP_SAVED)
    if outcome.assistant_text:
        steps.append(STEP_AI)
    if outcome.chart_url:
        steps.append(STEP_CHART)
    return steps


def _steps_markdown(lines: List[str]) -> str:
    return "\n".join(f"- {line}" for line in lines)


def physique_submit_action(
    service: TrackerService,
    notifier: Notifier,
    weight,
    height,
    waist,
    neck,
    hip,
    shoulder,
    chest,
    note,
):
    """
    Gradio generator callback: send measurements, then show the AI comment and chart.

    Yields (status, steps, ai comment, chart, weight, height, waist, neck, hip,
    shoulder, chest, note).
    """
    assistant = service.config.assistant_name
    unchanged: Any = gr.update()
    form_unchanged = tuple(unchanged for _ in range(8))

    # Only the step in progress; the rest is listed once the workflow reports back.
    yield ("", _steps_markdown([STEP_SENDING.format(assistant=assistant)]), "", "") + form_unchanged

    record = MeasurementRecord(weight, height, waist, neck, hip, shoulder, chest, note or "")
    outcome = service.send_physique(record)

    steps = completed_steps(outcome)

    if outcome.fully_succeeded:
        notifier.success("Success!", "Your measurements were processed.")
        status = f"✅ {outcome.user_message}"
        form = (0, 0, 0, 0, 0, 0, 0, "")
    elif outcome.succeeded:
        notifier.warning("Warning!", outcome.user_message)
        status = f"⚠️ {outcome.user_message}"
        form = form_unchanged
    else:
        notifier.error("Error!", outcome.user_message)
        status = f"❌ {outcome.user_message}"
        form = form_unchanged

    yield (
        status,
        _steps_markdown(steps),
        ai_markdown(assistant, outcome.assistant_text or ""),
        chart_markdown(outcome.chart_url or ""),
    ) + tuple(form)


def demo_view_action(assistant_name: str, chart_service_url: str):
    """Fill the AI comment and chart panels with sample content, without a backend call."""
    chart_url = build_chart_url(DEMO_CHART_SPEC, chart_service_url)
    return ai_markdown(assistant_name, DEMO_AI_RESPONSE), chart_markdown(chart_url)
