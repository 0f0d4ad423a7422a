"""
Encode form records into the automation backend's query-string commands.

The backend splits the `message` parameter on commas by position:

    habit:    -msg study,project,sport,social,note
    physique: -msr weight,height,waist,neck,hip,shoulder,chest,note
    chat:     -chat free text

`navigate` picks the workflow branch (0 habit, 1 chat, 2 physique) and `type`
names it for habit and physique. Notes are not escaped, so a comma inside a
note shifts the backend's field parsing.
"""

import logging
from typing import Any, Dict

from webhook.models import HABIT_KEYS, MEASUREMENT_KEYS, HabitRecord, MeasurementRecord

logger = logging.getLogger(__name__)

HABIT_PREFIX = "-msg"
PHYSIQUE_PREFIX = "-msr"
CHAT_PREFIX = "-chat"

NAVIGATE_HABIT = 0
NAVIGATE_CHAT = 1
NAVIGATE_PHYSIQUE = 2

TYPE_HABIT = "habit"
TYPE_PHYSIQUE = "physique"


def format_number(value: float) -> str:
    """Render 75.0 as '75', 75.5 as '75.5' and 0.00001 as '0.00001' (never exponent form)."""
    if float(value).is_integer():
        return str(int(value))
    text = f"{float(value):.10f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def _warn_on_comma(kind: str, note: str) -> None:
    if "," in note:
        logger.warning(
            f"{kind} note contains a comma; the backend will see extra fields: {note!r}"
        )


def habit_command(record: HabitRecord) -> str:
    _warn_on_comma("Habit", record.note)
    fields = [str(getattr(record, key)) for key in HABIT_KEYS]
    fields.append(record.note)
    return f"{HABIT_PREFIX} " + ",".join(fields)


def physique_command(record: MeasurementRecord) -> str:
    _warn_on_comma("Physique", record.note)
    fields = [format_number(getattr(record, key)) for key in MEASUREMENT_KEYS]
    fields.append(record.note)
    return f"{PHYSIQUE_PREFIX} " + ",".join(fields)


def chat_command(text: str) -> str:
    return f"{CHAT_PREFIX} {text}"


def encode_habit(record: HabitRecord) -> Dict[str, Any]:
    return {
        "message": habit_command(record),
        "navigate": NAVIGATE_HABIT,
        "type": TYPE_HABIT,
    }


def encode_physique(record: MeasurementRecord) -> Dict[str, Any]:
    return {
        "message": physique_command(record),
        "navigate": NAVIGATE_PHYSIQUE,
        "type": TYPE_PHYSIQUE,
    }


def encode_chat(text: str) -> Dict[str, Any]:
    # The chat branch is selected by `navigate` alone.
    return {
        "message": chat_command(text),
        "navigate": NAVIGATE_CHAT,
    }


# ---------------- BMI (display only, never sent) ----------------


def bmi(weight: float, height_cm: float) -> float:
    if weight <= 0 or height_cm <= 0:
        return 0.0
    height_m = height_cm / 100
    return weight / (height_m * height_m)


def bmi_category(value: float) -> str:
    if value <= 0:
        return ""
    if value < 18.5:
        return "Underweight"
    if value < 25:
        return "Normal"
    if value < 30:
        return "Overweight"
    return "Obese"
