import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

# Delivery states of a user-authored chat turn
SENDING = "sending"
SENT = "sent"
FAILED = "failed"

USER = "user"
ASSISTANT = "assistant"

HABIT_KEYS = ("study", "project", "sport", "social")
MEASUREMENT_KEYS = ("weight", "height", "waist", "neck", "hip", "shoulder", "chest")


def coerce_flag(value: Any) -> int:
    """Return 0 or 1 for a habit toggle; anything else is a caller bug."""
    if isinstance(value, bool):
        return int(value)
    if value in (0, 1):
        return int(value)
    raise ValueError(f"Habit flag must be 0 or 1, got {value!r}")


def coerce_number(value: Any) -> float:
    """Parse a measurement field, falling back to 0 when it is not a usable number."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(str(value).strip().replace(",", "."))
    except ValueError:
        return 0.0
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


@dataclass
class HabitRecord:
    study: int = 0
    project: int = 0
    sport: int = 0
    social: int = 0
    note: str = ""

    def __post_init__(self):
        for key in HABIT_KEYS:
            setattr(self, key, coerce_flag(getattr(self, key)))
        self.note = self.note or ""


@dataclass
class MeasurementRecord:
    weight: float = 0.0
    height: float = 0.0
    waist: float = 0.0
    neck: float = 0.0
    hip: float = 0.0
    shoulder: float = 0.0
    chest: float = 0.0
    note: str = ""

    def __post_init__(self):
        for key in MEASUREMENT_KEYS:
            setattr(self, key, coerce_number(getattr(self, key)))
        self.note = self.note or ""


@dataclass
class ChatTurn:
    text: str
    author: str
    timestamp: datetime = field(default_factory=datetime.now)
    status: str = SENT
    in_flight: bool = False

    @property
    def is_user(self) -> bool:
        return self.author == USER

    def resolve(self, succeeded: bool) -> None:
        """Move a `sending` turn to `sent` or `failed`. Resolved turns stay resolved."""
        if self.status != SENDING:
            raise ValueError(f"Chat turn already resolved as {self.status!r}")
        self.status = SENT if succeeded else FAILED


@dataclass
class WebhookResponse:
    """Raw result of one HTTP round trip."""

    status_code: int
    body: Any = None
    elapsed: float = 0.0


@dataclass
class BackendOutcome:
    """Normalized result of one round trip, consumed by the view layer."""

    succeeded: bool
    user_message: str
    assistant_text: Optional[str] = None
    chart_url: Optional[str] = None
    db_insert_succeeded: Optional[bool] = None
    calculation_failed: Optional[bool] = None
    status_code: Optional[int] = None

    @property
    def fully_succeeded(self) -> bool:
        """True when the workflow ran and nothing downstream reported a failure."""
        return (
            self.succeeded
            and self.db_insert_succeeded is not False
            and not self.calculation_failed
        )
