# User-facing texts, one per outcome category.

HABIT_SAVED = "Habit data saved successfully!"
HABIT_DB_FAILED = "Your habits reached the server but could not be saved to the database. Please try again."

PHYSIQUE_SAVED = "Your measurements were saved and processed successfully."
PHYSIQUE_CALCULATION_FAILED = (
    "Your measurements were received, but the calculation step failed. Please check the values and try again."
)
PHYSIQUE_FAILED = "Your measurements were received, but processing failed. Please try again."

GENERIC_FAILURE = "The server reported an unexpected error. Please try again."
TRANSPORT_FAILURE = "Could not reach the server. Please check your connection and try again."
TIMEOUT_FAILURE = "The server took too long to answer. Please try again."

CHAT_SENT = "Message sent!"
CHAT_APOLOGY = "Sorry, I can't answer right now. Could you try again a little later?"


def chat_received(assistant_name: str) -> str:
    return f"Got your message! {assistant_name} will reply shortly."


def chat_greeting(assistant_name: str) -> str:
    return (
        f"Hi! I'm {assistant_name}, your AI assistant. We can talk about your habits, "
        "your physical progress, or anything else. How are you today?"
    )
