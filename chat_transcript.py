# chat_transcript.py
"""
In-memory chat transcript shown in the chat page.

A user turn is appended as `sending` the moment it is submitted and resolved
to `sent` or `failed` once the webhook call returns. An assistant turn follows
every resolved user turn: the reply on success, an apology on failure.

Only one webhook call may run per turn: `claim_pending()` hands a `sending`
turn to exactly one caller.
"""

import threading
from typing import Dict, List, Optional

from webhook.models import ASSISTANT, FAILED, SENDING, USER, BackendOutcome, ChatTurn

STATUS_MARKERS = {SENDING: "⏳", FAILED: "⚠️ not delivered"}

# Module level: gr.State deep-copies its value, and locks cannot be copied.
_claim_lock = threading.Lock()


class ChatTranscript:
    def __init__(self, greeting: Optional[str] = None):
        self.turns: List[ChatTurn] = []
        if greeting:
            self.turns.append(ChatTurn(text=greeting, author=ASSISTANT))

    def submit(self, text: str) -> ChatTurn:
        turn = ChatTurn(text=text, author=USER, status=SENDING)
        self.turns.append(turn)
        return turn

    def pending(self) -> Optional[ChatTurn]:
        for turn in reversed(self.turns):
            if turn.is_user and turn.status == SENDING:
                return turn
        return None

    def claim_pending(self) -> Optional[ChatTurn]:
        """Return the `sending` turn if nobody is delivering it yet, and mark it in flight."""
        with _claim_lock:
            turn = self.pending()
            if turn is None or turn.in_flight:
                return None
            turn.in_flight = True
            return turn

    def resolve(self, turn: ChatTurn, outcome: BackendOutcome) -> None:
        turn.resolve(outcome.succeeded)
        turn.in_flight = False
        if outcome.assistant_text:
            self.turns.append(ChatTurn(text=outcome.assistant_text, author=ASSISTANT))

    def to_messages(self) -> List[Dict[str, str]]:
        """Gradio Chatbot `messages` format, with a delivery marker on user turns."""
        out: List[Dict[str, str]] = []
        for turn in self.turns:
            content = turn.text
            marker = STATUS_MARKERS.get(turn.status) if turn.is_user else None
            if marker:
                content = f"{content}\n\n_{marker}_"
            content += f"\n\n<sub>{turn.timestamp.strftime('%H:%M')}</sub>"
            out.append({"role": turn.author, "content": content})
        return out
