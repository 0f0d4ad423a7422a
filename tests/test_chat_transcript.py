"""Tests for the chat turn lifecycle."""

import pytest

from chat_transcript import ChatTranscript
from webhook import messages
from webhook.models import ASSISTANT, FAILED, SENDING, SENT, USER, BackendOutcome


def _ok(text="Hi back!"):
    return BackendOutcome(succeeded=True, user_message=messages.CHAT_SENT, assistant_text=text)


def _failed():
    return BackendOutcome(
        succeeded=False, user_message=messages.CHAT_APOLOGY, assistant_text=messages.CHAT_APOLOGY
    )


def test_starts_with_greeting():
    transcript = ChatTranscript("Hello!")

    assert len(transcript.turns) == 1
    assert transcript.turns[0].author == ASSISTANT
    assert transcript.turns[0].status == SENT


def test_submit_is_sending_immediately():
    transcript = ChatTranscript()
    turn = transcript.submit("hey")

    assert turn.author == USER
    assert turn.status == SENDING
    assert transcript.pending() is turn


def test_success_marks_sent_and_appends_reply():
    transcript = ChatTranscript("Hello!")
    turn = transcript.submit("hey")

    transcript.resolve(turn, _ok())

    assert turn.status == SENT
    assert transcript.pending() is None
    assert [t.author for t in transcript.turns] == [ASSISTANT, USER, ASSISTANT]
    assert transcript.turns[-1].text == "Hi back!"


def test_failure_marks_failed_and_appends_apology():
    transcript = ChatTranscript()
    turn = transcript.submit("hey")

    transcript.resolve(turn, _failed())

    assert turn.status == FAILED
    assert transcript.turns[-1].author == ASSISTANT
    assert transcript.turns[-1].text == messages.CHAT_APOLOGY


@pytest.mark.parametrize("first, second", [(_ok, _failed), (_failed, _ok), (_ok, _ok)])
def test_resolved_turn_never_changes(first, second):
    transcript = ChatTranscript()
    turn = transcript.submit("hey")
    transcript.resolve(turn, first())
    resolved_status = turn.status

    with pytest.raises(ValueError):
        transcript.resolve(turn, second())
    assert turn.status == resolved_status


def test_turns_keep_submission_order():
    transcript = ChatTranscript()
    for text in ("one", "two", "three"):
        turn = transcript.submit(text)
        transcript.resolve(turn, _ok(f"re: {text}"))

    assert [t.text for t in transcript.turns] == ["one", "re: one", "two", "re: two", "three", "re: three"]


def test_messages_show_delivery_markers():
    transcript = ChatTranscript("Hello!")
    transcript.submit("pending one")
    rendered = transcript.to_messages()

    assert [m["role"] for m in rendered] == ["assistant", "user"]
    assert rendered[1]["content"].startswith("pending one")
    assert "⏳" in rendered[1]["content"]

    transcript.resolve(transcript.pending(), _failed())
    rendered = transcript.to_messages()

    assert "not delivered" in rendered[1]["content"]
    assert "⏳" not in rendered[1]["content"]


def test_pending_turn_is_claimed_once():
    transcript = ChatTranscript()
    turn = transcript.submit("hey")

    assert transcript.claim_pending() is turn
    assert transcript.claim_pending() is None
    assert transcript.pending() is turn

    transcript.resolve(turn, _ok())

    assert turn.in_flight is False
    assert transcript.claim_pending() is None
