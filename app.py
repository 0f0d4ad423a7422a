import argparse
import logging
import os
import sys

import gradio as gr
from dotenv import load_dotenv

from chat_transcript import ChatTranscript
from dash_board import DASHBOARD_TXT
from logging_config import setup_logging
from logic.logic_chat import chat_resolve_action, chat_submit_action, start_new_chat_action
from logic.logic_habit import habit_preview, habit_submit_action
from logic.logic_physique import (
    bmi_display,
    demo_view_action,
    physique_preview,
    physique_submit_action,
)
from logic.notifier import GradioNotifier, Notifier
from webhook import messages
from webhook.service import TrackerService, build_service
from webhook_config import load_webhook_config

logger = logging.getLogger(__name__)

PAGES = ("dashboard", "habits", "physique", "chat")


def switch_page(page_name: str):
    """Return visibility updates for all main pages based on the active page name."""
    return tuple(gr.update(visible=(page_name == p)) for p in PAGES)


def build_demo(service: TrackerService, notifier: Notifier) -> gr.Blocks:
    assistant = service.config.assistant_name
    greeting = messages.chat_greeting(assistant)

    with gr.Blocks(title="Personal Development Tracker") as demo:
        chat_transcript_state = gr.State(ChatTranscript(greeting))

        gr.Markdown("# Personal Development Tracker")
        gr.Markdown(
            f"Track your habits, measure your physical progress, and chat with {assistant}, your AI assistant."
        )

        with gr.Row():
            # Left navigation
            with gr.Column(scale=1, min_width=180):
                gr.Markdown("### Navigation")
                btn_dashboard = gr.Button("📊 Dashboard")
                btn_habits = gr.Button("✅ Habit tracking")
                btn_physique = gr.Button("📏 Physical measurements")
                btn_chat = gr.Button(f"💬 {assistant} chat")

            # Right content
            with gr.Column(scale=4):
                # Dashboard
                with gr.Column(visible=True) as page_dashboard:
                    gr.Markdown(DASHBOARD_TXT)

                # Habits
                with gr.Column(visible=False) as page_habits:
                    gr.Markdown("## ✅ Daily habit tracking")
                    with gr.Row():
                        habit_study = gr.Checkbox(label="📚 Study")
                        habit_project = gr.Checkbox(label="💻 Project")
                        habit_sport = gr.Checkbox(label="🏋️ Sport")
                        habit_social = gr.Checkbox(label="👥 Social")
                    habit_note = gr.Textbox(
                        label="Note (optional)",
                        placeholder="Add a note about today...",
                        lines=3,
                    )
                    habit_save_btn = gr.Button("Save habits", variant="primary")
                    habit_status = gr.Markdown("")
                    habit_format = gr.Markdown(habit_preview(False, False, False, False, ""))

                # Physique
                with gr.Column(visible=False) as page_physique:
                    gr.Markdown("## 📏 Physical measurement tracking")
                    bmi_box = gr.Markdown(bmi_display(0, 0))
                    with gr.Row():
                        weight = gr.Number(label="Weight (kg)", value=0, step=0.1)
                        height = gr.Number(label="Height (cm)", value=0, step=0.1)
                        waist = gr.Number(label="Waist (cm)", value=0, step=0.1)
                        neck = gr.Number(label="Neck (cm)", value=0, step=0.1)
                    with gr.Row():
                        hip = gr.Number(label="Hip (cm)", value=0, step=0.1)
                        shoulder = gr.Number(label="Shoulder (cm)", value=0, step=0.1)
                        chest = gr.Number(label="Chest (cm)", value=0, step=0.1)
                    physique_note = gr.Textbox(
                        label="Note (optional)",
                        placeholder="Add a note about these measurements...",
                        lines=3,
                    )
                    with gr.Row():
                        physique_save_btn = gr.Button("Save measurements", variant="primary")
                        physique_demo_btn = gr.Button("🧪 Show demo view", variant="secondary")
                    physique_status = gr.Markdown("")
                    physique_steps = gr.Markdown("")
                    physique_ai = gr.Markdown("")
                    physique_chart = gr.Markdown("")
                    physique_format = gr.Markdown(physique_preview(0, 0, 0, 0, 0, 0, 0, ""))

                # Chat
                with gr.Column(visible=False) as page_chat:
                    gr.Markdown(f"## 💬 {assistant} chat")
                    chatbot = gr.Chatbot(
                        value=ChatTranscript(greeting).to_messages(),
                        label=f"{assistant} · AI assistant",
                        type="messages",
                    )
                    chat_input = gr.Textbox(
                        label="Your message",
                        placeholder=f"Write a message to {assistant}...",
                        lines=2,
                    )
                    chat_status = gr.Markdown("")
                    with gr.Row():
                        chat_send_btn = gr.Button("Send", variant="primary")
                        new_chat_btn = gr.Button("New conversation", variant="secondary")
                    gr.Markdown(
                        f"**{assistant} can:** analyse your habit and physical data, "
                        "produce weekly reports, and chat about anything."
                    )

        # ====== Event bindings ======

        pages = [page_dashboard, page_habits, page_physique, page_chat]
        btn_dashboard.click(lambda: switch_page("dashboard"), inputs=None, outputs=pages)
        btn_habits.click(lambda: switch_page("habits"), inputs=None, outputs=pages)
        btn_physique.click(lambda: switch_page("physique"), inputs=None, outputs=pages)
        btn_chat.click(lambda: switch_page("chat"), inputs=None, outputs=pages)

        # Habits
        habit_inputs = [habit_study, habit_project, habit_sport, habit_social, habit_note]
        for component in habit_inputs:
            component.change(habit_preview, inputs=habit_inputs, outputs=[habit_format])

        habit_save_btn.click(
            lambda: gr.update(interactive=False, value="Sending..."),
            inputs=None,
            outputs=[habit_save_btn],
        ).then(
            lambda *values: habit_submit_action(service, notifier, *values),
            inputs=habit_inputs,
            outputs=[habit_status] + habit_inputs,
        ).then(
            lambda: gr.update(interactive=True, value="Save habits"),
            inputs=None,
            outputs=[habit_save_btn],
        )

        # Physique
        measurement_inputs = [weight, height, waist, neck, hip, shoulder, chest, physique_note]
        for component in (weight, height):
            component.change(bmi_display, inputs=[weight, height], outputs=[bmi_box])
        for component in measurement_inputs:
            component.change(physique_preview, inputs=measurement_inputs, outputs=[physique_format])

        def _physique_submit(*values):
            yield from physique_submit_action(service, notifier, *values)

        physique_save_btn.click(
            lambda: (gr.update(interactive=False, value="Sending..."), gr.update(interactive=False)),
            inputs=None,
            outputs=[physique_save_btn, physique_demo_btn],
        ).then(
            _physique_submit,
            inputs=measurement_inputs,
            outputs=[physique_status, physique_steps, physique_ai, physique_chart] + measurement_inputs,
        ).then(
            lambda: (gr.update(interactive=True, value="Save measurements"), gr.update(interactive=True)),
            inputs=None,
            outputs=[physique_save_btn, physique_demo_btn],
        )

        physique_demo_btn.click(
            lambda: demo_view_action(assistant, service.config.chart_service_url),
            inputs=None,
            outputs=[physique_ai, physique_chart],
        )

        # Chat: optimistic append, then the round trip
        chat_outputs = [chat_transcript_state, chatbot, chat_status, chat_input, chat_send_btn]
        for trigger in (chat_send_btn.click, chat_input.submit):
            trigger(
                chat_submit_action,
                inputs=[chat_input, chat_transcript_state],
                outputs=[chat_transcript_state, chatbot, chat_input, chat_send_btn],
            ).then(
                lambda transcript: chat_resolve_action(service, notifier, transcript),
                inputs=[chat_transcript_state],
                outputs=chat_outputs,
            )

        new_chat_btn.click(
            lambda: start_new_chat_action(greeting),
            inputs=None,
            outputs=[chat_transcript_state, chatbot, chat_status],
        )

    return demo


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Habit / physique / chat tracker UI")
    parser.add_argument("--test-webhook", action="store_true", help="use WEBHOOK_TEST_URL")
    parser.add_argument("--host", type=str, default=None)
    parser.add_argument("--port", type=int, default=None)
    args = parser.parse_args(argv)

    load_dotenv()
    if args.test_webhook:
        os.environ["USE_TEST_WEBHOOK"] = "true"

    # A missing webhook URL stops the app here.
    config = load_webhook_config()
    setup_logging(config.log_level)
    logger.info(
        f"Using {'test' if config.use_test else 'production'} webhook: {config.base_url}"
    )

    service = build_service(config)
    try:
        demo = build_demo(service, GradioNotifier())
        demo.launch(server_name=args.host, server_port=args.port)
    finally:
        service.close()
        logger.info("Webhook session closed")


if __name__ == "__main__":
    main(sys.argv[1:])
