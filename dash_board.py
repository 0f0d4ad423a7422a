DASHBOARD_TXT = """
## 📊 Dashboard – Personal Development Tracker

Track your habits, measure your physical progress, and chat with your AI assistant.

This UI is a **thin front-end**: it collects what you enter, sends it to an
automation workflow over a single webhook, and shows what comes back. Validation,
AI replies, charts and storage all happen in the workflow.

---

### 🧭 What this app does

- **Daily habit tracking**
  Toggle the four daily habits (study, project, sport, social), add an optional note, and save.

- **Physical measurements**
  Enter weight, height, waist, neck, hip, shoulder and chest measurements.
  BMI is calculated live on this page; the workflow calculates body fat and lean mass,
  writes an AI comment and draws a weekly progress chart.

- **Assistant chat**
  Talk to the assistant about your habits, your progress, or anything else.

---

### 🧑‍💻 How to use the UI

#### 1. Habits page

- Tick each habit you completed today (1 = done, 0 = not done).
- Optionally add a note about the day.
- Click **“Save habits”**:
  - The page sends `-msg study,project,sport,social,note` to the workflow.
  - On success the form is cleared; if the database insert failed you get a warning and the form is kept.

> Avoid commas in notes: the workflow splits the message on commas.

#### 2. Physique page

- Fill in your measurements in kg / cm. Empty or invalid fields count as 0.
- The BMI box updates as you type.
- Click **“Save measurements”**:
  - The page sends `-msr weight,height,waist,neck,hip,shoulder,chest,note`.
  - While the workflow runs, the processing steps are listed.
  - When it finishes you see the assistant's comment and the progress chart.
  - If the calculation step failed you get a specific warning.
- **“Show demo view”** fills in a sample comment and chart without calling the workflow.

#### 3. Chat page

- Type a message and press **Send**.
- Your message appears immediately with a ⏳ marker while it is being delivered.
- When the reply arrives it is added below; if delivery failed your message is marked
  **not delivered** and the assistant apologises. Just send it again.
- **“New conversation”** clears the transcript (nothing is stored locally).

---

### 🧱 Application structure (high level)

- **`app.py`**
  - Gradio UI layout and event wiring.
  - Builds the webhook client and service once and passes them to the callbacks.

- **`logic/` package**
  - `logic_habit.py`, `logic_physique.py`, `logic_chat.py`: page callbacks.
  - `notifier.py`: toast notifications.

- **`webhook/` package**
  - `encoder.py`: builds the `message` / `navigate` / `type` query parameters.
  - `base.py`: HTTP client (one GET per action, no retries).
  - `interpreter.py`: turns status codes and bodies into a result for the page.
  - `service.py`: ties the three together.

- **`webhook_config.py`**
  - Reads `WEBHOOK_URL`, `WEBHOOK_TEST_URL`, `USE_TEST_WEBHOOK` and the timeouts.

---

### ⚙️ Backend status codes

| Page | Status | Meaning |
|---|---|---|
| Habits | 200 | saved |
| Habits | 400 | workflow ran, database insert failed |
| Physique | 211 | saved and processed |
| Physique | 411 | workflow ran, calculation failed |
| Physique | 400 | workflow ran, processing failed |
| Chat | 400 | assistant could not answer |
"""
