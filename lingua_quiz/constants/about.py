"""Static metadata describing LinguaQuiz."""

APP_NAME = "LinguaQuiz"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "LinguaQuiz runs timed multiple-choice quizzes for language courses. "
    "Questions support Markdown and LaTeX, answers are reviewed with explanations after submission."
)

HELP_TEXT = (
    "Load a quiz from a .txt file. An optional header block sets the title, "
    "description, total time limit (seconds) and pass mark (percent):\n\n"
    "TITLE: Spanish Basics Quiz\n"
    "TIMELIMIT: 600\n"
    "PASS: 70\n"
    "---\n"
    "Q: How do you say 'Good morning' in Spanish?\n"
    "A: Buenas noches\nB: Buenas tardes\nC: Buenos días\nD: Hasta luego\n"
    "CORRECT: C\n"
    "EXPLANATION: 'Buenos días' is used from early morning until around noon.\n\n"
    "Questions need between 2 and 8 options (A-H) and a CORRECT line. "
    "Indent a line to continue the text above it, for example a dialogue line "
    "such as '  A: Hola' inside a question."
)
