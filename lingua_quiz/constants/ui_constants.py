"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "LinguaQuiz"
DEFAULT_FONT_SIZE: int = 14

INTRO_START_BUTTON: str = "Start Quiz"
INTRO_IMPORT_BUTTON: str = "Load Quiz File"
INTRO_ABOUT_BUTTON: str = "About"
INTRO_HELP_BUTTON: str = "Help"
INTRO_SUMMARY_TEMPLATE: str = (
    "{count} questions · {minutes} minute(s) · pass mark {threshold}%"
)
INTRO_RULES: str = (
    "• Read each question carefully\n"
    "• Select the best answer from the options provided\n"
    "• You can move between questions with Previous/Next or the numbered buttons\n"
    "• Submit your quiz when you're ready or when time runs out\n"
    "• You need {threshold}% or higher to pass"
)

QUESTION_POSITION_TEMPLATE: str = "Question {number} of {count}"
PREVIOUS_BUTTON: str = "Previous"
NEXT_BUTTON: str = "Next"
SUBMIT_BUTTON: str = "Submit Quiz"

RESULT_PASSED_HEADLINE: str = "Congratulations! You passed the quiz."
RESULT_FAILED_HEADLINE: str = "Keep practicing!"
RESULT_FAILED_HINT: str = "You need {threshold}% or higher to pass. Review the material and try again."
RESULT_SUMMARY_TEMPLATE: str = "{correct} of {count} correct · time taken {time_taken}"
RESULT_TIMEOUT_NOTE: str = "Time ran out, so the quiz was submitted automatically."
RETAKE_BUTTON: str = "Retake Quiz"
BACK_BUTTON: str = "Back to Overview"

IMPORT_DIALOG_TITLE: str = "Select quiz file"
IMPORT_FILE_FILTER: str = "Quiz files (*.txt);;All files (*.*)"
NO_QUIZ_LOADED_MESSAGE: str = "Please load a quiz file first."
