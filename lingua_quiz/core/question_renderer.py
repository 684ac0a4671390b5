"""HTML views of a question in progress and of the post-submission review."""

from __future__ import annotations

from html import escape

from lingua_quiz.core.markdown_math_renderer import renderer
from lingua_quiz.core.models import PublicQuestion, QuizDefinition, QuizResult, option_letter

_OPTION_CSS = """
      .option { padding: 0.3rem 0.6rem; border-radius: 4px; margin: 0.2rem 0; }
      .option.selected { border: 2px solid #0078D4; }
"""

_REVIEW_CSS = _OPTION_CSS + """
      .review-item { margin-bottom: 1.5rem; }
      .option.correct { background: #dff6dd; color: #107C10; }
      .option.wrong { background: #fde7e9; color: #D13438; }
      .verdict.correct { color: #107C10; }
      .verdict.wrong { color: #D13438; }
      .explanation { font-style: italic; }
"""


def render_question_with_options(
    question: PublicQuestion,
    selected_index: int | None = None,
    font_size: int = 14,
) -> str:
    """Render a question in progress as a full HTML document.

    Takes the public view of the question so no answer key can reach the page.

    Args:
        question: Question without its answer key
        selected_index: Option the learner currently has selected, if any
        font_size: Font size in points

    Returns:
        HTML string ready for display in QWebEngineView
    """
    parts = [renderer.render_fragment(question.prompt)]
    for idx, option in enumerate(question.options):
        css_class = "option selected" if idx == selected_index else "option"
        parts.append(
            f'<div class="{css_class}"><strong>{option_letter(idx)}.</strong> '
            f"{renderer.render_inline(option) or '(empty)'}</div>"
        )
    return renderer.wrap_with_mathjax("\n".join(parts), font_size=font_size, extra_css=_OPTION_CSS)


def render_review(definition: QuizDefinition, result: QuizResult, font_size: int = 14) -> str:
    """Render the per-question review shown after submission.

    Each question lists its options with the correct one highlighted, the
    learner's wrong choice marked, and the explanation below.
    """
    parts: list[str] = []
    for number, (question, outcome) in enumerate(zip(definition.questions, result.per_question), start=1):
        if outcome.is_correct:
            verdict = '<span class="verdict correct">✓ Correct</span>'
        elif outcome.is_answered:
            verdict = '<span class="verdict wrong">✗ Incorrect</span>'
        else:
            verdict = '<span class="verdict wrong">✗ Not answered</span>'

        item = [
            '<div class="review-item">',
            f"<h3>Question {number} {verdict}</h3>",
            renderer.render_fragment(question.prompt),
        ]
        for idx, option in enumerate(question.options):
            if idx == outcome.correct_option_index:
                css_class = "option correct"
            elif idx == outcome.selected_option_index:
                css_class = "option wrong"
            else:
                css_class = "option"
            item.append(
                f'<div class="{css_class}"><strong>{option_letter(idx)}.</strong> '
                f"{renderer.render_inline(option)}</div>"
            )
        if question.explanation:
            item.append(
                f'<p class="explanation"><strong>Explanation:</strong> '
                f"{renderer.render_inline(question.explanation)}</p>"
            )
        item.append("</div>")
        parts.append("\n".join(item))

    return renderer.wrap_with_mathjax(
        "\n".join(parts),
        title=escape(definition.title),
        font_size=font_size,
        extra_css=_REVIEW_CSS,
    )
