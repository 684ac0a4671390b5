"""
Tests for HTML rendering of questions and the post-submission review
"""

from conftest import make_definition
from lingua_quiz.core.markdown_math_renderer import MarkdownMathRenderer
from lingua_quiz.core.models import PublicQuestion
from lingua_quiz.core.question_renderer import render_question_with_options, render_review
from lingua_quiz.core.services.scoring import score_attempt


class TestQuestionView:
    """Question shown during an attempt."""

    def test_renders_prompt_and_lettered_options(self):
        question = PublicQuestion(id=1, prompt="Say *hello*", options=("Hola", "Adiós"))
        html = render_question_with_options(question)
        assert "<em>hello</em>" in html
        assert "<strong>A.</strong> Hola" in html
        assert "<strong>B.</strong> Adiós" in html
        assert "mathjax" in html.lower()

    def test_marks_selected_option(self):
        question = PublicQuestion(id=1, prompt="Pick", options=("x", "y", "z"))
        html = render_question_with_options(question, selected_index=2)
        assert '<div class="option selected"><strong>C.</strong>' in html
        assert html.count("option selected") == 1

    def test_reveals_nothing_about_the_answer(self):
        definition = make_definition(question_count=1)
        html = render_question_with_options(definition.public_questions()[0])
        assert "correct" not in html
        assert "wrong" not in html
        assert "Because of rule" not in html

    def test_font_size(self):
        question = PublicQuestion(id=1, prompt="Pick", options=("x", "y"))
        assert "font-size: 20pt" in render_question_with_options(question, font_size=20)


class TestReview:
    """Review shown after submission."""

    def test_verdicts_and_highlighting(self):
        definition = make_definition(question_count=3)
        result = score_attempt(definition, {0: 0, 1: 3}, 30)
        html = render_review(definition, result)

        assert "Question 1 <span class=\"verdict correct\">✓ Correct</span>" in html
        assert "Question 2 <span class=\"verdict wrong\">✗ Incorrect</span>" in html
        assert "Question 3 <span class=\"verdict wrong\">✗ Not answered</span>" in html
        assert '<div class="option wrong"><strong>D.</strong>' in html
        assert html.count('<div class="option correct">') == 3
        assert "<strong>Explanation:</strong> Because of rule 2." in html
        assert "<title>Sample quiz</title>" in html


class TestMarkdownRenderer:
    """Markdown and math conversion."""

    def test_raw_html_is_escaped(self):
        html = MarkdownMathRenderer().render_fragment("<script>alert(1)</script>")
        assert "<script>alert" not in html

    def test_empty_fragment_placeholder(self):
        assert "No content provided" in MarkdownMathRenderer().render_fragment("   ")

    def test_inline_has_no_paragraph(self):
        assert MarkdownMathRenderer().render_inline("**bold**") == "<strong>bold</strong>"

    def test_math_is_left_for_mathjax(self):
        assert "$x^2$" in MarkdownMathRenderer().render_inline("$x^2$")

    def test_full_document_wraps_fragment(self):
        html = MarkdownMathRenderer().render_full_document("# Title", title="Doc", font_size=18)
        assert "<h1>Title</h1>" in html
        assert "<title>Doc</title>" in html
        assert "font-size: 18pt" in html
