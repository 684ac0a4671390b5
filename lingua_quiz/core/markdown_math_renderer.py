"""Markdown + LaTeX rendering helpers for question and review views.

The renderer converts quiz markup into HTML and relies on MathJax at
display-time inside the Qt web view. Raw HTML in quiz files is escaped, so a
quiz file cannot inject markup into the view.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from markdown_it import MarkdownIt

_MATHJAX_SCRIPT = (
    "https://cdn.jsdelivr.net/npm/mathjax@3/es5/tex-mml-chtml.js"
)


@dataclass(slots=True)
class MarkdownMathRenderer:
    """Converts markdown-with-math into HTML fragments or full documents."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = (
            MarkdownIt("commonmark", {"html": self.enable_html})
            .enable("table")
            .enable("strikethrough")
        )

    def render_fragment(self, markdown_text: str) -> str:
        """Render a markdown string into an HTML fragment."""

        sanitized = markdown_text.strip() or ""
        if not sanitized:
            return "<p><em>No content provided.</em></p>"
        return self._markdown.render(sanitized)

    def render_inline(self, markdown_text: str) -> str:
        """Render a single line of markdown without the wrapping paragraph."""

        return self._markdown.renderInline(markdown_text.strip())

    def wrap_with_mathjax(
        self,
        body_html: str,
        title: str = "LinguaQuiz",
        font_size: int = 14,
        extra_css: str = "",
    ) -> str:
        """Wrap a fragment inside a minimal HTML document that loads MathJax."""

        return f"""<!doctype html>
<html lang=\"en\">
  <head>
    <meta charset=\"utf-8\" />
    <title>{title}</title>
    <meta name=\"viewport\" content=\"width=device-width, initial-scale=1\" />
    <style>
      body {{ font-family: 'Segoe UI', system-ui, sans-serif; margin: 0; padding: 1rem; background: transparent; }}
      .quiz-html {{ font-size: {font_size}pt; line-height: 1.5; }}
      {extra_css}
    </style>
    <script>
      window.MathJax = {{ tex: {{ inlineMath: [['$','$']], displayMath: [['$$','$$']] }}, svg: {{ fontCache: 'global' }} }};
    </script>
    <script defer src=\"{_MATHJAX_SCRIPT}\"></script>
  </head>
  <body>
    <div class=\"quiz-html\">{body_html}</div>
  </body>
</html>"""

    def render_full_document(
        self, markdown_text: str, title: str = "LinguaQuiz", font_size: int = 14
    ) -> str:
        """Convenience wrapper to render markdown and embed MathJax."""

        fragment = self.render_fragment(markdown_text)
        return self.wrap_with_mathjax(fragment, title=title, font_size=font_size)


# Shared instance; the Qt UI renders from a single thread.
renderer = MarkdownMathRenderer()
