"""Renderer for terminal output."""

import click

from ...domain.models import Severity, ValidationResult
from ...markup import SegmentKind, tokenize
from ...ports.renderer import RendererPort

SEVERITY_COLORS = {
    Severity.WARNING: "yellow",
    Severity.DANGER: "red",
    Severity.SUCCESS: "green",
}


class TerminalRenderer(RendererPort):
    """Plain text with optional ANSI styling."""

    def __init__(self, color: bool = True) -> None:
        self.color = color

    def render(self, result: ValidationResult) -> str:
        title = self._style(result.title, fg=SEVERITY_COLORS[result.severity], bold=True)
        return f"{title}\n{self.render_message(result.message)}"

    def render_message(self, message: str) -> str:
        parts = []
        for seg in tokenize(message):
            if seg.kind is SegmentKind.BREAK:
                parts.append("\n")
            elif seg.kind is SegmentKind.STRONG:
                parts.append(self._style(seg.text, bold=True))
            else:
                parts.append(seg.text)
        return "".join(parts)

    def _style(self, text: str, **styles: object) -> str:
        if not self.color:
            return text
        return click.style(text, **styles)
