"""Renderer producing an HTML fragment."""

from html import escape

from ...domain.models import ValidationResult
from ...markup import SegmentKind, tokenize
from ...ports.renderer import RendererPort

_TAGS = {
    SegmentKind.STRONG: "strong",
    SegmentKind.CODE: "code",
}


class HtmlRenderer(RendererPort):
    """Alert-style HTML block.

    Every piece of text is escaped before markup is mapped to tags, so
    document values can never inject HTML.
    """

    def render(self, result: ValidationResult) -> str:
        severity = result.severity.value
        return (
            f'<div class="alert alert-{severity}" role="alert">'
            f"<h4>{escape(result.title)}</h4>"
            f"<p>{self.render_message(result.message)}</p>"
            "</div>"
        )

    def render_message(self, message: str) -> str:
        parts = []
        for seg in tokenize(message):
            if seg.kind is SegmentKind.BREAK:
                parts.append("<br>")
            elif seg.kind in _TAGS:
                tag = _TAGS[seg.kind]
                parts.append(f"<{tag}>{escape(seg.text)}</{tag}>")
            else:
                parts.append(escape(seg.text))
        return "".join(parts)
