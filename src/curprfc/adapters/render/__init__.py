"""Result renderers."""

from ...config import OutputFormat
from ...ports.renderer import RendererPort
from ..report.yaml_report import YamlRenderer
from .html import HtmlRenderer
from .terminal import TerminalRenderer

__all__ = ["HtmlRenderer", "TerminalRenderer", "YamlRenderer", "create_renderer"]


def create_renderer(fmt: OutputFormat, color: bool = True) -> RendererPort:
    """Create renderer for the requested output format."""
    if fmt == OutputFormat.TEXT:
        return TerminalRenderer(color=color)
    elif fmt == OutputFormat.HTML:
        return HtmlRenderer()
    elif fmt == OutputFormat.YAML:
        return YamlRenderer()
    else:
        raise ValueError(f"Unknown output format: {fmt}")
