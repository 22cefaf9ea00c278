"""Renderer port - interface for displaying validation results."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..domain.models import ValidationResult


class RendererPort(ABC):
    """Interface for turning a result into display text."""

    @abstractmethod
    def render(self, result: "ValidationResult") -> str:
        """Render title and message.

        Implementations must escape message content for their medium.
        """
        pass
