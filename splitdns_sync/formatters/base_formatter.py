"""
Base output formatter - Abstract base class for formatters.
"""

from abc import ABC, abstractmethod
from ..services.sync_service import SyncPreview


class OutputFormatter(ABC):
    """
    Abstract base class for output formatters.

    Design Pattern: Strategy Pattern
    Different formatters for different output styles (list, table, JSON).
    """

    @abstractmethod
    def format(self, preview: SyncPreview) -> str:
        """
        Format a dry-run preview for output.

        Args:
            preview: Resolved table plus the current remote table

        Returns:
            Formatted string for output
        """
        pass
