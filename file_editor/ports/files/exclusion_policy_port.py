"""
Exclusion policy port shared by the traversal use cases.
"""

from abc import ABC, abstractmethod


class ExclusionPolicyPort(ABC):
    """Decides which directories a traversal never enters or reports."""

    @abstractmethod
    def is_excluded(self, name: str) -> bool:
        """
        Check a directory entry name against the policy.

        Args:
            name: Base name of the directory entry

        Returns:
            True if the entry must be skipped
        """
        pass
