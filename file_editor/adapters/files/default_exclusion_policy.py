"""
Fixed exclusion policy skipping version-control and dependency-cache directories.
"""

from typing import Iterable, Optional

from typing_extensions import override

from file_editor.ports.files.exclusion_policy_port import ExclusionPolicyPort

DEFAULT_EXCLUDED_NAMES = frozenset({".git", "node_modules"})


class DefaultExclusionPolicy(ExclusionPolicyPort):
    """Exclude entries whose name is exactly one of the configured names."""

    def __init__(self, names: Optional[Iterable[str]] = None):
        self._names = frozenset(names) if names is not None else DEFAULT_EXCLUDED_NAMES

    @property
    def names(self) -> frozenset[str]:
        return self._names

    @override
    def is_excluded(self, name: str) -> bool:
        return name in self._names
