# coding=utf-8
"""Shared data structures for animation utilities."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from harmonytk.node_utils._node_utils import NodeType


class AttrStatus(Enum):
    """What happened to a single attribute."""

    SUCCEEDED = "succeeded"
    SKIPPED_LOCKED = "skipped_locked"  # host refused the unlink
    NOT_APPLICABLE = "not_applicable"  # host refused the write or the attribute is missing


@dataclass
class AttrResult:
    """The outcome of resetting one attribute."""

    attr: str
    status: AttrStatus
    value: Optional[float] = None
    column: str = ""  # the removed column, if any


@dataclass
class NodeReport:
    """Every attribute touched on one node."""

    node: str
    node_type: NodeType
    results: List[AttrResult] = field(default_factory=list)

    def get(self, attr: str) -> Optional[AttrResult]:
        """The last result recorded for an attribute."""
        for result in reversed(self.results):
            if result.attr == attr:
                return result
        return None


@dataclass
class RemovalReport:
    """The outcome of a remove keyframes operation."""

    frame: int
    nodes: List[NodeReport] = field(default_factory=list)
    description: str = ""

    def _by_status(self, status: AttrStatus) -> List[Tuple[str, str]]:
        return [
            (n.node, r.attr) for n in self.nodes for r in n.results if r.status is status
        ]

    @property
    def succeeded(self) -> List[Tuple[str, str]]:
        """(node, attr) pairs that were reset."""
        return self._by_status(AttrStatus.SUCCEEDED)

    @property
    def skipped(self) -> List[Tuple[str, str]]:
        """(node, attr) pairs left linked because the host refused the unlink."""
        return self._by_status(AttrStatus.SKIPPED_LOCKED)

    @property
    def removed_columns(self) -> List[str]:
        return [r.column for n in self.nodes for r in n.results if r.column]

    def summary(self) -> Dict[str, int]:
        return {
            "nodes": len(self.nodes),
            "attrs_reset": len(self.succeeded),
            "attrs_skipped": len(self.skipped),
            "columns_removed": len(self.removed_columns),
        }
