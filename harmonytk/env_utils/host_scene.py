# !/usr/bin/python
# coding=utf-8
"""The host scene boundary.

Everything harmonytk does to a scene goes through :class:`HostScene`. The
methods mirror the calls a Harmony script makes on the ``node``, ``column``,
``func``, ``selection``, ``frame`` and ``scene`` interfaces, with the
ambient globals (selection, current frame, undo context) made explicit.
"""
from dataclasses import dataclass
from typing import List, Protocol, runtime_checkable


@dataclass(frozen=True)
class AttrDescriptor:
    """An attribute as listed by the host: its keyword and value type name."""

    keyword: str
    type_name: str


@runtime_checkable
class HostScene(Protocol):
    """Operations a host scene graph must provide."""

    def selected_nodes(self) -> List[str]:
        """The current user selection, in selection order."""
        ...

    def current_frame(self) -> int:
        """The frame the timeline is currently on."""
        ...

    def node_type(self, node: str) -> str:
        """The host's type tag for the node (e.g. ``"PEG"``, ``"READ"``)."""
        ...

    def sub_nodes(self, node: str) -> List[str]:
        """Direct children of a group node. Empty for any other node."""
        ...

    def attr_list(
        self, node: str, frame: int, parent: str = ""
    ) -> List[AttrDescriptor]:
        """Attributes directly under ``parent`` (the node's root when empty)."""
        ...

    def linked_column(self, node: str, attr: str) -> str:
        """Name of the column driving the attribute, or ``""`` when unlinked."""
        ...

    def number_of_points(self, column: str) -> int:
        """Number of keyframes on a column."""
        ...

    def get_attr_value(self, node: str, frame: int, attr: str) -> float:
        """The attribute's value at a frame."""
        ...

    def unlink_attr(self, node: str, attr: str) -> bool:
        """Detach the attribute from its column. False when the host refuses."""
        ...

    def remove_unlinked_column(self, column: str) -> bool:
        """Delete a column no attribute links to. False when still in use."""
        ...

    def set_attr_value(self, node: str, attr: str, frame: int, value: float) -> bool:
        """Write an attribute value. False when the attribute can't be set."""
        ...

    def begin_undo(self, name: str) -> None:
        """Open an undo accumulation."""
        ...

    def end_undo(self) -> None:
        """Close the most recently opened undo accumulation."""
        ...


# -----------------------------------------------------------------------------

if __name__ == "__main__":
    pass
