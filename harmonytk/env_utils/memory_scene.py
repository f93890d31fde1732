# !/usr/bin/python
# coding=utf-8
"""An in-memory host scene.

``MemoryScene`` implements :class:`HostScene` without a running Harmony. It
holds a node tree, attribute trees and columns, and records undo steps as
snapshots. Use it to run harmonytk operations offline or to build test scenes::

    scene = MemoryScene()
    peg = scene.add_node("Top/Peg", "PEG")
    scene.add_attr(peg, "scale.x", value=1.0)
    scene.add_column("scale_x", [(1, 2.0), (10, 5.0)])
    scene.link_attr(peg, "scale.x", "scale_x")
    scene.get_attr_value(peg, 5, "scale.x")  # 3.0
"""
import copy
from bisect import bisect_left
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

import pythontk as ptk

from harmonytk.env_utils.host_scene import AttrDescriptor


class MemorySceneError(KeyError):
    """Raised for handles the scene doesn't know (nodes, columns)."""


@dataclass
class MemoryColumn:
    """A function column: keyframes evaluated by linear interpolation."""

    name: str
    points: List[Tuple[float, float]] = field(default_factory=list)

    def __post_init__(self):
        self.points = sorted((float(f), float(v)) for f, v in self.points)

    def value_at(self, frame: float) -> float:
        """The column's value at a frame. Held flat outside its keyframes, 0.0 when empty."""
        if not self.points:
            return 0.0
        frames = [f for f, _ in self.points]
        if frame <= frames[0]:
            return self.points[0][1]
        if frame >= frames[-1]:
            return self.points[-1][1]
        i = bisect_left(frames, frame)
        (f0, v0), (f1, v1) = self.points[i - 1], self.points[i]
        if f1 == frame:
            return v1
        return v0 + (v1 - v0) * (frame - f0) / (f1 - f0)


@dataclass
class MemoryAttr:
    keyword: str
    type_name: str
    value: float = 0.0
    column: str = ""
    children: Dict[str, "MemoryAttr"] = field(default_factory=dict)


@dataclass
class MemoryNode:
    path: str
    type_tag: str
    locked: bool = False
    children: List[str] = field(default_factory=list)
    attrs: Dict[str, MemoryAttr] = field(default_factory=dict)
    couplings: Dict[str, List[str]] = field(default_factory=dict)


class MemoryScene(ptk.LoggingMixin):
    """A HostScene kept entirely in memory.

    Nodes are addressed by path. Attribute paths are dot separated; parents
    missing when a sub-attribute is added are created as non-animatable
    composites. Locked nodes refuse unlinks and writes.
    """

    COMPOSITE_TYPE = "COMPOSITE"

    def __init__(self, frame: int = 1, selection: Optional[Iterable[str]] = None):
        self.frame = frame
        self.selection: List[str] = list(selection or [])
        self.nodes: Dict[str, MemoryNode] = {}
        self.columns: Dict[str, MemoryColumn] = {}
        self.undo_stack: List[Tuple[str, tuple]] = []
        self._undo_depth = 0
        self._undo_open: Optional[Tuple[str, tuple]] = None

    # ------------------------------------------------------------------
    # Building
    # ------------------------------------------------------------------

    def add_node(
        self,
        path: str,
        type_tag: str,
        parent: Optional[str] = None,
        locked: bool = False,
    ) -> str:
        """Add a node, optionally inside a group. Returns its path."""
        if path in self.nodes:
            raise ValueError(f"Node already exists: {path}")
        if parent is not None:
            self._node(parent).children.append(path)
        self.nodes[path] = MemoryNode(path, type_tag, locked)
        return path

    def add_attr(
        self, node: str, attr: str, type_name: str = "DOUBLE", value: float = 0.0
    ) -> MemoryAttr:
        """Add an attribute to a node, creating missing parent attributes as composites."""
        parts = attr.split(".")
        level = self._node(node).attrs
        for keyword in parts[:-1]:
            parent = level.get(keyword)
            if parent is None:
                parent = level[keyword] = MemoryAttr(keyword, self.COMPOSITE_TYPE)
            level = parent.children

        existing = level.get(parts[-1])
        if existing is not None:
            existing.type_name, existing.value = type_name, float(value)
            return existing
        level[parts[-1]] = MemoryAttr(parts[-1], type_name, float(value))
        return level[parts[-1]]

    def add_column(self, name: str, points: Iterable[Tuple[float, float]] = ()) -> str:
        """Add a function column holding the given (frame, value) keyframes."""
        if name in self.columns:
            raise ValueError(f"Column already exists: {name}")
        self.columns[name] = MemoryColumn(name, list(points))
        return name

    def link_attr(self, node: str, attr: str, column: str) -> None:
        """Drive an attribute with a column."""
        if column not in self.columns:
            raise MemorySceneError(f"No such column: {column}")
        self._attr(node, attr, strict=True).column = column

    def couple_attrs(self, node: str, attr: str, other: str) -> None:
        """Make a static write to either attribute write the other too.

        Models attributes the host keeps in step, e.g. a separate position and its 2D path.
        """
        node_ = self._node(node)
        node_.couplings.setdefault(attr, []).append(other)
        node_.couplings.setdefault(other, []).append(attr)

    def set_locked(self, node: str, locked: bool = True) -> None:
        self._node(node).locked = locked

    # ------------------------------------------------------------------
    # Queries used by tests and tools
    # ------------------------------------------------------------------

    def is_linked(self, node: str, attr: str) -> bool:
        return bool(self.linked_column(node, attr))

    def column_users(self, column: str) -> List[Tuple[str, str]]:
        """Every (node, attr) linked to a column."""
        return [
            (n.path, path)
            for n in self.nodes.values()
            for path, a in self._walk(n.attrs)
            if a.column == column
        ]

    # ------------------------------------------------------------------
    # HostScene
    # ------------------------------------------------------------------

    def selected_nodes(self) -> List[str]:
        return list(self.selection)

    def current_frame(self) -> int:
        return self.frame

    def node_type(self, node: str) -> str:
        return self._node(node).type_tag

    def sub_nodes(self, node: str) -> List[str]:
        return list(self._node(node).children)

    def attr_list(
        self, node: str, frame: int, parent: str = ""
    ) -> List[AttrDescriptor]:
        if parent:
            attr = self._attr(node, parent)
            level = attr.children if attr else {}
        else:
            level = self._node(node).attrs
        return [AttrDescriptor(a.keyword, a.type_name) for a in level.values()]

    def linked_column(self, node: str, attr: str) -> str:
        a = self._attr(node, attr)
        return a.column if a else ""

    def number_of_points(self, column: str) -> int:
        return len(self._column(column).points)

    def get_attr_value(self, node: str, frame: int, attr: str) -> float:
        """The attribute's value at a frame; 0.0 for attributes the node doesn't have."""
        a = self._attr(node, attr)
        if a is None:
            return 0.0
        if a.column:
            return self._column(a.column).value_at(frame)
        return a.value

    def unlink_attr(self, node: str, attr: str) -> bool:
        a = self._attr(node, attr)
        if a is None or not a.column or self._node(node).locked:
            return False
        a.column = ""
        return True

    def remove_unlinked_column(self, column: str) -> bool:
        if column not in self.columns or self.column_users(column):
            return False
        del self.columns[column]
        return True

    def set_attr_value(self, node: str, attr: str, frame: int, value: float) -> bool:
        """Write a value. Static attributes take it as is; linked ones get a key at the frame."""
        node_ = self._node(node)
        a = self._attr(node, attr)
        if a is None or node_.locked:
            return False

        if a.column:
            column = self._column(a.column)
            points = dict(column.points)
            points[float(frame)] = float(value)
            column.points = sorted(points.items())
            return True

        a.value = float(value)
        for other in node_.couplings.get(attr, []):
            coupled = self._attr(node, other)
            if coupled is not None and not coupled.column:
                coupled.value = float(value)
        return True

    def begin_undo(self, name: str) -> None:
        if self._undo_depth == 0:
            self._undo_open = (name, self._snapshot())
        self._undo_depth += 1

    def end_undo(self) -> None:
        if self._undo_depth == 0:
            raise RuntimeError("end_undo called without a matching begin_undo.")
        self._undo_depth -= 1
        if self._undo_depth == 0:
            self.undo_stack.append(self._undo_open)
            self._undo_open = None

    # ------------------------------------------------------------------
    # Undo
    # ------------------------------------------------------------------

    @property
    def undo_names(self) -> List[str]:
        return [name for name, _ in self.undo_stack]

    def undo(self) -> Optional[str]:
        """Revert the most recent undo entry. Returns its name, or None if there is nothing to undo."""
        if not self.undo_stack:
            return None
        name, (nodes, columns) = self.undo_stack.pop()
        self.nodes, self.columns = nodes, columns
        self.logger.debug(f"Undo: {name}")
        return name

    def _snapshot(self) -> tuple:
        return copy.deepcopy(self.nodes), copy.deepcopy(self.columns)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _node(self, node: str) -> MemoryNode:
        try:
            return self.nodes[node]
        except KeyError:
            raise MemorySceneError(f"No such node: {node}") from None

    def _column(self, column: str) -> MemoryColumn:
        try:
            return self.columns[column]
        except KeyError:
            raise MemorySceneError(f"No such column: {column}") from None

    def _attr(self, node: str, attr: str, strict: bool = False) -> Optional[MemoryAttr]:
        level = self._node(node).attrs
        a = None
        for keyword in attr.split("."):
            a = level.get(keyword)
            if a is None:
                if strict:
                    raise MemorySceneError(f"No such attribute: {node}.{attr}")
                return None
            level = a.children
        return a

    @staticmethod
    def _walk(attrs: Dict[str, MemoryAttr], prefix: str = ""):
        stack = [(prefix, a) for a in reversed(list(attrs.values()))]
        while stack:
            parent, a = stack.pop()
            path = f"{parent}.{a.keyword}" if parent else a.keyword
            yield path, a
            stack.extend((path, c) for c in reversed(list(a.children.values())))


# -----------------------------------------------------------------------------

if __name__ == "__main__":
    pass
