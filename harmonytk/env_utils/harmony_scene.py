# !/usr/bin/python
# coding=utf-8
"""HostScene over Harmony's scripting interfaces.

Harmony exposes its scene through a handful of global interface objects
(``node``, ``column``, ``func``, ``selection``, ``frame``, ``scene``). They
are handed to :class:`HarmonyScene` explicitly instead of being looked up, so
the adapter works wherever those objects come from::

    host = HarmonyScene.from_interface(harmony_globals)
    AnimUtils.remove_keyframes(host)
"""
from typing import Any, List, Mapping, Union

import pythontk as ptk

from harmonytk.env_utils.host_scene import AttrDescriptor


class HarmonyScene(ptk.LoggingMixin):
    """Adapts Harmony's ``node``/``column``/``func``/``selection``/``frame``/``scene`` interfaces to HostScene."""

    INTERFACES = ("node", "column", "func", "selection", "frame", "scene")

    def __init__(self, node, column, func, selection, frame, scene):
        self.node = node
        self.column = column
        self.func = func
        self.selection = selection
        self.frame = frame
        self.scene = scene

    @classmethod
    def from_interface(cls, source: Union[Mapping[str, Any], Any]) -> "HarmonyScene":
        """Build from a mapping or object exposing the interfaces by name.

        Parameters:
            source (dict/obj): e.g. the script's globals, or a module.

        Raises:
            AttributeError: If any interface is missing.
        """
        get = source.get if isinstance(source, Mapping) else (
            lambda name: getattr(source, name, None)
        )
        interfaces = {name: get(name) for name in cls.INTERFACES}
        missing = [name for name, obj in interfaces.items() if obj is None]
        if missing:
            raise AttributeError(f"Missing Harmony interfaces: {', '.join(missing)}")
        return cls(**interfaces)

    def selected_nodes(self) -> List[str]:
        return list(self.selection.selectedNodes())

    def current_frame(self) -> int:
        return int(self.frame.current())

    def node_type(self, node: str) -> str:
        return self.node.type(node)

    def sub_nodes(self, node: str) -> List[str]:
        return list(self.node.subNodes(node) or [])

    def attr_list(
        self, node: str, frame: int, parent: str = ""
    ) -> List[AttrDescriptor]:
        attrs = self.node.getAttrList(node, frame, parent) or []
        return [AttrDescriptor(a.keyword(), a.typeName()) for a in attrs]

    def linked_column(self, node: str, attr: str) -> str:
        return self.node.linkedColumn(node, attr) or ""

    def number_of_points(self, column: str) -> int:
        return int(self.func.numberOfPoints(column))

    def get_attr_value(self, node: str, frame: int, attr: str) -> float:
        return float(self.node.getAttr(node, frame, attr).doubleValue())

    def unlink_attr(self, node: str, attr: str) -> bool:
        return bool(self.node.unlinkAttr(node, attr))

    def remove_unlinked_column(self, column: str) -> bool:
        return bool(self.column.removeUnlinkedFunctionColumn(column))

    def set_attr_value(self, node: str, attr: str, frame: int, value: float) -> bool:
        """Write through ``node.setTextAttr``, which takes the value as text."""
        return bool(self.node.setTextAttr(node, attr, frame, str(value)))

    def begin_undo(self, name: str) -> None:
        self.logger.debug(f"Begin undo accumulation: {name}")
        self.scene.beginUndoRedoAccum(name)

    def end_undo(self) -> None:
        self.scene.endUndoRedoAccum()


# -----------------------------------------------------------------------------

if __name__ == "__main__":
    pass
