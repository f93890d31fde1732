# !/usr/bin/python
# coding=utf-8
from enum import Enum
from typing import List, Dict, Iterable, Tuple, Union

import pythontk as ptk


class NodeType(Enum):
    """Node types harmonytk distinguishes. Anything else is OTHER."""

    GROUP = "group"
    PEG = "peg"
    DRAWING = "drawing"
    DEFORMER = "deformer"
    OFFSET = "offset"
    CURVE = "curve"
    BONE = "bone"
    OTHER = "other"


class NodeUtils(ptk.HelpMixin):
    """Node and attribute queries against a host scene.

    For help on this class use: NodeUtils.help()
    """

    TYPE_TAGS: Dict[str, NodeType] = {
        "GROUP": NodeType.GROUP,
        "PEG": NodeType.PEG,
        "READ": NodeType.DRAWING,
        "FreeFormDeformation": NodeType.DEFORMER,
        "OffsetModule": NodeType.OFFSET,
        "CurveModule": NodeType.CURVE,
        "BendyBoneModule": NodeType.BONE,
    }
    """Host type tag -> NodeType."""

    ANIMATABLE_TYPES: Tuple[str, ...] = (
        "DOUBLE",
        "DOUBLEVB",
        "POINT_2D",
        "PATH_3D",
        "QUATERNION_PATH",
    )
    """Attribute value types that can be driven by a column."""

    @classmethod
    def get_type(cls, scene, node: str) -> NodeType:
        """Get the node's type.

        Parameters:
            scene (HostScene): The scene the node belongs to.
            node (str): The node to query.

        Returns:
            (NodeType) The node type. Unrecognized host tags return NodeType.OTHER.
        """
        return cls.TYPE_TAGS.get(scene.node_type(node), NodeType.OTHER)

    @classmethod
    def is_group(cls, scene, nodes: Union[str, Iterable[str]], filter: bool = False):
        """Determine if each of the given node(s) is a group.

        Parameters:
            scene (HostScene): The scene the nodes belong to.
            nodes (str/list): The node(s) to query.
            filter (bool): If True, return only the nodes that are groups.

        Returns:
            (bool/list) A list of booleans indicating whether each node is a group.
            If 'filter' is True, returns a list of nodes that are groups.
        """
        node_list = ptk.make_iterable(nodes)
        result = [cls.get_type(scene, n) is NodeType.GROUP for n in node_list]
        if filter:
            return [n for n, is_grp in zip(node_list, result) if is_grp]
        return ptk.format_return(result, nodes)

    @classmethod
    def get_complete_node_list(cls, scene, nodes: Iterable[str]) -> List[str]:
        """Expand any groups among the given nodes into their contents, at every depth.

        Nodes are returned depth-first, each group ahead of its own children.
        Nothing is de-duplicated; a node reachable twice is returned twice.

        Parameters:
            scene (HostScene): The scene the nodes belong to.
            nodes (list): The starting nodes, e.g. the current selection.

        Returns:
            (list) The given nodes along with all of their descendants.

        Example:
            >>> get_complete_node_list(scene, ["Top/Group"]) # Returns: ['Top/Group', 'Top/Group/Peg', 'Top/Group/Drawing']
        """
        found = []
        stack = list(reversed(list(nodes)))
        while stack:
            node = stack.pop()
            found.append(node)
            if cls.get_type(scene, node) is NodeType.GROUP:
                stack.extend(reversed(list(scene.sub_nodes(node))))
        return found

    @staticmethod
    def is_animated(scene, node: str, attr: str) -> bool:
        """Return True if the attribute is linked to a column holding at least one keyframe."""
        column = scene.linked_column(node, attr)
        return bool(column) and scene.number_of_points(column) > 0

    @classmethod
    def get_all_attrs(
        cls,
        scene,
        node: str,
        parent: str = "",
        animated_only: bool = False,
        frame: int = 1,
    ) -> List[str]:
        """List the full path of every animatable attribute on a node, sub-attributes included.

        Composite attributes are always descended into, whether or not they are
        animatable themselves. A sub-attribute follows its parent in the result.

        Parameters:
            scene (HostScene): The scene the node belongs to.
            node (str): The node to query.
            parent (str): Only list attributes under this attribute path.
            animated_only (bool): Skip attributes not linked to a column with keyframes.
            frame (int): The frame the attribute list is queried at.

        Returns:
            (list) Dot separated attribute paths, e.g. ['position.x', 'position.y', 'scale.x']
        """
        attrs = []
        stack = [(parent, d) for d in reversed(scene.attr_list(node, frame, parent))]
        while stack:
            prefix, descriptor = stack.pop()
            attr = f"{prefix}.{descriptor.keyword}" if prefix else descriptor.keyword

            if descriptor.type_name in cls.ANIMATABLE_TYPES:
                if not animated_only or cls.is_animated(scene, node, attr):
                    attrs.append(attr)

            sub_attrs = scene.attr_list(node, frame, attr)
            stack.extend((attr, d) for d in reversed(sub_attrs))
        return attrs


# -----------------------------------------------------------------------------

if __name__ == "__main__":
    pass

# -----------------------------------------------------------------------------
# Notes
# -----------------------------------------------------------------------------
