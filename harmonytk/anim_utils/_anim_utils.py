# !/usr/bin/python
# coding=utf-8
from typing import Dict, List, Optional, Union

import pythontk as ptk

# from this package:
from harmonytk.core_utils._core_utils import CoreUtils
from harmonytk.node_utils._node_utils import NodeUtils
from harmonytk.anim_utils.anim_structs import (
    AttrStatus,
    AttrResult,
    NodeReport,
    RemovalReport,
)
from harmonytk.anim_utils.reset_policy import ResetPolicy, ValueSource, get_reset_policy

UNDO_NAME = "Remove_Keyframes"


class AnimUtils(ptk.LoggingMixin, ptk.HelpMixin):
    """Animation utilities for Harmony.

    For help on this class use: AnimUtils.help()

    Removing keyframes works by deleting columns, not individual keys. Each
    attribute driven by a column is unlinked, the column is deleted once
    nothing else uses it, and the attribute is left holding a static value:

    1. Pegs and drawings go back to their defaults (1 for scale, else 0).
    2. Deformers (free form, offset, curve, bendy bone) go back to their resting values.
    3. Anything still animated afterwards keeps the value it has on the reference frame.
    """

    STATIC_FRAME: int = 1
    """Frame static values are written at."""

    RESTING_FRAME: int = 1
    """Frame resting values are read at."""

    @classmethod
    @CoreUtils.undoable(UNDO_NAME)
    def remove_keyframes(
        cls,
        scene,
        nodes: Optional[List[str]] = None,
        frame: Optional[int] = None,
        log_level: Optional[Union[int, str]] = None,
    ) -> RemovalReport:
        """Remove all keyframes from the given nodes, and from everything inside any groups among them.

        The whole operation is a single undo entry. An attribute the host won't
        unlink (e.g. on a locked node) is left as it is and reported as skipped.

        Parameters:
            scene (HostScene): The scene to operate on.
            nodes (list): The nodes to clear. Defaults to the current selection.
            frame (int): The reference frame whose values are kept for attributes
                    with no default or resting value. Defaults to the current frame.
            log_level (int/str): Set the logging level for this and later calls.

        Returns:
            (RemovalReport) What was done to every attribute of every node.

        Example:
            report = AnimUtils.remove_keyframes(scene) # Selected nodes, current frame.
            report = AnimUtils.remove_keyframes(scene, ["Top/Peg"], frame=10)
            report.summary() # {'nodes': 1, 'attrs_reset': 13, 'attrs_skipped': 0, 'columns_removed': 2}
        """
        if log_level is not None:
            cls.logger.setLevel(log_level)

        if nodes is None:
            nodes = scene.selected_nodes()
        if frame is None:
            frame = scene.current_frame()

        report = RemovalReport(frame=frame, description=UNDO_NAME)
        if not nodes:
            cls.logger.info("No nodes selected.")
            return report

        for node in NodeUtils.get_complete_node_list(scene, nodes):
            report.nodes.append(cls.remove_node_keyframes(scene, node, frame))

        summary = report.summary()
        cls.logger.info(
            f"Removed {summary['columns_removed']} columns, reset {summary['attrs_reset']} attributes "
            f"on {summary['nodes']} nodes (frame {frame})."
        )
        if summary["attrs_skipped"]:
            cls.logger.info(
                f"Left {summary['attrs_skipped']} attributes linked; the host refused to unlink them."
            )
        return report

    @classmethod
    def remove_node_keyframes(cls, scene, node: str, frame: int) -> NodeReport:
        """Remove the keyframes of a single node.

        Attributes in the node type's reset policy are reset first. Then every
        attribute still linked to a column with keyframes is frozen at its value
        on the given frame. Attributes the host refused to unlink in the first
        step are not tried again.

        Parameters:
            scene (HostScene): The scene the node belongs to.
            node (str): The node to clear.
            frame (int): The reference frame.

        Returns:
            (NodeReport)
        """
        node_type = NodeUtils.get_type(scene, node)
        report = NodeReport(node, node_type)

        skipped = set()
        policy = get_reset_policy(node_type)
        if policy is not None:
            results = cls._apply_reset_policy(scene, node, policy)
            report.results.extend(results)
            skipped = {
                r.attr for r in results if r.status is AttrStatus.SKIPPED_LOCKED
            }

        for attr in NodeUtils.get_all_attrs(scene, node, animated_only=True):
            if attr in skipped:  # Still linked; already reported.
                continue
            value = scene.get_attr_value(node, frame, attr)
            report.results.append(cls.reset_attr(scene, node, attr, value))

        return report

    @classmethod
    def _apply_reset_policy(
        cls, scene, node: str, policy: ResetPolicy
    ) -> List[AttrResult]:
        """Reset the attributes a policy covers."""
        available = []
        if policy.source is ValueSource.FRAGMENT:
            available = NodeUtils.get_all_attrs(scene, node)
        attrs = policy.match(available)

        # Read every resting value before writing anything. Writing a separate
        # position also writes the 2D path it is coupled with.
        resting: Dict[str, float] = {}
        for attr in attrs:
            resting_attr = policy.resting_attr(attr)
            if resting_attr is not None:
                resting[attr] = scene.get_attr_value(
                    node, cls.RESTING_FRAME, resting_attr
                )

        return [
            cls.reset_attr(scene, node, attr, policy.static_value(attr, resting.get(attr)))
            for attr in attrs
        ]

    @classmethod
    def reset_attr(cls, scene, node: str, attr: str, value: float) -> AttrResult:
        """Unlink an attribute from its column, delete the column if nothing else uses it, and set a static value.

        Parameters:
            scene (HostScene): The scene the node belongs to.
            node (str): The node the attribute is on.
            attr (str): The attribute path.
            value (float): The static value to leave on the attribute.

        Returns:
            (AttrResult) SKIPPED_LOCKED when the host refuses the unlink, in which case
            the attribute and its column are left untouched. NOT_APPLICABLE when the
            host refuses the write or the attribute isn't on the node.
        """
        column = scene.linked_column(node, attr)
        removed = ""
        if column:
            if not scene.unlink_attr(node, attr):
                cls.logger.debug(f"[{node}] Unlink refused: {attr} -> {column}")
                return AttrResult(attr, AttrStatus.SKIPPED_LOCKED)
            if scene.remove_unlinked_column(column):
                removed = column
                cls.logger.debug(f"[{node}] Removed column: {column}")

        if not scene.set_attr_value(node, attr, cls.STATIC_FRAME, value):
            return AttrResult(attr, AttrStatus.NOT_APPLICABLE, column=removed)

        cls.logger.debug(f"[{node}] {attr} = {value}")
        return AttrResult(attr, AttrStatus.SUCCEEDED, value, removed)


# -----------------------------------------------------------------------------

if __name__ == "__main__":
    pass

# -----------------------------------------------------------------------------
# Notes
# -----------------------------------------------------------------------------
