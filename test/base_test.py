# !/usr/bin/python
# coding=utf-8
"""
Base Test Class for HarmonyTk Tests

Provides common functionality for all harmonytk test cases including
scene setup and utility methods.
"""
import unittest
from typing import Iterable, Tuple

from harmonytk.env_utils.memory_scene import MemoryScene


class HarmonyTkTestCase(unittest.TestCase):
    """Base class for all harmonytk test cases."""

    def setUp(self):
        """Set up a clean scene for each test."""
        self.scene = MemoryScene(frame=1)

    def create_peg(self, path: str = "Top/Peg", parent: str = None) -> str:
        """Create a peg with the transform attributes a Harmony peg has."""
        node = self.scene.add_node(path, "PEG", parent=parent)
        for attr in ("position.x", "position.y", "position.z"):
            self.scene.add_attr(node, attr)
        self.scene.add_attr(node, "position.attr3dpath", "PATH_3D")
        for attr in ("scale.x", "scale.y", "scale.z", "scale.xy"):
            self.scene.add_attr(node, attr, value=1.0)
        for attr in ("rotation.anglex", "rotation.angley", "rotation.anglez"):
            self.scene.add_attr(node, attr)
        self.scene.add_attr(node, "rotation.QUATERNIONPATH", "QUATERNION_PATH")
        self.scene.add_attr(node, "skew")
        return node

    def create_drawing(self, path: str = "Top/Drawing", parent: str = None) -> str:
        """Create a drawing node with its transform attributes."""
        node = self.scene.add_node(path, "READ", parent=parent)
        for attr in ("offset.x", "offset.y", "offset.z"):
            self.scene.add_attr(node, attr)
        self.scene.add_attr(node, "offset.attr3dpath", "PATH_3D")
        for attr in ("scale.x", "scale.y", "scale.z", "scale.xy"):
            self.scene.add_attr(node, attr, value=1.0)
        for attr in ("rotation.anglex", "rotation.angley", "rotation.anglez"):
            self.scene.add_attr(node, attr)
        self.scene.add_attr(node, "rotation.QUATERNIONPATH", "QUATERNION_PATH")
        self.scene.add_attr(node, "skew")
        self.scene.add_attr(node, "drawing.element", "ELEMENT")
        return node

    def animate(
        self,
        node: str,
        attr: str,
        points: Iterable[Tuple[float, float]],
        column: str = None,
    ) -> str:
        """Key an existing attribute with a new column. Returns the column name."""
        column = column or f"{node}:{attr}"
        self.scene.add_column(column, points)
        self.scene.link_attr(node, attr, column)
        return column

    def assertUnlinked(self, node: str, attr: str, msg: str = None):
        """Assert that an attribute holds a static value."""
        column = self.scene.linked_column(node, attr)
        if column:
            msg = msg or f"'{node}.{attr}' is still linked to '{column}'"
            raise AssertionError(msg)

    def assertStatic(self, node: str, attr: str, expected: float, msg: str = None):
        """Assert that an attribute is unlinked and holds the expected value."""
        self.assertUnlinked(node, attr, msg)
        self.assertAlmostEqual(
            self.scene.get_attr_value(node, 1, attr), expected, places=6, msg=msg
        )

    def assertColumnRemoved(self, column: str, msg: str = None):
        """Assert that a column is no longer in the scene."""
        if column in self.scene.columns:
            msg = msg or f"Column '{column}' still exists"
            raise AssertionError(msg)
