# !/usr/bin/python
# coding=utf-8
"""
Test Suite for harmonytk.env_utils.memory_scene module
"""
import unittest

from harmonytk.env_utils.host_scene import AttrDescriptor, HostScene
from harmonytk.env_utils.memory_scene import (
    MemoryColumn,
    MemoryScene,
    MemorySceneError,
)

from base_test import HarmonyTkTestCase


class TestMemoryColumn(unittest.TestCase):
    """Tests for MemoryColumn evaluation."""

    def test_value_at(self):
        column = MemoryColumn("c", [(10, 5.0), (1, 2.0)])

        self.assertEqual(column.value_at(1), 2.0)
        self.assertEqual(column.value_at(10), 5.0)
        self.assertAlmostEqual(column.value_at(4), 3.0)
        self.assertEqual(column.value_at(-3), 2.0)
        self.assertEqual(column.value_at(50), 5.0)

    def test_empty_column(self):
        self.assertEqual(MemoryColumn("c").value_at(1), 0.0)


class TestMemoryScene(HarmonyTkTestCase):
    """Tests for MemoryScene."""

    def test_is_host_scene(self):
        self.assertIsInstance(self.scene, HostScene)

    def test_attr_list(self):
        """Test attributes list per level, missing parents created as composites."""
        node = self.scene.add_node("Top/Peg", "PEG")
        self.scene.add_attr(node, "position.x", value=2.0)
        self.scene.add_attr(node, "skew")

        self.assertEqual(
            self.scene.attr_list(node, 1),
            [
                AttrDescriptor("position", MemoryScene.COMPOSITE_TYPE),
                AttrDescriptor("skew", "DOUBLE"),
            ],
        )
        self.assertEqual(
            self.scene.attr_list(node, 1, "position"), [AttrDescriptor("x", "DOUBLE")]
        )
        self.assertEqual(self.scene.attr_list(node, 1, "position.x"), [])
        self.assertEqual(self.scene.get_attr_value(node, 1, "position.x"), 2.0)
        self.assertEqual(self.scene.get_attr_value(node, 1, "missing"), 0.0)

    def test_unknown_handles_raise(self):
        with self.assertRaises(MemorySceneError):
            self.scene.node_type("Top/Nothing")
        with self.assertRaises(KeyError):
            self.scene.number_of_points("nothing")
        node = self.scene.add_node("Top/Peg", "PEG")
        with self.assertRaises(MemorySceneError):
            self.scene.link_attr(node, "skew", "nothing")
        with self.assertRaises(ValueError):
            self.scene.add_node("Top/Peg", "PEG")

    def test_link_and_unlink(self):
        node = self.scene.add_node("Top/Peg", "PEG")
        self.scene.add_attr(node, "skew", value=1.0)
        column = self.animate(node, "skew", [(1, 4.0)])

        self.assertEqual(self.scene.get_attr_value(node, 1, "skew"), 4.0)
        self.assertFalse(self.scene.remove_unlinked_column(column))
        self.assertTrue(self.scene.unlink_attr(node, "skew"))
        self.assertFalse(self.scene.unlink_attr(node, "skew"))
        self.assertEqual(self.scene.get_attr_value(node, 1, "skew"), 1.0)
        self.assertTrue(self.scene.remove_unlinked_column(column))
        self.assertFalse(self.scene.remove_unlinked_column(column))

    def test_locked_node(self):
        node = self.scene.add_node("Top/Peg", "PEG", locked=True)
        self.scene.add_attr(node, "skew")
        self.animate(node, "skew", [(1, 4.0)])

        self.assertFalse(self.scene.unlink_attr(node, "skew"))
        self.assertFalse(self.scene.set_attr_value(node, "skew", 1, 0.0))

    def test_set_linked_attr_keys_column(self):
        node = self.scene.add_node("Top/Peg", "PEG")
        self.scene.add_attr(node, "skew")
        column = self.animate(node, "skew", [(1, 4.0), (10, 4.0)])

        self.assertTrue(self.scene.set_attr_value(node, "skew", 5, 9.0))

        self.assertEqual(self.scene.number_of_points(column), 3)
        self.assertEqual(self.scene.get_attr_value(node, 5, "skew"), 9.0)

    def test_coupled_attrs(self):
        node = self.scene.add_node("Top/FFD", "FreeFormDeformation")
        self.scene.add_attr(node, "Point0.POSITION.X")
        self.scene.add_attr(node, "Point0.POSITION.2DPOINT", "POINT_2D")
        self.scene.couple_attrs(node, "Point0.POSITION.X", "Point0.POSITION.2DPOINT")

        self.scene.set_attr_value(node, "Point0.POSITION.X", 1, 6.0)

        self.assertEqual(self.scene.get_attr_value(node, 1, "Point0.POSITION.2DPOINT"), 6.0)

    def test_sub_nodes(self):
        group = self.scene.add_node("Top/Group", "GROUP")
        peg = self.scene.add_node("Top/Group/Peg", "PEG", parent=group)

        self.assertEqual(self.scene.sub_nodes(group), [peg])
        self.assertEqual(self.scene.sub_nodes(peg), [])

    def test_nested_undo_is_one_entry(self):
        """Test nested accumulations record a single entry under the outer name."""
        node = self.scene.add_node("Top/Peg", "PEG")
        self.scene.add_attr(node, "skew", value=1.0)

        self.scene.begin_undo("Outer")
        self.scene.set_attr_value(node, "skew", 1, 2.0)
        self.scene.begin_undo("Inner")
        self.scene.set_attr_value(node, "skew", 1, 3.0)
        self.scene.end_undo()
        self.scene.end_undo()

        self.assertEqual(self.scene.undo_names, ["Outer"])
        self.assertEqual(self.scene.undo(), "Outer")
        self.assertEqual(self.scene.get_attr_value(node, 1, "skew"), 1.0)
        self.assertIsNone(self.scene.undo())

    def test_end_undo_without_begin(self):
        with self.assertRaises(RuntimeError):
            self.scene.end_undo()

    def test_selection_and_frame(self):
        scene = MemoryScene(frame=12, selection=["Top/A"])

        self.assertEqual(scene.selected_nodes(), ["Top/A"])
        self.assertEqual(scene.current_frame(), 12)


if __name__ == "__main__":
    unittest.main()
