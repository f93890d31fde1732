# !/usr/bin/python
# coding=utf-8
"""
Test Suite for harmonytk.anim_utils.reset_policy module
"""
import unittest

from harmonytk.anim_utils.reset_policy import (
    POLICIES,
    ResetPolicy,
    ValueSource,
    get_reset_policy,
)
from harmonytk.node_utils._node_utils import NodeType


class TestResetPolicy(unittest.TestCase):
    """Tests for the per node type reset policies."""

    def test_every_node_type_has_an_entry(self):
        """Test the policy table covers every node type."""
        self.assertEqual(set(POLICIES), set(NodeType))

    def test_generic_only_types(self):
        """Test groups and unknown nodes are left to the generic pass."""
        self.assertIsNone(get_reset_policy(NodeType.GROUP))
        self.assertIsNone(get_reset_policy(NodeType.OTHER))

    def test_default_values(self):
        """Test peg and drawing defaults: 1 for scale, else 0."""
        for node_type in (NodeType.PEG, NodeType.DRAWING):
            policy = get_reset_policy(node_type)
            with self.subTest(node_type=node_type):
                self.assertEqual(len(policy.attrs), 13)
                for attr in policy.attrs:
                    self.assertIsNone(policy.resting_attr(attr))
                    self.assertEqual(
                        policy.static_value(attr), 1.0 if "scale" in attr else 0.0
                    )

    def test_resting_pairs(self):
        """Test deformer attributes pair with their resting attributes index for index."""
        self.assertEqual(
            get_reset_policy(NodeType.OFFSET).resting_attr("orientation"),
            "restingorientation",
        )
        self.assertEqual(
            get_reset_policy(NodeType.CURVE).resting_attr("length1"), "restlength1"
        )
        bone = get_reset_policy(NodeType.BONE)
        self.assertEqual(bone.resting_attr("bias"), "restbias")
        self.assertEqual(bone.static_value("bias", 0.25), 0.25)
        for node_type in (NodeType.OFFSET, NodeType.CURVE, NodeType.BONE):
            policy = get_reset_policy(node_type)
            self.assertEqual(len(policy.attrs), len(policy.resting_attrs))

    def test_mismatched_resting_pairs_rejected(self):
        with self.assertRaises(ValueError):
            ResetPolicy(ValueSource.RESTING, attrs=("a", "b"), resting_attrs=("ra",))

    def test_fragment_match(self):
        """Test deformer attributes are matched by fragment, grouped in table order."""
        policy = get_reset_policy(NodeType.DEFORMER)
        available = [
            "Point0.Scale",
            "Point0.POSITION.X",
            "Point1.POSITION.X",
            "Point0.Rotation",
            "Point0.POSITION.Y",
            "Point0.restingPosition.X",
            "Point0.POSITION",
        ]

        self.assertEqual(
            policy.match(available),
            [
                "Point0.POSITION.X",
                "Point1.POSITION.X",
                "Point0.POSITION.Y",
                "Point0.Rotation",
                "Point0.Scale",
            ],
        )

    def test_fragment_values(self):
        """Test deformer positions come from resting positions, scale is 1, rotation 0."""
        policy = get_reset_policy(NodeType.DEFORMER)

        self.assertEqual(
            policy.resting_attr("Point0.POSITION.X"), "Point0.restingPosition.X"
        )
        self.assertEqual(policy.static_value("Point0.POSITION.X", 3.5), 3.5)
        self.assertIsNone(policy.resting_attr("Point0.Scale"))
        self.assertEqual(policy.static_value("Point0.Scale"), 1.0)
        self.assertEqual(policy.static_value("Point0.Rotation"), 0.0)

    def test_fixed_tables_ignore_available(self):
        policy = get_reset_policy(NodeType.OFFSET)
        self.assertEqual(policy.match([]), ["offset.x", "offset.y", "orientation"])


if __name__ == "__main__":
    unittest.main()
