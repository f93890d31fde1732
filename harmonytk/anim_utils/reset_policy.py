# !/usr/bin/python
# coding=utf-8
"""Per node type reset policies.

A policy names the attributes a node type resets by itself and where each
one's static value comes from. Node types without a policy are only handled
by the generic pass, which keeps each animated value as seen on the
reference frame.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from harmonytk.node_utils._node_utils import NodeType


class ValueSource(Enum):
    """Where a policy's static values come from."""

    DEFAULT = "default"  # 1 for scale attributes, else 0
    FRAGMENT = "fragment"  # matched by path fragment, position from its resting twin
    RESTING = "resting"  # paired resting attribute, index for index


@dataclass(frozen=True)
class ResetPolicy:
    """The attributes a node type resets and how their static values are chosen."""

    source: ValueSource
    attrs: Tuple[str, ...] = ()
    resting_attrs: Tuple[str, ...] = ()
    fragments: Tuple[str, ...] = ()

    def __post_init__(self):
        if self.source is ValueSource.RESTING and len(self.attrs) != len(
            self.resting_attrs
        ):
            raise ValueError("Each attribute needs exactly one resting attribute.")

    def match(self, available: List[str]) -> List[str]:
        """Get the attributes this policy resets, given a node's animatable attributes.

        Fixed tables are returned as-is. Fragment policies return each available
        attribute containing a fragment, grouped by fragment in table order.
        """
        if self.source is not ValueSource.FRAGMENT:
            return list(self.attrs)
        return [a for f in self.fragments for a in available if f in a]

    def resting_attr(self, attr: str) -> Optional[str]:
        """The attribute whose value the given attribute is reset to, if any."""
        if self.source is ValueSource.RESTING:
            return self.resting_attrs[self.attrs.index(attr)]
        if self.source is ValueSource.FRAGMENT and "POSITION" in attr:
            return attr.replace("POSITION", "restingPosition")
        return None

    def static_value(self, attr: str, resting_value: Optional[float] = None) -> float:
        """The value an attribute is left holding.

        Parameters:
            attr (str): The attribute path.
            resting_value (float): The value read from ``resting_attr(attr)``, where there is one.
        """
        if self.resting_attr(attr) is not None:
            return resting_value
        if self.source is ValueSource.FRAGMENT:
            return 1.0 if "Scale" in attr else 0.0
        return 1.0 if "scale" in attr else 0.0


PEG_POLICY = ResetPolicy(
    ValueSource.DEFAULT,
    attrs=(
        "position.x",
        "position.y",
        "position.z",
        "position.attr3dpath",
        "scale.x",
        "scale.y",
        "scale.z",
        "scale.xy",
        "rotation.anglex",
        "rotation.angley",
        "rotation.anglez",
        "rotation.QUATERNIONPATH",
        "skew",
    ),
)

DRAWING_POLICY = ResetPolicy(
    ValueSource.DEFAULT,
    attrs=(
        "offset.x",
        "offset.y",
        "offset.z",
        "offset.attr3dpath",
        "scale.x",
        "scale.y",
        "scale.z",
        "scale.xy",
        "rotation.anglex",
        "rotation.angley",
        "rotation.anglez",
        "rotation.QUATERNIONPATH",
        "skew",
    ),
)

DEFORMER_POLICY = ResetPolicy(
    ValueSource.FRAGMENT,
    fragments=(".POSITION.X", ".POSITION.Y", ".Rotation", ".Scale"),
)

OFFSET_POLICY = ResetPolicy(
    ValueSource.RESTING,
    attrs=("offset.x", "offset.y", "orientation"),
    resting_attrs=("restingoffset.x", "restingoffset.y", "restingorientation"),
)

CURVE_POLICY = ResetPolicy(
    ValueSource.RESTING,
    attrs=(
        "offset.x",
        "offset.y",
        "orientation0",
        "length0",
        "orientation1",
        "length1",
    ),
    resting_attrs=(
        "restingoffset.x",
        "restingoffset.y",
        "restingorientation0",
        "restlength0",
        "restingorientation1",
        "restlength1",
    ),
)

BONE_POLICY = ResetPolicy(
    ValueSource.RESTING,
    attrs=("offset.x", "offset.y", "radius", "orientation", "bias", "length"),
    resting_attrs=(
        "restoffset.x",
        "restoffset.y",
        "restradius",
        "restorientation",
        "restbias",
        "restlength",
    ),
)

POLICIES: Dict[NodeType, Optional[ResetPolicy]] = {
    NodeType.GROUP: None,
    NodeType.PEG: PEG_POLICY,
    NodeType.DRAWING: DRAWING_POLICY,
    NodeType.DEFORMER: DEFORMER_POLICY,
    NodeType.OFFSET: OFFSET_POLICY,
    NodeType.CURVE: CURVE_POLICY,
    NodeType.BONE: BONE_POLICY,
    NodeType.OTHER: None,
}

_missing = set(NodeType) - set(POLICIES)
if _missing:  # every node type must be decided, even if only to be left to the generic pass
    raise RuntimeError(f"No reset policy entry for: {sorted(t.name for t in _missing)}")


def get_reset_policy(node_type: NodeType) -> Optional[ResetPolicy]:
    """Get the reset policy for a node type, or None when only the generic pass applies."""
    return POLICIES[node_type]


# -----------------------------------------------------------------------------

if __name__ == "__main__":
    pass
