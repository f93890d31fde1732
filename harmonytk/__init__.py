# !/usr/bin/python
# coding=utf-8
from pythontk.core_utils.module_resolver import bootstrap_package


__package__ = "harmonytk"
__version__ = "1.0.0"

"""Dynamic Attribute Resolver for Module-based Packages

``bootstrap_package`` wires a :class:`ModuleAttributeResolver` into this package so classes,
methods, and helper APIs (``configure_resolver``, ``build_dictionaries``, ``export_all``,
``import_module``) remain available while keeping this module lean.
"""

DEFAULT_INCLUDE = {
    # Core classes - expose all using wildcard
    "_anim_utils": "*",
    "_core_utils": "*",
    "_node_utils": "*",
    # Animation utilities
    "anim_utils.reset_policy": ["ResetPolicy", "ValueSource", "get_reset_policy"],
    "anim_utils.anim_structs": [
        "AttrStatus",
        "AttrResult",
        "NodeReport",
        "RemovalReport",
    ],
    # Host scenes
    "env_utils.host_scene": ["HostScene", "AttrDescriptor"],
    "env_utils.memory_scene": ["MemoryScene", "MemorySceneError"],
    "env_utils.harmony_scene": "HarmonyScene",
}

bootstrap_package(
    globals(),
    include=DEFAULT_INCLUDE,
)
