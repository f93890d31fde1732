# !/usr/bin/python
# coding=utf-8
"""Host scene interfaces.

All classes are lazy-loaded via harmonytk root package.
Import from harmonytk directly: from harmonytk import MemoryScene
"""

# Lazy-loaded via parent package - no explicit imports needed
