"""
calsys.engines.factory
----------------------
Transforms pure data specifications into live calendar systems.
"""

from __future__ import annotations
from calsys.core.engine import CalendarSystem
from calsys.engines.specs import SystemSpec
from calsys.engines.gregorian import GregorianSystem
from calsys.engines.lunar import LunarSystem


def make_system(spec: SystemSpec) -> CalendarSystem:
    """The universal entry point."""
    if spec.kind == "gregorian":
        return GregorianSystem(spec.type, spec.label_key, spec.year_range)
    if spec.kind == "lunar":
        return LunarSystem(spec.type, spec.label_key, spec.year_range)
    raise TypeError(f"Unknown system kind: {spec.kind!r}")
