from __future__ import annotations
import logging

from calsys.core.engine import CalendarRegistry
from calsys.engines.specs import ALL_SPECS
from calsys.engines.factory import make_system

logger = logging.getLogger(__name__)

def build_registry() -> CalendarRegistry:
    systems = {}
    for name, spec in ALL_SPECS.items():
        systems[name] = make_system(spec)
    logger.debug("Built calendar registry: %s", ", ".join(systems))
    return CalendarRegistry(systems)
