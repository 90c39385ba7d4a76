"""
mmcal.engines.factory
---------------------
Transforms pure data specifications into live, executable Engine objects.
"""

from __future__ import annotations
from mmcal.engines.calendar import MyanmarCalendarEngine
from mmcal.engines.specs import CalendarParams, EngineSpec


def make_engine(spec: EngineSpec) -> MyanmarCalendarEngine:
    """The universal entry point."""
    if not isinstance(spec.params, CalendarParams):
        raise TypeError(f"Unknown params type: {type(spec.params)}")
    return MyanmarCalendarEngine(id=spec.id, params=spec.params)
