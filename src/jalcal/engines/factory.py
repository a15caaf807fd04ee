"""
jalcal.engines.factory
----------------------
Transforms pure data specifications into live, executable Engine objects.
"""

from __future__ import annotations
from jalcal.core.types import EngineSpec
from jalcal.core.engine import CalendarEngine
from jalcal.engines.gregorian import GregorianParams, GregorianEngine
from jalcal.engines.arithmetic_year import ArithmeticLeapParams, ArithmeticYearEngine
from jalcal.engines.break_table import BreakTableParams, BreakTableEngine


def make_engine(spec: EngineSpec) -> CalendarEngine:
    """The universal entry point."""
    if spec.kind == "gregorian" and isinstance(spec.payload, GregorianParams):
        return GregorianEngine(spec.id, spec.payload)
    if spec.kind == "arithmetic" and isinstance(spec.payload, ArithmeticLeapParams):
        return ArithmeticYearEngine(spec.id, spec.payload)
    if spec.kind == "break_table" and isinstance(spec.payload, BreakTableParams):
        return BreakTableEngine(spec.id, spec.payload)
    raise TypeError(f"Unknown engine spec: kind={spec.kind!r}, payload={type(spec.payload).__name__}")
