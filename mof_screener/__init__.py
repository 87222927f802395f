"""MOF working-uptake screener: fixed response surfaces checked against DOE targets."""

from .models import DOE_TARGETS, ChartDatum, InputVector, OutputPair, Thresholds, Verdict, parse_value
from .regression import evaluate
from .screening import ScreeningResult, classify, project, screen
from .session import ScreenerSession

__all__ = [
    "DOE_TARGETS", "ChartDatum", "InputVector", "OutputPair", "Thresholds", "Verdict",
    "parse_value", "evaluate", "classify", "project", "screen", "ScreeningResult",
    "ScreenerSession",
]
