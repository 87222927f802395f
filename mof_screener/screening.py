# mof_screener/screening.py
import logging

from pydantic import BaseModel, ConfigDict

from .config import WUG_NAME, WUV_NAME
from .models import DOE_TARGETS, ChartDatum, InputVector, OutputPair, Thresholds, Verdict
from .regression import evaluate

logger = logging.getLogger(__name__)


def classify(outputs: OutputPair, thresholds: Thresholds = DOE_TARGETS) -> Verdict:
    # raw (unclamped) predictions; equality passes
    return Verdict(
        is_wug_passing=outputs.wug >= thresholds.wug,
        is_wuv_passing=outputs.wuv >= thresholds.wuv,
    )


def project(outputs: OutputPair, thresholds: Thresholds, verdict: Verdict,
            show_thresholds: bool = True) -> list[ChartDatum]:
    """Bar-chart rows, gravimetric first. Negative predictions are drawn as 0.

    ``show_thresholds`` is only for the renderer; the rows always carry the targets.
    """
    return [
        ChartDatum(name=WUG_NAME, value=max(0.0, outputs.wug),
                   threshold=thresholds.wug, is_passing=verdict.is_wug_passing),
        ChartDatum(name=WUV_NAME, value=max(0.0, outputs.wuv),
                   threshold=thresholds.wuv, is_passing=verdict.is_wuv_passing),
    ]


class ScreeningResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    inputs: InputVector
    outputs: OutputPair
    thresholds: Thresholds
    verdict: Verdict
    chart: list[ChartDatum]


def screen(inputs: InputVector, thresholds: Thresholds = DOE_TARGETS) -> ScreeningResult:
    """evaluate -> classify -> project, all from scratch."""
    outputs = evaluate(inputs)
    verdict = classify(outputs, thresholds)
    chart = project(outputs, thresholds, verdict)
    logger.debug("wug=%.4f wuv=%.4f overall=%s", outputs.wug, outputs.wuv, verdict.is_overall_passing)
    return ScreeningResult(inputs=inputs, outputs=outputs, thresholds=thresholds,
                           verdict=verdict, chart=chart)
