# mof_screener/models.py
import logging
import math

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .config import DEFAULT_INPUTS, FIELD_NAMES, WUG_THRESHOLD, WUV_THRESHOLD

logger = logging.getLogger(__name__)


def parse_value(raw) -> float:
    """Parse user-entered text as a float; anything unparsable or non-finite becomes 0."""
    try:
        value = float(str(raw).strip())
    except (TypeError, ValueError):
        logger.info("Could not parse %r as a number, using 0", raw)
        return 0.0
    if not math.isfinite(value):
        logger.info("Non-finite value %r replaced with 0", raw)
        return 0.0
    return value


class InputVector(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    gsa: float = Field(DEFAULT_INPUTS["gsa"], description="Gravimetric accessible surface area (m²/g)")
    vsa: float = Field(DEFAULT_INPUTS["vsa"], description="Volumetric accessible surface area (m²/cm³)")
    vf: float = Field(DEFAULT_INPUTS["vf"], description="Void fraction (-)")
    pv: float = Field(DEFAULT_INPUTS["pv"], description="Pore volume (cm³/g)")
    density: float = Field(DEFAULT_INPUTS["density"], description="Framework density (g/cm³)")
    lcd: float = Field(DEFAULT_INPUTS["lcd"], description="Largest cavity diameter (Å)")
    pld: float = Field(DEFAULT_INPUTS["pld"], description="Pore limiting diameter (Å)")

    def set_field(self, name: str, raw_value) -> "InputVector":
        """Return a copy with one field replaced by the parsed text (0 on parse failure)."""
        if name not in FIELD_NAMES:
            raise KeyError(f"Unknown input field: {name}")
        return self.model_copy(update={name: parse_value(raw_value)})


class OutputPair(BaseModel):
    model_config = ConfigDict(frozen=True)

    wug: float  # wt%
    wuv: float  # g/L


class Thresholds(BaseModel):
    model_config = ConfigDict(frozen=True)

    wug: float = WUG_THRESHOLD
    wuv: float = WUV_THRESHOLD


DOE_TARGETS = Thresholds()


class Verdict(BaseModel):
    model_config = ConfigDict(frozen=True)

    is_wug_passing: bool
    is_wuv_passing: bool

    @computed_field
    @property
    def is_overall_passing(self) -> bool:
        return self.is_wug_passing and self.is_wuv_passing


class ChartDatum(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    value: float       # clamped to >= 0 for display
    threshold: float
    is_passing: bool
