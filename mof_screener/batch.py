# mof_screener/batch.py
"""Screen a table of candidate materials with the single-screen equations."""
import logging

import numpy as np
import pandas as pd
from pydantic import BaseModel

from .config import FIELDS
from .models import DOE_TARGETS, Thresholds, parse_value
from .regression import WUG_EQUATION, WUV_EQUATION, evaluate_equation

logger = logging.getLogger(__name__)

WUG_COL = "wug"
WUV_COL = "wuv"


class BatchInputError(ValueError):
    pass


class BatchColumnsError(BatchInputError):
    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__(f"Missing column(s): {', '.join(self.missing)}")


class Columns(BaseModel):
    """CSV column name for each input field (defaults to the field name)."""
    gsa: str = "gsa"
    vsa: str = "vsa"
    vf: str = "vf"
    pv: str = "pv"
    density: str = "density"
    lcd: str = "lcd"
    pld: str = "pld"
    name: str | None = None


def read_candidates(source) -> pd.DataFrame:
    try:
        return pd.read_csv(source)
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as e:
        raise BatchInputError(f"Could not read CSV: {e}") from e


def coerce_numeric(series: pd.Series) -> pd.Series:
    # text cells go through the single-field parser; non-finite -> 0
    if pd.api.types.is_numeric_dtype(series) and not pd.api.types.is_bool_dtype(series):
        values = series.astype(float)
    else:
        values = series.map(parse_value).astype(float)
    return values.replace([np.inf, -np.inf], np.nan).fillna(0.0)


def with_labels(results: pd.DataFrame) -> tuple[pd.DataFrame, str]:
    """Candidate labels for charts: the name column, else the row number."""
    if "name" in results.columns:
        return results, "name"
    label = "row"
    while label in results.columns:
        label = f"_{label}"
    return results.reset_index(names=label), label


def screen_frame(df: pd.DataFrame, cols: Columns | None = None,
                 thresholds: Thresholds = DOE_TARGETS) -> pd.DataFrame:
    """One output row per input row: the seven inputs, wug, wuv and pass flags."""
    cols = cols or Columns()
    mapping = {field: getattr(cols, field) for field in FIELDS}
    missing = [c for c in mapping.values() if c not in df.columns]
    if cols.name and cols.name not in df.columns:
        missing.append(cols.name)
    if missing:
        raise BatchColumnsError(missing)

    out = pd.DataFrame(index=df.index)
    if cols.name:
        out["name"] = df[cols.name].astype(str)
    for field, col in mapping.items():
        out[field] = coerce_numeric(df[col])

    x = {FIELDS[field]["symbol"]: out[field].to_numpy() for field in FIELDS}
    out[WUG_COL] = evaluate_equation(WUG_EQUATION, x)
    out[WUV_COL] = evaluate_equation(WUV_EQUATION, x)
    out["wug_pass"] = out[WUG_COL] >= thresholds.wug
    out["wuv_pass"] = out[WUV_COL] >= thresholds.wuv
    out["overall_pass"] = out["wug_pass"] & out["wuv_pass"]
    logger.info("Screened %d candidates, %d pass both targets", len(out), int(out["overall_pass"].sum()))
    return out


def summarize(results: pd.DataFrame) -> dict:
    n = len(results)
    passing = int(results["overall_pass"].sum()) if n else 0
    return {
        "candidates": n,
        "wug_pass": int(results["wug_pass"].sum()) if n else 0,
        "wuv_pass": int(results["wuv_pass"].sum()) if n else 0,
        "overall_pass": passing,
        "pass_rate": passing / n if n else 0.0,
    }
