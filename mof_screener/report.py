# mof_screener/report.py
import datetime as dt
import json
import platform
import sys

import pandas as pd

from .screening import ScreeningResult


def metrics_frame(result: ScreeningResult) -> pd.DataFrame:
    """One-row table: inputs, predictions, targets and verdict flags."""
    row = dict(result.inputs.model_dump())
    row.update({
        "wug_wt_pct": result.outputs.wug,
        "wuv_g_per_L": result.outputs.wuv,
        "wug_target": result.thresholds.wug,
        "wuv_target": result.thresholds.wuv,
        **result.verdict.model_dump(),
    })
    return pd.DataFrame([row])


def parameters_json(result: ScreeningResult) -> str:
    return json.dumps({"inputs": result.inputs.model_dump(),
                       "thresholds": result.thresholds.model_dump()}, indent=2)


def provenance(result: ScreeningResult, now: dt.datetime | None = None) -> dict:
    now = now or dt.datetime.now(dt.timezone.utc)
    return {
        "timestamp_utc": now.strftime("%Y-%m-%d %H:%M:%S"),
        "python": sys.version.split()[0],
        "platform": platform.platform(),
        "inputs": result.inputs.model_dump(),
        "outputs": result.outputs.model_dump(),
        "thresholds": result.thresholds.model_dump(),
        "verdict": result.verdict.model_dump(),
    }


def html_report(params: dict) -> str:
    verdict = "Promising Candidate" if params["verdict"]["is_overall_passing"] else "Does Not Meet Targets"
    out, thr = params["outputs"], params["thresholds"]
    return f"""
<h2>MOF Screening Report</h2>
<p><b>Generated:</b> {params['timestamp_utc']} UTC</p>
<p><b>Environment:</b> Python {params['python']} on {params['platform']}</p>
<p><b>Result:</b> {verdict}</p>
<table>
<tr><th>Metric</th><th>Predicted</th><th>Target</th></tr>
<tr><td>Working Uptake Gravimetric</td><td>{out['wug']:.2f} wt%</td><td>&ge; {thr['wug']:g} wt%</td></tr>
<tr><td>Working Uptake Volumetric</td><td>{out['wuv']:.2f} g/L</td><td>&ge; {thr['wuv']:g} g/L</td></tr>
</table>
<pre>{json.dumps(params['inputs'], indent=2)}</pre>
"""
