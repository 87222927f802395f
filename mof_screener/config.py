# mof_screener/config.py
"""Fixed settings for the screener: defaults, DOE targets, field metadata."""

PAGE_TITLE = "MOF Screener"
PAGE_ICON = "🧪"

# DOE targets
WUG_THRESHOLD = 5.5   # wt%
WUV_THRESHOLD = 40.0  # g/L

FIELD_NAMES = ("gsa", "vsa", "vf", "pv", "density", "lcd", "pld")

DEFAULT_INPUTS = {
    "gsa": 3000.0,
    "vsa": 1500.0,
    "vf": 0.5,
    "pv": 1.2,
    "density": 0.8,
    "lcd": 12.0,
    "pld": 8.0,
}

# label, unit, symbol used in the regression equations
FIELDS = {
    "gsa":     {"label": "ASA Gravimetric",         "unit": "m²/g",   "symbol": "GSA"},
    "vsa":     {"label": "ASA Volumetric",          "unit": "m²/cm³", "symbol": "VSA"},
    "vf":      {"label": "Void Fraction",           "unit": "av_vf",  "symbol": "VF"},
    "pv":      {"label": "Pore Volume",             "unit": "cm³/g",  "symbol": "PV"},
    "density": {"label": "Density",                 "unit": "g/cm³",  "symbol": "p"},
    "lcd":     {"label": "Largest Cavity Diameter", "unit": "Å",      "symbol": "LCD"},
    "pld":     {"label": "Pore Limiting Diameter",  "unit": "Å",      "symbol": "PLD"},
}

WUG_NAME = "Gravimetric (wt%)"
WUV_NAME = "Volumetric (g/L)"
WUG_UNIT = "wt%"
WUV_UNIT = "g/L"

# Chart colours
PASS_COLOR = "#10b981"
FAIL_COLOR = "#f43f5e"
TARGET_COLOR = "#94a3b8"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
