# mof_screener/regression.py
"""Second-order response surfaces for gravimetric (WUG) and volumetric (WUV) working uptake.

Each equation is a table of 36 ``(variables, coefficient)`` terms over the seven
geometric descriptors: intercept, 7 linear, 7 squares, 21 pairwise products.
Variables use the symbols of the published equations:

    p = density, GSA = gsa, VSA = vsa, VF = vf, PV = pv, LCD = lcd, PLD = pld

Summation order is fixed to the row order of the tables. Terms are added left
to right starting from the intercept; squares are evaluated as ``c * (x * x)``
and products as ``(c * x) * y``. Keep it that way: reordering changes results
at the last-bit level and breaks the reference fixtures in the tests.
"""
import logging

from .config import FIELDS
from .models import InputVector, OutputPair

logger = logging.getLogger(__name__)

# symbol -> InputVector field name
SYMBOLS = {meta["symbol"]: name for name, meta in FIELDS.items()}

WUG_EQUATION = (
    ((), -4.47194),
    (("p",), 1.77349),
    (("GSA",), 0.000511149),
    (("VSA",), 0.00163429),
    (("VF",), 3.92696),
    (("PV",), 5.59522),
    (("LCD",), -0.0764434),
    (("PLD",), 0.262302),
    (("p", "p"), -0.163317),
    (("p", "GSA"), -0.00133171),
    (("p", "VSA"), 7.69048e-5),
    (("p", "VF"), -2.66592),
    (("p", "PV"), 2.45092),
    (("p", "LCD"), 0.089082),
    (("p", "PLD"), -0.0975448),
    (("GSA", "GSA"), -4.1166e-8),
    (("GSA", "VSA"), -1.15768e-7),
    (("GSA", "VF"), 0.00280453),
    (("GSA", "PV"), -2.35326e-5),
    (("GSA", "LCD"), 8.39123e-6),
    (("GSA", "PLD"), -3.89128e-6),
    (("VSA", "VSA"), 2.21456e-7),
    (("VSA", "VF"), -0.00231186),
    (("VSA", "PV"), -0.00180075),
    (("VSA", "LCD"), 4.34998e-6),
    (("VSA", "PLD"), 1.65433e-5),
    (("VF", "VF"), 4.52648),
    (("VF", "PV"), -3.82519),
    (("VF", "LCD"), -0.0639716),
    (("VF", "PLD"), -0.283064),
    (("PV", "PV"), -0.0213098),
    (("PV", "LCD"), 0.000824477),
    (("PV", "PLD"), 0.00253194),
    (("LCD", "LCD"), 0.000521033),
    (("LCD", "PLD"), 0.000700743),
    (("PLD", "PLD"), -0.000244913),
)

WUV_EQUATION = (
    ((), -49.6238),
    (("p",), 17.4843),
    (("GSA",), -0.000310481),
    (("VSA",), 0.0214365),
    (("VF",), 32.4082),
    (("PV",), 14.1933),
    (("LCD",), 0.0660557),
    (("PLD",), 1.66494),
    (("p", "p"), -1.79789),
    (("p", "GSA"), -0.00754047),
    (("p", "VSA"), -0.0012505),
    (("p", "VF"), -22.99),
    (("p", "PV"), 69.0864),
    (("p", "LCD"), 0.861169),
    (("p", "PLD"), -0.523851),
    (("GSA", "GSA"), 1.51676e-7),
    (("GSA", "VSA"), 3.18358e-7),
    (("GSA", "VF"), 0.0145422),
    (("GSA", "PV"), -5.75705e-5),
    (("GSA", "LCD"), 0.000157672),
    (("GSA", "PLD"), -2.93554e-5),
    (("VSA", "VSA"), 7.11672e-7),
    (("VSA", "VF"), -0.0162344),
    (("VSA", "PV"), -0.0208807),
    (("VSA", "LCD"), 3.334e-5),
    (("VSA", "PLD"), 0.000196064),
    (("VF", "VF"), 44.1803),
    (("VF", "PV"), -14.2407),
    (("VF", "LCD"), -1.95209),
    (("VF", "PLD"), -2.23509),
    (("PV", "PV"), -0.0384937),
    (("PV", "LCD"), -0.00185746),
    (("PV", "PLD"), 0.0410538),
    (("LCD", "LCD"), 0.00735029),
    (("LCD", "PLD"), 0.00119741),
    (("PLD", "PLD"), 0.00386859),
)


def _term(coef, variables, x):
    if not variables:
        return coef
    if len(variables) == 1:
        return coef * x[variables[0]]
    a, b = variables
    if a == b:
        return coef * (x[a] * x[a])
    return coef * x[a] * x[b]


def evaluate_equation(equation, x):
    """Sum one coefficient table over ``x`` (symbol -> float or numpy array).

    Works element-wise on numpy arrays, with the same operation order as for scalars.
    """
    (_, total), *rest = equation
    for variables, coef in rest:
        total = total + _term(coef, variables, x)
    return total


def symbol_values(inputs: InputVector) -> dict:
    return {symbol: getattr(inputs, name) for symbol, name in SYMBOLS.items()}


def evaluate(inputs: InputVector) -> OutputPair:
    x = symbol_values(inputs)
    out = OutputPair(wug=evaluate_equation(WUG_EQUATION, x),
                     wuv=evaluate_equation(WUV_EQUATION, x))
    logger.debug("evaluate(%s) -> %s", inputs.model_dump(), out.model_dump())
    return out


def format_equation(target: str, equation, precision: int = 6) -> str:
    """Render a coefficient table as a LaTeX string, e.g. for the methods page."""
    parts = []
    for i, (variables, coef) in enumerate(equation):
        if len(variables) == 2 and variables[0] == variables[1]:
            factor = f"{variables[0]}^2"
        else:
            factor = r" \cdot ".join(variables)
        mag = f"{abs(coef):.{precision}g}"
        if "e" in mag:
            mantissa, exp = mag.split("e")
            mag = rf"{mantissa} \times 10^{{{int(exp)}}}"
        body = rf"{mag} \cdot {factor}" if factor else mag
        if i == 0:
            parts.append(f"-{body}" if coef < 0 else body)
        else:
            parts.append(f"{'-' if coef < 0 else '+'} {body}")
    return f"{target} = " + " ".join(parts)
