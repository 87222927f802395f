# mof_screener/session.py
import logging
from typing import Callable

from .models import DOE_TARGETS, InputVector, Thresholds
from .screening import ScreeningResult, screen

logger = logging.getLogger(__name__)

Listener = Callable[[ScreeningResult], None]


class ScreenerSession:
    """Current inputs plus the result derived from them.

    Every committed ``set_field`` recomputes the whole result once, synchronously,
    then notifies listeners. There is no other way to trigger a recompute.
    """

    def __init__(self, inputs: InputVector | None = None, thresholds: Thresholds = DOE_TARGETS):
        self.thresholds = thresholds
        self.inputs = inputs if inputs is not None else InputVector()
        self.show_thresholds = True
        self.recomputations = 0
        self._listeners: list[Listener] = []
        self.result = self._recompute()

    def _recompute(self) -> ScreeningResult:
        self.recomputations += 1
        return screen(self.inputs, self.thresholds)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def set_field(self, name: str, raw_value) -> ScreeningResult:
        self.inputs = self.inputs.set_field(name, raw_value)
        self.result = self._recompute()
        logger.debug("%s <- %r", name, raw_value)
        for listener in list(self._listeners):
            listener(self.result)
        return self.result

    @property
    def outputs(self):
        return self.result.outputs

    @property
    def verdict(self):
        return self.result.verdict

    def chart_data(self):
        return self.result.chart
