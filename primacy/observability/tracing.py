"""
Call tracing for calculator providers.

Every provider wraps its unit of work in a span so the
delegation chain can be read back from the logs
(or from an in-memory sink in tests).
"""

import logging
from contextlib import contextmanager
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)

TraceEvent = Tuple[str, str]


class CallTracer:
    def __init__(
        self,
        sink: Optional[List[TraceEvent]] = None,
        log_calls: bool = True,
    ):
        self.sink = sink
        self.log_calls = log_calls

    def _emit(self, marker: str, label: str) -> None:
        if self.log_calls:
            logger.info("%s %s", marker, label)
        if self.sink is not None:
            self.sink.append((marker, label))

    @contextmanager
    def span(self, label: str):
        self._emit(">>", label)
        yield
        self._emit("<<", label)

    def entered(self) -> List[str]:
        """Labels of every span entered so far, in call order."""
        if self.sink is None:
            return []
        return [label for marker, label in self.sink if marker == ">>"]
