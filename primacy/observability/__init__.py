from .tracing import CallTracer
from .hooks import (
    SelectionObserver,
    ConsoleSelectionObserver,
    FileSelectionObserver,
)
from .factory import build_observers

__all__ = [
    "CallTracer",
    "SelectionObserver",
    "ConsoleSelectionObserver",
    "FileSelectionObserver",
    "build_observers",
]
