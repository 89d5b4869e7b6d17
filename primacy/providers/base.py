from abc import ABC, abstractmethod
from typing import Optional

from primacy.observability.tracing import CallTracer


class CalculatorService(ABC):
    """
    The single capability every provider implements.
    Strategy Pattern + Decorator chain
    """

    def __init__(self, tracer: Optional[CallTracer] = None):
        self.tracer = tracer or CallTracer()

    @property
    def trace_label(self) -> str:
        return f"{type(self).__name__}#calculate"

    @abstractmethod
    def calculate(self) -> None:
        pass


class DelegatingCalculatorService(CalculatorService):
    """
    Base for decorators: holds the service it wraps and
    forwards exactly one call to it per calculate().
    """

    def __init__(
        self,
        calculator_service: CalculatorService,
        tracer: Optional[CallTracer] = None,
    ):
        super().__init__(tracer)
        if not isinstance(calculator_service, CalculatorService):
            raise TypeError(
                f"{type(self).__name__} must wrap a CalculatorService, "
                f"got {type(calculator_service).__name__}"
            )
        self.calculator_service = calculator_service

    def calculate(self) -> None:
        with self.tracer.span(self.trace_label):
            self.calculator_service.calculate()
