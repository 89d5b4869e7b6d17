import logging
from typing import Optional

from primacy.observability.tracing import CallTracer
from primacy.providers.base import CalculatorService
from primacy.providers.registry import CapabilityRegistry

logger = logging.getLogger(__name__)


class SimpleCalculator:
    """Consumer that only ever sees the default provider."""

    def __init__(
        self,
        calculator_service: CalculatorService,
        tracer: Optional[CallTracer] = None,
    ):
        self.calculator_service = calculator_service
        self.tracer = tracer or CallTracer()

    @classmethod
    def from_registry(cls, registry: CapabilityRegistry, tracer=None):
        return cls(registry.get_default(), tracer=tracer)

    def do_calculation(self) -> None:
        with self.tracer.span("SimpleCalculator#doCalculation"):
            self.calculator_service.calculate()
