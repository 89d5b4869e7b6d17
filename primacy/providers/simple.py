from primacy.providers.base import CalculatorService


class SimpleCoreCalculatorService(CalculatorService):
    """
    Base provider. Does the work itself, wraps nothing
    and keeps no state between calls.
    """

    def calculate(self) -> None:
        with self.tracer.span(self.trace_label):
            pass
