from primacy.providers.base import DelegatingCalculatorService


class NotSoSimpleCoreCalculatorService(DelegatingCalculatorService):
    """Built-in decorator around the simple core provider."""
