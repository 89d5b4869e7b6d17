from abc import ABC, abstractmethod
from dataclasses import asdict
import json
import logging
from pathlib import Path

from primacy.core.decision import SelectionDecision

logger = logging.getLogger(__name__)


class SelectionObserver(ABC):
    @abstractmethod
    def record(self, decision: SelectionDecision):
        pass


class ConsoleSelectionObserver(SelectionObserver):
    def record(self, decision: SelectionDecision):
        print("[PRIMACY SELECTION]")
        print(decision)


class FileSelectionObserver(SelectionObserver):
    def __init__(self, path: str = "selection_audit.jsonl"):
        self.path = Path(path)

    def record(self, decision: SelectionDecision):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(asdict(decision)) + "\n")
        logger.debug("Selection audit appended to %s", self.path)
