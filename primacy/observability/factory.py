from primacy.observability.hooks import (
    ConsoleSelectionObserver,
    FileSelectionObserver,
    SelectionObserver,
)


def build_observers(config: dict) -> list[SelectionObserver]:
    observers = []

    for obs in config.get("observers", []):
        obs_type = obs.get("type")

        if obs_type == "console":
            observers.append(ConsoleSelectionObserver())

        elif obs_type == "file":
            observers.append(
                FileSelectionObserver(path=obs.get("path", "selection_audit.jsonl"))
            )

        else:
            raise ValueError(f"Unknown selection observer type: {obs_type}")

    return observers
