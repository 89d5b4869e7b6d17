"""
Primacy Framework CLI

Registers the calculator providers, selects the default one
and runs a single calculation through it.
"""

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

from primacy.__version__ import __version__
from primacy.bootstrap import bootstrap
from primacy.config.loader import load_config, load_provider_config
from primacy.core.errors import PrimacyError
from primacy.observability.tracing import CallTracer
from primacy.runner import SimpleCalculator
from primacy.utils.logger import get_logger

logger = logging.getLogger(__name__)

EXIT_CONFIGURATION_ERROR = 2


# -------------------------------------------------
# PROGRAMMATIC ENTRY
# -------------------------------------------------
def run_once(
    config_path: Optional[str] = None,
    config: Optional[Dict[str, Any]] = None,
    tracer: Optional[CallTracer] = None,
) -> Dict[str, Any]:
    """
    Startup + one calculation through the default provider.

    Returns:
        {
            "selected": <identifier>,
            "rule": <selection rule>,
            "providers": [<identifier>, ...]
        }

    Raises NoDefaultSelectedError when no default could be chosen.
    """

    final_config = config if config is not None else load_config(config_path)
    provider_config = final_config.get("provider_engine") or load_provider_config(final_config)

    if tracer is None:
        tracer = CallTracer(log_calls=provider_config.trace_calls)

    registry, decision = bootstrap(final_config, tracer=tracer)

    with tracer.span("CmdLineRunner#run"):
        SimpleCalculator.from_registry(registry, tracer=tracer).do_calculation()

    logger.info("Calculation completed with provider %s", decision.selected)

    return {
        "selected": decision.selected,
        "rule": decision.rule,
        "providers": decision.identifiers,
    }


# -------------------------------------------------
# CLI ENTRY
# -------------------------------------------------
def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description=f"Primacy Framework v{__version__}"
    )

    parser.add_argument("--config", required=False, help="Path to config YAML")
    parser.add_argument(
        "--builtin-only",
        action="store_true",
        help="Do not register the bundled user-defined provider",
    )
    parser.add_argument("--version", action="store_true")
    parser.add_argument("-v", "--verbose", action="store_true")

    args = parser.parse_args(argv)

    # ---- VERSION ----
    if args.version:
        print(f"Primacy Framework v{__version__}")
        return 0

    # ---- CONFIG ----
    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError) as exc:
        parser.error(str(exc))

    if args.builtin_only:
        config["providers"]["user_defined"] = False
        config["provider_engine"] = load_provider_config(config)

    # ---- LOGGING ----
    level = logging.DEBUG if args.verbose else config["logging"].get("level", "INFO")
    get_logger("primacy", level=level)

    # ---- RUN ----
    try:
        result = run_once(config=config)
    except PrimacyError as exc:
        logger.error("Configuration error: %s", exc)
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_CONFIGURATION_ERROR

    print(f"Default provider: {result['selected']} ({result['rule']})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
