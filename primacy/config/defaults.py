DEFAULT_CONFIG = {
    # -----------------------------
    # PROVIDERS
    # -----------------------------
    "providers": {
        "user_defined": True,   # bundled extra provider on by default
        "extra_modules": [],    # import paths exposing register(registry, decorated, tracer)
    },

    # -----------------------------
    # PRIMARY SELECTION
    # -----------------------------
    "selection": {
        "preset": None,         # identifier defaulted before the selector runs
        "observers": [],        # [{"type": "console"}, {"type": "file", "path": ...}]
    },

    # -----------------------------
    # LOGGING
    # -----------------------------
    "logging": {
        "level": "INFO",
        "trace_calls": True,
    },
}
