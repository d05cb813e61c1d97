import os
from pathlib import Path

CONFIG_ENV = "DESIREDCAPS_CONFIG"


def get_configfile(raw: str | None = None) -> Path | None:
    # Priority: CLI > ENV. No file is a valid setup: defaults and environment apply.
    raw = raw or os.getenv(CONFIG_ENV)

    if raw is None:
        return None

    file = Path(raw)

    if not file.is_file():
        raise SystemExit(
            f"[config] Configuration file not found: '{file}'.\n"
            "  - Use --config <file.yaml>\n"
            f"  - Or set the {CONFIG_ENV} environment variable\n"
            "  - Or omit both to run with defaults."
        )

    return file
