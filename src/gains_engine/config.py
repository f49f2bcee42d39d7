"""Environment-variable-based configuration for the CLI and dashboard."""

from __future__ import annotations

import os
from pathlib import Path

DATA_DIR: Path = Path(os.environ.get("GAINS_DATA_DIR", "~/.gains_engine")).expanduser()
CHARACTER_FILE: Path = Path(
    os.environ.get("GAINS_CHARACTER_FILE", str(DATA_DIR / "character.json"))
).expanduser()
HISTORY_FILE: Path = Path(
    os.environ.get("GAINS_HISTORY_FILE", str(DATA_DIR / "history.json"))
).expanduser()
LOG_LEVEL: str = os.environ.get("GAINS_LOG_LEVEL", "INFO").upper()
FITNESS_LEVEL: str = os.environ.get("GAINS_FITNESS_LEVEL", "beginner")
EQUIPMENT: list[str] = [
    name.strip()
    for name in os.environ.get("GAINS_EQUIPMENT", "").split(",")
    if name.strip()
]
