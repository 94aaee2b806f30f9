from __future__ import annotations

import os
from pathlib import Path


def _project_root() -> Path:
    # core/config.py -> rotina/core -> rotina -> project root
    return Path(__file__).resolve().parents[2]


PROJECT_ROOT: Path = _project_root()

# Logs (engine.log); created lazily by configure_logging
LOG_DIR: Path = Path(os.getenv("ROTINA_LOG_DIR", str(PROJECT_ROOT / "logs")))
LOG_LEVEL: str = os.getenv("ROTINA_LOG_LEVEL", "INFO").upper()

# Language of rule descriptions ("en" or "pt")
DEFAULT_LOCALE: str = os.getenv("ROTINA_LOCALE", "en")

# Person value meaning "everyone together"; such tasks show up for every person
SHARED_PERSON: str = os.getenv("ROTINA_SHARED_PERSON", "juntos")
