import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

PACKAGE_DIR = Path(__file__).resolve().parent
ROOT_DIR = PACKAGE_DIR.parent
ENV_PATH = ROOT_DIR / ".env"

# Environment wins over .env so tests and deployments can override values
load_dotenv(ENV_PATH, override=False)

DEFAULT_RULES_PATH = PACKAGE_DIR / "config" / "clinical_rules.yaml"


def _env_str(name: str, default: str) -> str:
    return (os.getenv(name, default) or default).strip()


def log_level() -> str:
    return _env_str("MEDICHAT_LOG_LEVEL", "INFO").upper()


def rules_path() -> Path:
    """Location of the clinical decision rule table.

    CLINICAL_RULES_PATH overrides the copy shipped inside the package.
    """
    override: Optional[str] = (os.getenv("CLINICAL_RULES_PATH") or "").strip() or None
    return Path(override) if override else DEFAULT_RULES_PATH
