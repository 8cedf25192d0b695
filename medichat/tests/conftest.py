import os
import sys
from pathlib import Path

import pytest

# Keep developer .env values (log level, rule overrides) out of test runs
os.environ.setdefault("MEDICHAT_LOG_LEVEL", "INFO")
os.environ.pop("CLINICAL_RULES_PATH", None)

# Ensure the project root is on sys.path so `import medichat` works when
# running pytest from a checkout without an editable install.
ROOT_DIR = Path(__file__).resolve().parents[2]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from medichat.services import rules as rules_mod  # noqa: E402
from medichat.utils.tracing import TRACE_ID_CTX_VAR  # noqa: E402


@pytest.fixture(autouse=True)
def reset_rules_cache():
    # every test sees a fresh rule table load
    rules_mod.get_rules.cache_clear()
    yield
    rules_mod.get_rules.cache_clear()


@pytest.fixture(autouse=True)
def reset_trace_id():
    token = TRACE_ID_CTX_VAR.set("")
    yield
    TRACE_ID_CTX_VAR.reset(token)


@pytest.fixture
def write_rules(tmp_path):
    """Write a YAML rule table to a temp file and return its path."""
    def _write(text: str) -> Path:
        path = tmp_path / "clinical_rules.yaml"
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def cold_payload():
    return {"symptoms": ["cough", "sore_throat"], "age": 25}


@pytest.fixture
def cardiac_payload():
    return {
        "symptoms": ["chest_pain", "shortness_of_breath", "nausea"],
        "age": 58,
        "gender": "male",
        "duration": "2 hours",
        "severity": "severe",
    }
