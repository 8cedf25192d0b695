# Mark services as a package and expose the modules tests monkeypatch.

from . import rules as rules  # noqa: F401
from . import triage as triage  # noqa: F401

__all__ = [
    "rules",
    "triage",
]
