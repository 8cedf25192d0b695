"""Loader for the clinical decision rule table.

The table is reference text for the analysis prompt; nothing here evaluates
the trigger phrases against patient data.
"""
import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from medichat import settings
from medichat.utils.exceptions import RulesConfigError

logger = logging.getLogger("medichat")

URGENCY_TIERS = ("emergency", "high", "medium", "low")

RuleTable = Dict[str, Dict[str, List[str]]]


def _validate(raw: object, path: Path) -> RuleTable:
    if not isinstance(raw, dict) or not isinstance(raw.get("domains"), dict):
        raise RulesConfigError(f"rule table at {path} has no 'domains' mapping")
    table: RuleTable = {}
    for domain, buckets in raw["domains"].items():
        if not isinstance(buckets, dict):
            raise RulesConfigError(f"domain '{domain}' in {path} is not a mapping")
        missing = [tier for tier in URGENCY_TIERS if tier not in buckets]
        if missing:
            raise RulesConfigError(
                f"domain '{domain}' in {path} is missing tiers",
                details={"missing": missing},
            )
        # keep tier order fixed regardless of YAML order
        table[str(domain)] = {tier: [str(p) for p in (buckets.get(tier) or [])] for tier in URGENCY_TIERS}
    return table


def load_rules(path: Optional[Path] = None) -> RuleTable:
    """Read and validate the rule table from YAML."""
    path = path or settings.rules_path()
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        raise RulesConfigError(f"cannot read clinical rules from {path}", details=str(exc)) from exc
    table = _validate(raw, path)
    logger.info({"function": "load_rules", "path": str(path), "domains": list(table)})
    return table


@lru_cache(maxsize=1)
def get_rules() -> RuleTable:
    """Process-wide cached copy of the rule table.

    A broken CLINICAL_RULES_PATH override falls back to the packaged table;
    errors in the packaged table itself propagate.
    """
    path = settings.rules_path()
    try:
        return load_rules(path)
    except RulesConfigError as exc:
        if path == settings.DEFAULT_RULES_PATH:
            raise
        logger.warning({
            "function": "get_rules",
            "path": str(path),
            "error": exc.message,
            "fallback": str(settings.DEFAULT_RULES_PATH),
        })
        return load_rules(settings.DEFAULT_RULES_PATH)


def rules_for_domain(domain: str) -> Optional[Dict[str, List[str]]]:
    return get_rules().get(domain)
