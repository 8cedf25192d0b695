# medichat/__main__.py
"""Run a symptom check from the command line.

    python -m medichat fever headache --age 30
    python -m medichat cough sore_throat --prompt
"""
import argparse
import json
import sys
from typing import List, Optional

from medichat.services.prompts import render_symptom_prompt
from medichat.services.symptom_checker import build_response, check_symptoms
from medichat.utils.exceptions import MedichatError
from medichat.utils.logging_utils import configure_logging
from medichat.utils.tracing import new_trace_id


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="medichat", description="Rule-based symptom urgency check")
    parser.add_argument("symptoms", nargs="*", help="symptom ids, e.g. chest_pain fever")
    parser.add_argument("--age", type=int, default=None)
    parser.add_argument("--gender", default=None)
    parser.add_argument("--duration", default=None)
    parser.add_argument("--severity", default=None)
    parser.add_argument("--prompt", action="store_true", help="print the analysis prompt instead of the assessment")
    args = parser.parse_args(argv)

    configure_logging()
    new_trace_id()

    payload = {
        "symptoms": args.symptoms,
        "age": args.age,
        "gender": args.gender,
        "duration": args.duration,
        "severity": args.severity,
    }
    try:
        context = check_symptoms(payload)
    except MedichatError as exc:
        print(json.dumps(exc.to_envelope(), indent=2), file=sys.stderr)
        return 2

    if args.prompt:
        print(render_symptom_prompt(context))
    else:
        response = build_response(context, analysis="")
        print(response.model_dump_json(by_alias=True, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
