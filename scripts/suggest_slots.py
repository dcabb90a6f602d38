"""
Print travel-aware slot candidates for a JSON request.

    python scripts/suggest_slots.py request.json
    echo '{"org_id": "X", ...}' | python scripts/suggest_slots.py -
"""

import argparse
import json
import logging
import sys
import pathlib

sys.path.append(str(pathlib.Path(__file__).resolve().parents[1]))

from scheduler.config import get_settings
from scheduler.services.travel_slots import InputValidationError, suggest_slots_response


def load_request(path: str) -> dict:
    if path == "-":
        return json.load(sys.stdin)
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("request", help="Path to request JSON, or - for stdin")
    parser.add_argument("--full", action="store_true", help="Print the whole response, not only candidates")
    args = parser.parse_args(argv)

    logging.basicConfig(level=get_settings().resolved_log_level)

    try:
        response = suggest_slots_response(load_request(args.request))
    except InputValidationError as e:
        print(json.dumps({"error": str(e), "fields": e.fields}), file=sys.stderr)
        return 2

    if args.full:
        out = response.model_dump(mode="json")
    else:
        out = {"candidates": [c.model_dump(mode="json") for c in response.candidates]}
    print(json.dumps(out, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
