# generate_summary.py

# Summarize a test results JSON file for CI: print the counts from its stats
# block and write a compact summary JSON.

import argparse
import json
import sys
from datetime import datetime, timezone
from pathlib import Path

STAT_KEYS = {
    "totalTests": "tests",
    "passes": "passes",
    "failures": "failures",
    "pending": "pending",
    "duration": "duration",
}


def build_summary(results: dict) -> dict:
    stats = results.get("stats") or {}
    summary = {key: stats.get(source) or 0 for key, source in STAT_KEYS.items()}
    summary["timestamp"] = datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return summary


def print_summary(summary: dict) -> None:
    print("Test Summary:")
    print(f"  Total: {summary['totalTests']}")
    print(f"  Passed: {summary['passes']}")
    print(f"  Failed: {summary['failures']}")
    print(f"  Pending: {summary['pending']}")
    print(f"  Duration: {summary['duration']}ms")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Summarize a test results JSON file for CI.")
    parser.add_argument("results", nargs="?", default="test-results.json")
    parser.add_argument("--output", default="test-summary.json")
    args = parser.parse_args(argv)

    results_path = Path(args.results)
    if not results_path.exists():
        print("No test results found")
        return 0

    try:
        results = json.loads(results_path.read_text(encoding="utf-8"))
        summary = build_summary(results)
    except (OSError, ValueError, AttributeError) as exc:
        print(f"Error generating test summary: {exc}", file=sys.stderr)
        return 1

    print_summary(summary)
    Path(args.output).write_text(json.dumps(summary, indent=2), encoding="utf-8")
    return 0


if __name__ == "__main__":
    sys.exit(main())
