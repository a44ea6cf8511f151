#!/usr/bin/env python3
"""
Check parking tracker config files before handing them to park.py.

Prints one table row per file with every schema problem found, and exits
non-zero if any file is invalid.
"""
import argparse
import sys
from pathlib import Path
from tabulate import tabulate

from parking.config import load_schema, validate_config_file


def main(argv=None):
    parser = argparse.ArgumentParser(description="Validate parking config files")
    parser.add_argument("config_files", type=Path, nargs="+", help="YAML config files")
    args = parser.parse_args(argv)

    schema = load_schema()
    results = [(path, validate_config_file(path, schema)) for path in args.config_files]

    rows = [
        [path.name, "FAIL" if problems else "OK", "\n".join(problems) or "-"]
        for path, problems in results
    ]
    print(tabulate(rows, headers=["File", "Result", "Problems"], tablefmt="simple"))

    failed = sum(1 for _, problems in results if problems)
    if failed:
        print(f"\n{failed} of {len(results)} config files invalid.")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
