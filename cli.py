# cli.py
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pydantic import ValidationError

from cfr.errors import CfrError
from cfr.languages import LANGUAGES
from cfr.prefs import load_config
from cfr.runner import compile_and_run


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="cfr",
        description="Compile a single source file, run it on an input file and diff its output.",
    )
    ap.add_argument("source", help="Source file; language is taken from its extension")
    ap.add_argument("input", help="File fed to the program's stdin")
    ap.add_argument("expected", help="Expected output")
    ap.add_argument("-o", "--output", default=None, help="Where to store the program's stdout (default: <build-dir>/<name>.out)")
    ap.add_argument("--lang", default=None, help=f"Override language detection ({', '.join(LANGUAGES)})")
    ap.add_argument("--style", choices=["unified", "table"], default=None)
    ap.add_argument("--width", type=int, default=None, help="Column width for --style table")
    ap.add_argument("--timeout", type=int, default=None, help="Execution timeout in seconds")
    ap.add_argument("--build-dir", default=None)
    ap.add_argument("--keep", action="store_true", default=None, help="Keep compiled artifacts")
    ap.add_argument("--quiet", "-q", action="store_true", help="Only print the verdict and the diff")
    ap.add_argument("--strict", action="store_true", default=None, help="Exit with status 1 when outputs differ")
    ap.add_argument("--prefs", default=None, help="JSON prefs file (default: ./cfr.json)")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    overrides = {
        "style": args.style,
        "width": args.width,
        "timeout_s": args.timeout,
        "build_dir": args.build_dir,
        "keep_artifacts": args.keep,
        "strict": args.strict,
        "verbose": False if args.quiet else None,
    }
    try:
        config = load_config(args.prefs, overrides)
    except ValidationError as e:
        print(f"Error: invalid configuration: {e}")
        return 1

    output = args.output or str(Path(config.build_dir) / f"{Path(args.source).stem}.out")

    try:
        result = compile_and_run(
            args.source,
            args.input,
            output,
            args.expected,
            config=config,
            language=args.lang,
        )
    except CfrError as e:
        print(f"Error: {e}")
        return 1

    if not result.matched and config.strict:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
