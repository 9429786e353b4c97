from __future__ import annotations

import argparse
import sys
from typing import List, NoReturn, Optional

from file_manifest.pipeline.run import MODES, run_pipeline
from file_manifest.settings import load_cfg

PROG = "file-manifest"

DETAILED_HELP = f"""\
This tool offers two distinct modes: hashing and cleanup.

Hashing mode: files in a given directory are processed by calculating their MD5 hash and size.
The results are appended to the output file in JSON Lines format.
If a file's size has not changed since it was last recorded, hashing is skipped to save time.

Cleanup mode: rewrite the output file, removing entries of files that have been deleted
and keeping only the latest entry for files that appear multiple times.

  -d, --directory DIRECTORY       Directory to process. (Hashing mode only)
  -o, --output FILE               Output (manifest) file.
  -m, --mode MODE                 Mode: "hashing" or "cleanup" (case-insensitive).
  -c, --config FILE               Optional settings YAML (see configs/manifest.yaml).
  -h, --help                      Print this help.

Example usage:

  {PROG} -d /path/to/your/directory -o /path/to/your/output.jsonl -m hashing
  {PROG} -o /path/to/your/output.jsonl -m cleanup
"""


class UsageError(Exception):
    pass


class _HelpAction(argparse.Action):
    # exits as soon as -h is consumed, before later arguments are checked
    def __init__(self, option_strings, dest, **kwargs):
        super().__init__(option_strings, dest, nargs=0, default=argparse.SUPPRESS)

    def __call__(self, parser, namespace, values, option_string=None):
        print(DETAILED_HELP)
        sys.exit(0)


class _Parser(argparse.ArgumentParser):
    # argparse exits 2 on stderr; usage errors here exit 1 on stdout
    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    p = _Parser(prog=PROG, add_help=False)
    p.add_argument("-h", "--help", action=_HelpAction)
    p.add_argument("-d", "--directory", default=None)
    p.add_argument("-o", "--output", default=None)
    p.add_argument("-m", "--mode", default=None, type=str.lower)
    p.add_argument("-c", "--config", default=None)
    return p


def _usage_exit(reason: str) -> NoReturn:
    print(reason)
    print(DETAILED_HELP)
    sys.exit(1)


def main(argv: Optional[List[str]] = None) -> None:
    try:
        args = build_parser().parse_args(argv)
    except UsageError as e:
        _usage_exit(str(e))

    if args.mode not in MODES:
        _usage_exit("The mode must be specified as either 'hashing' or 'cleanup'.")
    if args.output is None:
        _usage_exit("The output file must be specified.")
    if args.mode == "hashing" and args.directory is None:
        _usage_exit("In hashing mode, the directory must be specified.")

    try:
        cfg = load_cfg(args.config)
        run_pipeline(args.mode, args.output, directory=args.directory, cfg=cfg)
        sys.exit(0)
    except Exception as e:
        print(f"[ERROR] {type(e).__name__}: {e}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
