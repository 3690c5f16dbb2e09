#!/usr/bin/env python3
"""
Command line interface for the junk file cleaner.
"""

# Standard Library
import argparse
import logging
from pathlib import Path
import sys

# local repo modules
from . import __version__
from .cleaner import Cleaner
from .config import CleanConfig, CleanError
from .patterns import RC_FILENAME, load_patterns
from .prompts import Confirmer
from .scanner import check_root, iter_candidates

PROG = "clean"

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2

EPILOG = f"""\
patterns:
  A file is a candidate when its name matches one of these regular
  expressions, tried in order (the first match wins):
    ~$        editor backup files (name~)
    ^#.*#$    auto-save files (#name#)
  Extra patterns are read from ~/{RC_FILENAME}, one expression per line.
  Blank lines are ignored; there is no comment syntax.

Without -a every match is confirmed interactively; the default answer is no.
"""

#============================================


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(
		prog=PROG,
		description=f"{PROG} {__version__}\nDelete junk files whose names match a set of patterns.",
		epilog=EPILOG,
		formatter_class=argparse.RawDescriptionHelpFormatter,
	)
	parser.add_argument(
		"-v",
		"--version",
		action="version",
		version=f"{PROG} {__version__}",
		help="Print the version and exit.",
	)
	parser.add_argument(
		"-V",
		"--verbose",
		dest="verbose",
		action="store_true",
		help="Print each examined file and each deletion.",
	)
	parser.add_argument(
		"-r",
		"--recursive",
		dest="recursive",
		action="store_true",
		help="Descend into subdirectories.",
	)
	parser.add_argument(
		"-a",
		"--automatic",
		dest="automatic",
		action="store_true",
		help="Delete every match without asking.",
	)
	parser.add_argument(
		"-d",
		"--dry-run",
		dest="dry_run",
		action="store_true",
		help="Only print the files that would be deleted.",
	)
	parser.add_argument(
		"-c",
		"--config",
		dest="config_path",
		help=f"Pattern file to use instead of ~/{RC_FILENAME}.",
	)
	parser.add_argument(
		"directory",
		nargs="?",
		default=None,
		help="Directory to clean (default: current directory).",
	)
	parser.set_defaults(verbose=False, recursive=False, automatic=False, dry_run=False)
	return parser


#============================================


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	"""
	Parse CLI arguments. Bad flags or extra positionals exit with status 2.
	"""
	parser = build_parser()
	return parser.parse_args(argv)


#============================================


def build_config(args: argparse.Namespace) -> CleanConfig:
	"""
	Build runtime config from args.
	"""
	root = Path(args.directory).expanduser() if args.directory else Path.cwd()
	rc_path = Path(args.config_path).expanduser() if args.config_path else None
	return CleanConfig(
		root=root,
		verbose=args.verbose,
		recursive=args.recursive,
		automatic=args.automatic,
		dry_run=args.dry_run,
		rc_path=rc_path,
	)


#============================================


def _color(text: str, code: str) -> str:
	if sys.stdout.isatty():
		return f"\033[{code}m{text}\033[0m"
	return text


#============================================


def run(config: CleanConfig, confirmer: Confirmer | None = None) -> int:
	"""
	Load patterns, scan, and clean.

	Args:
		config: Application configuration.
		confirmer: Interactive responder; standard input when None.

	Returns:
		Process exit status.
	"""
	try:
		# root and patterns are both checked before anything is touched
		check_root(config)
		patterns = load_patterns(config.rc_path)
		files = iter_candidates(config)
	except CleanError as exc:
		print(f"[ERROR] {exc}", file=sys.stderr)
		return EXIT_ERROR
	logging.info("Found %d files under %s", len(files), config.normalized_root())
	cleaner = Cleaner(config=config, patterns=patterns, confirmer=confirmer)
	report = cleaner.process(files)
	if config.verbose:
		print(
			f"{_color('[DONE]', '32')} examined={report.examined} matched={report.matched} "
			f"deleted={report.deleted} failed={report.failed}"
		)
	if report.failed:
		return EXIT_ERROR
	return EXIT_OK


#============================================


def main(argv: list[str] | None = None) -> int:
	"""
	Entry point for the CLI.
	"""
	args = parse_args(argv)
	config = build_config(args)
	if config.verbose:
		logging.basicConfig(level=logging.INFO)
	else:
		logging.basicConfig(level=logging.WARNING)
	return run(config)


#============================================


if __name__ == "__main__":
	sys.exit(main())
