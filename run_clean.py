#!/usr/bin/env python3
"""
Repo-root runner for junk_cleaner.

Examples:
	python run_clean.py --recursive --verbose ~/src/project
	python run_clean.py -a -r .
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> int:
	"""
	Run the CLI entrypoint with repo-root import behavior.
	"""
	repo_root = Path(__file__).resolve().parent
	if str(repo_root) not in sys.path:
		sys.path.insert(0, str(repo_root))

	from junk_cleaner.cli import main as cli_main

	return cli_main()


if __name__ == "__main__":
	sys.exit(main())
