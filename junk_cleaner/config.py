#!/usr/bin/env python3
from __future__ import annotations

# Standard Library
from dataclasses import dataclass, field
from pathlib import Path

#============================================


class CleanError(RuntimeError):
	"""
	Base error for fatal problems that stop a run before anything is deleted.
	"""


#============================================


@dataclass(slots=True, frozen=True)
class CleanConfig:
	"""
	Runtime configuration settings.

	Attributes:
		root: Directory to scan.
		verbose: Print each examined file and each action taken.
		recursive: Descend into subdirectories.
		automatic: Delete matches without asking.
		dry_run: Report matches without deleting or asking.
		rc_path: Pattern file override; None means ~/.cleanrc.
	"""
	root: Path = field(default_factory=Path.cwd)
	verbose: bool = False
	recursive: bool = False
	automatic: bool = False
	dry_run: bool = False
	rc_path: Path | None = None

	#============================================
	def normalized_root(self) -> Path:
		"""
		Normalize the search root.

		Returns:
			Absolute Path with ~ expanded.
		"""
		root: Path = self.root.expanduser().resolve()
		return root
