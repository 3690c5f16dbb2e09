#!/usr/bin/env python3
"""
Core cleaner: candidate -> first matching pattern -> delete decision.
"""

from __future__ import annotations

# Standard Library
import enum
import logging
from dataclasses import dataclass, field
from pathlib import Path
import sys

# local repo modules
from .config import CleanConfig
from .patterns import Pattern, first_match
from .prompts import Confirmer, StdinConfirmer

logger = logging.getLogger(__name__)

DELETE_PROMPT = "Delete? [y/n] "

#============================================


class FileOutcome(enum.Enum):
	SKIPPED = "skipped"
	KEPT = "kept"
	DELETED = "deleted"
	FAILED = "failed"
	WOULD_DELETE = "would_delete"


@dataclass(slots=True)
class FileResult:
	"""
	What happened to one candidate.
	"""

	path: Path
	outcome: FileOutcome
	pattern: Pattern | None = None
	error: str = ""


@dataclass(slots=True)
class CleanReport:
	results: list[FileResult] = field(default_factory=list)

	def count(self, outcome: FileOutcome) -> int:
		return sum(1 for result in self.results if result.outcome == outcome)

	@property
	def examined(self) -> int:
		return len(self.results)

	@property
	def matched(self) -> int:
		return sum(1 for result in self.results if result.pattern is not None)

	@property
	def deleted(self) -> int:
		return self.count(FileOutcome.DELETED)

	@property
	def failed(self) -> int:
		return self.count(FileOutcome.FAILED)


#============================================


class Cleaner:
	"""
	Decides, one file at a time, whether a candidate gets deleted.
	"""

	#============================================
	def __init__(
		self,
		config: CleanConfig,
		patterns: list[Pattern],
		confirmer: Confirmer | None = None,
	) -> None:
		self.config = config
		self.patterns = patterns
		if not confirmer:
			self.confirmer: Confirmer = StdinConfirmer()
		else:
			self.confirmer = confirmer

	#============================================
	def _color(self, text: str, code: str) -> str:
		if sys.stdout.isatty():
			return f"\033[{code}m{text}\033[0m"
		return text

	#============================================
	def _delete(self, path: Path, pattern: Pattern) -> FileResult:
		try:
			path.unlink()
		except OSError as exc:
			reason = exc.strerror or str(exc)
			print(f"[ERROR] Could not delete {path}: {reason}", file=sys.stderr)
			logger.debug("unlink failed for %s", path, exc_info=True)
			return FileResult(path=path, outcome=FileOutcome.FAILED, pattern=pattern, error=reason)
		if self.config.verbose:
			print(
				f"{self._color('[DELETE]', '31')} {path} "
				f"(pattern={pattern.source!r})"
			)
		return FileResult(path=path, outcome=FileOutcome.DELETED, pattern=pattern)

	#============================================
	def process_file(self, path: Path) -> FileResult:
		"""
		Run one candidate through matching and the delete decision.

		Args:
			path: Regular file found by the scanner.

		Returns:
			FileResult describing the terminal state.
		"""
		if self.config.verbose:
			print(f"{self._color('[INFO]', '34')} Examining {path}")
		pattern = first_match(path.name, self.patterns)
		if pattern is None:
			return FileResult(path=path, outcome=FileOutcome.SKIPPED)
		if self.config.dry_run:
			print(
				f"{self._color('[DRY RUN]', '33')} Would delete {path} "
				f"(pattern={pattern.source!r})"
			)
			return FileResult(path=path, outcome=FileOutcome.WOULD_DELETE, pattern=pattern)
		if self.config.automatic:
			return self._delete(path, pattern)
		print(f"{self._color('[MATCH]', '33')} {path} matches pattern {pattern.source!r}")
		if not self.confirmer.confirm(DELETE_PROMPT):
			return FileResult(path=path, outcome=FileOutcome.KEPT, pattern=pattern)
		return self._delete(path, pattern)

	#============================================
	def process(self, files: list[Path]) -> CleanReport:
		"""
		Process every candidate to completion before moving to the next.

		Returns:
			CleanReport with one result per file, in input order.
		"""
		report = CleanReport()
		for path in files:
			report.results.append(self.process_file(path))
		return report
