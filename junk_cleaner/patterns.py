#!/usr/bin/env python3
"""
Junk-name patterns: built-in defaults plus the user's ~/.cleanrc.
"""

from __future__ import annotations

# Standard Library
from dataclasses import dataclass
from pathlib import Path
import logging
import re

# local repo modules
from .config import CleanError

logger = logging.getLogger(__name__)

RC_FILENAME = ".cleanrc"

# editor backup suffix, then emacs auto-save names
DEFAULT_SOURCES = (
	r"~$",
	r"^#.*#$",
)

#============================================


class PatternError(CleanError):
	"""
	Raised when the pattern file cannot be read or holds a bad regex.
	"""

	def __init__(self, message: str, line: int | None = None, source: str = "") -> None:
		super().__init__(message)
		self.line = line
		self.source = source


@dataclass(slots=True, frozen=True)
class Pattern:
	source: str
	regex: re.Pattern
	line: int | None = None

	def matches(self, name: str) -> bool:
		return self.regex.search(name) is not None


#============================================


def default_rc_path() -> Path:
	"""
	Locate the per-user pattern file.

	Returns:
		Path to .cleanrc in the home directory named by $HOME.
	"""
	return Path.home() / RC_FILENAME


#============================================


def compile_pattern(source: str, line: int | None = None) -> Pattern:
	"""
	Compile one pattern line.

	Args:
		source: Regular expression text.
		line: 1-based line number in the pattern file, if any.

	Returns:
		Compiled Pattern.
	"""
	try:
		regex = re.compile(source)
	except re.error as exc:
		where = f"at line {line}" if line is not None else "in defaults"
		raise PatternError(
			f"invalid pattern {where}: {source!r} ({exc})", line=line, source=source
		) from exc
	return Pattern(source=source, regex=regex, line=line)


#============================================


def default_patterns() -> list[Pattern]:
	return [compile_pattern(source) for source in DEFAULT_SOURCES]


#============================================


def load_patterns(rc_path: Path | None = None) -> list[Pattern]:
	"""
	Build the ordered pattern list.

	Args:
		rc_path: Pattern file named by the user; it must exist. When None,
			~/.cleanrc is used and a missing file is fine.

	Returns:
		Defaults first, then one pattern per non-empty file line in file order.
	"""
	patterns = default_patterns()
	path = rc_path if rc_path is not None else default_rc_path()
	if not path.exists():
		if rc_path is not None:
			raise PatternError(f"pattern file does not exist: {path}")
		logger.info("No pattern file at %s; using defaults only", path)
		return patterns
	try:
		text = path.read_text(encoding="utf-8")
	except (OSError, UnicodeDecodeError) as exc:
		raise PatternError(f"cannot read pattern file {path}: {exc}") from exc
	# text mode already turned \r\n into \n; other separators belong to the regex
	for number, source in enumerate(text.split("\n"), start=1):
		if not source:
			continue
		patterns.append(compile_pattern(source, line=number))
	logger.info("Loaded %d patterns (%s)", len(patterns), path)
	return patterns


#============================================


def first_match(name: str, patterns: list[Pattern]) -> Pattern | None:
	"""
	Find the first pattern that matches a file name.

	Args:
		name: Base name of the file.
		patterns: Ordered patterns.

	Returns:
		The earliest matching Pattern, or None.
	"""
	for pattern in patterns:
		if pattern.matches(name):
			return pattern
	return None
