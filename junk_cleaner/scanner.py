#!/usr/bin/env python3
"""
Directory scanner for cleanup.
"""

# Standard Library
import logging
from pathlib import Path

# local repo modules
from .config import CleanConfig, CleanError

logger = logging.getLogger(__name__)

#============================================


class TraversalError(CleanError):
	"""
	Raised when the search root is missing or cannot be listed.
	"""


#============================================


def check_root(config: CleanConfig) -> Path:
	"""
	Resolve the search root and make sure it is a directory.

	Args:
		config: Application configuration.

	Returns:
		Normalized root path.
	"""
	root = config.normalized_root()
	if not root.exists():
		raise TraversalError(f"directory does not exist: {root}")
	if not root.is_dir():
		raise TraversalError(f"not a directory: {root}")
	return root


#============================================


def _list_dir(directory: Path) -> list[Path]:
	return sorted(directory.iterdir())


#============================================


def _collect(entries: list[Path], recursive: bool, paths: list[Path]) -> None:
	"""
	Depth-first walk over already listed entries.

	Unreadable subdirectories are logged and skipped.
	"""
	for path in entries:
		if path.is_dir():
			if not recursive or path.is_symlink():
				continue
			try:
				children = _list_dir(path)
			except OSError as exc:
				reason = exc.strerror or str(exc)
				logger.warning("Skipping unreadable directory %s: %s", path, reason)
				continue
			_collect(children, recursive, paths)
			continue
		if not path.is_file():
			continue
		paths.append(path)


#============================================


def iter_candidates(config: CleanConfig) -> list[Path]:
	"""
	Collect regular files under the root according to config.

	Args:
		config: Application configuration.

	Returns:
		Files in depth-first order, sorted within each directory.
		Directories are never included.
	"""
	root = check_root(config)
	try:
		entries = _list_dir(root)
	except OSError as exc:
		raise TraversalError(f"cannot read directory {root}: {exc}") from exc
	paths: list[Path] = []
	_collect(entries, config.recursive, paths)
	return paths
