#!/usr/bin/env python3
"""
Tests for candidate collection.
"""

import logging
from pathlib import Path

import pytest

from junk_cleaner.config import CleanConfig
from junk_cleaner.scanner import TraversalError, iter_candidates


def _tree(root: Path) -> None:
	(root / "a.txt").write_text("a")
	(root / "dir~").mkdir()
	sub = root / "sub"
	sub.mkdir()
	(sub / "old~").write_text("b")


def test_flat_scan_skips_subdirectories(tmp_path: Path):
	_tree(tmp_path)
	files = iter_candidates(CleanConfig(root=tmp_path))
	assert [p.name for p in files] == ["a.txt"]


def test_recursive_scan_finds_nested_files(tmp_path: Path):
	_tree(tmp_path)
	files = iter_candidates(CleanConfig(root=tmp_path, recursive=True))
	assert sorted(p.name for p in files) == ["a.txt", "old~"]
	assert all(p.is_file() for p in files)


def test_scan_order_is_stable(tmp_path: Path):
	for name in ("c", "a", "b"):
		(tmp_path / name).write_text(name)
	cfg = CleanConfig(root=tmp_path)
	assert iter_candidates(cfg) == iter_candidates(cfg)
	assert [p.name for p in iter_candidates(cfg)] == ["a", "b", "c"]


def test_missing_root_raises(tmp_path: Path):
	with pytest.raises(TraversalError):
		iter_candidates(CleanConfig(root=tmp_path / "nope"))


def test_file_root_raises(tmp_path: Path):
	target = tmp_path / "file.txt"
	target.write_text("x")
	with pytest.raises(TraversalError):
		iter_candidates(CleanConfig(root=target))


def _deny_listing(monkeypatch: pytest.MonkeyPatch, locked: Path) -> None:
	real_iterdir = Path.iterdir

	def fake_iterdir(self: Path):
		if self == locked:
			raise PermissionError(13, "Permission denied", str(self))
		return real_iterdir(self)

	monkeypatch.setattr(Path, "iterdir", fake_iterdir)


@pytest.mark.parametrize("recursive", [False, True])
def test_unreadable_root_raises(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, recursive: bool):
	(tmp_path / "junk~").write_text("x")
	_deny_listing(monkeypatch, tmp_path.resolve())
	with pytest.raises(TraversalError) as info:
		iter_candidates(CleanConfig(root=tmp_path, recursive=recursive))
	assert "cannot read directory" in str(info.value)


def test_unreadable_subdirectory_is_logged(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, caplog):
	_tree(tmp_path)
	sub = tmp_path.resolve() / "sub"
	_deny_listing(monkeypatch, sub)
	with caplog.at_level(logging.WARNING):
		files = iter_candidates(CleanConfig(root=tmp_path, recursive=True))
	assert [p.name for p in files] == ["a.txt"]
	assert "Skipping unreadable directory" in caplog.text
	assert str(sub) in caplog.text
