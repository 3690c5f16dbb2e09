"""
Pytest config to ensure local package imports work without installation.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def _add_repo_root_to_path() -> None:
	"""
	Insert the repo root into sys.path for local imports.
	"""
	repo_root = Path(__file__).resolve().parent.parent
	repo_root_str = str(repo_root)
	if repo_root_str not in sys.path:
		sys.path.insert(0, repo_root_str)


_add_repo_root_to_path()


class ScriptedConfirmer:
	"""
	Test-only confirmer that replays canned answers.
	"""

	def __init__(self, *answers: str) -> None:
		self.answers = list(answers)
		self.prompts: list[str] = []

	def confirm(self, prompt: str) -> bool:
		from junk_cleaner.prompts import is_yes

		self.prompts.append(prompt)
		answer = self.answers.pop(0) if self.answers else ""
		return is_yes(answer)


@pytest.fixture
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
	"""
	Point $HOME at an empty directory so ~/.cleanrc is under test control.
	"""
	home_dir = tmp_path / "home"
	home_dir.mkdir()
	monkeypatch.setenv("HOME", str(home_dir))
	return home_dir
