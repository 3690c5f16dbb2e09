#!/usr/bin/env python3
"""
Yes/no confirmation before a file is deleted.
"""

from __future__ import annotations

from typing import Protocol


class Confirmer(Protocol):
	def confirm(self, prompt: str) -> bool:
		"""
		Ask a yes/no question and return True only for yes.
		"""


#============================================


def is_yes(answer: str) -> bool:
	"""
	Interpret a reply; only a leading y or Y means yes.
	"""
	return answer.lower().startswith("y")


class StdinConfirmer:
	"""
	Ask on standard input.
	"""

	def confirm(self, prompt: str) -> bool:
		try:
			answer = input(prompt)
		except EOFError:
			print()
			return False
		return is_yes(answer)
