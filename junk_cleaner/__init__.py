"""
junk_cleaner
============

Delete editor backups and other junk files whose names match a set of
regular expressions.
"""

__version__ = "1.0.0"

__all__ = [
	"cleaner",
	"cli",
	"config",
	"patterns",
	"prompts",
	"scanner",
]
