from __future__ import annotations

import re
from typing import List, Tuple


# Wrapper tokens only expand when they start a line or follow whitespace and
# are followed by whitespace.
_TOKEN_START = r"(?:^|(?<=\s))"
_TOKEN_END = r"(?=\s)"


def _wrapper(prefix: str, replacement: str) -> Tuple[re.Pattern, str]:
	pattern = re.compile(_TOKEN_START + re.escape(prefix) + r"(\w+)" + _TOKEN_END)
	return pattern, replacement + r"<\1>"


# Order matters: rules are applied top to bottom.
ALIAS_RULES: List[Tuple[re.Pattern, str]] = [
	_wrapper("ob-", "IObservable"),
	_wrapper("_ob-", "_IObservable"),
	_wrapper("l-", "List"),
	_wrapper("_l-", "_List"),
	(re.compile(r"<i>"), "<int>"),
	(re.compile(r"<f>"), "<float>"),
	(re.compile(r"<s>"), "<string>"),
	(re.compile(r"<b>"), "<bool>"),
	(re.compile(r"\[i\]"), "int[]"),
	(re.compile(r"\[s\]"), "string[]"),
	(re.compile(r"\[f\]"), "float[]"),
	(re.compile(r"\[b\]"), "bool[]"),
]


def expand_aliases(line: str) -> str:
	"""Rewrite shorthand type tokens (``l-X``, ``ob-X``, ``<i>``, ``[s]``...) to canonical form."""
	for pattern, replacement in ALIAS_RULES:
		line = pattern.sub(replacement, line)
	return line
