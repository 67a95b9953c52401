from __future__ import annotations

import re
from typing import List

from .errors import MalformedParameterListError
from .model import DEFAULT_DESCRIPTION, DEFAULT_TYPE


_METHOD_RE = re.compile(r"\(.*\)")
# Name sits at line end, before a " #" comment or before an opening paren.
_NAME_RE = re.compile(r"[.\w]+$|[.\w]+(?=\s#)|[.\w]+(?=\()")
_DESCRIPTION_RE = re.compile(r"(?<=#\s).+$")
_CUSTOM_TYPE_RE = re.compile(r"^[\w<>]+(?=\s)")
_PRIVATE_TOKEN_RE = re.compile(r"^_\w")

PARAMETER_SEPARATOR = ", "


def is_method(line: str) -> bool:
	return _METHOD_RE.search(line) is not None


def is_private_token(line: str) -> bool:
	return _PRIVATE_TOKEN_RE.match(line) is not None


def parse_name(line: str) -> str:
	match = _NAME_RE.search(line)
	return match.group(0) if match else ""


def parse_description(line: str) -> str:
	match = _DESCRIPTION_RE.search(line)
	return match.group(0) if match else DEFAULT_DESCRIPTION


def parse_custom_type(line: str) -> str:
	match = _CUSTOM_TYPE_RE.match(line)
	return match.group(0) if match else DEFAULT_TYPE


def _parens_balanced(line: str) -> bool:
	depth = 0
	for ch in line:
		if ch == "(":
			depth += 1
		elif ch == ")":
			depth -= 1
			if depth < 0:
				return False
	return depth == 0


def parse_parameter_list(line: str) -> List[str]:
	"""Return the non-empty parameter segments between the first ``(`` and the last ``)``.

	Raises MalformedParameterListError when the line has no parentheses or
	they do not nest properly.
	"""
	if "(" not in line or not _parens_balanced(line):
		raise MalformedParameterListError(
			"Unbalanced parentheses in method declaration",
			text=line,
			hint="Every '(' in a method line needs a matching ')' after it",
		)
	inner = line[line.index("(") + 1:line.rindex(")")]
	return [segment for segment in inner.split(PARAMETER_SEPARATOR) if segment]
