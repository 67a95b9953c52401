"""Errors raised while parsing EZ notation."""

from __future__ import annotations

from typing import Any, Dict, Optional


class EzParseError(Exception):
	"""Base class for structural errors that abort a parse."""

	code: Optional[str] = None
	hint: Optional[str] = None

	def __init__(
		self,
		message: str,
		*,
		path: Optional[str] = None,
		line: Optional[int] = None,
		text: Optional[str] = None,
		code: Optional[str] = None,
		hint: Optional[str] = None,
	) -> None:
		super().__init__(message)
		self.message = message
		self.path = path
		self.line = line
		self.text = text
		if code is not None:
			self.code = code
		if hint is not None:
			self.hint = hint

	def with_location(self, path: Optional[str], line: Optional[int]) -> "EzParseError":
		"""Fill in the source path and line number if they are not known yet."""
		if self.path is None:
			self.path = path
		if self.line is None:
			self.line = line
		return self

	def describe_location(self) -> str:
		if self.path and self.line is not None:
			return f"{self.path}:{self.line}"
		if self.path:
			return self.path
		if self.line is not None:
			return f"line {self.line}"
		return "unknown location"

	def format(self) -> str:
		meta = [self.describe_location()]
		if self.code:
			meta.append(self.code)
		parts = [f"{self.message} ({'; '.join(meta)})"]
		if self.text is not None:
			parts.append(f"Line: {self.text!r}")
		if self.hint:
			parts.append(f"Hint: {self.hint}")
		return " ".join(parts)

	def to_dict(self) -> Dict[str, Any]:
		return {
			"message": self.message,
			"code": self.code,
			"path": self.path,
			"line": self.line,
			"text": self.text,
			"hint": self.hint,
		}

	def __str__(self) -> str:
		return self.format()


class MissingContainerError(EzParseError):
	"""A declaration appeared before any container that could own it."""

	code = "MISSING_CONTAINER"


class MalformedParameterListError(EzParseError):
	"""A method line's parameter list could not be delimited."""

	code = "MALFORMED_PARAMETERS"


__all__ = [
	"EzParseError",
	"MissingContainerError",
	"MalformedParameterListError",
]
