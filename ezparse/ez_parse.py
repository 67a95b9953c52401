from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable, Iterable, List, Literal, Optional, Tuple, cast

from .aliases import expand_aliases
from .config import get_settings
from .errors import EzParseError, MissingContainerError
from .fields import (
	is_method,
	is_private_token,
	parse_custom_type,
	parse_description,
	parse_name,
	parse_parameter_list,
)
from .model import (
	Accessibility,
	ClassInfo,
	EnumInfo,
	FileInfo,
	InterfaceInfo,
	MethodHolder,
	MethodInfo,
	NamespaceInfo,
	PropertyHolder,
	PropertyInfo,
)


logger = logging.getLogger(__name__)

ItemKind = Literal["none", "class", "interface", "enum"]

# Prefix -> type name for the four built-in member types.
BUILTIN_TYPES: List[Tuple[str, str]] = [
	("i ", "int"),
	("s ", "string"),
	("f ", "float"),
	("b ", "bool"),
]

PRIVATE_MARKER = "_"


@dataclass(frozen=True)
class CurrentItem:
	"""The container that receives member lines, tagged with its kind."""

	kind: ItemKind = "none"
	ref: Optional[PropertyHolder] = None

	@property
	def accepts_methods(self) -> bool:
		return self.kind in ("class", "interface")


NO_ITEM = CurrentItem()


@dataclass(frozen=True)
class ParseState:
	file: FileInfo
	current: CurrentItem = NO_ITEM


def _current_namespace(state: ParseState, line: str, line_no: Optional[int]) -> NamespaceInfo:
	namespace = state.file.current_namespace
	if namespace is None:
		raise MissingContainerError(
			"Declaration outside of any namespace",
			line=line_no,
			text=line,
			hint="Open a namespace with 'ns <name>' first",
		)
	return namespace


def _open_namespace(state: ParseState, rest: str, line: str, line_no: Optional[int]) -> ParseState:
	namespace = state.file.add_namespace(NamespaceInfo(name=parse_name(rest)))
	logger.debug("Opened namespace %s", namespace.name)
	return replace(state, current=NO_ITEM)


def _open_class(state: ParseState, rest: str, line: str, line_no: Optional[int]) -> ParseState:
	namespace = _current_namespace(state, line, line_no)
	cls = namespace.add_class(ClassInfo(name=parse_name(rest), description=parse_description(rest)))
	logger.debug("Opened class %s.%s", namespace.name, cls.name)
	return replace(state, current=CurrentItem("class", cls))


def _open_enum(state: ParseState, rest: str, line: str, line_no: Optional[int]) -> ParseState:
	namespace = _current_namespace(state, line, line_no)
	enum = namespace.add_enum(EnumInfo(name=parse_name(rest), description=parse_description(rest)))
	logger.debug("Opened enum %s.%s", namespace.name, enum.name)
	return replace(state, current=CurrentItem("enum", enum))


def _open_interface(state: ParseState, rest: str, line: str, line_no: Optional[int]) -> ParseState:
	namespace = _current_namespace(state, line, line_no)
	interface = namespace.add_interface(
		InterfaceInfo(name=parse_name(rest), description=parse_description(rest))
	)
	logger.debug("Opened interface %s.%s", namespace.name, interface.name)
	return replace(state, current=CurrentItem("interface", interface))


# Checked in order; "if " must not be shadowed by the "i " member prefix.
CONTAINER_OPENERS: List[Tuple[str, Callable[[ParseState, str, str, Optional[int]], ParseState]]] = [
	("ns ", _open_namespace),
	("c ", _open_class),
	("e ", _open_enum),
	("if ", _open_interface),
]


def parse_parameter(segment: str) -> PropertyInfo:
	"""Build a method parameter from one ``<prefix> <name>`` segment."""
	for prefix, type_name in BUILTIN_TYPES:
		if segment.startswith(prefix):
			return PropertyInfo(
				name=parse_name(segment[len(prefix):]),
				type=type_name,
				accessibility="public",
				description=None,
			)
	return PropertyInfo(
		name=parse_name(segment),
		type=parse_custom_type(segment),
		accessibility="public",
		description=None,
	)


def _member_name(rest: str, accessibility: Accessibility) -> Tuple[str, Accessibility]:
	name = parse_name(rest)
	if name.startswith(PRIVATE_MARKER):
		return name[len(PRIVATE_MARKER):], "private"
	return name, accessibility


def _add_method(
	state: ParseState, accessibility: Accessibility, type_name: str, rest: str, line: str, line_no: Optional[int]
) -> ParseState:
	current = state.current
	if not current.accepts_methods:
		if current.kind == "enum":
			message = f"Enum {current.ref.name!r} cannot hold methods"
		else:
			message = "Method declared with no open class or interface"
		raise MissingContainerError(
			message,
			line=line_no,
			text=line,
			hint="Methods belong to a class ('c <name>') or interface ('if <name>')",
		)
	parameters = [parse_parameter(segment) for segment in parse_parameter_list(rest)]
	name, accessibility = _member_name(rest, accessibility)
	method = MethodInfo(
		name=name,
		type=type_name,
		accessibility=accessibility,
		description=parse_description(rest),
	)
	for parameter in parameters:
		method.add_parameter(parameter)
	cast(MethodHolder, current.ref).add_method(method)
	return state


def _add_property(
	state: ParseState, accessibility: Accessibility, type_name: str, rest: str, line: str, line_no: Optional[int]
) -> ParseState:
	current = state.current
	if current.ref is None:
		raise MissingContainerError(
			"Property declared with no open class, interface or enum",
			line=line_no,
			text=line,
			hint="Open a container with 'c', 'if' or 'e' before declaring members",
		)
	name, accessibility = _member_name(rest, accessibility)
	current.ref.add_property(
		PropertyInfo(
			name=name,
			type=type_name,
			accessibility=accessibility,
			description=parse_description(rest),
		)
	)
	return state


def _add_member(
	state: ParseState, accessibility: Accessibility, type_name: str, rest: str, line: str, line_no: Optional[int]
) -> ParseState:
	if is_method(rest):
		return _add_method(state, accessibility, type_name, rest, line, line_no)
	return _add_property(state, accessibility, type_name, rest, line, line_no)


def parse_line(state: ParseState, line: str, line_no: Optional[int] = None) -> ParseState:
	"""Classify one alias-expanded line and fold it into ``state``."""
	if not line:
		return state

	for prefix, opener in CONTAINER_OPENERS:
		if line.startswith(prefix):
			return opener(state, line[len(prefix):], line, line_no)

	for prefix, type_name in BUILTIN_TYPES:
		if line.startswith(prefix):
			return _add_member(state, "public", type_name, line[len(prefix):], line, line_no)
		if line.startswith(PRIVATE_MARKER + prefix):
			return _add_member(state, "private", type_name, line[len(prefix) + 1:], line, line_no)

	# Custom type: the whole line is the member text.
	accessibility: Accessibility = "private" if is_private_token(line) else "public"
	type_name = parse_custom_type(line)
	return _add_member(state, accessibility, type_name, line, line, line_no)


def parse_lines(source: str, lines: Iterable[str]) -> FileInfo:
	"""Parse EZ notation lines into a FileInfo named ``source``.

	Lines are trimmed and alias-expanded before classification. Structural
	errors carry ``source`` and the 1-based line number.
	"""
	state = ParseState(file=FileInfo(name=source))
	for line_no, raw in enumerate(lines, start=1):
		line = expand_aliases(raw.strip())
		try:
			state = parse_line(state, line, line_no)
		except EzParseError as err:
			raise err.with_location(source, line_no)
	return state.file


def parse_text(source: str, text: str) -> FileInfo:
	return parse_lines(source, text.split("\n"))


def parse_file(path: str, encoding: Optional[str] = None) -> FileInfo:
	encoding = encoding or get_settings().encoding
	with open(path, "r", encoding=encoding) as fh:
		text = fh.read()
	facts = parse_text(path, text)
	logger.info(
		"Parsed %s: %d namespaces, %d types",
		path,
		len(facts.namespaces),
		sum(len(ns.classes) + len(ns.enums) + len(ns.interfaces) for ns in facts.namespaces),
	)
	return facts
