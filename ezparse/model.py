from __future__ import annotations

from typing import List, Literal, Optional, Protocol

from pydantic import BaseModel


Accessibility = Literal["public", "private"]

DEFAULT_DESCRIPTION = "TODO"
DEFAULT_TYPE = "var"


class PropertyInfo(BaseModel):
	name: str
	type: str = DEFAULT_TYPE
	accessibility: Accessibility = "public"
	description: Optional[str] = DEFAULT_DESCRIPTION


class MethodInfo(BaseModel):
	name: str
	type: str = DEFAULT_TYPE
	accessibility: Accessibility = "public"
	description: str = DEFAULT_DESCRIPTION
	parameters: List[PropertyInfo] = []

	def add_parameter(self, parameter: PropertyInfo) -> PropertyInfo:
		self.parameters.append(parameter)
		return parameter


class PropertyHolder(Protocol):
	"""Anything that accepts properties: classes, interfaces and enums."""

	name: str

	def add_property(self, prop: PropertyInfo) -> PropertyInfo:
		...


class MethodHolder(PropertyHolder, Protocol):
	"""Containers that also accept methods: classes and interfaces."""

	def add_method(self, method: MethodInfo) -> MethodInfo:
		...


class ClassInfo(BaseModel):
	name: str
	description: str = DEFAULT_DESCRIPTION
	methods: List[MethodInfo] = []
	properties: List[PropertyInfo] = []

	def add_method(self, method: MethodInfo) -> MethodInfo:
		self.methods.append(method)
		return method

	def add_property(self, prop: PropertyInfo) -> PropertyInfo:
		self.properties.append(prop)
		return prop


class InterfaceInfo(BaseModel):
	name: str
	description: str = DEFAULT_DESCRIPTION
	methods: List[MethodInfo] = []
	properties: List[PropertyInfo] = []

	def add_method(self, method: MethodInfo) -> MethodInfo:
		self.methods.append(method)
		return method

	def add_property(self, prop: PropertyInfo) -> PropertyInfo:
		self.properties.append(prop)
		return prop


class EnumInfo(BaseModel):
	name: str
	description: str = DEFAULT_DESCRIPTION
	properties: List[PropertyInfo] = []

	def add_property(self, prop: PropertyInfo) -> PropertyInfo:
		self.properties.append(prop)
		return prop


class NamespaceInfo(BaseModel):
	name: str
	classes: List[ClassInfo] = []
	enums: List[EnumInfo] = []
	interfaces: List[InterfaceInfo] = []

	def add_class(self, cls: ClassInfo) -> ClassInfo:
		self.classes.append(cls)
		return cls

	def add_enum(self, enum: EnumInfo) -> EnumInfo:
		self.enums.append(enum)
		return enum

	def add_interface(self, interface: InterfaceInfo) -> InterfaceInfo:
		self.interfaces.append(interface)
		return interface


class FileInfo(BaseModel):
	name: str
	namespaces: List[NamespaceInfo] = []

	def add_namespace(self, namespace: NamespaceInfo) -> NamespaceInfo:
		self.namespaces.append(namespace)
		return namespace

	@property
	def current_namespace(self) -> Optional[NamespaceInfo]:
		return self.namespaces[-1] if self.namespaces else None


class ParseResult(BaseModel):
	"""Parsed files of one directory scan."""

	root: str
	files: List[FileInfo] = []
