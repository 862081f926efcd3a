"""
Tree walking over style_props nodes.

Traversal is generic over dataclass fields, so new node types participate
without registering anything. Rewrites never mutate their input; they return a
new tree that shares untouched subtrees with the original.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import fields, is_dataclass, replace
from typing import Any, TypeVar

from style_props.nodes import (
	Arrow,
	ArrayPattern,
	Element,
	Function,
	Identifier,
	Node,
	ObjectPattern,
	Param,
)

N = TypeVar("N", bound=Node)


def iter_children(node: Node) -> Iterator[Node]:
	"""Yield the direct child nodes of `node`, in field order."""
	if not is_dataclass(node):
		return
	for f in fields(node):  # pyright: ignore[reportArgumentType]
		yield from _nodes_in(getattr(node, f.name))


def _nodes_in(value: Any) -> Iterator[Node]:
	if isinstance(value, Node):
		yield value
	elif isinstance(value, (list, tuple)):
		for item in value:  # pyright: ignore[reportUnknownVariableType]
			yield from _nodes_in(item)


def walk(node: Node) -> Iterator[Node]:
	"""Pre-order traversal of `node` and all its descendants."""
	stack: list[Node] = [node]
	while stack:
		current = stack.pop()
		yield current
		children = list(iter_children(current))
		stack.extend(reversed(children))


def find_elements(root: Node) -> list[Element]:
	"""All JSX elements under `root` (root included), outermost first."""
	return [n for n in walk(root) if isinstance(n, Element)]


class NodeTransformer:
	"""Rebuilds a tree bottom-up, calling `visit_<ClassName>` where defined.

	A visit method receives the original node and returns its replacement.
	Nodes without a visit method get their children rebuilt.
	"""

	def visit(self, node: N) -> N:
		method: Callable[[Any], Any] | None = getattr(
			self, f"visit_{type(node).__name__}", None
		)
		if method is not None:
			return method(node)
		return self.generic_visit(node)

	def generic_visit(self, node: N) -> N:
		if not is_dataclass(node):
			return node
		changes: dict[str, Any] = {}
		for f in fields(node):  # pyright: ignore[reportArgumentType]
			if not f.init:
				continue
			old = getattr(node, f.name)
			new = self._visit_value(old)
			if new is not old:
				changes[f.name] = new
		if not changes:
			return node
		return replace(node, **changes)  # pyright: ignore[reportArgumentType]

	def _visit_value(self, value: Any) -> Any:
		if isinstance(value, Node):
			return self.visit(value)
		if isinstance(value, (list, tuple)):
			items = [self._visit_value(v) for v in value]  # pyright: ignore[reportUnknownVariableType]
			if all(a is b for a, b in zip(items, value)):  # pyright: ignore[reportUnknownArgumentType]
				return value
			return tuple(items) if isinstance(value, tuple) else items
		return value


def binds_name(params: list[Param] | tuple[Param, ...], name: str) -> bool:
	"""Whether a parameter list introduces a binding called `name`."""
	return any(_pattern_binds(p, name) for p in params)


def _pattern_binds(param: Param | None, name: str) -> bool:
	if param is None:
		return False
	if isinstance(param, str):
		return param == name
	if isinstance(param, ObjectPattern):
		return param.rest == name or any(
			_pattern_binds(target, name) for _, target in param.props
		)
	if isinstance(param, ArrayPattern):
		return any(_pattern_binds(target, name) for target in param.elements)
	return False


class _IdentifierRenamer(NodeTransformer):
	def __init__(self, target: str, replacement: str) -> None:
		self.target = target
		self.replacement = replacement

	def visit_Identifier(self, node: Identifier) -> Identifier:
		if node.name == self.target:
			return Identifier(self.replacement)
		return node

	def visit_Arrow(self, node: Arrow) -> Arrow:
		# Inner function rebinding the name shadows the outer one
		if binds_name(list(node.params), self.target):
			return node
		return self.generic_visit(node)

	def visit_Function(self, node: Function) -> Function:
		if binds_name(list(node.params), self.target):
			return node
		return self.generic_visit(node)


def rename_identifier(root: N, target: str, replacement: str) -> N:
	"""Return a copy of `root` with free references to `target` renamed.

	Object keys and member property names are not references and stay as-is.
	Nested functions that rebind `target` are left untouched.
	"""
	if target == replacement:
		return root
	return _IdentifierRenamer(target, replacement).visit(root)
