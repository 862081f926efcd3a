from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Literal as Lit
from typing import TypeAlias

from typing_extensions import override


# =============================================================================
# Base classes
# =============================================================================
class Node(ABC):
	"""Base class for all tree nodes."""

	__slots__: tuple[str, ...] = ()

	@abstractmethod
	def emit(self, out: list[str]) -> None:
		"""Emit this node as JavaScript/JSX code into the output buffer."""


class Expr(Node, ABC):
	"""Base class for expression nodes."""

	__slots__: tuple[str, ...] = ()

	def precedence(self) -> int:
		"""Operator precedence (higher = binds tighter). Default: primary (20)."""
		return 20


class Stmt(Node, ABC):
	"""Base class for statement nodes."""

	__slots__: tuple[str, ...] = ()


# =============================================================================
# Expression Nodes
# =============================================================================


@dataclass(slots=True)
class Identifier(Expr):
	"""JS identifier: x, theme, myVar"""

	name: str

	@override
	def emit(self, out: list[str]) -> None:
		out.append(self.name)


@dataclass(slots=True)
class Literal(Expr):
	"""JS literal: 42, "hello", true, null"""

	value: int | float | str | bool | None

	@override
	def emit(self, out: list[str]) -> None:
		if self.value is None:
			out.append("null")
		elif isinstance(self.value, bool):
			out.append("true" if self.value else "false")
		elif isinstance(self.value, str):
			out.append('"')
			out.append(_escape_string(self.value))
			out.append('"')
		else:
			out.append(str(self.value))


class Undefined(Expr):
	"""JS undefined literal.

	Use Undefined() for JS `undefined`. Literal(None) emits `null`.
	"""

	__slots__: tuple[str, ...] = ()

	@override
	def emit(self, out: list[str]) -> None:
		out.append("undefined")

	@override
	def __eq__(self, other: object) -> bool:
		return isinstance(other, Undefined)

	@override
	def __hash__(self) -> int:
		return hash("undefined")

	@override
	def __repr__(self) -> str:
		return "Undefined()"


# Singleton instance for convenience
UNDEFINED = Undefined()


@dataclass(slots=True)
class Array(Expr):
	"""JS array: [a, b, c]

	A `None` element is a hole: [a, , c]
	"""

	elements: Sequence[Expr | None]

	@override
	def emit(self, out: list[str]) -> None:
		out.append("[")
		for i, e in enumerate(self.elements):
			if i > 0:
				out.append(", ")
			if e is not None:
				e.emit(out)
		out.append("]")


@dataclass(slots=True)
class Spread(Expr):
	"""JS spread: ...expr"""

	expr: Expr

	@override
	def emit(self, out: list[str]) -> None:
		out.append("...")
		_emit_paren(self.expr, ",", "right", out)


ObjectEntry: TypeAlias = tuple[str, Expr] | Spread


@dataclass(slots=True)
class Object(Expr):
	"""JS object: { key: value, ...spread }"""

	props: Sequence[ObjectEntry]

	@override
	def emit(self, out: list[str]) -> None:
		out.append("{")
		for i, entry in enumerate(self.props):
			if i > 0:
				out.append(", ")
			if isinstance(entry, Spread):
				entry.emit(out)
				continue
			k, v = entry
			out.append('"')
			out.append(_escape_string(k))
			out.append('": ')
			_emit_paren(v, ",", "right", out)
		out.append("}")

	def keys(self) -> list[str]:
		"""Keyed entries in order, spreads excluded."""
		return [e[0] for e in self.props if not isinstance(e, Spread)]


@dataclass(slots=True)
class Member(Expr):
	"""JS member access: obj.prop"""

	obj: Expr
	prop: str

	@override
	def emit(self, out: list[str]) -> None:
		_emit_primary(self.obj, out)
		out.append(".")
		out.append(self.prop)


@dataclass(slots=True)
class Subscript(Expr):
	"""JS subscript access: obj[key]"""

	obj: Expr
	key: Expr

	@override
	def emit(self, out: list[str]) -> None:
		_emit_primary(self.obj, out)
		out.append("[")
		self.key.emit(out)
		out.append("]")


@dataclass(slots=True)
class Call(Expr):
	"""JS function call: fn(args)"""

	callee: Expr
	args: Sequence[Expr]

	@override
	def emit(self, out: list[str]) -> None:
		_emit_primary(self.callee, out)
		out.append("(")
		for i, a in enumerate(self.args):
			if i > 0:
				out.append(", ")
			a.emit(out)
		out.append(")")


@dataclass(slots=True)
class Unary(Expr):
	"""JS unary expression: -x, !x, typeof x"""

	op: str
	operand: Expr

	@override
	def precedence(self) -> int:
		op = self.op
		tag = "+u" if op == "+" else ("-u" if op == "-" else op)
		return _PRECEDENCE.get(tag, 17)

	@override
	def emit(self, out: list[str]) -> None:
		if self.op in {"typeof", "void", "delete"}:
			out.append(self.op)
			out.append(" ")
		else:
			out.append(self.op)
		_emit_paren(self.operand, self.op, "unary", out)


@dataclass(slots=True)
class Binary(Expr):
	"""JS binary expression: x + y, a !== b"""

	left: Expr
	op: str
	right: Expr

	@override
	def precedence(self) -> int:
		return _PRECEDENCE.get(self.op, 0)

	@override
	def emit(self, out: list[str]) -> None:
		_emit_paren(self.left, self.op, "left", out)
		out.append(" ")
		out.append(self.op)
		out.append(" ")
		_emit_paren(self.right, self.op, "right", out)


@dataclass(slots=True)
class Ternary(Expr):
	"""JS ternary expression: cond ? a : b"""

	cond: Expr
	then: Expr
	else_: Expr

	@override
	def precedence(self) -> int:
		return _PRECEDENCE["?:"]

	@override
	def emit(self, out: list[str]) -> None:
		self.cond.emit(out)
		out.append(" ? ")
		self.then.emit(out)
		out.append(" : ")
		self.else_.emit(out)


@dataclass(slots=True)
class Template(Expr):
	"""JS template literal: `hello ${name}`

	Parts alternate: [str, Expr, str, Expr, str, ...]
	"""

	parts: Sequence[str | Expr]

	@override
	def emit(self, out: list[str]) -> None:
		out.append("`")
		for p in self.parts:
			if isinstance(p, str):
				out.append(_escape_template(p))
			else:
				out.append("${")
				p.emit(out)
				out.append("}")
		out.append("`")


# =============================================================================
# Patterns
# =============================================================================


@dataclass(slots=True)
class ObjectPattern(Node):
	"""Destructuring pattern: { colors, space: s, ...rest }

	Each prop is (key, target) where target is a binding name or a nested pattern.
	"""

	props: Sequence[tuple[str, Param]]
	rest: str | None = None

	@override
	def emit(self, out: list[str]) -> None:
		out.append("{ ")
		for i, (key, target) in enumerate(self.props):
			if i > 0:
				out.append(", ")
			if isinstance(target, str) and target == key:
				out.append(key)
				continue
			out.append(key)
			out.append(": ")
			_emit_param(target, out)
		if self.rest is not None:
			if self.props:
				out.append(", ")
			out.append("...")
			out.append(self.rest)
		out.append(" }")


@dataclass(slots=True)
class ArrayPattern(Node):
	"""Destructuring pattern: [a, , b]"""

	elements: Sequence[Param | None]

	@override
	def emit(self, out: list[str]) -> None:
		out.append("[")
		for i, target in enumerate(self.elements):
			if i > 0:
				out.append(", ")
			if target is not None:
				_emit_param(target, out)
		out.append("]")


Pattern: TypeAlias = ObjectPattern | ArrayPattern
Param: TypeAlias = str | Pattern


# =============================================================================
# Functions
# =============================================================================


@dataclass(slots=True)
class Arrow(Expr):
	"""JS arrow function: (x) => expr or (x) => { ... }"""

	params: Sequence[Param]
	body: Expr | Block

	@override
	def precedence(self) -> int:
		return 2

	@override
	def emit(self, out: list[str]) -> None:
		if len(self.params) == 1 and isinstance(self.params[0], str):
			out.append(self.params[0])
		else:
			out.append("(")
			for i, p in enumerate(self.params):
				if i > 0:
					out.append(", ")
				_emit_param(p, out)
			out.append(")")
		out.append(" => ")
		# Object bodies need parens to not parse as a block
		if isinstance(self.body, Object):
			out.append("(")
			self.body.emit(out)
			out.append(")")
		else:
			self.body.emit(out)


@dataclass(slots=True)
class Function(Expr):
	"""JS function: function name(params) { ... }"""

	params: Sequence[Param]
	body: Sequence[Stmt]
	name: str | None = None

	@override
	def emit(self, out: list[str]) -> None:
		out.append("function")
		if self.name:
			out.append(" ")
			out.append(self.name)
		out.append("(")
		for i, p in enumerate(self.params):
			if i > 0:
				out.append(", ")
			_emit_param(p, out)
		out.append(") {\n")
		for stmt in self.body:
			stmt.emit(out)
			out.append("\n")
		out.append("}")


# =============================================================================
# Statement Nodes
# =============================================================================


@dataclass(slots=True)
class Return(Stmt):
	"""JS return statement: return expr;"""

	value: Expr | None = None

	@override
	def emit(self, out: list[str]) -> None:
		out.append("return")
		if self.value is not None:
			out.append(" ")
			self.value.emit(out)
		out.append(";")


@dataclass(slots=True)
class Declare(Stmt):
	"""JS variable declaration: const { colors } = theme;"""

	target: Param
	value: Expr
	kind: Lit["let", "const", "var"] = "const"

	@override
	def emit(self, out: list[str]) -> None:
		out.append(self.kind)
		out.append(" ")
		_emit_param(self.target, out)
		out.append(" = ")
		self.value.emit(out)
		out.append(";")


@dataclass(slots=True)
class ExprStmt(Stmt):
	"""JS expression statement: expr;"""

	expr: Expr

	@override
	def emit(self, out: list[str]) -> None:
		self.expr.emit(out)
		out.append(";")


@dataclass(slots=True)
class Block(Stmt):
	"""JS block: { ... } - a sequence of statements."""

	body: Sequence[Stmt]

	@override
	def emit(self, out: list[str]) -> None:
		out.append("{\n")
		for stmt in self.body:
			stmt.emit(out)
			out.append("\n")
		out.append("}")


# =============================================================================
# JSX Nodes
# =============================================================================


@dataclass(slots=True, frozen=True)
class SourceLocation:
	"""Position of a node in its source file, 1-based line and 0-based column."""

	line: int
	column: int
	file: str | None = None

	@override
	def __str__(self) -> str:
		prefix = f"{self.file}:" if self.file else ""
		return f"{prefix}{self.line}:{self.column}"


@dataclass(slots=True)
class Attribute(Node):
	"""JSX attribute: name="value", name={expr} or a bare `name`.

	`value` is None for a bare attribute.
	"""

	name: str
	value: Expr | None = None

	@override
	def emit(self, out: list[str]) -> None:
		out.append(self.name)
		if self.value is None:
			return
		if isinstance(self.value, Literal) and isinstance(self.value.value, str):
			out.append('="')
			out.append(_escape_jsx_attr(self.value.value))
			out.append('"')
		else:
			out.append("={")
			self.value.emit(out)
			out.append("}")


@dataclass(slots=True)
class SpreadAttribute(Node):
	"""JSX spread attribute: {...props}"""

	expr: Expr

	@override
	def emit(self, out: list[str]) -> None:
		out.append("{...")
		self.expr.emit(out)
		out.append("}")


@dataclass(slots=True)
class Element(Expr):
	"""A JSX element. Tag "" is a fragment."""

	tag: str
	attrs: list[Attribute | SpreadAttribute] = field(default_factory=list)
	children: list[Child] = field(default_factory=list)
	loc: SourceLocation | None = None

	@override
	def emit(self, out: list[str]) -> None:
		if not self.tag:
			out.append("<>")
			for c in self.children:
				_emit_jsx_child(c, out)
			out.append("</>")
			return

		out.append("<")
		out.append(self.tag)
		for attr in self.attrs:
			out.append(" ")
			attr.emit(out)

		if not self.children:
			out.append(" />")
			return

		out.append(">")
		for c in self.children:
			_emit_jsx_child(c, out)
		out.append("</")
		out.append(self.tag)
		out.append(">")

	def get_attr(self, name: str) -> Attribute | None:
		for attr in self.attrs:
			if isinstance(attr, Attribute) and attr.name == name:
				return attr
		return None


Child: TypeAlias = str | Expr


# =============================================================================
# Emit logic
# =============================================================================


def emit(node: Node) -> str:
	"""Emit a node as JavaScript/JSX code."""
	out: list[str] = []
	node.emit(out)
	return "".join(out)


# Operator precedence table (higher = binds tighter)
_PRECEDENCE: dict[str, int] = {
	# Primary
	".": 20,
	"[]": 20,
	"()": 20,
	# Unary
	"!": 17,
	"+u": 17,
	"-u": 17,
	"typeof": 17,
	# Exponentiation (right-assoc)
	"**": 16,
	# Multiplicative
	"*": 15,
	"/": 15,
	"%": 15,
	# Additive
	"+": 14,
	"-": 14,
	# Relational
	"<": 12,
	"<=": 12,
	">": 12,
	">=": 12,
	"instanceof": 12,
	"in": 12,
	# Equality
	"==": 11,
	"!=": 11,
	"===": 11,
	"!==": 11,
	# Logical
	"&&": 7,
	"||": 6,
	"??": 6,
	# Ternary
	"?:": 4,
	# Comma
	",": 1,
}

_RIGHT_ASSOC = {"**"}


def _escape_string(s: str) -> str:
	"""Escape for double-quoted JS string literals."""
	return (
		s.replace("\\", "\\\\")
		.replace('"', '\\"')
		.replace("\n", "\\n")
		.replace("\r", "\\r")
		.replace("\t", "\\t")
		.replace("\u2028", "\\u2028")
		.replace("\u2029", "\\u2029")
	)


def _escape_template(s: str) -> str:
	"""Escape for template literal strings."""
	return (
		s.replace("\\", "\\\\")
		.replace("`", "\\`")
		.replace("${", "\\${")
		.replace("\n", "\\n")
		.replace("\r", "\\r")
		.replace("\t", "\\t")
	)


def _escape_jsx_text(s: str) -> str:
	"""Escape text content for JSX."""
	return s.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def _escape_jsx_attr(s: str) -> str:
	"""Escape attribute value for JSX."""
	return s.replace("&", "&amp;").replace('"', "&quot;")


def _emit_paren(node: Expr, parent_op: str, side: str, out: list[str]) -> None:
	"""Emit child with parens if needed for precedence."""
	needs_parens = False
	child_prec = node.precedence()
	parent_prec = _PRECEDENCE.get(parent_op, 0)
	if isinstance(node, Ternary) and parent_op != ",":
		# Ternary as child of an operator always needs parens
		needs_parens = True
	elif child_prec < parent_prec:
		needs_parens = True
	elif child_prec == parent_prec and isinstance(node, Binary):
		# Handle associativity
		if parent_op in _RIGHT_ASSOC:
			needs_parens = side == "left"
		else:
			needs_parens = side == "right"

	if needs_parens:
		out.append("(")
		node.emit(out)
		out.append(")")
	else:
		node.emit(out)


def _emit_primary(node: Expr, out: list[str]) -> None:
	"""Emit with parens if not primary precedence."""
	if node.precedence() < 20 or isinstance(node, Ternary):
		out.append("(")
		node.emit(out)
		out.append(")")
	else:
		node.emit(out)


def _emit_param(param: Param, out: list[str]) -> None:
	if isinstance(param, str):
		out.append(param)
	else:
		param.emit(out)


def _emit_jsx_child(child: Child, out: list[str]) -> None:
	"""Emit a single JSX child."""
	if isinstance(child, str):
		out.append(_escape_jsx_text(child))
		return
	if isinstance(child, Element):
		child.emit(out)
		return
	out.append("{")
	child.emit(out)
	out.append("}")
