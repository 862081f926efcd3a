from __future__ import annotations

from collections.abc import Sequence
from typing import Literal as Lit
from typing import TypeAlias

from style_props.nodes import Array, Expr, Literal, Ternary, Unary

ValueShape: TypeAlias = Lit["literal", "array", "conditional", "computed"]

NEGATION_MARKER = "-"


def classify_value(value: Expr) -> ValueShape:
	if isinstance(value, Array):
		return "array"
	if isinstance(value, Ternary):
		return "conditional"
	if isinstance(value, Literal):
		return "literal"
	if isinstance(value, Unary) and value.op == "-" and isinstance(value.operand, Literal):
		return "literal"
	return "computed"


def split_negative(value: Expr) -> tuple[Expr, bool]:
	"""Strip a leading negation from a value.

	-3 and "-large" come back as (3, True) and ("large", True). Anything else
	is returned unchanged with False.
	"""
	if isinstance(value, Unary) and value.op == NEGATION_MARKER:
		return value.operand, True
	if (
		isinstance(value, Literal)
		and isinstance(value.value, str)
		and value.value.startswith(NEGATION_MARKER)
	):
		return Literal(value.value[1:]), True
	if (
		isinstance(value, Literal)
		and isinstance(value.value, (int, float))
		and not isinstance(value.value, bool)
		and value.value < 0
	):
		return Literal(-value.value), True
	return value, False


def is_skippable(value: Expr | None) -> bool:
	"""Explicit null (or an empty array slot) never produces a declaration."""
	return value is None or (isinstance(value, Literal) and value.value is None)


def normalize_responsive(
	elements: Sequence[Expr | None],
	breakpoint_count: int,
	*,
	pad: bool = False,
) -> list[Expr]:
	"""Fill null slots from the nearest preceding non-null element.

	Slots past `breakpoint_count` are dropped. With `pad`, the result is
	extended to exactly `breakpoint_count + 1` slots so every breakpoint gets a
	value. A leading null stays null.

		['l', null, 'm'] -> ['l', 'l', 'm']
	"""
	size = breakpoint_count + 1 if pad else min(len(elements), breakpoint_count + 1)
	result: list[Expr] = []
	for i in range(size):
		element = elements[i] if i < len(elements) else None
		if element is None or is_skippable(element):
			element = result[i - 1] if i > 0 else Literal(None)
		result.append(element)
	return result


__all__ = [
	"NEGATION_MARKER",
	"ValueShape",
	"classify_value",
	"is_skippable",
	"normalize_responsive",
	"split_negative",
]
