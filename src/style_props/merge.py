"""
Merging generated entries into an existing `css` declaration.

Generated entries always come first; the author's own entries follow so they
win on key collisions. Nothing from the existing declaration is dropped.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from style_props.context import TransformContext
from style_props.errors import MissingReturnInMergeTarget
from style_props.nodes import (
	Arrow,
	Block,
	Declare,
	Expr,
	Function,
	Identifier,
	Object,
	ObjectEntry,
	Param,
	Return,
	Spread,
	Stmt,
)
from style_props.visitor import rename_identifier

logger = logging.getLogger(__name__)


def _returned_entries(value: Expr | None) -> list[ObjectEntry]:
	if value is None:
		return []
	if isinstance(value, Object):
		return list(value.props)
	# Anything else is spread so the author's styles still apply
	return [Spread(value)]


def _split_block(body: Sequence[Stmt]) -> tuple[list[Stmt], list[ObjectEntry]]:
	statements = [s for s in body if not isinstance(s, Return)]
	ret = next((s for s in body if isinstance(s, Return)), None)
	if ret is None:
		raise MissingReturnInMergeTarget(
			"Existing css function has a block body without a return statement"
		)
	return statements, _returned_entries(ret.value)


def extract_function_parts(
	ctx: TransformContext,
	fn: Arrow | Function,
) -> tuple[list[Stmt], list[ObjectEntry]]:
	"""Split an existing css function into body statements and returned entries.

	The function's parameter is rebound to the generated function's parameter:
	a plain name is renamed throughout the body, a destructuring pattern is
	re-declared from the new parameter as the first statement.
	"""
	param = ctx.theme_param
	statements: list[Stmt] = []
	body: Expr | Block = fn.body if isinstance(fn, Arrow) else Block(list(fn.body))

	existing: Param | None = fn.params[0] if fn.params else None
	if isinstance(existing, str):
		body = rename_identifier(body, existing, param)
	elif existing is not None:
		statements.append(Declare(existing, Identifier(param)))

	if isinstance(body, Block):
		block_statements, entries = _split_block(body.body)
		return [*statements, *block_statements], entries
	return statements, _returned_entries(body)


def merge_entries(
	generated: Sequence[ObjectEntry],
	existing: Sequence[ObjectEntry],
) -> list[ObjectEntry]:
	return [*generated, *existing]


def merge_declarations(
	ctx: TransformContext,
	entries: Sequence[ObjectEntry],
	existing: Expr | None,
) -> Arrow:
	"""Combine generated entries with an existing css value into one function.

		theme => ({ ...generated, ...existing })
		theme => { const { colors } = theme; return { ...generated, ...existing }; }
	"""
	param = ctx.theme_param
	statements: list[Stmt] = []

	if existing is None:
		merged = list(entries)
	elif isinstance(existing, Object):
		merged = merge_entries(entries, existing.props)
	elif isinstance(existing, (Arrow, Function)):
		statements, existing_entries = extract_function_parts(ctx, existing)
		merged = merge_entries(entries, existing_entries)
	else:
		logger.debug(
			"Spreading opaque css value %s after generated styles",
			type(existing).__name__,
		)
		merged = merge_entries(entries, [Spread(existing)])

	if statements:
		return Arrow([param], Block([*statements, Return(Object(merged))]))
	return Arrow([param], Object(merged))


__all__ = ["extract_function_parts", "merge_declarations", "merge_entries"]
