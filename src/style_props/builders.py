"""
Declaration builders.

Turns classified style attributes into theme-aware object entries, bucketed by
breakpoint index, and flattens the buckets into the entries of a single style
object with responsive buckets nested under media query keys.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import cast

from style_props.constants import create_media_query
from style_props.context import TransformContext
from style_props.errors import MalformedVariantValue
from style_props.nodes import (
	UNDEFINED,
	Array,
	Binary,
	Expr,
	Literal,
	Member,
	Object,
	ObjectEntry,
	Spread,
	Subscript,
	Ternary,
)
from style_props.resolve import (
	Resolution,
	ScaleResolution,
	StyleResolution,
	VariantResolution,
	theme_namespace,
)
from style_props.values import (
	classify_value,
	is_skippable,
	normalize_responsive,
	split_negative,
)

Buckets = list[list[ObjectEntry]]

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def _namespace_access(obj: Expr, namespace: str) -> Expr:
	if _IDENTIFIER_RE.match(namespace):
		return Member(obj, namespace)
	return Subscript(obj, Literal(namespace))


def _key_access(obj: Expr, key: Expr) -> Expr:
	if (
		isinstance(key, Literal)
		and isinstance(key.value, str)
		and _IDENTIFIER_RE.match(key.value)
	):
		return Member(obj, key.value)
	return Subscript(obj, key)


def build_undefined_fallback(value: Expr, fallback: Expr) -> Ternary:
	"""`value !== undefined ? value : fallback`"""
	return Ternary(Binary(value, "!==", UNDEFINED), value, fallback)


def build_theme_expression(
	ctx: TransformContext,
	prop: str,
	value: Expr,
	namespace: str | None,
	*,
	with_fallback: bool = True,
	with_negation: bool = True,
	scale: bool = False,
	index: int = 0,
) -> Expr:
	"""Theme-aware accessor for one CSS property.

	Without a namespace the value is used as-is. Otherwise the value indexes
	theme[namespace], falling back to the raw key when the theme has no entry,
	and a stripped negative sign is re-applied as a "-" prefix:

		mr="-large" -> "-" + (theme.space.large !== undefined ? theme.space.large : "large")

	In scale mode the accessor is further indexed by breakpoint and returned
	without fallback or negation.
	"""
	if namespace is None:
		return value

	base, negative = split_negative(value)
	key = ctx.backend.resolve_access_key(ctx, prop, base, index)
	accessor = _key_access(_namespace_access(ctx.backend.theme_expr(), namespace), key)

	if scale:
		return Subscript(accessor, Literal(index))

	if with_fallback:
		accessor = build_undefined_fallback(accessor, key)

	if with_negation and negative:
		accessor = Binary(Literal("-"), "+", accessor)

	return accessor


def build_variant_spread(
	ctx: TransformContext,
	name: str,
	value: Expr,
	namespace: str,
) -> Spread:
	"""`...theme[namespace][value]` for a variant attribute."""
	if not (
		isinstance(value, Literal)
		and isinstance(value.value, (str, int))
		and not isinstance(value.value, bool)
	):
		raise MalformedVariantValue(name)
	key = ctx.backend.resolve_access_key(ctx, name, value, 0)
	return Spread(_key_access(_namespace_access(ctx.backend.theme_expr(), namespace), key))


def build_attribute_buckets(
	ctx: TransformContext,
	name: str,
	value: Expr,
	resolution: Resolution,
) -> Buckets:
	"""Object entries for one attribute, bucketed by breakpoint index.

	Array values spread across breakpoints, one slot per bucket, with null
	slots inheriting the previous value. A scalar fills the base bucket only,
	except for scale props, which index their scale once per breakpoint.
	"""
	buckets = ctx.new_buckets()

	if isinstance(resolution, VariantResolution):
		if not is_skippable(value):
			buckets[0].append(build_variant_spread(ctx, name, value, resolution.namespace))
		return buckets

	if not isinstance(resolution, (StyleResolution, ScaleResolution)):
		return buckets

	scale = isinstance(resolution, ScaleResolution)
	breakpoint_count = len(ctx.breakpoints)

	positions: list[tuple[int, Expr]]
	if classify_value(value) == "array":
		elements = cast(Array, value).elements
		slots = normalize_responsive(elements, breakpoint_count, pad=scale)
		positions = list(enumerate(slots))
	elif scale:
		positions = [(i, value) for i in range(breakpoint_count + 1)]
	else:
		positions = [(0, value)]

	for index, element in positions:
		if is_skippable(element):
			continue
		for prop in resolution.properties:
			namespace = theme_namespace(prop, "scale" if scale else "style")
			if scale and namespace is None:
				continue
			expr = build_theme_expression(
				ctx, prop, element, namespace, scale=scale, index=index
			)
			buckets[index].append((prop, expr))

	return buckets


def merge_buckets(target: Buckets, source: Sequence[Sequence[ObjectEntry]]) -> None:
	"""Append each bucket of `source` to the matching bucket of `target`."""
	for bucket, entries in zip(target, source, strict=True):
		bucket.extend(entries)


def flatten_buckets(ctx: TransformContext, buckets: Buckets) -> list[ObjectEntry]:
	"""Base entries first, then one media query object per non-empty breakpoint."""
	entries: list[ObjectEntry] = list(buckets[0])
	for i, bucket in enumerate(buckets[1:], start=1):
		if not bucket:
			continue
		entries.append((create_media_query(ctx.breakpoints[i - 1]), Object(list(bucket))))
	return entries


__all__ = [
	"Buckets",
	"build_attribute_buckets",
	"build_theme_expression",
	"build_undefined_fallback",
	"build_variant_spread",
	"flatten_buckets",
	"merge_buckets",
]
