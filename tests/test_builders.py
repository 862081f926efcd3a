"""
Tests for theme expression building and breakpoint bucketing.
"""

import pytest
from style_props.builders import (
	build_attribute_buckets,
	build_theme_expression,
	build_variant_spread,
	flatten_buckets,
	merge_buckets,
)
from style_props.config import StylePropsConfig
from style_props.context import TransformContext
from style_props.errors import MalformedVariantValue
from style_props.nodes import (
	Array,
	Identifier,
	Literal,
	Object,
	ObjectEntry,
	Ternary,
	Unary,
	emit,
)
from style_props.resolve import ScaleResolution, resolve_attribute


def make_ctx(**kwargs: object) -> TransformContext:
	return TransformContext.create(StylePropsConfig(**kwargs))  # pyright: ignore[reportArgumentType]


def emit_entries(entries: list[ObjectEntry]) -> str:
	return emit(Object(entries))


def build(ctx: TransformContext, name: str, value: object) -> list[list[ObjectEntry]]:
	assert isinstance(value, (Literal, Array, Identifier, Unary, Ternary))
	return build_attribute_buckets(
		ctx, name, value, resolve_attribute(name, ctx.config.variants)
	)


# =============================================================================
# Theme expressions
# =============================================================================


class TestThemeExpression:
	def test_fallback_accessor(self):
		ctx = make_ctx()
		expr = build_theme_expression(ctx, "color", Literal("primary"), "colors")
		assert (
			emit(expr)
			== 'theme.colors.primary !== undefined ? theme.colors.primary : "primary"'
		)

	def test_no_namespace_passes_value_through(self):
		ctx = make_ctx()
		value = Literal("-5px")
		assert build_theme_expression(ctx, "width", value, None) is value

	def test_negative_string(self):
		ctx = make_ctx()
		expr = build_theme_expression(ctx, "marginRight", Literal("-large"), "space")
		assert emit(expr) == (
			'"-" + (theme.space.large !== undefined ? theme.space.large : "large")'
		)

	def test_unary_negative_number(self):
		ctx = make_ctx()
		expr = build_theme_expression(ctx, "marginTop", Unary("-", Literal(3)), "space")
		assert emit(expr) == '"-" + (theme.space[3] !== undefined ? theme.space[3] : 3)'

	def test_negation_disabled(self):
		ctx = make_ctx()
		expr = build_theme_expression(
			ctx, "marginTop", Literal("-large"), "space", with_negation=False
		)
		assert emit(expr) == (
			'theme.space.large !== undefined ? theme.space.large : "large"'
		)

	def test_fallback_disabled(self):
		ctx = make_ctx()
		expr = build_theme_expression(
			ctx, "color", Literal("primary"), "colors", with_fallback=False
		)
		assert emit(expr) == "theme.colors.primary"

	def test_non_identifier_key_uses_subscript(self):
		ctx = make_ctx()
		expr = build_theme_expression(
			ctx, "color", Literal("gray.100"), "colors", with_fallback=False
		)
		assert emit(expr) == 'theme.colors["gray.100"]'

	def test_computed_key(self):
		ctx = make_ctx()
		expr = build_theme_expression(ctx, "color", Identifier("tone"), "colors")
		assert emit(expr) == "theme.colors[tone] !== undefined ? theme.colors[tone] : tone"

	def test_scale_indexes_by_breakpoint(self):
		ctx = make_ctx()
		expr = build_theme_expression(
			ctx, "marginTop", Literal("-l"), "spaceScales", scale=True, index=2
		)
		assert emit(expr) == "theme.spaceScales.l[2]"

	def test_styled_components_surfaces_value(self):
		ctx = make_ctx(styling_library="styled-components")
		expr = build_theme_expression(ctx, "color", Identifier("tone"), "colors", index=1)
		key = "p.__styleProps__.color[1]"
		assert emit(expr) == (
			f"p.theme.colors[{key}] !== undefined ? p.theme.colors[{key}] : {key}"
		)
		assert ctx.registry.get("color", 1) == Identifier("tone")
		assert ctx.registry.get("color", 0) is None

	def test_styled_components_records_base_value(self):
		ctx = make_ctx(styling_library="styled-components")
		build_theme_expression(ctx, "marginTop", Literal("-large"), "space")
		assert ctx.registry.values == {"marginTop": [Literal("large")]}


# =============================================================================
# Variants
# =============================================================================


class TestVariantSpread:
	def test_spreads_theme_sub_object(self):
		ctx = make_ctx(variants={"boxStyle": "boxStyles"})
		spread = build_variant_spread(ctx, "boxStyle", Literal("primary"), "boxStyles")
		assert emit(spread) == "...theme.boxStyles.primary"

	def test_negative_looking_key_is_not_negated(self):
		ctx = make_ctx()
		spread = build_variant_spread(ctx, "boxStyle", Literal("-primary"), "boxStyles")
		assert emit(spread) == '...theme.boxStyles["-primary"]'

	@pytest.mark.parametrize(
		"value",
		[Identifier("style"), Literal(True), Ternary(Identifier("a"), Literal("x"), Literal("y"))],
	)
	def test_rejects_non_literal(self, value: Literal):
		ctx = make_ctx()
		with pytest.raises(MalformedVariantValue) as exc_info:
			build_variant_spread(ctx, "boxStyle", value, "boxStyles")
		assert exc_info.value.attribute == "boxStyle"


# =============================================================================
# Bucketing
# =============================================================================


class TestAttributeBuckets:
	def test_scalar_style_fills_base_only(self):
		ctx = make_ctx(breakpoints=("40rem", "52rem"))
		buckets = build(ctx, "w", Literal("100%"))
		assert [len(b) for b in buckets] == [1, 0, 0]
		assert emit_entries(buckets[0]) == '{"width": "100%"}'

	def test_alias_expands_to_each_property(self):
		ctx = make_ctx()
		buckets = build(ctx, "size", Literal(10))
		assert emit_entries(buckets[0]) == '{"width": 10, "height": 10}'

	def test_array_spreads_across_breakpoints(self):
		ctx = make_ctx(breakpoints=("40rem",))
		buckets = build(ctx, "width", Array([Literal("100%"), Literal("50%")]))
		assert emit_entries(buckets[0]) == '{"width": "100%"}'
		assert emit_entries(buckets[1]) == '{"width": "50%"}'

	def test_array_ignores_extra_positions(self):
		ctx = make_ctx(breakpoints=("40rem",))
		buckets = build(ctx, "width", Array([Literal(1), Literal(2), Literal(3)]))
		assert len(buckets) == 2
		assert emit_entries(buckets[1]) == '{"width": 2}'

	def test_array_null_carries_forward(self):
		ctx = make_ctx(breakpoints=("40rem", "52rem"))
		buckets = build(ctx, "w", Array([Literal(1), Literal(None), Literal(3)]))
		assert [emit_entries(b) for b in buckets] == [
			'{"width": 1}',
			'{"width": 1}',
			'{"width": 3}',
		]

	def test_array_leading_null_is_skipped(self):
		ctx = make_ctx(breakpoints=("40rem",))
		buckets = build(ctx, "w", Array([Literal(None), Literal(2)]))
		assert buckets[0] == []
		assert emit_entries(buckets[1]) == '{"width": 2}'

	def test_null_scalar_produces_nothing(self):
		ctx = make_ctx(breakpoints=("40rem",))
		buckets = build(ctx, "color", Literal(None))
		assert buckets == [[], []]

	def test_scale_scalar_replicates_per_breakpoint(self):
		ctx = make_ctx(breakpoints=("40rem", "52rem"))
		buckets = build(ctx, "mtScale", Literal("l"))
		assert [emit_entries(b) for b in buckets] == [
			'{"marginTop": theme.spaceScales.l[0]}',
			'{"marginTop": theme.spaceScales.l[1]}',
			'{"marginTop": theme.spaceScales.l[2]}',
		]

	def test_scale_array_pads_to_breakpoints(self):
		ctx = make_ctx(breakpoints=("40rem", "52rem"))
		buckets = build(ctx, "pxScale", Array([Literal("m"), Literal("l")]))
		assert emit_entries(buckets[2]) == (
			'{"paddingLeft": theme.spaceScales.l[2], '
			+ '"paddingRight": theme.spaceScales.l[2]}'
		)

	def test_variant_in_base_bucket(self):
		ctx = make_ctx(breakpoints=("40rem",), variants={"boxStyle": "boxStyles"})
		buckets = build(ctx, "boxStyle", Literal("primary"))
		assert emit_entries(buckets[0]) == "{...theme.boxStyles.primary}"
		assert buckets[1] == []

	def test_registry_tracks_each_position(self):
		ctx = make_ctx(breakpoints=("40rem",), styling_library="styled-components")
		build(ctx, "mt", Array([Identifier("a"), Unary("-", Identifier("b"))]))
		assert ctx.registry.values == {
			"marginTop": [Identifier("a"), Identifier("b")],
		}

	def test_conditional_value_stays_in_base_bucket(self):
		ctx = make_ctx(breakpoints=("40rem",))
		value = Ternary(Identifier("wide"), Literal("100%"), Literal("50%"))
		buckets = build(ctx, "w", value)
		assert buckets[1] == []
		assert emit_entries(buckets[0]) == '{"width": wide ? "100%" : "50%"}'

	def test_scale_without_scale_mapping_is_dropped(self):
		ctx = make_ctx(breakpoints=("40rem",), styling_library="styled-components")
		buckets = build_attribute_buckets(
			ctx, "opacityScale", Literal("l"), ScaleResolution(("opacity",))
		)
		assert buckets == [[], []]
		assert len(ctx.registry) == 0


class TestFlatten:
	def test_base_then_media_queries(self):
		ctx = make_ctx(breakpoints=("40rem", "52rem"))
		buckets = ctx.new_buckets()
		merge_buckets(buckets, build(ctx, "width", Array([Literal("100%"), Literal("50%")])))
		merge_buckets(buckets, build(ctx, "color", Literal("red")))
		entries = flatten_buckets(ctx, buckets)
		assert emit_entries(entries) == (
			'{"width": "100%", '
			+ '"color": theme.colors.red !== undefined ? theme.colors.red : "red", '
			+ '"@media screen and (min-width: 40rem)": {"width": "50%"}}'
		)

	def test_no_breakpoints(self):
		ctx = make_ctx()
		buckets = ctx.new_buckets()
		assert len(buckets) == 1
		merge_buckets(buckets, build(ctx, "w", Array([Literal(1), Literal(2)])))
		assert emit_entries(flatten_buckets(ctx, buckets)) == '{"width": 1}'

	def test_empty_breakpoint_buckets_are_omitted(self):
		ctx = make_ctx(breakpoints=("40rem", "52rem"))
		buckets = ctx.new_buckets()
		merge_buckets(buckets, build(ctx, "w", Literal("100%")))
		entries = flatten_buckets(ctx, buckets)
		assert len(entries) == 1
		assert emit_entries(entries) == '{"width": "100%"}'
