import pytest
from style_props.nodes import (
	Array,
	Call,
	Identifier,
	Literal,
	Ternary,
	Unary,
)
from style_props.values import (
	classify_value,
	is_skippable,
	normalize_responsive,
	split_negative,
)


class TestSplitNegative:
	def test_negative_string(self):
		assert split_negative(Literal("-large")) == (Literal("large"), True)

	def test_unary_minus(self):
		assert split_negative(Unary("-", Literal(3))) == (Literal(3), True)

	def test_negative_number_literal(self):
		assert split_negative(Literal(-3)) == (Literal(3), True)

	@pytest.mark.parametrize(
		"value",
		[
			Literal("large"),
			Literal(3),
			Literal(True),
			Literal(None),
			Identifier("gap"),
			Unary("!", Identifier("x")),
		],
	)
	def test_non_negative_values_unchanged(self, value: Literal):
		base, negative = split_negative(value)
		assert base is value
		assert negative is False

	def test_sign_roundtrip(self):
		for raw in ["-large", "-1", "-"]:
			base, negative = split_negative(Literal(raw))
			assert negative
			assert isinstance(base.value, str)  # pyright: ignore[reportAttributeAccessIssue]
			assert "-" + base.value == raw  # pyright: ignore[reportAttributeAccessIssue]


class TestClassifyValue:
	def test_shapes(self):
		assert classify_value(Literal("a")) == "literal"
		assert classify_value(Unary("-", Literal(2))) == "literal"
		assert classify_value(Array([Literal(1)])) == "array"
		assert classify_value(
			Ternary(Identifier("x"), Literal(1), Literal(2))
		) == "conditional"
		assert classify_value(Identifier("x")) == "computed"
		assert classify_value(Call(Identifier("f"), [])) == "computed"


class TestSkippable:
	def test_null_and_hole(self):
		assert is_skippable(Literal(None))
		assert is_skippable(None)
		assert not is_skippable(Literal(0))
		assert not is_skippable(Literal(""))


class TestNormalizeResponsive:
	def test_carries_forward(self):
		elements = [Literal("l"), Literal(None), Literal("m")]
		assert normalize_responsive(elements, 2) == [
			Literal("l"),
			Literal("l"),
			Literal("m"),
		]

	def test_holes_are_nulls(self):
		elements = [Literal("l"), None, Literal("m")]
		assert normalize_responsive(elements, 2) == [
			Literal("l"),
			Literal("l"),
			Literal("m"),
		]

	def test_leading_null_stays_null(self):
		elements = [Literal(None), Literal(None), Literal("m")]
		result = normalize_responsive(elements, 2)
		assert result == [Literal(None), Literal(None), Literal("m")]
		assert is_skippable(result[0])

	def test_truncates_past_breakpoints(self):
		elements = [Literal(1), Literal(2), Literal(3), Literal(4)]
		assert normalize_responsive(elements, 1) == [Literal(1), Literal(2)]

	def test_short_array_is_not_padded_by_default(self):
		assert normalize_responsive([Literal(1)], 3) == [Literal(1)]

	def test_pad_fills_every_breakpoint(self):
		assert normalize_responsive([Literal("l"), None], 3, pad=True) == [
			Literal("l"),
			Literal("l"),
			Literal("l"),
			Literal("l"),
		]

	def test_no_breakpoints(self):
		assert normalize_responsive([Literal(1), Literal(2)], 0) == [Literal(1)]
