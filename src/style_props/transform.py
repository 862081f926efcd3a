"""
Style prop transformation of JSX elements.

    <Box color="primary" mx={["1rem", "2rem"]} onClick={go} />

becomes, with breakpoints ["40rem"]:

    <Box onClick={go} css={theme => ({
        color: theme.colors.primary !== undefined ? theme.colors.primary : "primary",
        marginLeft: ..., marginRight: ...,
        "@media screen and (min-width: 40rem)": { marginLeft: ..., marginRight: ... },
    })} />
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from style_props.builders import (
	build_attribute_buckets,
	flatten_buckets,
	merge_buckets,
)
from style_props.config import StylePropsConfig
from style_props.constants import CSS_PROP, INTERNAL_PROP_ID
from style_props.context import PassThroughRegistry, TransformContext
from style_props.errors import (
	MalformedVariantValue,
	NodeTransformError,
	StylePropsError,
)
from style_props.merge import merge_declarations
from style_props.nodes import Attribute, Element, Node, SpreadAttribute
from style_props.resolve import PassThroughResolution, resolve_attribute
from style_props.visitor import find_elements

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TransformResult:
	"""Outcome of transforming one element.

	`css` is None when the element carried no style props and was left as-is.
	`pass_through` holds the runtime values the styled-components wrapper
	must receive as props.
	"""

	element: Element
	css: Attribute | None
	pass_through: PassThroughRegistry
	consumed: list[str] = field(default_factory=list)
	diagnostics: list[StylePropsError] = field(default_factory=list)

	@property
	def changed(self) -> bool:
		return self.css is not None


def transform_element(element: Element, config: StylePropsConfig) -> TransformResult:
	"""Replace the style props on `element` with a single `css` attribute.

	The element is only mutated once everything has been built, so a failure
	leaves it exactly as it was.
	"""
	ctx = TransformContext.create(config)
	buckets = ctx.new_buckets()
	consumed: list[Attribute] = []
	diagnostics: list[StylePropsError] = []
	existing_css: Attribute | None = None

	for attr in element.attrs:
		if isinstance(attr, SpreadAttribute):
			continue
		if attr.name == CSS_PROP:
			existing_css = attr
			continue
		# A bare attribute has no value to resolve
		if attr.value is None:
			continue
		resolution = resolve_attribute(attr.name, config.variants)
		if isinstance(resolution, PassThroughResolution):
			continue
		try:
			attr_buckets = build_attribute_buckets(ctx, attr.name, attr.value, resolution)
		except MalformedVariantValue as exc:
			where = f" at {element.loc}" if element.loc is not None else ""
			logger.warning("<%s>%s: %s", element.tag, where, exc)
			diagnostics.append(exc)
			continue
		merge_buckets(buckets, attr_buckets)
		consumed.append(attr)

	if not consumed:
		return TransformResult(element, None, ctx.registry, diagnostics=diagnostics)

	entries = flatten_buckets(ctx, buckets)
	try:
		declaration = merge_declarations(
			ctx, entries, existing_css.value if existing_css is not None else None
		)
	except StylePropsError as exc:
		raise NodeTransformError(element.tag, element.loc, CSS_PROP, exc) from exc

	css = Attribute(CSS_PROP, declaration)
	_replace_attributes(element, consumed, existing_css, css)
	if config.attach_pass_through and ctx.registry:
		element.attrs.append(Attribute(INTERNAL_PROP_ID, ctx.registry.to_expr()))

	logger.debug(
		"<%s>: replaced %d style props with css (%d entries)",
		element.tag,
		len(consumed),
		len(entries),
	)
	return TransformResult(
		element,
		css,
		ctx.registry,
		consumed=[a.name for a in consumed],
		diagnostics=diagnostics,
	)


def _replace_attributes(
	element: Element,
	consumed: list[Attribute],
	existing_css: Attribute | None,
	css: Attribute,
) -> None:
	"""Drop consumed attributes; `css` takes the old css slot or goes last."""
	consumed_ids = {id(a) for a in consumed}
	attrs: list[Attribute | SpreadAttribute] = []
	for attr in element.attrs:
		if id(attr) in consumed_ids:
			continue
		if attr is existing_css:
			attrs.append(css)
			continue
		attrs.append(attr)
	if existing_css is None:
		attrs.append(css)
	element.attrs[:] = attrs


@dataclass(slots=True)
class TransformRun:
	"""Results of transforming a whole tree."""

	results: list[TransformResult] = field(default_factory=list)
	errors: list[NodeTransformError] = field(default_factory=list)

	@property
	def transformed(self) -> list[TransformResult]:
		return [r for r in self.results if r.changed]

	@property
	def diagnostics(self) -> list[StylePropsError]:
		return [d for r in self.results for d in r.diagnostics]


class StylePropsTransformer:
	"""Transforms every element of a tree with one shared config.

	With `fail_fast` (the default) the first failing element aborts the run.
	Otherwise failures are collected and the remaining elements are still
	transformed; a failed element is left unchanged.
	"""

	config: StylePropsConfig
	fail_fast: bool
	on_element: Callable[[TransformResult], None] | None

	def __init__(
		self,
		config: StylePropsConfig | None = None,
		*,
		fail_fast: bool = True,
		on_element: Callable[[TransformResult], None] | None = None,
	) -> None:
		self.config = config or StylePropsConfig()
		self.fail_fast = fail_fast
		self.on_element = on_element

	def transform(self, element: Element) -> TransformResult:
		result = transform_element(element, self.config)
		if self.on_element is not None and result.changed:
			self.on_element(result)
		return result

	def transform_tree(self, root: Node) -> TransformRun:
		run = TransformRun()
		for element in find_elements(root):
			if not element.tag:
				# Fragments cannot carry attributes
				continue
			try:
				run.results.append(self.transform(element))
			except NodeTransformError as exc:
				logger.error("%s", exc)
				if self.fail_fast:
					raise
				run.errors.append(exc)
		return run


__all__ = [
	"StylePropsTransformer",
	"TransformResult",
	"TransformRun",
	"transform_element",
]
