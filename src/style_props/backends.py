"""
Styling backends.

The generated `css` function needs to reach the theme and any value that is
only known at runtime. How it does so depends on the CSS-in-JS library:

- emotion calls `css={theme => ...}` in the component's own scope, so the
  function closes over local variables directly.
- styled-components hoists `css` into a separate styled wrapper that cannot
  close over locals. Values are surfaced as a prop bag on the element and read
  back from the wrapper's props (`p.__styleProps__.marginTop[0]`).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

from typing_extensions import override

from style_props.constants import INTERNAL_PROP_ID
from style_props.errors import ConfigError
from style_props.nodes import Expr, Identifier, Literal, Member, Subscript

if TYPE_CHECKING:
	from style_props.context import TransformContext


class StylingBackend(ABC):
	"""Access protocol for the theme and runtime values inside `css`."""

	__slots__: tuple[str, ...] = ()

	name: ClassVar[str]
	param: ClassVar[str]

	@abstractmethod
	def theme_expr(self) -> Expr:
		"""Expression evaluating to the theme inside the style function."""

	@abstractmethod
	def resolve_access_key(
		self,
		ctx: TransformContext,
		prop: str,
		base: Expr,
		index: int,
	) -> Expr:
		"""Expression used to index theme[namespace] for `prop` at `index`."""


class EmotionBackend(StylingBackend):
	"""Direct-closure access: `theme => ({ color: theme.colors[color] })`."""

	__slots__: tuple[str, ...] = ()

	name: ClassVar[str] = "emotion"
	param: ClassVar[str] = "theme"

	@override
	def theme_expr(self) -> Expr:
		return Identifier(self.param)

	@override
	def resolve_access_key(
		self,
		ctx: TransformContext,
		prop: str,
		base: Expr,
		index: int,
	) -> Expr:
		return base


class StyledComponentsBackend(StylingBackend):
	"""Surfaced-props access: `p => ({ color: p.theme.colors[p.__styleProps__.color[0]] })`."""

	__slots__: tuple[str, ...] = ()

	name: ClassVar[str] = "styled-components"
	param: ClassVar[str] = "p"

	@override
	def theme_expr(self) -> Expr:
		return Member(Identifier(self.param), "theme")

	@override
	def resolve_access_key(
		self,
		ctx: TransformContext,
		prop: str,
		base: Expr,
		index: int,
	) -> Expr:
		ctx.registry.record(prop, index, base)
		return Subscript(
			Member(Member(Identifier(self.param), INTERNAL_PROP_ID), prop),
			Literal(index),
		)


BACKENDS: dict[str, StylingBackend] = {
	EmotionBackend.name: EmotionBackend(),
	StyledComponentsBackend.name: StyledComponentsBackend(),
}


def get_backend(name: str) -> StylingBackend:
	backend = BACKENDS.get(name)
	if backend is None:
		raise ConfigError(
			f"Unknown styling library '{name}'. Expected one of: {', '.join(BACKENDS)}"
		)
	return backend


__all__ = [
	"BACKENDS",
	"EmotionBackend",
	"StyledComponentsBackend",
	"StylingBackend",
	"get_backend",
]
