from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from style_props.backends import StylingBackend, get_backend
from style_props.nodes import Array, Expr, Literal, Object, ObjectEntry

if TYPE_CHECKING:
	from style_props.config import StylePropsConfig


@dataclass(slots=True)
class PassThroughRegistry:
	"""Runtime values surfaced to the generated style function, per element.

	Maps a CSS property to the value contributed at each breakpoint index.
	Slots nothing was recorded for stay None.
	"""

	values: dict[str, list[Expr | None]] = field(default_factory=dict)

	def record(self, prop: str, index: int, value: Expr) -> None:
		slots = self.values.setdefault(prop, [])
		if len(slots) <= index:
			slots.extend([None] * (index + 1 - len(slots)))
		slots[index] = value

	def get(self, prop: str, index: int) -> Expr | None:
		slots = self.values.get(prop)
		if slots is None or index >= len(slots):
			return None
		return slots[index]

	def __contains__(self, prop: object) -> bool:
		return prop in self.values

	def __iter__(self) -> Iterator[str]:
		return iter(self.values)

	def __len__(self) -> int:
		return len(self.values)

	def to_expr(self) -> Object:
		"""Object literal to attach as the element's internal prop bag.

			{"marginTop": [x, null, y]}
		"""
		props: list[ObjectEntry] = []
		for prop, slots in self.values.items():
			props.append(
				(prop, Array([v if v is not None else Literal(None) for v in slots]))
			)
		return Object(props)


@dataclass(slots=True)
class TransformContext:
	"""State for transforming one element.

	The config and backend are shared; the registry is owned by this element.
	"""

	config: StylePropsConfig
	backend: StylingBackend
	registry: PassThroughRegistry = field(default_factory=PassThroughRegistry)

	@classmethod
	def create(cls, config: StylePropsConfig) -> TransformContext:
		return cls(config=config, backend=get_backend(config.styling_library))

	@property
	def breakpoints(self) -> tuple[str, ...]:
		return self.config.breakpoints

	@property
	def theme_param(self) -> str:
		"""Parameter name of the generated style function."""
		return self.backend.param

	def new_buckets(self) -> list[list[ObjectEntry]]:
		"""One empty bucket for the base styles plus one per breakpoint."""
		return [[] for _ in range(len(self.breakpoints) + 1)]


__all__ = ["PassThroughRegistry", "TransformContext"]
