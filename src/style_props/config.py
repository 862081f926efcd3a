from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Literal, get_args

from style_props.errors import ConfigError

StylingLibrary = Literal["emotion", "styled-components"]

STYLING_LIBRARIES: tuple[str, ...] = get_args(StylingLibrary)


@dataclass(slots=True, frozen=True)
class StylePropsConfig:
	"""Parsed plugin options.

	Shared read-only across every element of a run.
	"""

	breakpoints: tuple[str, ...] = ()
	variants: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
	styling_library: StylingLibrary = "emotion"
	# Attach the pass-through registry to the element as `__styleProps__`
	attach_pass_through: bool = False

	def __post_init__(self) -> None:
		if self.styling_library not in STYLING_LIBRARIES:
			raise ConfigError(
				f"Unknown styling library '{self.styling_library}'. "
				+ f"Expected one of: {', '.join(STYLING_LIBRARIES)}"
			)
		# Freeze mutable inputs so the config is safe to share
		object.__setattr__(self, "breakpoints", tuple(self.breakpoints))
		object.__setattr__(self, "variants", MappingProxyType(dict(self.variants)))

	@classmethod
	def from_mapping(cls, options: Mapping[str, Any]) -> StylePropsConfig:
		"""Build a config from plugin options as written in a bundler config.

		Recognised keys: `breakpoints`, `variants`, `stylingLibrary`,
		`attachPassThrough`. Unknown keys are ignored.
		"""
		breakpoints = options.get("breakpoints", ())
		if isinstance(breakpoints, str) or not isinstance(breakpoints, (list, tuple)):
			raise ConfigError("'breakpoints' must be a list of CSS units")
		for unit in breakpoints:  # pyright: ignore[reportUnknownVariableType]
			if not isinstance(unit, str):
				raise ConfigError(f"Breakpoint {unit!r} must be a string CSS unit")

		variants = options.get("variants", {})
		if not isinstance(variants, Mapping):
			raise ConfigError("'variants' must map prop names to theme keys")
		for name, key in variants.items():  # pyright: ignore[reportUnknownVariableType]
			if not isinstance(name, str) or not isinstance(key, str):
				raise ConfigError(f"Variant {name!r}: {key!r} must map a string to a string")

		library = options.get("stylingLibrary", "emotion")
		attach = options.get("attachPassThrough", False)
		if not isinstance(attach, bool):
			raise ConfigError("'attachPassThrough' must be a boolean")

		return cls(
			breakpoints=tuple(breakpoints),  # pyright: ignore[reportUnknownArgumentType]
			variants=dict(variants),  # pyright: ignore[reportUnknownArgumentType]
			styling_library=library,
			attach_pass_through=attach,
		)


__all__ = ["STYLING_LIBRARIES", "StylePropsConfig", "StylingLibrary"]
