"""
Attribute classification.

Every attribute name is resolved against the built-in style table, the
built-in scale table and the configured variant table, in that order. The
first table that knows the name wins; a name found in none is left alone.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal, TypeAlias

from style_props.constants import (
	SCALE_ALIASES,
	SCALE_PROPS,
	SCALE_THEME_MAP,
	STYLE_ALIASES,
	STYLE_PROPS,
	THEME_MAP,
)

Mode = Literal["style", "scale"]

RESOLUTION_ORDER: tuple[str, ...] = ("style", "scale", "variant")


@dataclass(slots=True, frozen=True)
class StyleResolution:
	"""Themed style prop expanding to one or more CSS properties."""

	properties: tuple[str, ...]


@dataclass(slots=True, frozen=True)
class ScaleResolution:
	"""Scale prop: every CSS property indexes a per-breakpoint theme scale."""

	properties: tuple[str, ...]


@dataclass(slots=True, frozen=True)
class VariantResolution:
	"""Variant prop spreading theme[namespace][value]."""

	namespace: str


@dataclass(slots=True, frozen=True)
class PassThroughResolution:
	"""Not a style prop; stays on the element."""


Resolution: TypeAlias = (
	StyleResolution | ScaleResolution | VariantResolution | PassThroughResolution
)

PASS_THROUGH = PassThroughResolution()


def _resolve_style(name: str, variants: Mapping[str, str]) -> Resolution | None:
	if name not in STYLE_PROPS:
		return None
	return StyleResolution(STYLE_ALIASES.get(name, (name,)))


def _resolve_scale(name: str, variants: Mapping[str, str]) -> Resolution | None:
	if name not in SCALE_PROPS:
		return None
	return ScaleResolution(SCALE_ALIASES[name])


def _resolve_variant(name: str, variants: Mapping[str, str]) -> Resolution | None:
	namespace = variants.get(name)
	if namespace is None:
		return None
	return VariantResolution(namespace)


_RESOLVERS = {
	"style": _resolve_style,
	"scale": _resolve_scale,
	"variant": _resolve_variant,
}


def resolve_attribute(name: str, variants: Mapping[str, str]) -> Resolution:
	"""Classify an attribute name. See RESOLUTION_ORDER for precedence."""
	for table in RESOLUTION_ORDER:
		resolution = _RESOLVERS[table](name, variants)
		if resolution is not None:
			return resolution
	return PASS_THROUGH


def theme_namespace(prop: str, mode: Mode = "style") -> str | None:
	"""Theme namespace a CSS property resolves through, or None for raw values."""
	if mode == "scale":
		return SCALE_THEME_MAP.get(prop)
	return THEME_MAP.get(prop)


__all__ = [
	"PASS_THROUGH",
	"RESOLUTION_ORDER",
	"Mode",
	"PassThroughResolution",
	"Resolution",
	"ScaleResolution",
	"StyleResolution",
	"VariantResolution",
	"resolve_attribute",
	"theme_namespace",
]
