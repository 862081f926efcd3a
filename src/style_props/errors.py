from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
	from style_props.nodes import SourceLocation


class StylePropsError(Exception):
	"""Base class for all style prop transformation errors."""


class ConfigError(StylePropsError):
	"""Invalid plugin options."""


class MalformedVariantValue(StylePropsError):
	"""A variant attribute whose value is not a string literal.

	Reported and skipped: the attribute stays on the element unresolved.
	"""

	attribute: str

	def __init__(self, attribute: str, message: str | None = None) -> None:
		self.attribute = attribute
		super().__init__(
			message
			or f"Variant prop '{attribute}' must be a literal theme key"
		)


class MissingReturnInMergeTarget(StylePropsError):
	"""An existing block-bodied css function has no return statement."""


class NodeTransformError(StylePropsError):
	"""A single element failed to transform.

	Carries the element tag, its source location and the attribute being
	processed so the run driver can point at the exact spot.
	"""

	tag: str
	loc: SourceLocation | None
	attribute: str | None

	def __init__(
		self,
		tag: str,
		loc: SourceLocation | None,
		attribute: str | None,
		cause: BaseException,
	) -> None:
		self.tag = tag
		self.loc = loc
		self.attribute = attribute
		where = f" at {loc}" if loc is not None else ""
		attr = f" (attribute '{attribute}')" if attribute else ""
		super().__init__(f"Failed to transform <{tag}>{where}{attr}: {cause}")
		self.__cause__ = cause


__all__ = [
	"ConfigError",
	"MalformedVariantValue",
	"MissingReturnInMergeTarget",
	"NodeTransformError",
	"StylePropsError",
]
