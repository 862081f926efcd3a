"""Built-in style prop tables."""

from collections.abc import Mapping

# Attribute holding the generated style declaration
CSS_PROP = "css"

# Instance prop bag used to surface runtime values to styled-components
INTERNAL_PROP_ID = "__styleProps__"

MEDIA_QUERY_TEMPLATE = "@media screen and (min-width: {unit})"


def create_media_query(unit: str) -> str:
	return MEDIA_QUERY_TEMPLATE.format(unit=unit)


# =============================================================================
# Style props
# =============================================================================

# Shorthand attribute -> CSS properties it expands to
STYLE_ALIASES: Mapping[str, tuple[str, ...]] = {
	# Space
	"m": ("margin",),
	"mt": ("marginTop",),
	"mr": ("marginRight",),
	"mb": ("marginBottom",),
	"ml": ("marginLeft",),
	"mx": ("marginLeft", "marginRight"),
	"my": ("marginTop", "marginBottom"),
	"p": ("padding",),
	"pt": ("paddingTop",),
	"pr": ("paddingRight",),
	"pb": ("paddingBottom",),
	"pl": ("paddingLeft",),
	"px": ("paddingLeft", "paddingRight"),
	"py": ("paddingTop", "paddingBottom"),
	# Color
	"bg": ("backgroundColor",),
	# Layout
	"w": ("width",),
	"h": ("height",),
	"minW": ("minWidth",),
	"maxW": ("maxWidth",),
	"minH": ("minHeight",),
	"maxH": ("maxHeight",),
	"size": ("width", "height"),
	# Typography
	"font": ("fontFamily",),
	"ls": ("letterSpacing",),
	"lh": ("lineHeight",),
	# Border
	"radius": ("borderRadius",),
	"shadow": ("boxShadow",),
}

# CSS property -> theme namespace. Properties not listed pass raw values through.
THEME_MAP: Mapping[str, str] = {
	# Space
	"margin": "space",
	"marginTop": "space",
	"marginRight": "space",
	"marginBottom": "space",
	"marginLeft": "space",
	"padding": "space",
	"paddingTop": "space",
	"paddingRight": "space",
	"paddingBottom": "space",
	"paddingLeft": "space",
	"gap": "space",
	"rowGap": "space",
	"columnGap": "space",
	"top": "space",
	"right": "space",
	"bottom": "space",
	"left": "space",
	# Color
	"color": "colors",
	"backgroundColor": "colors",
	"borderColor": "colors",
	"outlineColor": "colors",
	"fill": "colors",
	"stroke": "colors",
	# Typography
	"fontFamily": "fonts",
	"fontSize": "fontSizes",
	"fontWeight": "fontWeights",
	"lineHeight": "lineHeights",
	"letterSpacing": "letterSpacings",
	# Border
	"border": "borders",
	"borderTop": "borders",
	"borderRight": "borders",
	"borderBottom": "borders",
	"borderLeft": "borders",
	"borderWidth": "borderWidths",
	"borderStyle": "borderStyles",
	"borderRadius": "radii",
	# Effects
	"boxShadow": "shadows",
	"textShadow": "shadows",
	"zIndex": "zIndices",
	"transition": "transitions",
}

# CSS properties accepted verbatim as attributes without a theme mapping
_RAW_STYLE_PROPERTIES: tuple[str, ...] = (
	"width",
	"height",
	"minWidth",
	"maxWidth",
	"minHeight",
	"maxHeight",
	"display",
	"position",
	"overflow",
	"opacity",
	"textAlign",
	"textTransform",
	"fontStyle",
	"verticalAlign",
	"alignItems",
	"alignContent",
	"alignSelf",
	"justifyContent",
	"justifyItems",
	"justifySelf",
	"flex",
	"flexDirection",
	"flexWrap",
	"flexGrow",
	"flexShrink",
	"flexBasis",
	"order",
	"gridTemplateColumns",
	"gridTemplateRows",
	"gridColumn",
	"gridRow",
	"gridArea",
	"cursor",
	"pointerEvents",
	"userSelect",
	"whiteSpace",
	"objectFit",
)

# Every attribute name recognised as a style prop
STYLE_PROPS: frozenset[str] = frozenset(
	(*STYLE_ALIASES, *THEME_MAP, *_RAW_STYLE_PROPERTIES)
)


# =============================================================================
# Scale props
# =============================================================================

# Scale attribute -> CSS properties. Disjoint from STYLE_ALIASES.
SCALE_ALIASES: Mapping[str, tuple[str, ...]] = {
	"mScale": ("margin",),
	"mtScale": ("marginTop",),
	"mrScale": ("marginRight",),
	"mbScale": ("marginBottom",),
	"mlScale": ("marginLeft",),
	"mxScale": ("marginLeft", "marginRight"),
	"myScale": ("marginTop", "marginBottom"),
	"pScale": ("padding",),
	"ptScale": ("paddingTop",),
	"prScale": ("paddingRight",),
	"pbScale": ("paddingBottom",),
	"plScale": ("paddingLeft",),
	"pxScale": ("paddingLeft", "paddingRight"),
	"pyScale": ("paddingTop", "paddingBottom"),
	"gapScale": ("gap",),
	"fontSizeScale": ("fontSize",),
	"lineHeightScale": ("lineHeight",),
	"letterSpacingScale": ("letterSpacing",),
	"wScale": ("width",),
	"maxWScale": ("maxWidth",),
}

SCALE_PROPS: frozenset[str] = frozenset(SCALE_ALIASES)

# CSS property -> scale namespace. Each scale entry is a list indexed by breakpoint.
SCALE_THEME_MAP: Mapping[str, str] = {
	"margin": "spaceScales",
	"marginTop": "spaceScales",
	"marginRight": "spaceScales",
	"marginBottom": "spaceScales",
	"marginLeft": "spaceScales",
	"padding": "spaceScales",
	"paddingTop": "spaceScales",
	"paddingRight": "spaceScales",
	"paddingBottom": "spaceScales",
	"paddingLeft": "spaceScales",
	"gap": "spaceScales",
	"fontSize": "fontSizeScales",
	"lineHeight": "lineHeightScales",
	"letterSpacing": "letterSpacingScales",
	"width": "sizeScales",
	"maxWidth": "sizeScales",
}
