import pytest
from style_props.backends import EmotionBackend, StyledComponentsBackend, get_backend
from style_props.config import StylePropsConfig
from style_props.errors import ConfigError


def test_defaults():
	config = StylePropsConfig()
	assert config.breakpoints == ()
	assert dict(config.variants) == {}
	assert config.styling_library == "emotion"
	assert config.attach_pass_through is False


def test_from_mapping():
	config = StylePropsConfig.from_mapping(
		{
			"breakpoints": ["40rem", "52rem"],
			"variants": {"boxStyle": "boxStyles"},
			"stylingLibrary": "styled-components",
			"somethingElse": 1,
		}
	)
	assert config.breakpoints == ("40rem", "52rem")
	assert config.variants["boxStyle"] == "boxStyles"
	assert config.styling_library == "styled-components"


def test_config_is_read_only():
	variants = {"boxStyle": "boxStyles"}
	config = StylePropsConfig(breakpoints=("40rem",), variants=variants)
	variants["textStyle"] = "textStyles"
	assert "textStyle" not in config.variants
	with pytest.raises(TypeError):
		config.variants["x"] = "y"  # pyright: ignore[reportIndexIssue]


@pytest.mark.parametrize(
	"options, match",
	[
		({"breakpoints": "40rem"}, "breakpoints"),
		({"breakpoints": [40]}, "Breakpoint"),
		({"variants": ["boxStyle"]}, "variants"),
		({"variants": {"boxStyle": 1}}, "Variant"),
		({"stylingLibrary": "stitches"}, "Unknown styling library"),
		({"attachPassThrough": "yes"}, "attachPassThrough"),
	],
)
def test_from_mapping_rejects_bad_options(options: dict[str, object], match: str):
	with pytest.raises(ConfigError, match=match):
		StylePropsConfig.from_mapping(options)


def test_get_backend():
	assert isinstance(get_backend("emotion"), EmotionBackend)
	assert isinstance(get_backend("styled-components"), StyledComponentsBackend)
	with pytest.raises(ConfigError):
		get_backend("linaria")
