import textwrap

import pytest

from PagePress.config import FooterPlacement, RenderConfig, load_config, parse_config


def test_defaults_match_reference_layout():
    config = RenderConfig()
    assert config.margin == 20
    assert config.page_format == "A4"
    assert config.footer is FooterPlacement.LAST_PAGE
    assert config.attribution_label == "Chairman: "


def test_parse_yaml_settings():
    config = parse_config(
        textwrap.dedent(
            """
            title: Weekly summary
            margin: 15
            footer: every-page
            page_format: Letter
            """
        )
    )
    assert config.title == "Weekly summary"
    assert config.margin == 15.0
    assert config.footer is FooterPlacement.EVERY_PAGE
    assert config.page_format == "Letter"
    assert config.font_family == "Helvetica"


def test_empty_yaml_gives_defaults():
    assert parse_config("") == RenderConfig()


def test_load_config_from_file(tmp_path):
    path = tmp_path / "layout.yaml"
    path.write_text("attribution_label: 'Model: '\n", encoding="utf-8")
    assert load_config(path).attribution_label == "Model: "


@pytest.mark.parametrize(
    "text, message",
    [
        ("- a\n- b\n", "mapping"),
        ("colour: red\n", "Unknown config key"),
        ("footer: sometimes\n", "footer must be one of"),
        ("margin: -4\n", "margin must be positive"),
        ("margin: wide\n", "margin must be a number"),
        ("page_format: B7\n", "Unsupported page_format"),
    ],
)
def test_invalid_settings_are_rejected(text, message):
    with pytest.raises(ValueError, match=message):
        parse_config(text)


def test_overrides_skip_missing_values():
    config = RenderConfig().with_overrides(title=None, footer="every_page")
    assert config.title == RenderConfig().title
    assert config.footer is FooterPlacement.EVERY_PAGE
