import logging

import pytest
import supervision as sv

from rectscan_cli.config import AppConfig, LoggingConfig, OutputConfig, RenderConfig


def test_defaults():
    config = AppConfig()
    assert config.output.indent == 2
    assert config.logging.level_value == logging.WARNING
    assert config.render.scale == 20.0
    assert config.render.draw_labels is True


def test_from_yaml(tmp_path):
    path = tmp_path / "rectscan.yaml"
    path.write_text(
        "output:\n"
        "  indent: 4\n"
        "logging:\n"
        "  level: info\n"
        "render:\n"
        "  scale: 5\n"
        "  padding: 10\n"
        "  area_color: '#0000FF'\n"
        "  draw_labels: false\n"
    )

    config = AppConfig.from_yaml(path)

    assert config.output == OutputConfig(indent=4)
    assert config.logging.level_value == logging.INFO
    assert config.render.scale == 5
    assert config.render.padding == 10
    assert config.render.draw_labels is False
    assert config.render.intersection_color == RenderConfig().intersection_color


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert AppConfig.from_yaml(path) == AppConfig()


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        AppConfig.from_yaml(tmp_path / "missing.yaml")


def test_invalid_yaml(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("output: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid YAML"):
        AppConfig.from_yaml(path)


@pytest.mark.parametrize(
    "data, fragment",
    [
        ({"mqtt": {}}, "Unknown config sections"),
        ({"output": [1, 2]}, "must be a mapping"),
        ({"output": {"spaces": 2}}, "Invalid config section 'output'"),
        ({"output": {"indent": 12}}, "indent must be in"),
        ({"logging": {"level": "LOUD"}}, "Invalid logging level"),
        ({"render": {"opacity": 1.5}}, "opacity"),
        ({"render": {"area_color": "green"}}, "area_color"),
        ({"render": {"max_canvas_size": 32}}, "max_canvas_size"),
        ({"render": {"padding": 100, "max_canvas_size": 64}}, "no room"),
        ({"render": {"padding": 2.5}}, "padding must be an integer"),
        ({"render": {"thickness": 2.5}}, "thickness must be an integer"),
        ({"render": {"max_canvas_size": True}}, "max_canvas_size must be an integer"),
        ({"render": {"scale": "big"}}, "scale must be a number"),
        ({"render": {"draw_labels": "no"}}, "draw_labels must be true or false"),
        ([1, 2], "Config root must be a mapping"),
    ],
)
def test_invalid_values(data, fragment):
    with pytest.raises(ValueError, match=fragment):
        AppConfig.from_dict(data)


def test_render_color_conversion():
    config = RenderConfig(area_color="#00FF00")
    assert config.color("area_color") == sv.Color(r=0, g=255, b=0)


def test_logging_level_is_case_insensitive():
    assert LoggingConfig(level="debug").level_value == logging.DEBUG
