import pytest
from PIL import Image

from huepicker.app import format_color, main
from huepicker.color import Color


def test_format_color_red():
    assert format_color(Color(255, 0, 0)) == "Current color: #ff0000 (r=255, g=0, b=0)"


def test_format_color_contains_name():
    color = Color.from_string("#123456")
    assert format_color(color).startswith("Current color: #123456")


def test_no_actions_prints_nothing(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == ""


def test_set_hue_reports_green(capsys):
    assert main(["--set", "hue=120"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 1
    assert lines[0].startswith("Current color: #00ff00")


def test_set_name_reports_colour(capsys):
    assert main(["--set", "name=0000ff"]) == 0
    out = capsys.readouterr().out
    assert out == format_color(Color(0, 0, 255)) + "\n"


def test_slider_bottom_reports_black(capsys):
    assert main(["--slider", "204"]) == 0
    out = capsys.readouterr().out
    assert out == format_color(Color(0, 0, 0)) + "\n"


def test_actions_apply_in_order(capsys):
    assert main(["--color", "#000000", "--set", "red=10", "--set", "green=20"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        format_color(Color(10, 0, 0)),
        format_color(Color(10, 20, 0)),
    ]


def test_wheel_click_off_disc_prints_nothing(capsys):
    assert main(["--wheel", "0,0"]) == 0
    assert capsys.readouterr().out == ""


def test_output_image(tmp_path):
    path = tmp_path / "picker.png"
    assert main(["--output", str(path)]) == 0
    with Image.open(path) as image:
        assert image.size == (261, 365)
        assert image.convert("RGB").getpixel((0, 300)) == (83, 83, 83)


def test_invalid_color_is_rejected():
    with pytest.raises(SystemExit):
        main(["--color", "red"])


def test_invalid_field_key_is_rejected():
    with pytest.raises(SystemExit):
        main(["--set", "alpha=3"])


def test_invalid_point_is_rejected():
    with pytest.raises(SystemExit):
        main(["--wheel", "1"])