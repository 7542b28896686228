import pytest

from nci.style import blue, cyan, dim, green, red, underlined, yellow


@pytest.fixture
def forced(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.setenv("CLICOLOR_FORCE", "1")


@pytest.fixture
def disabled(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")


def _styled_all(text):
    return [
        blue(text),
        yellow(text),
        green(text),
        red(text),
        cyan(text),
        dim(text),
        underlined(text),
    ]


def test_blue_escape_sequence(forced):
    assert blue("x") == "\x1b[34mx\x1b[0m"


def test_styled_text_wraps_original(forced):
    for result in _styled_all("hello"):
        assert result.startswith("\x1b[")
        assert result.endswith("\x1b[0m")
        assert "hello" in result


def test_no_color_leaves_text_unchanged(disabled):
    assert _styled_all("hello") == ["hello"] * 7


def test_styles_differ(forced):
    results = _styled_all("a")
    assert len(set(results)) == len(results)


def test_non_string_is_converted(disabled):
    assert green(42) == "42"