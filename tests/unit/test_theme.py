"""Tests for the CLI color theme."""

import pytest

from castscore.scoring.models import Severity
from castscore.ui.theme import DARK_THEME, LIGHT_THEME, get_theme, reset_theme, set_theme


@pytest.fixture(autouse=True)
def _reset():
    reset_theme()
    yield
    reset_theme()


class TestTheme:
    """Tests for theme selection and formatting helpers."""

    def test_explicit_modes(self) -> None:
        assert set_theme("light") is LIGHT_THEME
        assert set_theme("dark") is DARK_THEME

    def test_auto_detects_light_background(self, monkeypatch) -> None:
        monkeypatch.setenv("COLORFGBG", "0;15")
        assert set_theme("auto") is LIGHT_THEME

    def test_get_theme_defaults_to_dark(self, monkeypatch) -> None:
        monkeypatch.delenv("COLORFGBG", raising=False)
        monkeypatch.delenv("CASTSCORE_THEME", raising=False)
        assert get_theme() is DARK_THEME

    @pytest.mark.parametrize("stars,color", [(1, "red"), (2, "red"), (3, "yellow"), (5, "green")])
    def test_star_colors(self, stars, color) -> None:
        assert DARK_THEME.stars_color(stars) == color

    def test_stars_text(self) -> None:
        assert "★★★☆☆" in DARK_THEME.stars_text(3)

    def test_severity_colors(self) -> None:
        assert DARK_THEME.severity_color(Severity.CRITICAL) == "red"
        assert DARK_THEME.severity_color(Severity.INFO) == "cyan"

    def test_potential_text(self) -> None:
        assert "+70" in DARK_THEME.potential_text(70)
        assert DARK_THEME.potential_text(0) == "[dim]+0[/dim]"
