"""
Unit tests for the demo script.
"""
import importlib.util
from pathlib import Path

import pytest


@pytest.fixture
def demo_module(monkeypatch):
    """Load demo.py from the project root with sleeping and clearing disabled."""
    path = Path(__file__).parent.parent.parent / "demo.py"
    spec = importlib.util.spec_from_file_location("demo", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    monkeypatch.setattr(module.time, "sleep", lambda _: None)
    monkeypatch.setattr(module, "clear_screen", lambda: None)
    return module


class TestDemo:
    """Test the watch-the-agent loop."""

    def test_zero_games_reports_zero_percent(self, demo_module, capsys) -> None:
        """No games played still prints a final line."""
        demo_module.demo(games=0, size=3)
        assert "Final: 0/0 wins (0%)" in capsys.readouterr().out

    def test_games_run_to_completion(self, demo_module, capsys) -> None:
        """Every game ends with a banner."""
        demo_module.demo(games=2, size=3, seed=4)
        out = capsys.readouterr().out
        assert out.count("*** Game ") == 2
        assert "Final: " in out
