"""
Tests for the structured logger
"""
from posture_engine import config
from posture_engine import logger


class TestLogLevels:

    def test_debug_hidden_at_info(self, monkeypatch, capsys):
        monkeypatch.setattr(config, "LOG_LEVEL", "INFO")
        logger.log_debug("Measurement Skipped", {"measurement_type": "head_horizontal_level"})
        assert capsys.readouterr().out == ""

    def test_debug_shown_at_debug(self, monkeypatch, capsys):
        monkeypatch.setattr(config, "LOG_LEVEL", "DEBUG")
        logger.log_debug("Measurement Skipped", {"measurement_type": "head_horizontal_level"})
        out = capsys.readouterr().out
        assert "[DEBUG]" in out
        assert "measurement_type: head_horizontal_level" in out

    def test_errors_shown_at_warning(self, monkeypatch, capsys):
        monkeypatch.setattr(config, "LOG_LEVEL", "WARNING")
        logger.log_engine("Measurements Calculated", {"count": 3})
        logger.log_error("Measurement Save Failed", ValueError("boom"))
        out = capsys.readouterr().out
        assert "[ENGINE]" not in out
        assert "Type: ValueError" in out

    def test_next_step_hint(self, monkeypatch, capsys):
        monkeypatch.setattr(config, "LOG_LEVEL", "INFO")
        logger.log_db("Measurements Saved", {"count": 2})
        assert ">>> Next:" in capsys.readouterr().out

    def test_long_values_truncated(self, monkeypatch, capsys):
        monkeypatch.setattr(config, "LOG_LEVEL", "INFO")
        logger.log_api("POST /measurements/calculate", {"body": "x" * 300})
        assert "x" * 97 + "..." in capsys.readouterr().out

    def test_missing_landmarks_not_logged_as_errors(self, monkeypatch, capsys):
        from posture_engine.measurement_engine import calculate_all_measurements

        monkeypatch.setattr(config, "LOG_LEVEL", "DEBUG")
        calculate_all_measurements([], "front")
        out = capsys.readouterr().out
        assert "[ERROR]" not in out
        assert "Measurement Skipped" in out
