"""
Tests for cli.register

Covers the reference scenarios end to end, overrides, invalid input and
exit codes.
"""

import importlib

import pytest
from click.testing import CliRunner

from cli import main
from cli.help_texts import ExitCodes
from hostel.notifications import NotificationHub, RecordingObserver


@pytest.fixture
def runner():
    return CliRunner()


class TestRegisterCLI:
    def test_eligible_student(self, runner):
        result = runner.invoke(main, ["register", "--name", "John Doe", "--distance", "15", "--fee-paid"])
        assert result.exit_code == ExitCodes.SUCCESS
        assert "Proximity check passed for John Doe" in result.output
        assert "Fee payment verified for John Doe" in result.output
        assert "Room allocated to John Doe" in result.output
        assert "Student John Doe registered successfully" in result.output
        assert "Warden received notification: Student John Doe has been allocated a room" in result.output
        assert "Accounts Office received notification" in result.output

    def test_stage_messages_precede_notifications(self, runner):
        result = runner.invoke(main, ["register", "-n", "John Doe", "-d", "15", "--fee-paid"])
        output = result.output
        assert output.index("[proximity]") < output.index("[payment]") < output.index("[allocation]")
        assert output.index("[allocation]") < output.index("Warden received")

    def test_student_too_close(self, runner):
        result = runner.invoke(main, ["register", "--name", "Jane", "--distance", "5", "--fee-paid"])
        assert result.exit_code == ExitCodes.VALIDATION_FAILED
        assert "Validation failed: Jane lives too close" in result.output
        assert "[payment]" not in result.output
        assert "[allocation]" not in result.output
        assert "received notification" not in result.output

    def test_fee_unpaid(self, runner):
        result = runner.invoke(main, ["register", "--name", "Sam", "--distance", "15", "--fee-unpaid"])
        assert result.exit_code == ExitCodes.VALIDATION_FAILED
        assert "Proximity check passed for Sam" in result.output
        assert "Sam has not paid the hostel fee" in result.output
        assert "[allocation]" not in result.output

    def test_fee_defaults_to_unpaid(self, runner):
        result = runner.invoke(main, ["register", "--name", "Sam", "--distance", "15"])
        assert result.exit_code == ExitCodes.VALIDATION_FAILED

    def test_min_distance_override(self, runner):
        result = runner.invoke(main, [
            "register", "-n", "John Doe", "-d", "15", "--fee-paid", "--min-distance", "20"
        ])
        assert result.exit_code == ExitCodes.VALIDATION_FAILED
        assert "distance 15 < 20" in result.output

    def test_observers_from_environment(self, runner, monkeypatch):
        monkeypatch.setenv("HOSTEL_OBSERVERS", "Porter")
        result = runner.invoke(main, ["register", "-n", "John Doe", "-d", "15", "--fee-paid"])
        assert result.exit_code == ExitCodes.SUCCESS
        assert "Porter received notification" in result.output
        assert "Warden received notification" not in result.output

    def test_config_file(self, runner, tmp_path):
        fp = tmp_path / "hostel.yaml"
        fp.write_text("min_distance: 3\n", encoding="utf-8")
        result = runner.invoke(main, [
            "register", "-n", "Jane", "-d", "5", "--fee-paid", "--config", str(fp)
        ])
        assert result.exit_code == ExitCodes.SUCCESS
        assert "Room allocated to Jane" in result.output

    def test_invalid_config(self, runner, tmp_path):
        fp = tmp_path / "hostel.yaml"
        fp.write_text("min_distance: -1\n", encoding="utf-8")
        result = runner.invoke(main, [
            "register", "-n", "Jane", "-d", "5", "--fee-paid", "--config", str(fp)
        ])
        assert result.exit_code == ExitCodes.INVALID_CONFIGURATION
        assert "Configuration error" in result.output

    def test_empty_name(self, runner):
        result = runner.invoke(main, ["register", "--name", "", "--distance", "15", "--fee-paid"])
        assert result.exit_code == ExitCodes.VALIDATION_FAILED
        assert "invalid student" in result.output

    def test_negative_distance(self, runner):
        result = runner.invoke(main, ["register", "--name", "Ann", "--distance", "-4", "--fee-paid"])
        assert result.exit_code == ExitCodes.VALIDATION_FAILED
        assert "distance" in result.output

    def test_missing_name(self, runner):
        result = runner.invoke(main, ["register", "--distance", "15"])
        assert result.exit_code != 0
        assert "--name" in result.output

    def test_notification_failure(self, runner, monkeypatch):
        class Offline:
            name = "Accounts Office"

            def receive(self, message):
                raise ConnectionError("mail server down")

        recorder = RecordingObserver("Warden")

        def failing_hub(config):
            hub = NotificationHub()
            hub.register(Offline())
            hub.register(recorder)
            return hub

        register_module = importlib.import_module("cli.register")
        monkeypatch.setattr(register_module, "build_hub", failing_hub)

        result = runner.invoke(main, ["register", "-n", "John Doe", "-d", "15", "--fee-paid"])
        assert result.exit_code == ExitCodes.NOTIFICATION_FAILED
        assert "Notification failed: Accounts Office: mail server down" in result.output
        assert recorder.messages == ["Student John Doe has been allocated a room"]

    def test_log_file_from_environment(self, runner, monkeypatch, tmp_path):
        log_file = tmp_path / "logs" / "hostel.log"
        monkeypatch.setenv("HOSTEL_LOG_FILE", str(log_file))
        result = runner.invoke(main, ["register", "-n", "John Doe", "-d", "15", "--fee-paid"])
        assert result.exit_code == ExitCodes.SUCCESS
        assert "Room allocated to John Doe" in log_file.read_text(encoding="utf-8")
