"""
Tests for cli.demo
"""

import pytest
from click.testing import CliRunner

from cli import main


@pytest.fixture
def runner():
    return CliRunner()


class TestDemoCLI:
    def test_runs_all_scenarios(self, runner):
        result = runner.invoke(main, ["demo"])
        assert result.exit_code == 0
        assert "Room allocated to John Doe" in result.output
        assert "Validation failed: Jane lives too close" in result.output
        assert "Validation failed: Sam has not paid the hostel fee" in result.output
        assert "Registration failed: Student John Doe is already registered" in result.output

    def test_only_allocated_student_is_announced(self, runner):
        result = runner.invoke(main, ["demo"])
        assert "Student John Doe has been allocated a room" in result.output
        assert "Student Jane has been allocated" not in result.output
        assert "Student Sam has been allocated" not in result.output

    def test_unsubscribed_observer_misses_final_broadcast(self, runner):
        result = runner.invoke(main, ["demo"])
        assert "Warden unsubscribes" in result.output
        assert "Accounts Office received notification: Hostel rules have been updated" in result.output
        assert "Warden received notification: Hostel rules have been updated" not in result.output

    def test_no_observers_configured(self, runner, tmp_path):
        fp = tmp_path / "hostel.yaml"
        fp.write_text("observers: []\n", encoding="utf-8")
        result = runner.invoke(main, ["demo", "--config", str(fp)])
        assert result.exit_code == 0
        assert "received notification" not in result.output

    def test_summary_lists_every_scenario(self, runner):
        result = runner.invoke(main, ["demo"])
        summary = result.output.split("== Summary ==", 1)[1]
        assert "✅ John Doe: Accepted" in summary
        assert "❌ Jane: Rejected at proximity" in summary
        assert "❌ Sam: Rejected at payment" in summary
