# File: tests/integration/test_cli.py
"""
Integration tests for the command-line entry point.
"""

import json
import pytest

from weekplanner.cli import main
from weekplanner.processors.layout_exporter import LayoutExporter


@pytest.fixture
def events_file(tmp_path):
    """Events export with a clash, a banner and one broken record."""
    path = tmp_path / "events.json"
    path.write_text(json.dumps([
        {'id': '1', 'title': 'Nancy Grossman Appointment', 'startTime': '2025-07-07T09:00:00',
         'endTime': '2025-07-07T10:00:00', 'source': 'simplepractice'},
        {'id': '2', 'title': 'Dan re: Supervision', 'startTime': '2025-07-07T09:30:00',
         'endTime': '2025-07-07T10:30:00', 'source': 'google'},
        {'id': '3', 'title': 'Independence Day Holiday', 'startTime': '2025-07-08T00:00:00',
         'endTime': '2025-07-09T00:00:00'},
        {'id': '4', 'title': 'Broken', 'startTime': '2025-07-07T12:00:00', 'endTime': '2025-07-07T11:00:00'},
    ]), encoding='utf-8')
    return path


class TestMain:
    """Tests for weekplanner-layout."""

    def test_writes_json_layout(self, events_file, tmp_path):
        output = tmp_path / "out" / "layout.json"

        code = main([
            "--events", str(events_file),
            "--start", "2025-07-07", "--end", "2025-07-08",
            "--timezone", "America/New_York",
            "--output", str(output), "--quiet",
        ])

        assert code == 0
        data = json.loads(output.read_text(encoding='utf-8'))
        assert [d['date'] for d in data['days']] == ['2025-07-07', '2025-07-08']
        assert [e['column'] for e in data['days'][0]['timed']] == [0, 1]
        assert data['days'][1]['all_day'][0]['variant'] == 'holiday'
        assert data['diagnostics'][0]['code'] == 'malformed-event'
        assert 'generated_at' in data

    def test_prints_summary(self, events_file, capsys):
        code = main(["--events", str(events_file), "--week", "2025-07-09", "--timezone", "America/New_York"])

        out = capsys.readouterr().out
        assert code == 0
        assert "WEEKLY PLANNER LAYOUT" in out
        assert "[ALL DAY] Independence Day Holiday" in out
        assert "col 2/2" in out
        assert "Warnings: 1" in out

    def test_invalid_range(self, events_file):
        assert main(["--events", str(events_file), "--start", "2025-07-09", "--end", "2025-07-07", "--quiet"]) == 1

    def test_missing_events_file(self, tmp_path):
        assert main(["--events", str(tmp_path / "nope.json"), "--quiet"]) == 1

    def test_unknown_timezone(self, events_file):
        assert main(["--events", str(events_file), "--timezone", "Nowhere/Land", "--quiet"]) == 1

    def test_bad_date_argument(self, events_file):
        with pytest.raises(SystemExit):
            main(["--events", str(events_file), "--start", "07/07/2025"])

    def test_end_without_start_rejected(self, events_file, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["--events", str(events_file), "--end", "2025-07-08", "--quiet"])

        assert excinfo.value.code == 2
        assert "--end requires --start" in capsys.readouterr().err


class TestPrettyPrint:
    """Tests for the console summary."""

    def test_clean_layout_reports_no_warnings(self, engine, make_event, monday, capsys):
        result = engine.layout([make_event("a", "09:00", "10:00")], (monday, monday))

        LayoutExporter().pretty_print(result)

        out = capsys.readouterr().out
        assert not result.has_warnings()
        assert "Warnings: 0" in out
        assert "No warnings" in out

    def test_warnings_listed(self, engine, make_event, monday, capsys):
        result = engine.layout([make_event("dawn", "04:30", "05:30")], (monday, monday))

        LayoutExporter().pretty_print(result)

        out = capsys.readouterr().out
        assert result.has_warnings()
        assert "! [out-of-grid] event dawn" in out
        assert "No warnings" not in out
