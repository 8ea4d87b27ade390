import sys
import os
import tempfile
import unittest
from unittest.mock import patch, MagicMock
from argparse import Namespace
from datetime import datetime, timedelta, timezone
from io import StringIO

# Add the parent directory to sys.path to import the clockifish package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from clockifish.__main__ import main, report_hours, NO_TIMER_SENTINEL, NO_TIMER_MESSAGE
from clockifish.api.errors import ApiError, Unauthorized
from clockifish.api.models import TimeEntry, TimeInterval

T = datetime(2024, 5, 13, 8, 0, tzinfo=timezone.utc)


def entry(entry_id="entry1", seconds=None, description="Writing docs"):
    """Build a time entry lasting ``seconds``, or running if None."""
    end = T + timedelta(seconds=seconds) if seconds is not None else None
    return TimeEntry(entry_id, "user1", "ws1", TimeInterval(T, end), description=description)


@patch('clockifish.__main__.load_environment')
@patch('clockifish.__main__.ClockifyClient')
@patch.dict('os.environ', {'CLOCKIFY_API_KEY': 'test_api_key', 'CLOCKIFY_WORKSPACE_ID': 'ws1'})
class TestCli(unittest.TestCase):
    """Test the command line interface against a mocked client."""

    def run_main(self, argv):
        """Run main() and return (exit code, stdout, stderr)."""
        stdout, stderr = StringIO(), StringIO()
        code = 0
        with patch('sys.stdout', stdout), patch('sys.stderr', stderr):
            try:
                main(argv)
            except SystemExit as e:
                code = e.code
        return code, stdout.getvalue(), stderr.getvalue()

    def test_start(self, mock_client_cls, mock_load_env):
        client = mock_client_cls.return_value
        client.start_timer.return_value = entry()

        code, out, _ = self.run_main(['timer', 'start', '-d', 'Writing docs', '-p', 'project1'])

        self.assertEqual(code, 0)
        client.start_timer.assert_called_once_with(description='Writing docs', project_id='project1')
        self.assertIn("Timer started successfully", out)
        self.assertIn("ID: entry1", out)
        self.assertIn("Description: Writing docs", out)

    def test_start_without_options(self, mock_client_cls, mock_load_env):
        client = mock_client_cls.return_value
        client.start_timer.return_value = entry(description=None)

        code, out, _ = self.run_main(['timer', 'start'])

        self.assertEqual(code, 0)
        client.start_timer.assert_called_once_with(description=None, project_id=None)
        self.assertNotIn("Description", out)

    def test_stop_without_timer(self, mock_client_cls, mock_load_env):
        """Test that stop only reports when nothing is running."""
        client = mock_client_cls.return_value
        client.get_current_timer.return_value = None

        code, out, _ = self.run_main(['timer', 'stop'])

        self.assertEqual(code, 0)
        self.assertIn(NO_TIMER_MESSAGE, out)
        client.stop_timer.assert_not_called()

    def test_stop(self, mock_client_cls, mock_load_env):
        client = mock_client_cls.return_value
        client.get_current_timer.return_value = entry()
        client.stop_timer.return_value = entry(seconds=3723)

        code, out, _ = self.run_main(['timer', 'stop'])

        self.assertEqual(code, 0)
        client.stop_timer.assert_called_once_with("user1", "ws1")
        self.assertIn("Timer stopped successfully", out)
        self.assertIn("Duration: 1h 2m 3s", out)

    def test_status_running(self, mock_client_cls, mock_load_env):
        mock_client_cls.return_value.get_current_timer.return_value = entry()

        code, out, _ = self.run_main(['timer', 'status'])

        self.assertEqual(code, 0)
        self.assertIn("Timer is running", out)
        self.assertIn("ID: entry1", out)

    def test_status_without_timer(self, mock_client_cls, mock_load_env):
        """Test that plain status exits zero when nothing is running."""
        mock_client_cls.return_value.get_current_timer.return_value = None

        code, out, _ = self.run_main(['timer', 'status'])

        self.assertEqual(code, 0)
        self.assertIn(NO_TIMER_MESSAGE, out)

    def test_status_id(self, mock_client_cls, mock_load_env):
        mock_client_cls.return_value.get_current_timer.return_value = entry()

        code, out, _ = self.run_main(['timer', 'status', 'id'])

        self.assertEqual(code, 0)
        self.assertEqual(out, "entry1\n")

    def test_status_id_without_timer(self, mock_client_cls, mock_load_env):
        """Test that status id fails for scripts when nothing is running."""
        mock_client_cls.return_value.get_current_timer.return_value = None

        code, out, _ = self.run_main(['timer', 'status', 'id'])

        self.assertNotEqual(code, 0)
        self.assertEqual(out.strip(), NO_TIMER_SENTINEL)

    def test_api_error(self, mock_client_cls, mock_load_env):
        """Test that API errors exit non-zero with status and body."""
        mock_client_cls.return_value.get_current_timer.side_effect = Unauthorized(401, "Invalid API key")

        code, _, err = self.run_main(['timer', 'status'])

        self.assertEqual(code, 1)
        self.assertIn("401", err)
        self.assertIn("Invalid API key", err)

    def test_decode_error(self, mock_client_cls, mock_load_env):
        mock_client_cls.return_value.get_current_timer.side_effect = KeyError("timeInterval")

        code, _, err = self.run_main(['timer', 'status'])

        self.assertEqual(code, 1)
        self.assertIn("timeInterval", err)

    def test_missing_api_key(self, mock_client_cls, mock_load_env):
        """Test that a missing API key fails before a client is created."""
        with patch.dict('os.environ', {'CLOCKIFY_WORKSPACE_ID': 'ws1'}, clear=True):
            code, _, err = self.run_main(['timer', 'status'])

        self.assertEqual(code, 1)
        self.assertIn("CLOCKIFY_API_KEY", err)
        mock_client_cls.assert_not_called()

    def test_env_file_option(self, mock_client_cls, mock_load_env):
        mock_client_cls.return_value.get_current_timer.return_value = None

        self.run_main(['--env-file', 'custom.env', 'timer', 'status'])

        mock_load_env.assert_called_once_with('custom.env')

    def test_report_week_raw(self, mock_client_cls, mock_load_env):
        client = mock_client_cls.return_value
        client.get_time_entries.return_value = [entry(seconds=3600), entry("entry2", 1801), entry("entry3")]

        code, out, _ = self.run_main(['report', 'week', '--raw'])

        self.assertEqual(code, 0)
        self.assertEqual(out, "1.50\n")
        self.assertEqual(client.get_time_entries.call_count, 1)

    def test_report_month(self, mock_client_cls, mock_load_env):
        mock_client_cls.return_value.get_time_entries.return_value = [entry(seconds=7200)]

        code, out, _ = self.run_main(['report', 'month'])

        self.assertEqual(code, 0)
        self.assertIn("Month", out)
        self.assertIn("2.00 hours", out)

    def test_report_both(self, mock_client_cls, mock_load_env):
        client = mock_client_cls.return_value
        client.get_time_entries.return_value = []

        code, out, _ = self.run_main(['report'])

        self.assertEqual(code, 0)
        self.assertEqual(client.get_time_entries.call_count, 2)
        self.assertIn("Week", out)
        self.assertIn("Month", out)

    def test_no_command(self, mock_client_cls, mock_load_env):
        code, out, _ = self.run_main([])

        self.assertEqual(code, 0)
        self.assertIn("usage", out)
        mock_client_cls.assert_not_called()

    def test_version(self, mock_client_cls, mock_load_env):
        with patch.dict('os.environ', {'CLOCKIFISH_VERSION': '9.9.9'}):
            code, out, _ = self.run_main(['--version'])

        self.assertEqual(code, 0)
        self.assertIn("9.9.9", out)


class TestReportHours(unittest.TestCase):
    """Test report windows passed to the client."""

    def setUp(self):
        """Set up test fixtures."""
        self.client = MagicMock()
        self.client.get_time_entries.return_value = [entry(seconds=3600)]
        self.now = datetime(2024, 5, 19, 18, 30)

    def _args(self, **kwargs):
        values = {'period': None, 'raw': False, 'md': None, 'overwrite': False}
        values.update(kwargs)
        return Namespace(**values)

    @patch('sys.stdout', new_callable=StringIO)
    def test_query_uses_exclusive_end(self, mock_stdout):
        """Test that queries use the next Monday / next 1st, not the display end."""
        report_hours(self.client, self._args(), now=self.now)

        calls = [c[0] for c in self.client.get_time_entries.call_args_list]
        self.assertEqual(calls, [
            (datetime(2024, 5, 13), datetime(2024, 5, 20)),
            (datetime(2024, 5, 1), datetime(2024, 6, 1)),
        ])
        output = mock_stdout.getvalue()
        self.assertIn("(Sun)2024-05-19", output)
        self.assertIn("(Fri)2024-05-31", output)
        self.assertNotIn("2024-05-20", output)

    @patch('sys.stdout', new_callable=StringIO)
    def test_raw_both(self, mock_stdout):
        report_hours(self.client, self._args(raw=True), now=self.now)
        self.assertEqual(mock_stdout.getvalue(), "1.00\n1.00\n")

    @patch('sys.stdout', new_callable=StringIO)
    def test_markdown_export(self, mock_stdout):
        with tempfile.TemporaryDirectory() as tmpdir:
            md_path = os.path.join(tmpdir, 'hours.md')
            report_hours(self.client, self._args(period='week', md=md_path), now=self.now)
            report_hours(self.client, self._args(period='week', md=md_path), now=self.now)

            with open(md_path, encoding='utf-8') as f:
                content = f.read()

        self.assertTrue(content.startswith("# Clockify hours"))
        self.assertEqual(content.count("# Clockify hours"), 1)
        self.assertEqual(content.count("### Hours as of"), 2)
        self.assertIn("Appending output", mock_stdout.getvalue())


if __name__ == '__main__':
    unittest.main()
