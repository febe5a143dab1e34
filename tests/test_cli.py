"""Tests for CLI commands."""

import json
from unittest.mock import AsyncMock, MagicMock, patch

from typer.testing import CliRunner

from dohresolver.cli.main import app
from dohresolver.core.models import AnswerRecord, LookupResult, RecordType


runner = CliRunner()


def mock_client(result: LookupResult) -> MagicMock:
    client = MagicMock()
    client.base_url = "http://localhost:3000"
    client.connect = AsyncMock()
    client.disconnect = AsyncMock()
    client.lookup = AsyncMock(return_value=result)
    return client


class TestLookupCommand:
    """Tests for the lookup command."""

    def test_a_record(self):
        client = mock_client(
            LookupResult(
                ok=True,
                answers=[
                    AnswerRecord(name="example.com", record_type=1, data="93.184.216.34")
                ],
            )
        )
        with patch("dohresolver.cli.commands.query.DoHClient", return_value=client):
            result = runner.invoke(app, ["lookup", "example.com"])

        assert result.exit_code == 0
        assert "93.184.216.34" in result.stdout
        client.lookup.assert_awaited_once_with("example.com", RecordType.A, normalize=False)
        client.disconnect.assert_awaited_once()

    def test_url_is_normalized(self):
        client = mock_client(LookupResult(ok=True))
        with patch("dohresolver.cli.commands.query.DoHClient", return_value=client):
            result = runner.invoke(
                app, ["lookup", "https://mail.example.com/inbox", "--type", "MX"]
            )

        assert result.exit_code == 0
        client.lookup.assert_awaited_once_with("mail.example.com", RecordType.MX, normalize=False)

    def test_custom_url(self):
        client = mock_client(LookupResult(ok=True))
        with patch("dohresolver.cli.commands.query.DoHClient", return_value=client) as cls:
            runner.invoke(app, ["lookup", "example.com", "--url", "http://dns.internal:8053"])

        cls.assert_called_once_with(base_url="http://dns.internal:8053")

    def test_json_output(self):
        client = mock_client(
            LookupResult(
                ok=True,
                answers=[
                    AnswerRecord(name="example.com", record_type=15, data="10 mail.example.com")
                ],
            )
        )
        with patch("dohresolver.cli.commands.query.DoHClient", return_value=client):
            result = runner.invoke(app, ["--output", "json", "lookup", "example.com", "-t", "MX"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == [
            {"name": "example.com", "type": 15, "TTL": 300, "data": "10 mail.example.com"}
        ]

    def test_dns_error(self):
        client = mock_client(
            LookupResult(ok=False, error="queryA ENOTFOUND nonexistent.invalid")
        )
        with patch("dohresolver.cli.commands.query.DoHClient", return_value=client):
            result = runner.invoke(app, ["lookup", "nonexistent.invalid"])

        assert result.exit_code == 1
        assert "ENOTFOUND" in result.stdout

    def test_unsupported_type(self):
        result = runner.invoke(app, ["lookup", "example.com", "--type", "NS"])
        assert result.exit_code != 0


class TestServeCommand:
    """Tests for the serve command."""

    def test_serve_passes_options(self, monkeypatch):
        for key in ("DOH_HOST", "DOH_PORT", "DOH_NAMESERVERS"):
            monkeypatch.setenv(key, "")

        with patch("dohresolver.cli.commands.serve.run") as run:
            result = runner.invoke(app, ["serve", "--host", "127.0.0.1", "--port", "8053"])

        assert result.exit_code == 0
        args, kwargs = run.call_args
        assert args == ("127.0.0.1", 8053)
        assert kwargs["reload"] is False

    def test_serve_exports_settings(self, monkeypatch):
        monkeypatch.setenv("DOH_NAMESERVERS", "1.1.1.1")
        monkeypatch.setenv("DOH_PORT", "3000")
        monkeypatch.setenv("DOH_HOST", "")

        with patch("dohresolver.cli.commands.serve.run"):
            runner.invoke(app, ["serve", "--port", "5353"])

        import os

        assert os.environ["DOH_PORT"] == "5353"
        assert os.environ["DOH_NAMESERVERS"] == "1.1.1.1"


def test_version():
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert "dohctl version" in result.stdout
