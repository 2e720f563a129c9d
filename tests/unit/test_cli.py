"""Tests for the tariff-search command line interface."""

import pytest
from typer.testing import CliRunner

from tariff_search.adapters.inbound.api import deps
from tariff_search.adapters.inbound.cli.commands import app
from tariff_search.adapters.outbound.pdf.reportlab_renderer import ReportLabPdfRenderer
from tariff_search.core.services.download_service import DownloadService
from tariff_search.core.services.search_service import SearchService

pytestmark = pytest.mark.unit

runner = CliRunner()


@pytest.fixture
def services(store, monkeypatch):
    """Point the CLI's providers at the fake-backed store."""
    search_service = SearchService(store, ["FileName", "Text"])
    download_service = DownloadService(search_service, ReportLabPdfRenderer())
    monkeypatch.setattr(deps, "get_document_store", lambda: store)
    monkeypatch.setattr(deps, "get_search_service", lambda: search_service)
    monkeypatch.setattr(deps, "get_download_service", lambda: download_service)
    return search_service, download_service


class TestSearchCommands:
    def test_search_prints_results(self, services):
        result = runner.invoke(app, ["search", "--filename", "tariff"])

        assert result.exit_code == 0
        assert "3 document(s)" in result.output

    def test_search_without_filters_fails(self, services, fake_client):
        result = runner.invoke(app, ["search", "--author", "  "])

        assert result.exit_code == 1
        assert "TS_VAL_002" in result.output
        assert fake_client.collections["Documents"].pipelines == []

    def test_search_all_blank_keyword_fails(self, services):
        result = runner.invoke(app, ["search-all", " "])

        assert result.exit_code == 1
        assert "TS_VAL_003" in result.output

    def test_search_all_prints_results(self, services):
        result = runner.invoke(app, ["search-all", "duties", "--sort-by", "filename"])

        assert result.exit_code == 0
        assert "3 document(s)" in result.output


class TestDownloadCommand:
    def test_writes_pdf(self, services, tmp_path):
        result = runner.invoke(
            app, ["download", "65f000000000000000000002", "--output", str(tmp_path)]
        )

        assert result.exit_code == 0
        target = tmp_path / "a-duties-content.pdf"
        assert target.read_bytes().startswith(b"%PDF-")

    def test_unknown_document_fails(self, services, tmp_path):
        result = runner.invoke(
            app, ["download", "65f0000000000000000000ff", "--output", str(tmp_path)]
        )

        assert result.exit_code == 1
        assert "TS_DOC_001" in result.output
        assert list(tmp_path.iterdir()) == []


class TestStatusCommand:
    def test_reachable_store(self, services):
        result = runner.invoke(app, ["status"])

        assert result.exit_code == 0
        assert "Document store reachable" in result.output

    def test_unreachable_store(self, services, store, monkeypatch):
        monkeypatch.setattr(store, "ping", lambda: False)

        result = runner.invoke(app, ["status"])

        assert result.exit_code == 1
        assert "unreachable" in result.output
