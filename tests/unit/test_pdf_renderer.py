"""Unit tests for ReportLabPdfRenderer."""

from io import BytesIO

import pytest
from pypdf import PdfReader
from reportlab.lib.enums import TA_JUSTIFY

from tariff_search.adapters.outbound.pdf.reportlab_renderer import ReportLabPdfRenderer
from tariff_search.core.domain.exceptions import PdfRenderingError

pytestmark = pytest.mark.unit


@pytest.fixture
def renderer():
    return ReportLabPdfRenderer()


def _read(pdf_bytes: bytes) -> PdfReader:
    return PdfReader(BytesIO(pdf_bytes))


def _page_text(pdf_bytes: bytes) -> str:
    return "\n".join(page.extract_text() or "" for page in _read(pdf_bytes).pages)


class TestBuildStory:
    """Tests for which blocks make it into the PDF."""

    def test_title_and_body(self, renderer):
        story = renderer.build_story("Doc", "Body")

        assert len(story) == 2
        title, body = story
        assert title.getPlainText() == "Doc"
        assert title.style.fontName == "Helvetica-Bold"
        assert title.style.fontSize == 16
        assert title.style.spaceAfter == 20
        assert body.getPlainText() == "Body"
        assert body.style.fontSize == 12
        assert body.style.alignment == TA_JUSTIFY

    def test_title_only_when_text_blank(self, renderer):
        story = renderer.build_story("Doc", "")

        assert len(story) == 1
        assert story[0].style.name == "DocumentTitle"

    def test_body_only_when_name_blank(self, renderer):
        story = renderer.build_story("", "Body")

        assert len(story) == 1
        assert story[0].style.name == "DocumentBody"

    def test_whitespace_counts_as_blank(self, renderer):
        assert renderer.build_story("   ", "\n\t") == []

    def test_markup_characters_are_escaped(self, renderer):
        (body,) = renderer.build_story(None, "Duty < 5% & rate > 2")

        assert body.getPlainText() == "Duty < 5% & rate > 2"


class TestRender:
    """Tests for the generated PDF bytes."""

    def test_output_is_pdf(self, renderer):
        pdf_bytes = renderer.render("Doc", "Body")

        assert pdf_bytes.startswith(b"%PDF-")
        assert b"%%EOF" in pdf_bytes[-32:]

    def test_title_and_body_text_present(self, renderer):
        text = _page_text(renderer.render("Tariff Report", "Steel import duties apply."))

        assert "Tariff Report" in text
        assert "Steel import duties apply." in text

    def test_body_only(self, renderer):
        text = _page_text(renderer.render("", "Body"))

        assert "Body" in text

    def test_both_blank_is_valid_single_page_pdf(self, renderer):
        reader = _read(renderer.render("", ""))

        assert len(reader.pages) == 1
        assert (reader.pages[0].extract_text() or "").strip() == ""

    def test_long_text_paginates(self, renderer):
        text = " ".join(["tariff"] * 5000)

        assert len(_read(renderer.render("Long", text)).pages) > 1

    def test_output_is_deterministic(self, renderer):
        assert renderer.render("Doc", "Body") == renderer.render("Doc", "Body")

    def test_layout_failure_is_wrapped(self, renderer, monkeypatch):
        def boom(*args, **kwargs):
            raise ValueError("layout failed")

        monkeypatch.setattr(
            "tariff_search.adapters.outbound.pdf.reportlab_renderer.SimpleDocTemplate.build",
            boom,
        )

        with pytest.raises(PdfRenderingError) as exc_info:
            renderer.render("Doc", "Body")
        assert isinstance(exc_info.value.cause, ValueError)
