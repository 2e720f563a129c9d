"""PDF rendering of document text with reportlab."""

import logging
from io import BytesIO
from xml.sax.saxutils import escape

from reportlab.lib.enums import TA_JUSTIFY
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.platypus import Flowable, Paragraph, SimpleDocTemplate, Spacer

from ....core.domain.exceptions import PdfRenderingError

logger = logging.getLogger(__name__)

TITLE_FONT_SIZE = 16
TITLE_SPACE_AFTER = 20
BODY_FONT_SIZE = 12


def _to_markup(text: str) -> str:
    """Escape paragraph markup and keep source line breaks."""
    return escape(text).replace("\r\n", "\n").replace("\n", "<br/>")


class ReportLabPdfRenderer:
    """Renders a title and a justified body paragraph to a standalone PDF."""

    def __init__(self, pagesize: tuple[float, float] = A4) -> None:
        self.pagesize = pagesize
        styles = getSampleStyleSheet()
        self.title_style = ParagraphStyle(
            "DocumentTitle",
            parent=styles["Normal"],
            fontName="Helvetica-Bold",
            fontSize=TITLE_FONT_SIZE,
            leading=TITLE_FONT_SIZE * 1.2,
            spaceAfter=TITLE_SPACE_AFTER,
        )
        self.body_style = ParagraphStyle(
            "DocumentBody",
            parent=styles["Normal"],
            fontName="Helvetica",
            fontSize=BODY_FONT_SIZE,
            leading=BODY_FONT_SIZE * 1.2,
            alignment=TA_JUSTIFY,
        )

    def build_story(self, name: str | None, text: str | None) -> list[Flowable]:
        """Flowables for the title and body; blank parts are left out."""
        story: list[Flowable] = []

        if name and name.strip():
            story.append(Paragraph(_to_markup(name), self.title_style))

        if text and text.strip():
            story.append(Paragraph(_to_markup(text), self.body_style))

        return story

    def render(self, name: str | None, text: str | None) -> bytes:
        """Render a PDF with an optional bold title and optional body text.

        Args:
            name: Display name used as the title.
            text: Body text, fully justified.

        Returns:
            Complete PDF bytes. With nothing to show, a single blank page.
        """
        story = self.build_story(name, text)
        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=self.pagesize,
            title=name or "",
            invariant=1,
        )

        try:
            # An empty story would produce a document without pages
            doc.build(story or [Spacer(1, 0)])
        except Exception as e:
            raise PdfRenderingError(
                "Failed to render PDF",
                cause=e,
                context={"name": name or "", "text_length": len(text or "")},
            ) from e

        pdf_bytes = buffer.getvalue()
        logger.debug("Rendered %d byte PDF for %r", len(pdf_bytes), name)
        return pdf_bytes
