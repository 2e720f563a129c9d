"""Document models shared by the search service and its adapters."""

from dataclasses import dataclass


@dataclass
class Document:
    """A document record read from the document store.

    Records come from two collections but callers never see which one;
    every field is populated, with ``""`` or ``0`` standing in for values
    the raw record did not carry.

    Attributes:
        id: Hex string of the record's ObjectId.
        file_name: Original file name of the ingested document.
        text: Full extracted text.
        creator: PDF creator metadata.
        author: PDF author metadata.
        title: PDF title metadata.
        subject: PDF subject metadata.
        producer: PDF producer metadata.
        page_count: Number of pages in the source document.
        score: Atlas Search relevance score. Only meaningful for ordering
            search results and never returned to API callers.
    """

    id: str
    file_name: str = ""
    text: str = ""
    creator: str = ""
    author: str = ""
    title: str = ""
    subject: str = ""
    producer: str = ""
    page_count: int = 0
    score: float = 0.0
