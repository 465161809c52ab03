"""Document-format adapters and the format-name factory.

Each adapter wraps pre-rendered report content and knows how to preview
(:meth:`Document.display`) and serialize it. PDF and Word serialization is
a tagged plain-text stub, not a real binary format. HTML serializes to
exactly its preview.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from carctl.domain.errors import UnsupportedFormatError
from carctl.domain.types import DocumentFormat
from carctl.infrastructure.filesystem import write_document

logger = logging.getLogger(__name__)


class Document(ABC):
    """Contract shared by all document variants.

    ``content`` is fixed at construction.
    """

    def __init__(self, content: str) -> None:
        self._content = content

    @property
    def content(self) -> str:
        return self._content

    @property
    @abstractmethod
    def tag(self) -> str:
        """Human-facing format label (e.g. 'PDF')."""
        ...

    @abstractmethod
    def display(self) -> str:
        """Preview string for the console."""
        ...

    @abstractmethod
    def serialize(self) -> str:
        """Exact text written by :meth:`save`."""
        ...

    def save(self, path: str | Path) -> Path:
        """Write :meth:`serialize` output to *path*, overwriting it.

        Raises:
            DocumentWriteError: the file could not be written.
        """
        written = write_document(path, self.serialize())
        logger.debug("Saved %s document to %s", self.tag, written)
        return written

    def __repr__(self) -> str:
        return f"{type(self).__name__}(content={self._content!r})"


class PdfDocument(Document):
    """PDF stub: ``%PDF-1.4`` header line followed by the content."""

    HEADER = "%PDF-1.4\n"

    @property
    def tag(self) -> str:
        return "PDF"

    def display(self) -> str:
        return "[PDF]\n" + self._content

    def serialize(self) -> str:
        return self.HEADER + self._content


class WordDocument(Document):
    """Word stub: ``DOCX FORMAT`` header line followed by the content."""

    HEADER = "DOCX FORMAT\n"

    @property
    def tag(self) -> str:
        return "Word"

    def display(self) -> str:
        return "[WORD]\n" + self._content

    def serialize(self) -> str:
        return self.HEADER + self._content


class HtmlDocument(Document):
    """HTML page; saved bytes are identical to the preview."""

    @property
    def tag(self) -> str:
        return "HTML"

    def display(self) -> str:
        return "<html><body>" + self._content + "</body></html>"

    def serialize(self) -> str:
        return self.display()


DOCUMENT_REGISTRY: dict[str, type[Document]] = {
    DocumentFormat.PDF: PdfDocument,
    DocumentFormat.WORD: WordDocument,
    DocumentFormat.HTML: HtmlDocument,
}

SUPPORTED_FORMATS: tuple[str, ...] = tuple(str(fmt) for fmt in DocumentFormat)


def create_document(fmt: str, content: str) -> Document:
    """Return a new document variant for *fmt* (case-insensitive).

    Raises:
        UnsupportedFormatError: *fmt* is not pdf, word, or html. The message
            carries *fmt* as given.
    """
    doc_cls = DOCUMENT_REGISTRY.get(fmt.lower())
    if doc_cls is None:
        raise UnsupportedFormatError(fmt)
    logger.debug("Created %s document (%d chars)", doc_cls.__name__, len(content))
    return doc_cls(content)
