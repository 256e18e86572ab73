"""PDF text extraction for chat attachments using pypdf.

Attachments are downloaded from the chat CDN and reduced to plain text
so they can be appended to the model prompt.
"""

import io
import logging

from pydantic import BaseModel, Field
from pypdf import PdfReader
from pypdf.errors import PdfReadError

logger = logging.getLogger(__name__)

# Constants
MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
PDF_MAGIC_BYTES = b"%PDF"


class PDFContent(BaseModel):
    """Text extracted from a PDF attachment.

    Attributes:
        text: Page texts joined by blank lines, stripped.
        pages: Total number of pages in the document.
        title: Document title from the PDF metadata, if any.
    """

    text: str
    pages: int = Field(ge=0)
    title: str | None = None

    @property
    def has_text(self) -> bool:
        return bool(self.text)


class PDFParseError(Exception):
    """Raised when PDF parsing fails."""

    pass


def _validate_pdf_bytes(file_content: bytes) -> None:
    if not file_content:
        raise PDFParseError("Empty file provided")

    if len(file_content) > MAX_FILE_SIZE:
        size_mb = len(file_content) / (1024 * 1024)
        raise PDFParseError(f"File size ({size_mb:.1f}MB) exceeds maximum allowed (10MB)")

    if not file_content.lstrip()[:10].startswith(PDF_MAGIC_BYTES):
        raise PDFParseError("Invalid PDF: file does not start with PDF header")


def _read_title(reader: PdfReader) -> str | None:
    try:
        if reader.metadata and reader.metadata.title:
            return str(reader.metadata.title)
    except Exception as e:
        logger.warning(f"Failed to read PDF title: {e}")
    return None


def parse_pdf(file_content: bytes) -> PDFContent:
    """Parse a PDF file and extract its text content.

    Pages whose text cannot be extracted are skipped. A document without
    a text layer (e.g. a scan) parses successfully with empty text.

    Args:
        file_content: Raw bytes of the PDF file.

    Returns:
        PDFContent with extracted text, page count, and title.

    Raises:
        PDFParseError: If the file is invalid, too large, empty, or corrupt.
    """
    _validate_pdf_bytes(file_content)

    try:
        reader = PdfReader(io.BytesIO(file_content))
        pages = len(reader.pages)
    except PdfReadError as e:
        raise PDFParseError(f"Corrupt or invalid PDF: {e}") from e
    except Exception as e:
        raise PDFParseError(f"Failed to read PDF: {e}") from e

    if pages == 0:
        raise PDFParseError("PDF contains no pages")

    text_parts: list[str] = []
    for i, page in enumerate(reader.pages):
        try:
            page_text = page.extract_text()
        except Exception as e:
            logger.warning(f"Failed to extract text from page {i + 1}: {e}")
            continue
        if page_text and page_text.strip():
            text_parts.append(page_text)

    text = "\n\n".join(text_parts).strip()
    if not text:
        logger.info("PDF contains no extractable text (may be scanned/image-based)")

    return PDFContent(text=text, pages=pages, title=_read_title(reader))
