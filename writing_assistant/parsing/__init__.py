"""PDF parsing utilities for chat attachments.

Responsibilities:
    - PDF byte validation (size, header)
    - Page-by-page text extraction with pypdf
    - Title lookup for labelling extracted text
"""

from writing_assistant.parsing.pdf_parser import PDFContent, PDFParseError, parse_pdf

__all__ = ["PDFContent", "PDFParseError", "parse_pdf"]
