"""Turn chat message attachments into model inputs.

Images become agno ``Image`` media (inline bytes for data URLs, remote
references for CDN uploads). PDFs are downloaded and reduced to text on
a best-effort basis: any download or parse failure leaves them out.
"""

import base64
import binascii
import logging
import re
from dataclasses import dataclass, field
from typing import Any

import httpx
from agno.media import Image

from writing_assistant.agent.errors import TransientFetchError
from writing_assistant.parsing.pdf_parser import PDFContent, PDFParseError, parse_pdf

logger = logging.getLogger(__name__)

DATA_URL_PATTERN = re.compile(r"^data:(.*?);base64,(.*)$", re.DOTALL)
DEFAULT_IMAGE_MIME_TYPE = "image/*"
FETCH_TIMEOUT = 30.0


@dataclass
class AttachmentContext:
    """Model inputs collected from one message's attachments."""

    images: list[Image] = field(default_factory=list)
    pdf_text: str = ""
    has_pdf: bool = False


def is_pdf(attachment: dict[str, Any]) -> bool:
    mime_type = attachment.get("mime_type") or ""
    title = attachment.get("title") or ""
    return "pdf" in mime_type or title.endswith(".pdf")


def _inline_image(attachment: dict[str, Any]) -> Image | None:
    match = DATA_URL_PATTERN.match(attachment["image_url"])
    if not match:
        return None
    mime_type, data = match.groups()
    try:
        content = base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError):
        logger.warning("Skipping inline image with invalid base64 payload")
        return None
    return Image(content=content, mime_type=mime_type)


async def fetch_pdf(url: str, http_client: httpx.AsyncClient) -> PDFContent:
    """Download a PDF and extract its text and metadata.

    Raises:
        TransientFetchError: If the download or the parse fails.
    """
    try:
        response = await http_client.get(url)
        response.raise_for_status()
        return parse_pdf(response.content)
    except (httpx.HTTPError, PDFParseError) as e:
        raise TransientFetchError(f"Could not extract text from {url}: {e}") from e


async def collect_attachments(
    attachments: list[dict[str, Any]],
    http_client: httpx.AsyncClient,
) -> AttachmentContext:
    """Build model inputs from a message's attachments.

    Args:
        attachments: Attachment payloads from a ``message.new`` event.
        http_client: Client used to download PDF attachments.

    Returns:
        Images, concatenated PDF text, and whether any PDF was attached.
    """
    context = AttachmentContext()

    for attachment in attachments:
        if not isinstance(attachment, dict):
            continue

        image_url = attachment.get("image_url")
        if attachment.get("type") == "image" and isinstance(image_url, str):
            if image_url.startswith("data:"):
                image = _inline_image(attachment)
                if image is not None:
                    context.images.append(image)
            elif image_url.startswith("http"):
                context.images.append(
                    Image(
                        url=image_url,
                        mime_type=attachment.get("mime_type") or DEFAULT_IMAGE_MIME_TYPE,
                    )
                )

        if not is_pdf(attachment):
            continue
        context.has_pdf = True

        url = attachment.get("asset_url") or attachment.get("file") or image_url
        if not isinstance(url, str) or not url.startswith("http"):
            continue
        try:
            pdf = await fetch_pdf(url, http_client)
        except TransientFetchError as e:
            logger.warning(str(e))
            continue
        if not pdf.has_text:
            logger.info(f"PDF {url} has {pdf.pages} page(s) but no extractable text")
            continue

        # Attachments uploaded without a name fall back to the document title
        title = attachment.get("title") or pdf.title or ""
        context.pdf_text += f"\n\n[Extracted from PDF {title}]\n{pdf.text}"

    return context
