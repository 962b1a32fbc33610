#!/usr/bin/env python3
"""
PDF text extraction
"""

import io
import logging

from pypdf import PdfReader

from errors import ExtractionError

logger = logging.getLogger(__name__)


def extract_pdf_text(pdf_bytes: bytes) -> str:
    """
    Extract plain text from every page of a PDF

    Args:
        pdf_bytes: Raw bytes of the downloaded file

    Returns:
        Page texts joined with newlines

    Raises:
        ExtractionError: bytes are empty or not a readable PDF
    """
    if not pdf_bytes:
        raise ExtractionError("the file is empty")

    try:
        reader = PdfReader(io.BytesIO(pdf_bytes))
        pages = [page.extract_text() or "" for page in reader.pages]
    except Exception as e:  # pypdf raises TypeError, AttributeError, LimitReachedError on broken files
        raise ExtractionError(f"not a readable PDF ({e})") from e

    text = "\n".join(pages)
    logger.debug(f"Extracted {len(text)} characters from {len(pages)} page(s)")
    return text
