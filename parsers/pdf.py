import io
import logging
import os

import fitz  # PyMuPDF

logger = logging.getLogger(__name__)


def _open_pdf(source):
    if isinstance(source, (str, os.PathLike)):
        return fitz.open(os.fspath(source))
    data = source if isinstance(source, (bytes, bytearray)) else source.read()
    return fitz.open(stream=io.BytesIO(data), filetype="pdf")


def pdf_to_text(source) -> str:
    """
    Plain text of every page in a PDF.

    ``source`` may be a path (``str`` or ``os.PathLike``), raw bytes or a
    file-like upload. Unreadable documents give an empty string.
    """
    try:
        with _open_pdf(source) as doc:
            pages = [page.get_text("text") for page in doc]
    except Exception as e:
        logger.warning(f"Could not read PDF {source!r}: {e}")
        return ""
    return "\n".join(pages).strip()
