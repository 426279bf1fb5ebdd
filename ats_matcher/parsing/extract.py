from __future__ import annotations

import logging
from io import BytesIO
from pathlib import Path
from typing import Any

from pypdf import PdfReader

from ats_matcher.schemas.analysis import ExtractTextResponse

from .file_security import UTF16_BOMS, file_extension, validate_upload_signature

logger = logging.getLogger(__name__)

_TEXT_ENCODINGS = ("utf-8", "latin-1")


def _decode_text(content: bytes) -> tuple[str, str]:
    # UTF-16 only with a byte order mark; without one, single-byte text
    # of even length would decode as CJK noise.
    if content.startswith(UTF16_BOMS):
        try:
            return content.decode("utf-16"), "utf-16"
        except UnicodeDecodeError as exc:
            raise ValueError("Unable to decode this text file.") from exc
    for encoding in _TEXT_ENCODINGS:
        try:
            return content.decode(encoding), encoding
        except UnicodeDecodeError:
            continue
    raise ValueError("Unable to decode this text file.")


def _extract_pdf_text(content: bytes) -> tuple[str, int]:
    try:
        reader = PdfReader(BytesIO(content))
        page_chunks = [page.extract_text() or "" for page in reader.pages]
    except Exception as exc:
        raise ValueError("Unable to extract text from this PDF file.") from exc
    return "\n".join(chunk for chunk in page_chunks if chunk.strip()), len(page_chunks)


def extract_text_from_file(filename: str, content: bytes) -> ExtractTextResponse:
    """Turn an uploaded .txt or .pdf payload into plain text for the engine.

    Raises ``UnsupportedFileError`` for any other extension and ``ValueError``
    when the payload cannot be read as the type its name claims.
    """
    validate_upload_signature(filename=filename, content=content)
    ext = file_extension(filename)
    details: dict[str, Any] = {"extension": ext}

    if ext == "pdf":
        text, pages = _extract_pdf_text(content)
        details["pages"] = pages
        source_type = "pdf"
    else:
        text, encoding = _decode_text(content)
        details["encoding"] = encoding
        source_type = "text"

    logger.info("extract_text filename=%s source=%s characters=%d", filename, source_type, len(text))
    return ExtractTextResponse(
        filename=filename,
        source_type=source_type,
        text=text,
        characters=len(text),
        details=details,
    )


def read_document(file_path: str | Path) -> ExtractTextResponse:
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Input document not found: '{path}'")
    return extract_text_from_file(filename=path.name, content=path.read_bytes())
