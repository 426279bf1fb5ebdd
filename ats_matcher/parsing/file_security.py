from __future__ import annotations

PDF_MAGIC = b"%PDF-"
UTF16_BOMS = (b"\xff\xfe", b"\xfe\xff")

ALLOWED_EXTENSIONS = frozenset({"txt", "pdf"})


class UnsupportedFileError(ValueError):
    pass


def file_extension(filename: str) -> str:
    return filename.rsplit(".", 1)[-1].lower() if "." in (filename or "") else ""


def _is_probably_text_payload(content: bytes) -> bool:
    if not content:
        return False
    if content.startswith(UTF16_BOMS):
        return len(content) % 2 == 0
    sample = content[:4096]
    if b"\x00" in sample:
        return False
    printable = 0
    for byte in sample:
        # Bytes >= 0x80 are UTF-8 continuation/lead bytes of accented text.
        if byte in (9, 10, 13) or 32 <= byte <= 126 or byte >= 128:
            printable += 1
    return (printable / len(sample)) >= 0.75


def ensure_supported_extension(filename: str) -> str:
    ext = file_extension(filename)
    if ext not in ALLOWED_EXTENSIONS:
        shown = f".{ext}" if ext else "(none)"
        raise UnsupportedFileError(
            f"Unsupported file type '{shown}'. Use PDF (.pdf) or Text (.txt)."
        )
    return ext


def validate_upload_signature(*, filename: str, content: bytes) -> None:
    ext = ensure_supported_extension(filename)

    if ext == "pdf":
        if not content.startswith(PDF_MAGIC):
            raise ValueError("File signature does not match .pdf content.")
        return

    if ext == "txt":
        if not _is_probably_text_payload(content):
            raise ValueError("File signature does not match .txt text content.")
        return
