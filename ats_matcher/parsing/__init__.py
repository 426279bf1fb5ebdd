from .extract import extract_text_from_file, read_document
from .file_security import ALLOWED_EXTENSIONS, UnsupportedFileError

__all__ = [
    "ALLOWED_EXTENSIONS",
    "UnsupportedFileError",
    "extract_text_from_file",
    "read_document",
]
