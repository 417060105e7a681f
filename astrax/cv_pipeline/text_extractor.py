"""Read résumé uploads (PDF, DOCX, TXT/MD) from bytes into cleaned plain text."""

import re
import unicodedata
from io import BytesIO
from pathlib import PurePath
from typing import Callable, Dict, List, Optional

from astrax.utils.logger import get_logger

logger = get_logger(__name__)

MAX_RESUME_CHARS = 50000
_ZERO_WIDTH = re.compile("[\u200b\u200c\u200d\ufeff]")
_BULLETS = re.compile(r"^[ \t]*[\u2022\u25cf\u25aa\u25e6\u25a0*-][ \t]+", re.MULTILINE)


def clean_resume_text(text: str, max_chars: int = MAX_RESUME_CHARS) -> str:
    """
    NFKC-normalize, drop zero-width characters, turn bullet glyphs into '- ',
    squeeze horizontal whitespace and runs of blank lines, then truncate.
    """
    if not text or not text.strip():
        return ""
    cleaned = _ZERO_WIDTH.sub("", unicodedata.normalize("NFKC", text))
    cleaned = _BULLETS.sub("- ", cleaned)
    cleaned = re.sub(r"[ \t]+", " ", cleaned)
    cleaned = re.sub(r"\n\s*\n\s*\n", "\n\n", cleaned).strip()
    if len(cleaned) > max_chars:
        cleaned = cleaned[:max_chars] + "\n\n[Content truncated.]"
    return cleaned


def _pdf_text(data: bytes) -> List[str]:
    import pdfplumber

    with pdfplumber.open(BytesIO(data)) as pdf:
        return [page.extract_text() or "" for page in pdf.pages]


def _docx_text(data: bytes) -> List[str]:
    """Paragraphs, then table rows (skills and education are often laid out in tables)."""
    from docx import Document

    doc = Document(BytesIO(data))
    blocks = [p.text for p in doc.paragraphs]
    for table in doc.tables:
        for row in table.rows:
            blocks.append(" | ".join(cell.text.strip() for cell in row.cells if cell.text.strip()))
    return blocks


def _plain_text(data: bytes) -> List[str]:
    return [data.decode("utf-8", errors="replace")]


EXTRACTORS: Dict[str, Callable[[bytes], List[str]]] = {
    ".pdf": _pdf_text,
    ".docx": _docx_text,
    ".txt": _plain_text,
    ".md": _plain_text,
}


def extract_text_from_file(file_bytes: bytes, filename: str) -> Optional[str]:
    """
    Cleaned text of an uploaded résumé, read in memory.
    None when the extension is unsupported, the file cannot be parsed, or it holds no text.
    """
    suffix = PurePath((filename or "").strip()).suffix.lower()
    extractor = EXTRACTORS.get(suffix)
    if extractor is None:
        logger.warning("Unsupported résumé type: %s", filename)
        return None
    try:
        blocks = extractor(file_bytes)
    except Exception as e:
        logger.exception("Could not read %s: %s", filename, e)
        return None
    text = "\n\n".join(b for b in blocks if b and b.strip())
    if not text.strip():
        return None
    return clean_resume_text(text)
