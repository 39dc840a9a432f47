# textsrc/reader.py
"""
Get statement text from a file: .txt is read as UTF-8, .pdf goes through
PyMuPDF's text layer (no OCR). Scanned PDFs come back empty, which the
engine treats like any other unreadable statement.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

import fitz  # PyMuPDF

log = logging.getLogger("textsrc")

TXT_EXTS = {".txt"}
PDF_EXTS = {".pdf"}
SUPPORTED_EXTS = TXT_EXTS | PDF_EXTS


def read_pdf_text(pdf_path: Union[str, Path]) -> str:
    pages = []
    with fitz.open(pdf_path) as doc:
        for page in doc:
            pages.append(page.get_text("text"))
    log.info("Read %d page(s) from %s", len(pages), pdf_path)
    return "\n".join(pages)


def read_statement_text(path: Union[str, Path]) -> str:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Input not found: {path}")
    ext = path.suffix.lower()
    if ext in TXT_EXTS:
        return path.read_text(encoding="utf-8", errors="replace")
    if ext in PDF_EXTS:
        return read_pdf_text(path)
    raise ValueError(f"Unsupported file type: {ext}")
