import fitz  # PyMuPDF
import pytest

from textsrc.reader import read_statement_text


def test_reads_txt(statement_txt):
    text = read_statement_text(statement_txt)
    assert "DEPOSITS & CREDITS" in text


def test_reads_pdf_text_layer(tmp_path):
    p = tmp_path / "statement.pdf"
    doc = fitz.open()
    page = doc.new_page()
    page.insert_text((72, 72), "WITHDRAWALS\n08/20 Rent Payment 1,200.00")
    doc.save(str(p))
    doc.close()

    text = read_statement_text(p)
    assert "WITHDRAWALS" in text
    assert "Rent Payment" in text


def test_unsupported_and_missing(tmp_path):
    doc = tmp_path / "statement.docx"
    doc.write_bytes(b"x")
    with pytest.raises(ValueError):
        read_statement_text(doc)
    with pytest.raises(FileNotFoundError):
        read_statement_text(tmp_path / "gone.txt")
