"""
Tests for the PDFTextRecognizer wrapper script
"""

import unittest
import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from unittest.mock import MagicMock, patch

import pyperclip

from scripts.pdf_to_text import PDFTextRecognizer, main
from reflow import DocumentUnreadableError


def mock_open_with_pages(mock_open, pages_words):
    mock_pdf = MagicMock()
    pages = []
    for words in pages_words:
        page = MagicMock()
        page.height = 792.0
        page.extract_words.return_value = words
        pages.append(page)
    mock_pdf.pages = pages
    mock_open.return_value.__enter__.return_value = mock_pdf


class TestPDFTextRecognizer(unittest.TestCase):

    PAGES = [
        [{'text': 'Hi', 'x0': 10, 'x1': 20, 'top': 100, 'bottom': 110, 'size': 10},
         {'text': 'there', 'x0': 25, 'x1': 50, 'top': 100, 'bottom': 110, 'size': 10}],
        [{'text': 'Bye', 'x0': 10, 'x1': 30, 'top': 100, 'bottom': 110, 'size': 10}],
    ]

    def test_extract_text(self):
        rec = PDFTextRecognizer("dummy.pdf")
        with patch("pdfplumber.open") as mock_open:
            mock_open_with_pages(mock_open, self.PAGES)
            text = rec.extract_text()
        self.assertEqual(text, "Hi there\n\nBye")
        self.assertEqual(rec.extracted_text, text)
        self.assertEqual(rec.debug_bundle.pages_total, 2)

    def test_iter_page_texts(self):
        rec = PDFTextRecognizer("dummy.pdf")
        with patch("pdfplumber.open") as mock_open:
            mock_open_with_pages(mock_open, self.PAGES)
            pages = list(rec.iter_page_texts())
        self.assertEqual(pages, [(1, "Hi there"), (2, "Bye")])

    def test_iter_page_texts_streams_pages(self):
        rec = PDFTextRecognizer("dummy.pdf")
        with patch("pdfplumber.open") as mock_open:
            mock_open_with_pages(mock_open, self.PAGES * 3)
            pages = mock_open.return_value.__enter__.return_value.pages
            gen = rec.iter_page_texts()
            self.assertEqual(next(gen), (1, "Hi there"))
            extracted = sum(p.extract_words.call_count for p in pages)
            self.assertEqual(extracted, 1)
            self.assertEqual(next(gen), (2, "Bye"))
            self.assertEqual(sum(p.extract_words.call_count for p in pages), 2)
            gen.close()
        mock_open.return_value.__exit__.assert_called_once()

    def test_iter_page_texts_page_failure(self):
        rec = PDFTextRecognizer("dummy.pdf")
        with patch("pdfplumber.open") as mock_open:
            mock_open_with_pages(mock_open, self.PAGES)
            pages = mock_open.return_value.__enter__.return_value.pages
            pages[1].extract_words.side_effect = ValueError("bad content stream")
            gen = rec.iter_page_texts()
            self.assertEqual(next(gen), (1, "Hi there"))
            with self.assertRaises(DocumentUnreadableError):
                next(gen)

    def test_extract_text_unreadable(self):
        rec = PDFTextRecognizer("locked.pdf", password="wrong")
        with patch("pdfplumber.open", side_effect=RuntimeError("password incorrect")):
            with self.assertRaises(DocumentUnreadableError):
                rec.extract_text()
        self.assertEqual(rec.extracted_text, "")

    def test_copy_to_clipboard(self):
        rec = PDFTextRecognizer("dummy.pdf")
        rec.extracted_text = "copied"
        with patch("pyperclip.copy") as mock_copy:
            self.assertTrue(rec.copy_to_clipboard())
            mock_copy.assert_called_once_with("copied")

    def test_copy_to_clipboard_unavailable(self):
        rec = PDFTextRecognizer("dummy.pdf")
        with patch("pyperclip.copy", side_effect=pyperclip.PyperclipException("no clipboard")):
            with patch("builtins.print"):
                self.assertFalse(rec.copy_to_clipboard("x"))

    def test_main_missing_file(self):
        with patch("builtins.print"):
            self.assertEqual(main(["/nonexistent/file.pdf"]), 1)

    def test_main_unreadable(self):
        with patch("os.path.exists", return_value=True), \
             patch("pdfplumber.open", side_effect=OSError("truncated")), \
             patch("builtins.print") as mock_print:
            self.assertEqual(main(["bad.pdf"]), 1)
        self.assertIn("Document unreadable", mock_print.call_args.args[0])


if __name__ == "__main__":
    unittest.main()
