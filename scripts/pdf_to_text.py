import argparse
import os
import sys
from typing import Iterator, List, Optional, Tuple

import pyperclip

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from reflow import ReflowPipeline, DocumentUnreadableError
from reflow.pipeline import PipelineConfig, DebugBundle, extract_pdf_pages, iter_pdf_pages


class PDFTextRecognizer:
    """Plain-text extraction with line and paragraph reconstruction"""

    def __init__(self, pdf_path: str, config: Optional[PipelineConfig] = None,
                 password: Optional[str] = None):
        self.pdf_path = pdf_path
        self.password = password
        self.config = config or PipelineConfig.default()
        self.pipeline = ReflowPipeline(self.config)
        self.extracted_text = ""
        self.debug_bundle: Optional[DebugBundle] = None

    def iter_page_texts(self) -> Iterator[Tuple[int, str]]:
        """
        Generator yielding (page_num, page_text) for each page.
        Entry point for progress reporting.
        """
        for i, fragments in enumerate(iter_pdf_pages(self.pdf_path, self.password)):
            yield i + 1, self.pipeline.reflow_page(fragments)

    def extract_text(self) -> str:
        """
        Extract the whole document.

        Raises:
            DocumentUnreadableError: the PDF could not be read; no partial text
        """
        pages = extract_pdf_pages(self.pdf_path, self.password)
        self.extracted_text, self.debug_bundle = self.pipeline.run_from_pages(pages)
        return self.extracted_text

    def copy_to_clipboard(self, text: Optional[str] = None) -> bool:
        """Copy text to clipboard"""
        try:
            if text is None: text = self.extracted_text
            pyperclip.copy(text)
            return True
        except pyperclip.PyperclipException as e:
            print(f"Clipboard error: {e}")
            return False


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Extract readable text from a PDF")
    parser.add_argument("pdf_path")
    parser.add_argument("--password", default=None)
    parser.add_argument("--workers", type=int, default=1)
    parser.add_argument("--debug", action="store_true")
    parser.add_argument("--copy", action="store_true", help="copy result to clipboard")
    args = parser.parse_args(argv)

    if not os.path.exists(args.pdf_path):
        print(f"Error: File not found: {args.pdf_path}")
        return 1

    config = PipelineConfig(max_workers=args.workers, debug=args.debug)
    recognizer = PDFTextRecognizer(args.pdf_path, config, password=args.password)

    try:
        text = recognizer.extract_text()
    except DocumentUnreadableError as e:
        print(f"Error: {e}")
        return 1

    print(text)
    if args.debug and recognizer.debug_bundle:
        print(recognizer.debug_bundle.summary())
    if args.copy and recognizer.copy_to_clipboard():
        print("[ENGINE] Copied to clipboard")
    return 0


if __name__ == "__main__":
    sys.exit(main())
