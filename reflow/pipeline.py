"""
Reflow Pipeline
===============
Single entry point for turning positioned fragments into document text.
Orchestrates, per page: Normalizer -> Clusterer -> Assembler,
then joins page texts in original page order.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import List, Tuple, Dict, Iterator, Optional, Sequence

from .types import TextFragment, DocumentUnreadableError
from .fragments import NormalizerConfig, normalize_fragments
from .lines import ClusterConfig, cluster_lines
from .paragraphs import AssemblyConfig, assemble_page_text, count_paragraph_breaks


Page = Sequence[TextFragment]


@dataclass
class PipelineConfig:
    """Complete pipeline configuration"""
    # Stage configs
    normalizer_config: NormalizerConfig = field(default_factory=NormalizerConfig)
    cluster_config: ClusterConfig = field(default_factory=ClusterConfig)
    assembly_config: AssemblyConfig = field(default_factory=AssemblyConfig)

    page_separator: str = "\n\n"

    # Pages are independent; >1 fans them out to a thread pool
    max_workers: int = 1

    # Debug
    debug: bool = False

    @classmethod
    def default(cls) -> 'PipelineConfig':
        """Sequential config with the empirical tolerances"""
        return cls()

    @classmethod
    def parallel(cls, max_workers: int = 4) -> 'PipelineConfig':
        """Per-page fan-out config"""
        return cls(max_workers=max_workers)

    def validate(self) -> None:
        """Raise ValueError on settings the stages cannot work with"""
        checks = {
            'y_line_epsilon': self.cluster_config.y_line_epsilon,
            'line_group_epsilon': self.cluster_config.line_group_epsilon,
            'paragraph_factor': self.assembly_config.paragraph_factor,
            'default_font_height': self.assembly_config.default_font_height,
            'normalizer default_font_height': self.normalizer_config.default_font_height,
        }
        for name, value in checks.items():
            if not value > 0:
                raise ValueError(f"{name} must be positive, got {value}")
        if self.normalizer_config.default_font_height != self.assembly_config.default_font_height:
            raise ValueError(
                "default_font_height differs between normalizer "
                f"({self.normalizer_config.default_font_height}) and assembler "
                f"({self.assembly_config.default_font_height})"
            )
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")


@dataclass
class PageStats:
    """Per-page reconstruction counters"""
    page_num: int  # 1-indexed
    fragments_in: int = 0
    fragments_kept: int = 0
    lines: int = 0
    paragraph_breaks: int = 0
    chars_out: int = 0

    def summary(self) -> str:
        return (
            f"Page {self.page_num}: {self.fragments_kept}/{self.fragments_in} fragments, "
            f"{self.lines} lines, {self.paragraph_breaks} paragraph breaks, "
            f"{self.chars_out} chars"
        )


@dataclass
class DebugBundle:
    """Debug information from pipeline run"""
    pages_total: int = 0
    pages_empty: int = 0

    fragments_total: int = 0
    fragments_dropped: int = 0

    lines_total: int = 0
    paragraph_breaks: int = 0

    empty_pages: List[int] = field(default_factory=list)
    per_page_stats: List[PageStats] = field(default_factory=list)

    def add_page(self, stats: PageStats) -> None:
        self.per_page_stats.append(stats)
        self.pages_total += 1
        self.fragments_total += stats.fragments_in
        self.fragments_dropped += stats.fragments_in - stats.fragments_kept
        self.lines_total += stats.lines
        self.paragraph_breaks += stats.paragraph_breaks
        if stats.chars_out == 0:
            self.pages_empty += 1
            self.empty_pages.append(stats.page_num)

    def summary(self) -> str:
        """Generate summary string"""
        lines = [
            "=" * 60,
            "REFLOW ENGINE DEBUG SUMMARY",
            "=" * 60,
            f"Pages: {self.pages_total}",
            f"Empty Pages: {self.pages_empty} {self.empty_pages[:20]}",
            "",
            f"Fragments: {self.fragments_total}",
            f"Dropped (blank): {self.fragments_dropped}",
            f"Lines: {self.lines_total}",
            f"Paragraph Breaks: {self.paragraph_breaks}",
        ]

        if self.per_page_stats:
            lines.append("")
            lines.append("Per-Page Stats (first 10):")
            for stat in self.per_page_stats[:10]:
                lines.append(f"  {stat.summary()}")

        lines.append("=" * 60)
        return "\n".join(lines)


class ReflowPipeline:
    """
    Main text reconstruction pipeline.

    Usage:
        pipeline = ReflowPipeline()
        text, debug = pipeline.run_from_pages(pages)
    """

    def __init__(self, config: Optional[PipelineConfig] = None):
        self.config = config or PipelineConfig.default()
        self.config.validate()

    def reflow_page(self, fragments: Page) -> str:
        """Reconstruct the text of one page"""
        text, _ = self._process_page(fragments, page_num=1)
        return text

    def _process_page(self, fragments: Page, page_num: int) -> Tuple[str, PageStats]:
        cfg = self.config
        stats = PageStats(page_num=page_num, fragments_in=len(fragments))

        kept = normalize_fragments(fragments, cfg.normalizer_config)
        stats.fragments_kept = len(kept)
        if not kept:
            return "", stats

        lines = cluster_lines(kept, cfg.cluster_config)
        text = assemble_page_text(lines, cfg.assembly_config)

        stats.lines = len(lines)
        stats.paragraph_breaks = count_paragraph_breaks(lines, cfg.assembly_config)
        stats.chars_out = len(text)
        return text, stats

    def run_from_pages(self, pages: Sequence[Page]) -> Tuple[str, DebugBundle]:
        """
        Run pipeline over pages already materialized in memory.

        Textless pages add no separator of their own: X, <blank>, Y
        gives "X\\n\\nY", not a doubled gap.

        Args:
            pages: Fragment collections in physical page order

        Returns:
            Tuple of (document_text, debug_bundle)
        """
        debug = DebugBundle()
        numbered = list(enumerate(pages, start=1))

        def run(item: Tuple[int, Page]) -> Tuple[str, PageStats]:
            page_num, fragments = item
            return self._process_page(fragments, page_num)

        # Executor.map yields results in submission order
        if self.config.max_workers > 1 and len(numbered) > 1:
            with ThreadPoolExecutor(max_workers=self.config.max_workers) as pool:
                results = list(pool.map(run, numbered))
        else:
            results = [run(item) for item in numbered]

        page_texts: List[str] = []
        for text, stats in results:
            debug.add_page(stats)
            if text:
                page_texts.append(text)

        if self.config.debug:
            print(f"[REFLOW] Pages: {debug.pages_total} ({debug.pages_empty} empty)")
            print(f"[REFLOW] Fragments: {debug.fragments_total}, dropped {debug.fragments_dropped}")
            print(f"[REFLOW] Lines: {debug.lines_total}, paragraph breaks: {debug.paragraph_breaks}")

        document = self.config.page_separator.join(page_texts).strip()
        return document, debug


def reflow_pages(pages: Sequence[Page], config: Optional[PipelineConfig] = None) -> str:
    """Document text for in-memory pages"""
    text, _ = ReflowPipeline(config).run_from_pages(pages)
    return text


def iter_pdf_pages(pdf_path: str, password: Optional[str] = None) -> Iterator[List[TextFragment]]:
    """
    Generator yielding each page's fragments as soon as pdfplumber reads it.
    The PDF stays open until the generator is exhausted or closed.

    Any failure, on open or on a single page, aborts the whole document.

    Raises:
        DocumentUnreadableError: corrupted, encrypted or unsupported input
    """
    import pdfplumber

    try:
        with pdfplumber.open(pdf_path, password=password) as pdf:
            for page in pdf.pages:
                page_height = page.height or 792.0
                words: List[Dict] = page.extract_words(extra_attrs=["size"])
                yield [TextFragment.from_pdfplumber(w, page_height) for w in words]
    except Exception as e:
        raise DocumentUnreadableError(str(pdf_path), str(e)) from e


def extract_pdf_pages(pdf_path: str, password: Optional[str] = None) -> List[List[TextFragment]]:
    """Read every page of a PDF into fragments (see iter_pdf_pages)"""
    return list(iter_pdf_pages(pdf_path, password=password))


def run_reflow_pipeline(
    pdf_path: str,
    config: Optional[PipelineConfig] = None,
    password: Optional[str] = None
) -> Tuple[str, DebugBundle]:
    """
    Single entry point for running the pipeline on a PDF path.
    """
    cfg = config or PipelineConfig.default()
    pages = extract_pdf_pages(pdf_path, password=password)

    if cfg.debug:
        print(f"[REFLOW] Extracted {len(pages)} pages from {pdf_path}")

    pipeline = ReflowPipeline(cfg)
    return pipeline.run_from_pages(pages)
