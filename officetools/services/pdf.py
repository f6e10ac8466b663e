"""PDF merging and HTML-to-PDF rendering with PyMuPDF."""

from __future__ import annotations

import logging
from io import BytesIO
from typing import Iterable

import fitz  # PyMuPDF

from officetools.domain.compression import InputFile
from officetools.domain.errors import ToolInputError

logger = logging.getLogger(__name__)

MIN_MERGE_FILES = 2

PAGE_SIZE = 'a4'
# 0.5in on every side, in PDF points.
PAGE_MARGIN = 36


def _open_pdf(item: InputFile) -> fitz.Document:
    if not item.data:
        raise ToolInputError(f'{item.name} is empty')
    try:
        doc = fitz.open(stream=item.data, filetype='pdf')
    except (RuntimeError, ValueError) as exc:
        raise ToolInputError(f'{item.name} is not a valid PDF') from exc
    if doc.needs_pass:
        doc.close()
        raise ToolInputError(f'{item.name} is password protected')
    if doc.page_count == 0:
        doc.close()
        raise ToolInputError(f'{item.name} is not a valid PDF')
    return doc


def merge_pdfs(files: Iterable[InputFile]) -> bytes:
    """Concatenate every page of ``files`` in order into one document."""
    files = list(files)
    if len(files) < MIN_MERGE_FILES:
        raise ToolInputError('At least 2 PDF files are required')

    merged = fitz.open()
    try:
        for item in files:
            source = _open_pdf(item)
            try:
                merged.insert_pdf(source)
            finally:
                source.close()
        logger.info('Merged %d PDFs into %d pages', len(files), merged.page_count)
        return merged.tobytes(garbage=3, deflate=True)
    finally:
        merged.close()


def render_html_to_pdf(html: str) -> bytes:
    """Lay ``html`` out over as many A4 pages as it needs."""
    if not (html or '').strip():
        raise ToolInputError('HTML content is required')

    mediabox = fitz.paper_rect(PAGE_SIZE)
    where = mediabox + (PAGE_MARGIN, PAGE_MARGIN, -PAGE_MARGIN, -PAGE_MARGIN)

    buffer = BytesIO()
    try:
        story = fitz.Story(html=html)
        writer = fitz.DocumentWriter(buffer)
        more = True
        while more:
            device = writer.begin_page(mediabox)
            more, _ = story.place(where)
            story.draw(device)
            writer.end_page()
        writer.close()
    except RuntimeError as exc:
        raise RuntimeError('HTML-to-PDF rendering failed') from exc

    pdf_bytes = buffer.getvalue()
    if not pdf_bytes:
        raise RuntimeError('HTML-to-PDF rendering returned empty output')
    return pdf_bytes
