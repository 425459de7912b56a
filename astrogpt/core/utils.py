import asyncio
import logging
import os
import tempfile
from typing import Callable, Dict, List, Optional, Sequence, Tuple

import fitz  # PyMuPDF
from fastapi.concurrency import run_in_threadpool
from langchain_community.document_loaders import CSVLoader

from astrogpt.core.errors import FileProcessingError
from astrogpt.core.models import UploadedFile

logger = logging.getLogger(__name__)


def extract_txt_text(data: bytes) -> str:
    return data.decode("utf-8-sig")


def extract_pdf_text(data: bytes) -> str:
    """Extract the text of every page, joined as a single segment."""
    doc = fitz.open(stream=data, filetype="pdf")
    try:
        pages = []
        for i in range(doc.page_count):
            page = doc.load_page(i)
            pages.append(page.get_text("text") or "")
        return "\n".join(pages)
    finally:
        doc.close()


def extract_csv_text(data: bytes) -> str:
    """Render each CSV row as "column: value" lines, one row after another."""
    temp_file = None
    try:
        with tempfile.NamedTemporaryFile(delete=False, suffix=".csv") as temp:
            temp.write(data)
            temp_file = temp.name
        docs = CSVLoader(file_path=temp_file, encoding="utf-8-sig").load()
        return "\n".join(doc.page_content for doc in docs)
    finally:
        if temp_file and os.path.exists(temp_file):
            os.unlink(temp_file)


EXTRACTORS: Dict[str, Callable[[bytes], str]] = {
    ".txt": extract_txt_text,
    ".pdf": extract_pdf_text,
    ".csv": extract_csv_text,
}


def get_extractor(filename: str) -> Optional[Callable[[bytes], str]]:
    lowered = filename.lower()
    for suffix, extractor in EXTRACTORS.items():
        if lowered.endswith(suffix):
            return extractor
    return None


def format_file_block(filename: str, text: str) -> str:
    return f"Astrological Information from {filename}:\n{text}\n\n"


def extract_file_block(upload: UploadedFile) -> str:
    """Return the labelled text block for one upload, or "" if its type is unsupported."""
    filename = upload.filename.lower()
    extractor = get_extractor(filename)
    if extractor is None:
        logger.info(f"Skipping unsupported file {filename}")
        return ""

    try:
        text = extractor(upload.content)
    except Exception as e:
        logger.error(f"Error processing file {filename}: {e}", exc_info=True)
        raise FileProcessingError(filename) from e

    return format_file_block(filename, text)


async def extract_file_blocks(files: Sequence[UploadedFile]) -> List[Tuple[str, str]]:
    """
    Extract every upload off the event loop.

    Results keep upload order whatever each file's extraction time. The first
    failure aborts the whole batch.
    """
    blocks = await asyncio.gather(
        *(run_in_threadpool(extract_file_block, upload) for upload in files)
    )
    return [(upload.filename, block) for upload, block in zip(files, blocks)]


async def extract_file_contents(files: Sequence[UploadedFile]) -> str:
    if not files:
        return ""
    return "".join(block for _, block in await extract_file_blocks(files))
