from io import BytesIO
from pathlib import PurePath
from typing import List

from docx import Document as DocxDocument
from langchain_core.documents import Document
from pypdf import PdfReader


def read_pdf(data: bytes, filename: str) -> List[Document]:
    reader = PdfReader(BytesIO(data))
    docs = []
    for i, page in enumerate(reader.pages, start=1):
        text = page.extract_text() or ""
        docs.append(Document(page_content=text, metadata={"source": filename, "page": i}))
    return docs


def read_docx(data: bytes, filename: str) -> List[Document]:
    doc = DocxDocument(BytesIO(data))
    parts = [p.text for p in doc.paragraphs if p.text.strip()]
    return [Document(page_content="\n".join(parts), metadata={"source": filename})]


def read_text(data: bytes, filename: str) -> List[Document]:
    return [Document(page_content=data.decode("utf-8", errors="ignore"), metadata={"source": filename})]


def read_unknown(data: bytes, filename: str) -> List[Document]:
    """Accepts an unrecognised file only when its bytes are plain UTF-8 text."""
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        text = None
    if text is None or "\x00" in text:
        raise ValueError(f"Unsupported file type: {filename}")
    return [Document(page_content=text, metadata={"source": filename})]


TEXT_EXTENSIONS = (
    ".txt", ".md", ".markdown", ".csv", ".tsv", ".json", ".xml",
    ".html", ".htm", ".log", ".rst", ".yaml", ".yml",
)

READERS = {
    ".pdf": read_pdf,
    ".docx": read_docx,
    **{ext: read_text for ext in TEXT_EXTENSIONS},
}


def read_document(data: bytes, filename: str) -> List[Document]:
    """
    Extracts raw text from an uploaded file. Unknown extensions must be plain
    UTF-8 text, binaries raise ValueError. Blank documents are dropped.
    """
    suffix = PurePath(filename or "").suffix.lower()
    reader = READERS.get(suffix, read_unknown)
    return [d for d in reader(data, filename) if (d.page_content or "").strip()]
