from typing import List, Optional
from langchain_text_splitters import RecursiveCharacterTextSplitter, TextSplitter
from langchain_core.documents import Document

from .rag import chunk_metadata


# Fixed chunk policy, not user-configurable
CHUNK_SIZE = 500
CHUNK_OVERLAP = 100
MIN_CHUNK_LENGTH = 5
MAX_NUM_CHUNKS = 10000
KEEP_SEPARATOR = True


def default_splitter() -> TextSplitter:
    return RecursiveCharacterTextSplitter(
        chunk_size=CHUNK_SIZE,
        chunk_overlap=CHUNK_OVERLAP,
        separators=["\n\n", "\n", " ", ""],
        keep_separator=KEEP_SEPARATOR,
    )


def split_documents(
    documents: List[Document],
    splitter: Optional[TextSplitter] = None,
) -> List[Document]:
    splitter = splitter or default_splitter()

    chunks: List[Document] = []
    for chunk in splitter.split_documents(documents):
        if len((chunk.page_content or "").strip()) < MIN_CHUNK_LENGTH:
            continue
        chunks.append(chunk)
        if len(chunks) >= MAX_NUM_CHUNKS:
            break

    return chunks


def tag_chunks(chunks: List[Document], *, source: str, upload_time: int) -> List[Document]:
    """
    Stamps every chunk with its origin. Indices follow split order and are
    dense, so they are assigned after short chunks have been dropped.
    """
    for idx, chunk in enumerate(chunks):
        meta = dict(chunk.metadata or {})
        meta.update(chunk_metadata(source, idx, upload_time))
        chunk.metadata = meta
    return chunks
