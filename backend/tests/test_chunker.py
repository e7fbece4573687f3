"""Tests for the fixed chunk policy and chunk tagging."""

from langchain_core.documents import Document

from knowbase.services import chunker
from knowbase.services.chunker import (
    CHUNK_SIZE,
    MIN_CHUNK_LENGTH,
    default_splitter,
    split_documents,
    tag_chunks,
)

GUIDE = (
    "KnowBase stores uploaded documents as searchable chunks.\n\n"
    "Each chunk keeps the name of the file it came from and its position.\n\n"
    "Questions are answered from the most similar chunks only."
)


def test_short_document_fits_in_one_chunk():
    chunks = split_documents([Document(page_content=GUIDE)])

    assert len(chunks) == 1
    assert "Questions are answered" in chunks[0].page_content


def test_long_document_respects_chunk_size():
    paragraph = "word " * 60
    text = "\n\n".join([paragraph.strip()] * 20)

    chunks = split_documents([Document(page_content=text)])

    assert len(chunks) > 1
    assert all(len(c.page_content) <= CHUNK_SIZE for c in chunks)


def test_tiny_chunks_are_dropped():
    chunks = split_documents([Document(page_content="ok"), Document(page_content="long enough text")])

    assert [c.page_content for c in chunks] == ["long enough text"]
    assert all(len(c.page_content.strip()) >= MIN_CHUNK_LENGTH for c in chunks)


def test_chunk_count_is_capped(monkeypatch):
    monkeypatch.setattr(chunker, "MAX_NUM_CHUNKS", 2)
    docs = [Document(page_content=f"document number {i}") for i in range(5)]

    assert len(split_documents(docs)) == 2


def test_default_splitter_policy():
    splitter = default_splitter()

    assert splitter._chunk_size == 500
    assert splitter._chunk_overlap == 100


def test_tag_chunks_assigns_dense_indices_and_keeps_reader_metadata():
    chunks = [
        Document(page_content="page one text", metadata={"page": 1}),
        Document(page_content="page two text", metadata={"page": 2}),
        Document(page_content="page three text", metadata={"page": 3}),
    ]

    tagged = tag_chunks(chunks, source="report.pdf", upload_time=123)

    assert [c.metadata["chunk_index"] for c in tagged] == [0, 1, 2]
    assert {c.metadata["source"] for c in tagged} == {"report.pdf"}
    assert {c.metadata["upload_time"] for c in tagged} == {123}
    assert [c.metadata["page"] for c in tagged] == [1, 2, 3]


def test_tag_chunks_overrides_reader_source():
    tagged = tag_chunks([Document(page_content="text here", metadata={"source": "tmp123"})], source="guide.txt", upload_time=1)

    assert tagged[0].metadata["source"] == "guide.txt"
