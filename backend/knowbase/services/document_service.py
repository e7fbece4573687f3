import logging
import time
from typing import Callable, List, Optional

from langchain_core.documents import Document
from langchain_core.vectorstores import VectorStore

from .chunker import split_documents, tag_chunks
from .document_reader import read_document
from .mlflow_logger import Timer
from .results import UploadFailed, UploadResult, UploadSucceeded

log = logging.getLogger("ingest")

Reader = Callable[[bytes, str], List[Document]]
IngestTracker = Callable[..., None]


class DocumentService:
    """
    Turns an uploaded file into tagged chunks in the vector store.

    Embedding happens inside the store's ``add_documents``.
    """

    def __init__(
        self,
        vector_store: VectorStore,
        *,
        reader: Reader = read_document,
        tracker: Optional[IngestTracker] = None,
    ):
        self.vector_store = vector_store
        self.reader = reader
        self.tracker = tracker

    def upload(self, data: bytes, filename: str) -> UploadResult:
        try:
            documents = self.reader(data, filename)
            chunks = tag_chunks(
                split_documents(documents),
                source=filename,
                upload_time=int(time.time() * 1000),
            )

            with Timer() as t:
                if chunks:
                    self.vector_store.add_documents(chunks)
        except Exception as e:
            log.exception("upload failed filename=%s", filename)
            return UploadFailed(filename=filename, error=str(e))

        log.info("stored filename=%s docs=%s chunks=%s in %.2fs", filename, len(documents), len(chunks), t.dt)
        self._track(filename, len(chunks), t.dt)
        return UploadSucceeded(filename=filename, num_chunks=len(chunks))

    def _track(self, filename: str, num_chunks: int, elapsed: float) -> None:
        if self.tracker is None:
            return
        try:
            self.tracker(filename=filename, num_chunks=num_chunks, elapsed=elapsed)
        except Exception as e:
            log.warning("ingest tracking failed for %s: %s", filename, e)
