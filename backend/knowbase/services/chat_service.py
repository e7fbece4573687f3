import logging

from langchain_core.vectorstores import VectorStore

from .llm import LLMClient
from .rag import build_context, build_prompt, make_references
from .results import Answered, AnswerFailed, AnswerResult
from .timing import StepTimer

log = logging.getLogger("chat")

# Retrieval and generation policy
TOP_K = 3
SIMILARITY_THRESHOLD = 0.6
TEMPERATURE = 0.7
MAX_TOKENS = 500


class ChatService:
    def __init__(self, vector_store: VectorStore, llm: LLMClient):
        self.vector_store = vector_store
        self.llm = llm

    def answer(self, question: str) -> AnswerResult:
        """
        Retrieves up to TOP_K chunks above the similarity threshold and asks
        the LLM to answer from them. With no usable context the LLM is not
        called. Every failure is reported as AnswerFailed.
        """
        t = StepTimer("chat")
        log.info("question q_len=%s top_k=%s threshold=%s", len(question), TOP_K, SIMILARITY_THRESHOLD)

        try:
            pairs = self.vector_store.similarity_search_with_score(
                question,
                k=TOP_K,
                score_threshold=SIMILARITY_THRESHOLD,
            )
            docs = [doc for doc, _score in pairs]
            t.mark(f"retrieve docs={len(docs)}")

            context = build_context(docs)
            if not context.strip():
                t.mark("no_context")
                return Answered.no_context()

            answer = self.llm.generate(
                build_prompt(question, context),
                temperature=TEMPERATURE,
                max_tokens=MAX_TOKENS,
            )
            t.mark("llm_generate")

            references = make_references(docs)
        except Exception as e:
            log.exception("answering failed")
            return AnswerFailed(error=str(e))

        log.info("answered refs=%s total=%.1f ms", len(references), t.total_ms)
        return Answered(answer=answer, references=references)
