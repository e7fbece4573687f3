from typing import Any, Dict, List, Mapping
from langchain_core.documents import Document

PROMPT_TEMPLATE = """请基于以下上下文信息回答用户的问题。如果上下文中没有相关信息，请说明无法找到相关信息。

上下文信息：
{context}

用户问题：{question}

请给出准确、有帮助的回答：
"""


def build_context(docs: List[Document]) -> str:
    """
    Joins retrieved chunk texts in the order the store returned them.
    """
    return "\n\n".join(d.page_content or "" for d in docs)


def build_prompt(question: str, context: str) -> str:
    if not context.strip():
        return question
    return PROMPT_TEMPLATE.format(context=context, question=question)


def format_reference(metadata: Mapping[str, Any]) -> str:
    # chunk_index is 0-based in storage, 1-based for readers
    return f"{metadata['source']} (片段 {int(metadata['chunk_index']) + 1})"


def make_references(docs: List[Document]) -> List[str]:
    return [format_reference(d.metadata or {}) for d in docs]


def chunk_metadata(source: str, chunk_index: int, upload_time: int) -> Dict[str, Any]:
    return {
        "source": source,
        "chunk_index": chunk_index,
        "upload_time": upload_time,
    }
