"""
Outcome values returned by the orchestrators.

Uploads and questions never raise to the HTTP layer: each call returns one
of the variants below and the routes turn every variant into a 200 body.
"""
from dataclasses import dataclass, field
from typing import List, Union

NO_CONTEXT_ANSWER = "抱歉，我没有找到相关的文档信息来回答您的问题。请先上传相关文档。"


@dataclass(frozen=True)
class UploadSucceeded:
    filename: str
    num_chunks: int

    @property
    def message(self) -> str:
        return f"文档 '{self.filename}' 上传成功，共处理 {self.num_chunks} 个文档块"


@dataclass(frozen=True)
class UploadFailed:
    filename: str
    error: str

    @property
    def message(self) -> str:
        return f"文档上传失败: {self.error}"


UploadResult = Union[UploadSucceeded, UploadFailed]


@dataclass(frozen=True)
class Answered:
    answer: str
    references: List[str] = field(default_factory=list)
    # False when nothing relevant was retrieved and the LLM was skipped
    grounded: bool = True

    @classmethod
    def no_context(cls) -> "Answered":
        return cls(answer=NO_CONTEXT_ANSWER, references=[], grounded=False)


@dataclass(frozen=True)
class AnswerFailed:
    error: str

    @property
    def answer(self) -> str:
        return f"处理您的问题时出现错误: {self.error}"

    @property
    def references(self) -> List[str]:
        return []


AnswerResult = Union[Answered, AnswerFailed]
