"""Tests for orchestrator result values."""

from knowbase.services.results import (
    NO_CONTEXT_ANSWER,
    Answered,
    AnswerFailed,
    UploadFailed,
    UploadSucceeded,
)


def test_upload_messages():
    assert UploadSucceeded("guide.txt", 3).message == "文档 'guide.txt' 上传成功，共处理 3 个文档块"
    assert UploadFailed("guide.txt", "boom").message == "文档上传失败: boom"


def test_no_context_answer():
    result = Answered.no_context()

    assert result.answer == NO_CONTEXT_ANSWER
    assert result.references == []
    assert not result.grounded


def test_failed_answer_has_no_references():
    result = AnswerFailed("timeout")

    assert result.answer == "处理您的问题时出现错误: timeout"
    assert result.references == []
