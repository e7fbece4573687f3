import logging
from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool

from ...deps import get_chat_service
from ...schemas.chat import ChatRequest, ChatResponse
from ...services.chat_service import ChatService

router = APIRouter()
log = logging.getLogger("chat")


@router.post("/chat/message", response_model=ChatResponse)
async def send_message(req: ChatRequest, service: ChatService = Depends(get_chat_service)):
    log.info("REQ /chat/message q_len=%s", len(req.message))

    result = await run_in_threadpool(service.answer, req.message)

    # answered, refused and failed questions all return 200
    return ChatResponse(answer=result.answer, references=list(result.references))
