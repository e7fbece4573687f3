import logging
from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.concurrency import run_in_threadpool

from ...deps import get_document_service
from ...schemas.upload import UploadResponse
from ...services.document_service import DocumentService

router = APIRouter()
log = logging.getLogger("ingest")


@router.post("/documents/upload", response_model=UploadResponse)
async def upload_document(
    file: UploadFile = File(...),
    service: DocumentService = Depends(get_document_service),
):
    data = await file.read()
    filename = file.filename or ""
    log.info("REQ /documents/upload filename=%s bytes=%s", filename, len(data))

    result = await run_in_threadpool(service.upload, data, filename)
    return UploadResponse(message=result.message)
