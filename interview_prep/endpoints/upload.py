# Endpoint for uploading a question spreadsheet and getting it back grouped by role
# interview_prep/endpoints/upload.py
from fastapi import APIRouter, File, UploadFile

from interview_prep.models.question import ExcelData
from interview_prep.services.spreadsheet_service import spreadsheet_service
from interview_prep.utils.logger import logger

router = APIRouter()


@router.post("/", response_model=ExcelData)
async def upload_spreadsheet(file: UploadFile | None = File(None)):
    filename = file.filename if file is not None else None
    content = await file.read() if file is not None else b""
    logger.info(f"Upload received: '{filename}' ({len(content)} bytes)")
    return spreadsheet_service.parse(filename, content)
