"""Imports router for bank statement uploads."""

import logging

from fastapi import APIRouter, File, Response, UploadFile, status

from rollcast.application.services import TransactionImportService
from rollcast.domain.shared.exceptions import ErrorCode, ValidationError
from rollcast.presentation.api.dependencies import (
    AppSettings,
    RepoFactory,
    StatementReaderDep,
)
from rollcast.presentation.api.schemas import (
    ImportPreviewResponse,
    ImportResultResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


async def _read_upload(file: UploadFile) -> str:
    raw = await file.read()
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise ValidationError(
            "Statement file must be UTF-8 encoded text",
            code=ErrorCode.INVALID_FORMAT,
            details={"filename": file.filename},
        ) from e


@router.post(
    "/preview",
    summary="Preview a statement import",
    responses={
        200: {"description": "What the import would write"},
        400: {"description": "Missing required columns or unreadable file"},
    },
)
async def preview_import(
    factory: RepoFactory,
    reader: StatementReaderDep,
    settings: AppSettings,
    file: UploadFile = File(..., description="Bank statement CSV export"),
) -> ImportPreviewResponse:
    """
    Parse, categorize and deduplicate a statement without storing anything.

    Rows with malformed dates or amounts are reported in ``errors``; rows
    without date or description are counted as skipped.
    """
    content = await _read_upload(file)
    service = TransactionImportService.from_factory(factory, reader, settings)
    preview = await service.preview(content)
    return ImportPreviewResponse.from_dto(preview)


@router.post(
    "",
    summary="Import a statement",
    responses={
        200: {"description": "Import committed"},
        400: {"description": "Missing required columns or unreadable file"},
        503: {"description": "The store rejected the write; retry later"},
    },
)
async def import_statement(
    response: Response,
    factory: RepoFactory,
    reader: StatementReaderDep,
    settings: AppSettings,
    file: UploadFile = File(..., description="Bank statement CSV export"),
) -> ImportResultResponse:
    """
    Preview and commit a statement in one step.

    Importing the same file again stores nothing new.
    """
    content = await _read_upload(file)
    service = TransactionImportService.from_factory(factory, reader, settings)
    result = await service.import_statement(content)
    if not result.success:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return ImportResultResponse.from_dto(result)
