from fastapi import APIRouter, Depends, status
from fastapi.responses import StreamingResponse

from src.platform.constant.route_constant import EXPORT_EVENTS, EXPORT_TICKETS, EXPORT_USERS
from src.platform.logging.loguru_io import Logger
from src.service.partier.app.query.export_csv_use_case import CsvExport, ExportCsvUseCase
from src.service.partier.domain.entity.user_entity import UserEntity
from src.service.partier.driving_adapter.http_controller.auth.role_auth import require_organizer


router = APIRouter(tags=['export'])


def _csv_download(export: CsvExport) -> StreamingResponse:
    return StreamingResponse(
        export.iter_lines(),
        media_type='text/csv; charset=utf-8',
        headers={'Content-Disposition': f'attachment; filename="{export.filename}"'},
    )


@router.get(EXPORT_USERS, status_code=status.HTTP_200_OK, response_class=StreamingResponse)
@Logger.io
async def export_users(
    current_user: UserEntity = Depends(require_organizer),
    use_case: ExportCsvUseCase = Depends(ExportCsvUseCase.depends),
) -> StreamingResponse:
    return _csv_download(await use_case.export_users())


@router.get(EXPORT_TICKETS, status_code=status.HTTP_200_OK, response_class=StreamingResponse)
@Logger.io
async def export_tickets(
    current_user: UserEntity = Depends(require_organizer),
    use_case: ExportCsvUseCase = Depends(ExportCsvUseCase.depends),
) -> StreamingResponse:
    return _csv_download(await use_case.export_tickets())


@router.get(EXPORT_EVENTS, status_code=status.HTTP_200_OK, response_class=StreamingResponse)
@Logger.io
async def export_events(
    current_user: UserEntity = Depends(require_organizer),
    use_case: ExportCsvUseCase = Depends(ExportCsvUseCase.depends),
) -> StreamingResponse:
    return _csv_download(await use_case.export_events())
