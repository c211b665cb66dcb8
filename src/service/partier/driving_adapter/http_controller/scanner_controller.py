from fastapi import APIRouter, Depends, status

from src.platform.constant.route_constant import SCANNER_VALIDATE
from src.platform.logging.loguru_io import Logger
from src.service.partier.app.query.validate_ticket_use_case import ValidateTicketUseCase
from src.service.partier.domain.entity.user_entity import UserEntity
from src.service.partier.driving_adapter.http_controller.auth.role_auth import require_organizer
from src.service.partier.driving_adapter.schema.scanner_schema import (
    ScanRequest,
    ScanResultResponse,
)


router = APIRouter(tags=['scanner'])


@router.post(SCANNER_VALIDATE, status_code=status.HTTP_200_OK)
@Logger.io
async def validate_scanned_code(
    request: ScanRequest,
    current_user: UserEntity = Depends(require_organizer),
    use_case: ValidateTicketUseCase = Depends(ValidateTicketUseCase.depends),
) -> ScanResultResponse:
    """Validate a decoded QR payload at the door"""
    result = await use_case.validate(request.code)
    return ScanResultResponse.from_result(result)
