from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.features.leads.schemas.lead_schema import (
    LeadCreate,
    LeadOut,
    RegistrationOut,
    RegistrationResponse,
)
from app.features.leads.services.lead_service import (
    SUCCESS_MESSAGE,
    LeadService,
    build_download_url,
)
from app.platform.db.session import get_db
from app.platform.response import api_response
from app.platform.schemas import ValidationErrorResponse

router = APIRouter(prefix="/leads", tags=["Leads"])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_201_CREATED: {"model": RegistrationResponse},
        status.HTTP_422_UNPROCESSABLE_ENTITY: {"model": ValidationErrorResponse},
    },
)
async def register_lead(
    payload: LeadCreate,
    db: AsyncSession = Depends(get_db),
):
    service = LeadService(db)
    lead, download = await service.register(
        first_name=payload.first_name,
        last_name=payload.last_name,
        email=payload.email,
        age_range=payload.age_range,
    )

    return api_response(
        message=SUCCESS_MESSAGE,
        data=RegistrationOut(
            lead=LeadOut.model_validate(lead),
            download_url=build_download_url(download.token),
        ),
        status_code=status.HTTP_201_CREATED,
    )
