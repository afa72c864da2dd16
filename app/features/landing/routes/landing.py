from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.templating import Jinja2Templates
from sqlalchemy.ext.asyncio import AsyncSession

from app.features.landing import content
from app.features.landing.state import LandingFormState
from app.features.leads.services.lead_service import (
    SUCCESS_MESSAGE,
    LeadService,
    build_download_url,
)
from app.features.leads.utils.validation import AGE_RANGES
from app.platform.config import settings
from app.platform.db.session import get_db
from app.platform.logger import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["Landing"])

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "template"))


def _render(request: Request, form: LandingFormState):
    return templates.TemplateResponse(
        request,
        "landing.html",
        {
            "app_name": settings.APP_NAME,
            "content": content,
            "age_ranges": AGE_RANGES,
            "form": form,
        },
    )


@router.get("/", include_in_schema=False)
async def landing_page(request: Request):
    return _render(request, LandingFormState())


@router.post("/", include_in_schema=False)
async def submit_landing_form(request: Request, db: AsyncSession = Depends(get_db)):
    form = LandingFormState.from_form(await request.form())
    if not form.validate():
        return _render(request, form)

    form.begin_submit()
    try:
        _, download = await LeadService(db).register(
            first_name=form.values["firstName"],
            last_name=form.values["lastName"],
            email=form.values["email"],
            age_range=form.values["ageRange"],
        )
    except HTTPException as exc:
        form.fail(str(exc.detail))
        return _render(request, form)

    form.succeed(SUCCESS_MESSAGE, build_download_url(download.token))
    return _render(request, form)
