from typing import Tuple
from urllib.parse import urlencode

from fastapi import HTTPException, status
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.features.downloads.models.download_token import DownloadToken
from app.features.leads.models.lead_model import Lead
from app.features.leads.utils.token_generator import generate_download_token
from app.platform.config import settings
from app.platform.logger import get_logger

logger = get_logger(__name__)

DUPLICATE_EMAIL_MESSAGE = "This email is already registered. Please use a different email address."
GENERIC_ERROR_MESSAGE = "An error occurred. Please try again later."
SUCCESS_MESSAGE = "Thank you for registering! Click the button below to download your free ebook."


def build_download_url(token: str) -> str:
    return f"{settings.DOWNLOAD_URL_PATH}?{urlencode({'token': token})}"


class LeadService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def email_exists(self, email: str) -> bool:
        result = await self.db.execute(select(Lead.email).where(Lead.email == email))
        return result.scalars().first() is not None

    async def register(
        self,
        first_name: str,
        last_name: str,
        email: str,
        age_range: str,
    ) -> Tuple[Lead, DownloadToken]:
        """
        Store a lead and its one-time download token.

        Both rows are committed together: a failure on either leaves no
        partial state behind. The unique index on ``leads.email`` turns a
        concurrent registration of the same address into the duplicate error.
        """
        try:
            exists = await self.email_exists(email)
        except Exception as exc:
            logger.exception("Duplicate email check failed", exc_info=exc)
            await self.db.rollback()
            raise HTTPException(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR_MESSAGE)
        if exists:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, DUPLICATE_EMAIL_MESSAGE)

        lead = Lead(
            name=f"{first_name.strip()} {last_name.strip()}",
            email=email,
            age_range=age_range,
        )
        download = DownloadToken(email=email, token=generate_download_token(), used=False)
        self.db.add(lead)
        self.db.add(download)

        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            logger.warning("Lead insert hit unique constraint", extra={"email": email})
            raise HTTPException(status.HTTP_400_BAD_REQUEST, DUPLICATE_EMAIL_MESSAGE)
        except Exception as exc:
            logger.exception("Failed to store lead registration", exc_info=exc)
            await self.db.rollback()
            raise HTTPException(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR_MESSAGE)

        logger.info("Lead registered", extra={"email": email, "age_range": age_range})
        return lead, download
