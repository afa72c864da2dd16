from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import FileResponse, PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.features.downloads.services.download_service import (
    DownloadService,
    EbookUnavailable,
    ebook_path,
)
from app.platform.config import settings
from app.platform.db.session import get_db
from app.platform.logger import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["Downloads"])

DOWNLOAD_ERROR_MESSAGE = "An error occurred during download"


@router.get(settings.DOWNLOAD_URL_PATH)
async def download_ebook(
    token: str | None = Query(default=None, description="One-time download token"),
    db: AsyncSession = Depends(get_db),
):
    """
    Exchange a one-time token for the ebook.

    - 400 when the token is missing, unknown or already used
    - 500 when the file or the database is unavailable
    - 200 with the PDF as an attachment otherwise
    """
    if not token or not token.strip():
        return PlainTextResponse("Invalid token", status_code=status.HTTP_400_BAD_REQUEST)

    try:
        # Resolve the file first so a missing asset never burns a token
        path = ebook_path()
        redeemed = await DownloadService(db).redeem(token)
    except EbookUnavailable as exc:
        logger.error(f"Download error: {exc}")
        return PlainTextResponse(DOWNLOAD_ERROR_MESSAGE, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    except Exception as exc:
        logger.exception("Download error", exc_info=exc)
        return PlainTextResponse(DOWNLOAD_ERROR_MESSAGE, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    if not redeemed:
        return PlainTextResponse(
            "Invalid or expired download link", status_code=status.HTTP_400_BAD_REQUEST
        )

    return FileResponse(
        path,
        media_type="application/pdf",
        filename=settings.EBOOK_DOWNLOAD_FILENAME,
    )
