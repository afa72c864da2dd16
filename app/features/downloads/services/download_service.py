from datetime import datetime, timezone
from pathlib import Path

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from app.features.downloads.models.download_token import DownloadToken
from app.platform.config import settings
from app.platform.logger import get_logger

logger = get_logger(__name__)


class EbookUnavailable(Exception):
    pass


def ebook_path() -> Path:
    path = Path(settings.EBOOK_FILE_PATH)
    if not path.is_file():
        raise EbookUnavailable(f"Ebook not found at {path}")
    return path


class DownloadService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def redeem(self, token: str) -> bool:
        """
        Mark ``token`` as used if it is still unused.

        The check and the write are a single conditional UPDATE, so two
        concurrent redemptions of the same token cannot both succeed.
        Returns False for unknown or already used tokens.
        """
        stmt = (
            update(DownloadToken)
            .where(DownloadToken.token == token, DownloadToken.used.is_(False))
            .values(used=True, used_at=datetime.now(timezone.utc))
        )
        try:
            result = await self.db.execute(stmt)
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        if result.rowcount == 0:
            logger.info("Rejected download token", extra={"token": token})
            return False

        logger.info("Download token redeemed", extra={"token": token})
        return True
