from sqlalchemy import Boolean, Column, DateTime, String, false

from app.platform.db.base import BaseModel


class DownloadToken(BaseModel):
    __tablename__ = "downloads"
    email = Column(String(255), nullable=False, index=True)
    token = Column(String(64), nullable=False, unique=True, index=True)
    used = Column(Boolean, nullable=False, default=False, server_default=false())
    used_at = Column(DateTime(timezone=True), nullable=True)

    def __repr__(self) -> str:
        return f"<DownloadToken(email='{self.email}', token='{self.token}', used={self.used})>"
