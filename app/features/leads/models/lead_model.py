from sqlalchemy import Column, String

from app.platform.db.base import BaseModel


class Lead(BaseModel):
    __tablename__ = "leads"
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    age_range = Column(String(10), nullable=False)

    def __repr__(self) -> str:
        return f"<Lead(email='{self.email}', age_range='{self.age_range}')>"
