from sqlalchemy import Column, Integer, String

from app.db.base import Base


class Organization(Base):
    __tablename__ = "organizations"

    id = Column(Integer, primary_key=True, index=True)
    uuid = Column(String(40), unique=True, nullable=False, index=True)
    kee = Column(String(32), unique=True, nullable=False, index=True)
    name = Column(String(64), nullable=False)
