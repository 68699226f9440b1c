from sqlalchemy import Column, Integer, String, Text

from app.db.base import Base


class Property(Base):
    __tablename__ = "properties"

    id = Column(Integer, primary_key=True, index=True)
    prop_key = Column(String(512), nullable=False, index=True)
    text_value = Column(Text, nullable=True)
    # Null for global properties
    resource_id = Column(Integer, nullable=True)
