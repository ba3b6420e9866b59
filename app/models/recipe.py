from .base import Base

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, func


class Recipe(Base):
    __tablename__ = "recipes"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    title = Column(String(255), index=True, nullable=False)
    description = Column(Text)
    instructions = Column(Text, nullable=False)
    prep_time_minutes = Column(Integer)
    cook_time_minutes = Column(Integer)
    servings = Column(Integer)
    image_url = Column(String(255))
    video_url = Column(String(255))
    created_at = Column(DateTime(timezone=True), index=True, nullable=False, server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now()
    )
