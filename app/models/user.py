from .base import Base

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Table, Text, false, func


user_dietary_restrictions = Table(
    "user_dietary_restrictions",
    Base.metadata,
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column(
        "dietary_restriction_id",
        Integer,
        ForeignKey("dietary_restrictions.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    username = Column(String(50), unique=True, nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    is_admin = Column(Boolean, nullable=False, default=False, server_default=false())
    first_name = Column(String(255))
    last_name = Column(String(255))
    bio = Column(Text)
    profile_picture_url = Column(String(255))
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now()
    )
