# jobagent/models/user.py
from sqlalchemy import Boolean, Column, DateTime, Integer, String, func
from sqlalchemy.orm import relationship

from jobagent.core.base import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)

    email = Column(String(255), unique=True, index=True, nullable=False)
    name = Column(String(100), nullable=False)
    email_verified = Column(Boolean, nullable=False, server_default="false", default=False)
    image = Column(String(1024), nullable=True)
    password_hash = Column(String(255), nullable=False)

    # candidate | admin. Never client-settable at sign-up.
    role = Column(String(20), nullable=False, server_default="candidate", default="candidate")

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    sessions = relationship(
        "UserSession",
        back_populates="user",
        cascade="all, delete-orphan",
    )
