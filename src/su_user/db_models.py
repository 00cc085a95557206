"""SQLAlchemy ORM model for the registration service's "User" table.

The table and its camelCase column names are owned by the registration
service; this mapping is read-only and ships no migration.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from src.su_common.database import Base


class UserModel(Base):
    __tablename__ = "User"

    # Stored lowercased by the registration service
    address: Mapped[str] = mapped_column(String, primary_key=True)
    twitter_pfp_url: Mapped[str | None] = mapped_column(
        "twitterPfpUrl", String, nullable=True
    )
    twitter_username: Mapped[str | None] = mapped_column(
        "twitterUsername", String, nullable=True
    )
