"""User model."""

from sqlalchemy import BigInteger, Column, DateTime, Integer, String

from src.database import Base

# SQLite only autoincrements an INTEGER primary key
IdType = BigInteger().with_variant(Integer, "sqlite")


class User(Base):
    """A user record. ``id`` and ``created_at`` never change after insert."""

    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(IdType, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
