"""
SQLAlchemy ORM models for persistence.
"""
from sqlalchemy import CheckConstraint, Column, Date, Integer, JSON, String, Text, UniqueConstraint

from db import Base


class AdvertiserORM(Base):
    __tablename__ = "advertisers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False, unique=True)
    email = Column(String, nullable=True)


class AdvertORM(Base):
    __tablename__ = "adverts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String, nullable=False, unique=True)
    content = Column(Text, nullable=True)
    advert_date = Column(Date, nullable=True)
    advertiser_id = Column(Integer, nullable=True, index=True)


class MediaORM(Base):
    __tablename__ = "medias"
    __table_args__ = (UniqueConstraint("name", "release_date", name="uq_medias_name_release_date"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False, index=True)
    description = Column(Text, nullable=True)
    release_date = Column(Date, nullable=True)
    supports = Column(JSON, nullable=True)


class LoanORM(Base):
    __tablename__ = "loans"
    __table_args__ = (UniqueConstraint("borrower_id", "media_id", name="uq_loans_borrower_media"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    borrower_id = Column(Integer, nullable=False, index=True)
    media_id = Column(Integer, nullable=False, index=True)
    start_loan_date = Column(Date, nullable=True)
    end_loan_date = Column(Date, nullable=True)


class StockORM(Base):
    __tablename__ = "stocks"
    __table_args__ = (
        CheckConstraint(
            "current_stock >= 0 AND current_stock <= initial_stock",
            name="ck_stocks_current_within_bounds",
        ),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    media_id = Column(Integer, nullable=False, unique=True)
    initial_stock = Column(Integer, nullable=False)
    current_stock = Column(Integer, nullable=False)


class UserORM(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String, nullable=False, unique=True)
    password = Column(String, nullable=False)
    role = Column(String, nullable=False)
