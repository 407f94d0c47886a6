"""
Core domain models for the MediaLibs services.
These are framework-agnostic and can be used across all services.
"""
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import List, Optional


class Role(str, Enum):
    """Role granted to a user account."""
    GUEST = "GUEST"
    MEMBER = "MEMBER"
    ADMIN = "ADMIN"


@dataclass
class Advertiser:
    """A company or person publishing adverts."""
    name: str
    email: Optional[str] = None
    id: Optional[int] = None


@dataclass
class Advert:
    """An advertisement published by an advertiser."""
    title: str
    content: Optional[str] = None
    advert_date: Optional[date] = None
    advertiser_id: Optional[int] = None
    id: Optional[int] = None


@dataclass
class Media:
    """
    A lendable media (book, film, album...).

    `supports` lists the physical or digital formats it is available on,
    e.g. ["DVD", "BLU_RAY"].
    """
    name: str
    description: Optional[str] = None
    release_date: Optional[date] = None
    supports: List[str] = field(default_factory=list)
    id: Optional[int] = None


@dataclass
class Loan:
    """A media borrowed by a user between two dates."""
    borrower_id: int
    media_id: int
    start_loan_date: Optional[date] = None
    end_loan_date: Optional[date] = None
    id: Optional[int] = None


@dataclass
class Stock:
    """
    Number of copies of a media held by the library.

    `current_stock` is the number of copies on the shelf and always stays
    within [0, initial_stock].
    """
    media_id: int
    initial_stock: int
    current_stock: int
    id: Optional[int] = None

    def is_fill(self) -> bool:
        return self.current_stock >= self.initial_stock

    def is_empty(self) -> bool:
        return self.current_stock <= 0


@dataclass
class User:
    """A user account."""
    email: str
    password: str = field(repr=False)
    role: Role = Role.GUEST
    id: Optional[int] = None
