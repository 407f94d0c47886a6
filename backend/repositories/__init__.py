from .base import DuplicateEntityError, ResourceRepository
from .adverts import AdvertsRepository, AdvertisersRepository
from .loans import LoansRepository
from .medias import MediasRepository
from .stocks import StocksRepository
from .users import UsersRepository
from . import models

__all__ = [
    "DuplicateEntityError",
    "ResourceRepository",
    "AdvertsRepository",
    "AdvertisersRepository",
    "LoansRepository",
    "MediasRepository",
    "StocksRepository",
    "UsersRepository",
    "models",
]
