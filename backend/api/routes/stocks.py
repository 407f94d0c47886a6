"""
Stocks API routes.

Besides the generic CRUD endpoints, a stock can be incremented or
decremented by one copy. The adjustment works on the stored value; any
request body is ignored.
"""
import logging

from fastapi import Depends, HTTPException, Response
from pydantic import Field, model_validator
from sqlalchemy.orm import Session

from api.routes.resource import (
    SERVICES_PREFIX,
    CamelModel,
    build_resource_router,
    item_location,
    no_content,
)
from db import get_session
from domain.models import Stock
from repositories import StocksRepository

BASE_PATH = f"{SERVICES_PREFIX}/stocks"
stocks_repo = StocksRepository()
logger = logging.getLogger(__name__)


class StockFields(CamelModel):
    media_id: int
    initial_stock: int = Field(ge=0)
    current_stock: int = Field(ge=0)


class StockPayload(StockFields):
    @model_validator(mode="after")
    def check_bounds(self) -> "StockPayload":
        if self.current_stock > self.initial_stock:
            raise ValueError("currentStock cannot exceed initialStock")
        return self


class StockResponse(StockFields):
    id: int


router = build_resource_router(BASE_PATH, stocks_repo, Stock, StockPayload, StockResponse)


def _adjusted_response(
    entity_id: int, stock, increment: bool, response: Response, session: Session
):
    """Turn the result of an adjustment into a response.

    A failed adjustment is looked up again: a stock removed meanwhile answers
    204, one sitting at its bound answers 405.
    """
    if stock is not None:
        logger.info("Stock %s adjusted for media %s", stock, stock.media_id)
        response.headers["Location"] = item_location(BASE_PATH, entity_id)
        return StockResponse.model_validate(stock)

    current = stocks_repo.get(session, entity_id)
    if current is None:
        logger.info("Stock with id %s not found on system", entity_id)
        return no_content()
    if increment:
        logger.info("Stock %s cannot be incremented, full: %s", entity_id, current.is_fill())
        raise HTTPException(status_code=405, detail="Stock is already full")
    logger.info("Stock %s cannot be decremented, empty: %s", entity_id, current.is_empty())
    raise HTTPException(status_code=405, detail="Stock is already empty")


@router.put("/{entity_id}/increment", response_model=StockResponse)
async def increment_stock(
    entity_id: int, response: Response, session: Session = Depends(get_session)
):
    """Put one copy back on the shelf."""
    logger.info("Increment stock %s", entity_id)
    stock = stocks_repo.increment(session, entity_id)
    return _adjusted_response(entity_id, stock, True, response, session)


@router.put("/{entity_id}/decrement", response_model=StockResponse)
async def decrement_stock(
    entity_id: int, response: Response, session: Session = Depends(get_session)
):
    """Take one copy off the shelf."""
    logger.info("Decrement stock %s", entity_id)
    stock = stocks_repo.decrement(session, entity_id)
    return _adjusted_response(entity_id, stock, False, response, session)
