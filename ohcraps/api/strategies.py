"""
Strategy library endpoints.

Browse, filter and share the bundled strategy catalog.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel, Field

from ohcraps.api.schemas import (
    ShareResponse,
    StrategyDetailResponse,
    StrategySummary,
    detail_for,
    share_response_for,
    summary_for,
)
from ohcraps.filtering import browse_strategies
from ohcraps.models.filters import BuyInFilter, TableMinFilter
from ohcraps.models.strategy import Strategy
from ohcraps.services.strategy_catalog import find_strategy, get_strategy_catalog
from ohcraps.services.submission import build_share_payload

router = APIRouter(prefix="/strategies", tags=["strategies"])

Catalog = Annotated[tuple[Strategy, ...], Depends(get_strategy_catalog)]


class SectionResponse(BaseModel):
    """One list section ("#" or a letter)."""

    key: str
    strategies: list[StrategySummary] = Field(default_factory=list)


class BrowseResponse(BaseModel):
    """Filtered, sectioned strategy list."""

    total: int = 0
    sections: list[SectionResponse] = Field(default_factory=list)


class FilterOption(BaseModel):
    value: str
    label: str


class FilterOptionsResponse(BaseModel):
    """Bucket choices, with labels to display verbatim."""

    table_min: list[FilterOption]
    buy_in: list[FilterOption]


def _get_or_404(catalog: tuple[Strategy, ...], strategy_id: UUID) -> Strategy:
    strategy = find_strategy(catalog, strategy_id)
    if strategy is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Strategy not found",
        )
    return strategy


@router.get("", response_model=BrowseResponse)
async def list_strategies(
    catalog: Catalog,
    search: Annotated[str, Query(description="Case-insensitive name search")] = "",
    table_min: Annotated[TableMinFilter | None, Query(description="Table-minimum bucket")] = None,
    buy_in: Annotated[BuyInFilter | None, Query(description="Buy-in bucket")] = None,
) -> BrowseResponse:
    """
    Browse the strategy library.

    Applies the name search and bucket filters, then groups the result
    into "#" and A-Z sections.
    """
    sections = browse_strategies(catalog, search=search, table_min=table_min, buy_in=buy_in)

    return BrowseResponse(
        total=sum(len(section.strategies) for section in sections),
        sections=[
            SectionResponse(
                key=section.key.display,
                strategies=[summary_for(s) for s in section.strategies],
            )
            for section in sections
        ],
    )


@router.get("/filters", response_model=FilterOptionsResponse)
async def filter_options() -> FilterOptionsResponse:
    """List the available filter buckets."""
    return FilterOptionsResponse(
        table_min=[FilterOption(value=f.value, label=f.label) for f in TableMinFilter],
        buy_in=[FilterOption(value=f.value, label=f.label) for f in BuyInFilter],
    )


@router.get("/{strategy_id}", response_model=StrategyDetailResponse)
async def get_strategy(strategy_id: UUID, catalog: Catalog) -> StrategyDetailResponse:
    """Get one strategy with numbered body lines."""
    return detail_for(_get_or_404(catalog, strategy_id))


@router.get("/{strategy_id}/share", response_model=ShareResponse)
async def share_strategy(strategy_id: UUID, catalog: Catalog) -> ShareResponse:
    """Get share text, subject and attachment name for a strategy."""
    return share_response_for(build_share_payload(_get_or_404(catalog, strategy_id)))
