"""Response models shared by the strategy endpoints."""

from pydantic import BaseModel, Field

from ohcraps.models.content_block import BlockKind
from ohcraps.models.strategy import Strategy
from ohcraps.services.strategy_detail import render_detail_lines
from ohcraps.services.submission import SharePayload


class StrategySummary(BaseModel):
    """A strategy as listed in the browser."""

    id: str
    name: str
    buy_in: str
    table_minimum: str


class DetailLineResponse(BaseModel):
    kind: BlockKind
    text: str
    number: int | None = None


class StrategyDetailResponse(BaseModel):
    """Full strategy with numbered body lines."""

    id: str
    name: str
    buy_in: str
    table_minimum: str
    buy_in_range: tuple[int, int]
    table_minimum_range: tuple[int, int]
    notes: str = ""
    credit: str = ""
    steps: list[str] = Field(
        default_factory=list,
        description="Body content as tagged block strings",
    )
    lines: list[DetailLineResponse] = Field(default_factory=list)


class ShareResponse(BaseModel):
    """Payload for a mail composer or share sheet."""

    subject: str
    filename: str
    text: str


def summary_for(strategy: Strategy) -> StrategySummary:
    return StrategySummary(
        id=str(strategy.id),
        name=strategy.name,
        buy_in=strategy.buy_in_text,
        table_minimum=strategy.table_min_text,
    )


def detail_for(strategy: Strategy) -> StrategyDetailResponse:
    return StrategyDetailResponse(
        id=str(strategy.id),
        name=strategy.name,
        buy_in=strategy.buy_in_text,
        table_minimum=strategy.table_min_text,
        buy_in_range=(strategy.buy_in_min, strategy.buy_in_max),
        table_minimum_range=(strategy.table_min_min, strategy.table_min_max),
        notes=strategy.notes,
        credit=strategy.credit,
        steps=strategy.steps,
        lines=[
            DetailLineResponse(kind=line.kind, text=line.text, number=line.number)
            for line in render_detail_lines(strategy)
        ],
    )


def share_response_for(payload: SharePayload) -> ShareResponse:
    return ShareResponse(subject=payload.subject, filename=payload.filename, text=payload.text)
