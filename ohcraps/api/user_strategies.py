"""
User strategy endpoints.

Create, edit, duplicate, submit, share and delete strategies authored by
the user. Every change is persisted before the response is returned.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from ohcraps.api.schemas import (
    ShareResponse,
    StrategyDetailResponse,
    detail_for,
    share_response_for,
)
from ohcraps.models.user_strategy import UserStrategy
from ohcraps.services.submission import build_share_payload, build_submission_email
from ohcraps.services.user_strategy_html import user_strategy_to_strategy
from ohcraps.services.user_strategy_store import (
    UserStrategyNotFoundError,
    UserStrategyStore,
    get_user_strategy_store,
)

router = APIRouter(prefix="/user-strategies", tags=["user-strategies"])

Store = Annotated[UserStrategyStore, Depends(get_user_strategy_store)]


class UserStrategyCreateRequest(BaseModel):
    """Request model for a new user strategy."""

    name: str = Field(..., examples=["Three Point Molly"])
    buy_in: str = Field(default="", examples=["$100-$300"])
    table_minimum: str = Field(default="", examples=["$10"])
    steps: str = Field(
        ...,
        description="Free text. '1. ' lines are steps, '- ' lines are bullets",
        examples=["1. Bet the Pass Line\n2. Take full odds\n- Press after a hit"],
    )
    notes: str = ""
    credit: str = ""


class UserStrategyUpdateRequest(BaseModel):
    """Request model for editing; omitted fields are left unchanged."""

    name: str | None = None
    buy_in: str | None = None
    table_minimum: str | None = None
    steps: str | None = None
    notes: str | None = None
    credit: str | None = None


class UserStrategyResponse(BaseModel):
    id: str
    name: str
    buy_in: str
    table_minimum: str
    steps: str
    notes: str
    credit: str
    date_created: datetime
    date_last_edited: datetime | None = None
    is_submitted: bool = False
    has_been_submitted: bool = False
    submission_status: str


class UserStrategyListResponse(BaseModel):
    strategies: list[UserStrategyResponse] = Field(default_factory=list)


class SubmissionEmailResponse(BaseModel):
    recipient: str
    subject: str
    body: str


class SubmitResponse(BaseModel):
    """Submitted record plus the email draft to hand to a mail composer."""

    strategy: UserStrategyResponse
    email: SubmissionEmailResponse


class DeleteResponse(BaseModel):
    id: str
    deleted: bool
    message: str = ""


def _response_for(strategy: UserStrategy) -> UserStrategyResponse:
    return UserStrategyResponse(
        id=str(strategy.id),
        name=strategy.name,
        buy_in=strategy.buy_in,
        table_minimum=strategy.table_minimum,
        steps=strategy.steps,
        notes=strategy.notes,
        credit=strategy.credit,
        date_created=strategy.date_created,
        date_last_edited=strategy.date_last_edited,
        is_submitted=strategy.is_submitted,
        has_been_submitted=strategy.has_been_submitted,
        submission_status=strategy.submission_status,
    )


def _require_text(value: str | None, field_name: str) -> None:
    if value is not None and not value.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{field_name} cannot be empty",
        )


@contextmanager
def _store_errors() -> Iterator[None]:
    """Map store failures to HTTP errors."""
    try:
        yield
    except UserStrategyNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User strategy not found",
        ) from e
    except OSError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Could not save strategies. Please try again later.",
        ) from e


@router.get("", response_model=UserStrategyListResponse)
async def list_user_strategies(store: Store) -> UserStrategyListResponse:
    """List user strategies in creation order."""
    return UserStrategyListResponse(strategies=[_response_for(s) for s in store.strategies])


@router.post("", response_model=UserStrategyResponse, status_code=status.HTTP_201_CREATED)
async def create_user_strategy(
    request: UserStrategyCreateRequest,
    store: Store,
) -> UserStrategyResponse:
    """
    Create a user strategy.

    Name and steps are required and cannot be blank.
    """
    _require_text(request.name, "Name")
    _require_text(request.steps, "Steps")

    with _store_errors():
        strategy = store.add(UserStrategy(**request.model_dump()))
    return _response_for(strategy)


@router.get("/{strategy_id}", response_model=UserStrategyResponse)
async def get_user_strategy(strategy_id: UUID, store: Store) -> UserStrategyResponse:
    with _store_errors():
        return _response_for(store.get(strategy_id))


@router.get("/{strategy_id}/detail", response_model=StrategyDetailResponse)
async def get_user_strategy_detail(strategy_id: UUID, store: Store) -> StrategyDetailResponse:
    """Render a user strategy the same way as a library strategy."""
    with _store_errors():
        user_strategy = store.get(strategy_id)
    return detail_for(user_strategy_to_strategy(user_strategy))


@router.put("/{strategy_id}", response_model=UserStrategyResponse)
async def edit_user_strategy(
    strategy_id: UUID,
    request: UserStrategyUpdateRequest,
    store: Store,
) -> UserStrategyResponse:
    """
    Edit a user strategy.

    Editing a submitted strategy clears its submitted state; the record
    then reports that it is ready to resubmit.
    """
    _require_text(request.name, "Name")
    _require_text(request.steps, "Steps")

    changes = request.model_dump(exclude_none=True)
    with _store_errors():
        strategy = store.edit(strategy_id, **changes)
    return _response_for(strategy)


@router.post(
    "/{strategy_id}/duplicate",
    response_model=UserStrategyResponse,
    status_code=status.HTTP_201_CREATED,
)
async def duplicate_user_strategy(strategy_id: UUID, store: Store) -> UserStrategyResponse:
    with _store_errors():
        return _response_for(store.duplicate(strategy_id))


@router.post("/{strategy_id}/submit", response_model=SubmitResponse)
async def submit_user_strategy(strategy_id: UUID, store: Store) -> SubmitResponse:
    """
    Mark a strategy as submitted and return the submission email draft.

    Sending the email is up to the caller.
    """
    with _store_errors():
        strategy = store.submit(strategy_id)

    email = build_submission_email(strategy)
    return SubmitResponse(
        strategy=_response_for(strategy),
        email=SubmissionEmailResponse(
            recipient=email.recipient,
            subject=email.subject,
            body=email.body,
        ),
    )


@router.get("/{strategy_id}/share", response_model=ShareResponse)
async def share_user_strategy(strategy_id: UUID, store: Store) -> ShareResponse:
    with _store_errors():
        strategy = store.get(strategy_id)
    return share_response_for(build_share_payload(strategy))


@router.delete("/{strategy_id}", response_model=DeleteResponse)
async def delete_user_strategy(strategy_id: UUID, store: Store) -> DeleteResponse:
    """Delete a user strategy. This cannot be undone."""
    with _store_errors():
        store.delete(strategy_id)
    return DeleteResponse(
        id=str(strategy_id),
        deleted=True,
        message="Your strategy has been deleted.",
    )
