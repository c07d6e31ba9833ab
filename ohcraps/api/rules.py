"""Casino rules reference endpoint."""

from fastapi import APIRouter
from pydantic import BaseModel

from ohcraps.content.rules import RULES_CONTENT, RulesSection

router = APIRouter(prefix="/rules", tags=["rules"])


class RulesResponse(BaseModel):
    sections: list[RulesSection]


@router.get("", response_model=RulesResponse)
async def get_rules() -> RulesResponse:
    return RulesResponse(sections=RULES_CONTENT)
