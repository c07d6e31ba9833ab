from ohcraps.models.content_block import BLOCK_MARKERS, BlockKind, ContentBlock
from ohcraps.models.filters import BuyInFilter, SectionKey, TableMinFilter
from ohcraps.models.strategy import Strategy
from ohcraps.models.user_strategy import UserStrategy

__all__ = [
    "BLOCK_MARKERS",
    "BlockKind",
    "BuyInFilter",
    "ContentBlock",
    "SectionKey",
    "Strategy",
    "TableMinFilter",
    "UserStrategy",
]
