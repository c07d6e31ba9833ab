"""
Oh Craps! services.

Catalog loading, share formatting and user strategy management.
"""

from ohcraps.services.share_formatter import render_steps, share_text
from ohcraps.services.strategy_catalog import (
    DirectoryDocumentStore,
    DocumentStore,
    find_strategy,
    get_strategy_catalog,
    load_all_strategies,
    load_strategy_document,
)
from ohcraps.services.strategy_detail import DetailLine, render_detail_lines
from ohcraps.services.submission import (
    SharePayload,
    SubmissionEmail,
    build_share_payload,
    build_submission_email,
    share_filename,
)
from ohcraps.services.user_strategy_html import make_strategy_html, user_strategy_to_strategy
from ohcraps.services.user_strategy_store import (
    InMemoryKeyValueStore,
    JsonFileKeyValueStore,
    KeyValueStore,
    UserStrategyNotFoundError,
    UserStrategyStore,
    get_user_strategy_store,
)

__all__ = [
    # Catalog
    "DirectoryDocumentStore",
    "DocumentStore",
    "find_strategy",
    "get_strategy_catalog",
    "load_all_strategies",
    "load_strategy_document",
    # Formatting
    "DetailLine",
    "render_detail_lines",
    "render_steps",
    "share_text",
    # Payloads
    "SharePayload",
    "SubmissionEmail",
    "build_share_payload",
    "build_submission_email",
    "share_filename",
    # User strategies
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "KeyValueStore",
    "UserStrategyNotFoundError",
    "UserStrategyStore",
    "get_user_strategy_store",
    "make_strategy_html",
    "user_strategy_to_strategy",
]
