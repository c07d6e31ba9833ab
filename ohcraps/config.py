import sys
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DATA_DIR = Path(__file__).parent / "data"


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    app_name: str = "Oh Craps!"
    debug: bool = False

    # Bundled strategy documents (one HTML-fragment .txt file per strategy)
    strategies_dir: Path = DATA_DIR / "strategies"
    strategy_document_suffix: str = ".txt"

    # Where user-authored strategies are persisted
    user_store_path: Path = Path("user_strategies.json")

    # Recipient for strategy submissions; empty means the caller must supply one
    submission_email: str = ""


settings = Settings()


# =============================================================================
# RANGE LIMITS
# =============================================================================

# Upper bound used for "Any" amounts and open-ended buckets
MAX_AMOUNT = sys.maxsize
