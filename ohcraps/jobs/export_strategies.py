"""
Export the strategy library as share-text files.

Writes one plain-text file per bundled strategy, named the same way as a
shared attachment. Run as:

    python -m ohcraps.jobs.export_strategies OUTPUT_DIR
"""

import argparse
import logging
from pathlib import Path

from ohcraps.config import settings
from ohcraps.models.strategy import Strategy
from ohcraps.services.strategy_catalog import DirectoryDocumentStore, load_all_strategies
from ohcraps.services.submission import build_share_payload

logger = logging.getLogger(__name__)


def export_strategies(strategies: list[Strategy], output_dir: Path) -> list[Path]:
    """
    Write share text for each strategy.

    Strategies whose names sanitize to the same file name overwrite each
    other; the last one wins and a warning is logged.

    Returns:
        Paths written, in strategy order.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []

    for strategy in strategies:
        payload = build_share_payload(strategy)
        path = output_dir / payload.filename
        if path in written:
            logger.warning("Overwriting %s with %s", path.name, strategy.name)
        path.write_text(payload.text + "\n", encoding="utf-8")
        written.append(path)

    logger.info("Exported %d strategies to %s", len(written), output_dir)
    return written


def run_export(output_dir: Path, strategies_dir: Path | None = None) -> list[Path]:
    """Load the library from disk and export it."""
    store = DirectoryDocumentStore(
        strategies_dir or settings.strategies_dir,
        settings.strategy_document_suffix,
    )
    return export_strategies(load_all_strategies(store), output_dir)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Export strategies as share-text files")
    parser.add_argument("output_dir", type=Path, help="Directory to write files into")
    parser.add_argument(
        "--strategies-dir",
        type=Path,
        default=None,
        help="Strategy document directory (defaults to the bundled library)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    run_export(args.output_dir, args.strategies_dir)


if __name__ == "__main__":
    main()
