"""Round player stats loading using polars."""

import logging
from pathlib import Path
from typing import Optional

import polars as pl

from .constants import STAT_FIELDS
from .models import StatLine

logger = logging.getLogger('duzza.stats_loader')

READERS = {
    '.csv': pl.read_csv,
    '.json': pl.read_json,
    '.ndjson': pl.read_ndjson,
    '.jsonl': pl.read_ndjson,
    '.parquet': pl.read_parquet,
}


class RoundStatsLoader:
    """Loads and caches one round's player stats from an exported stats table."""

    def __init__(self, path: Path | str, round_number: Optional[int] = None):
        """
        Args:
            path: Stats table (.csv, .json, .ndjson/.jsonl or .parquet) with a
                'player_name' column and any of the stat counter columns
            round_number: Keep only rows for this round when the table has a
                'round' column
        """
        self.path = Path(path)
        self.round_number = round_number
        self._table: Optional[pl.DataFrame] = None

    @property
    def table(self) -> pl.DataFrame:
        """Lazy load the cleaned stats table."""
        if self._table is None:
            self._table = self._clean(self._read())
        return self._table

    def _read(self) -> pl.DataFrame:
        if not self.path.exists():
            logger.error(f'Stats file not found: {self.path}')
            raise FileNotFoundError(f'Stats file not found: {self.path}')

        reader = READERS.get(self.path.suffix.lower())
        if reader is None:
            raise ValueError(
                f'Unsupported stats file type {self.path.suffix!r} '
                f'(expected one of {", ".join(sorted(READERS))})'
            )
        logger.debug(f'Loading stats from {self.path}')
        return reader(self.path)

    def _clean(self, table: pl.DataFrame) -> pl.DataFrame:
        if 'player_name' not in table.columns:
            raise ValueError(f'Stats file {self.path} has no player_name column')

        if self.round_number is not None and 'round' in table.columns:
            table = table.filter(pl.col('round') == self.round_number)

        missing = [name for name in STAT_FIELDS if name not in table.columns]
        if missing:
            logger.debug(f'Stats file {self.path} has no {", ".join(missing)} columns; using 0')
            table = table.with_columns([pl.lit(0).alias(name) for name in missing])

        table = (
            table.with_columns(
                pl.col('player_name').cast(pl.Utf8).str.strip_chars(),
                *[pl.col(name).cast(pl.Int64, strict=False).fill_null(0) for name in STAT_FIELDS],
            )
            .filter(pl.col('player_name').is_not_null() & (pl.col('player_name') != ''))
            .select(['player_name', *STAT_FIELDS])
        )

        deduped = table.unique(subset=['player_name'], keep='first', maintain_order=True)
        if deduped.height < table.height:
            logger.warning(
                f'{table.height - deduped.height} duplicate player rows in {self.path}; '
                'keeping the first row for each player'
            )
        return deduped

    def stats_by_player_name(self) -> dict[str, StatLine]:
        """All players in the round, keyed by name."""
        return {
            row['player_name']: StatLine.from_dict(row)
            for row in self.table.iter_rows(named=True)
        }


def load_round_stats(path: Path | str, round_number: Optional[int] = None) -> dict[str, StatLine]:
    """Load a round's stats table into a player name -> StatLine map."""
    return RoundStatsLoader(path, round_number).stats_by_player_name()
