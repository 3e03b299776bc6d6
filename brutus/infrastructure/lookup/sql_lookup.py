"""Database-backed dictionary lookup.

Word lists live in two tables, ``commons`` and ``words``, each with a single
``text`` column. Variants are sent in bound ``IN`` batches and compared to the
lowercased column, so the store may hold mixed-case entries.
"""

from collections.abc import Set
from functools import lru_cache
from itertools import islice

from sqlalchemy import Column, Engine, MetaData, String, Table, create_engine, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool

from brutus.core.config import DatabaseConfig
from brutus.core.errors import ConfigurationError, LookupUnavailableError
from brutus.core.logging import get_logger
from brutus.domain.enums import Dataset

logger = get_logger(__name__)

DEFAULT_BATCH_SIZE = 500

lookup_metadata = MetaData()

commons_table = Table(
    "commons",
    lookup_metadata,
    Column("text", String(255), nullable=False, index=True),
)

words_table = Table(
    "words",
    lookup_metadata,
    Column("text", String(255), nullable=False, index=True),
)

DATASET_TABLES = {
    Dataset.COMMONS: commons_table,
    Dataset.DICTIONARY: words_table,
}


def _batches(items: list[str], size: int):
    iterator = iter(items)
    while batch := list(islice(iterator, size)):
        yield batch


def create_lookup_engine(config: DatabaseConfig) -> Engine:
    """Engine for ``config``; engines are shared per settings."""
    if not config.is_configured:
        raise ConfigurationError(
            "BRUTUS_DATABASE_URL must be set for database lookups",
            config_key="BRUTUS_DATABASE_URL",
        )
    return _cached_engine(config)


@lru_cache(maxsize=8)
def _cached_engine(config: DatabaseConfig) -> Engine:
    logger.info("Creating lookup engine", url=config.safe_url())
    try:
        if config.is_sqlite:
            return create_engine(
                config.url,
                echo=config.echo,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
                pool_pre_ping=config.pool_pre_ping,
            )
        return create_engine(
            config.url,
            echo=config.echo,
            pool_size=config.pool_size,
            pool_pre_ping=config.pool_pre_ping,
        )
    except (SQLAlchemyError, ImportError, ValueError) as e:
        raise ConfigurationError(
            f"Invalid lookup database settings: {e}",
            config_key="BRUTUS_DATABASE_URL",
            cause=e,
        ) from e


class SqlDictionaryLookup:
    """Queries the ``commons`` and ``words`` tables for any variant."""

    def __init__(self, engine: Engine, batch_size: int = DEFAULT_BATCH_SIZE) -> None:
        if batch_size < 1:
            raise ValueError("batch_size must be positive")
        self.engine = engine
        self.batch_size = batch_size

    def matches(self, variants: Set[str], dataset: Dataset) -> Dataset | None:
        candidates = sorted({variant.lower() for variant in variants})
        if not candidates:
            return None
        try:
            with self.engine.connect() as conn:
                for member in dataset.members:
                    table = DATASET_TABLES[member]
                    for batch in _batches(candidates, self.batch_size):
                        statement = (
                            select(func.count())
                            .select_from(table)
                            .where(func.lower(table.c.text).in_(batch))
                        )
                        if conn.execute(statement).scalar_one() > 0:
                            logger.debug("Dictionary match", dataset=member.value, table=table.name)
                            return member
        except SQLAlchemyError as e:
            logger.error("Lookup database unavailable", reason=str(e.__class__.__name__))
            raise LookupUnavailableError(
                "Lookup database unavailable",
                backend="database",
                source=self.engine.url.render_as_string(hide_password=True),
                cause=e,
            ) from e
        return None
