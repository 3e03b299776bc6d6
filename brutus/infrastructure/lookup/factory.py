"""Selects the dictionary lookup backend for a policy."""

from pathlib import Path

from brutus.core.config import DatabaseConfig, Policy
from brutus.core.errors import LookupUnavailableError

from .file_lookup import FileDictionaryLookup
from .sql_lookup import SqlDictionaryLookup, create_lookup_engine


def build_dictionary_lookup(
    policy: Policy, database_config: DatabaseConfig | None = None
) -> FileDictionaryLookup | SqlDictionaryLookup:
    """
    File lookup when the policy names files, database lookup otherwise.

    ``usefile=True`` selects the bundled word lists. Without files the
    database settings come from ``database_config`` or the environment.

    Raises:
        LookupUnavailableError: If neither files nor a database are configured
    """
    if policy.usefile is True:
        return FileDictionaryLookup.bundled()
    if isinstance(policy.usefile, str | Path | tuple):
        return FileDictionaryLookup.from_paths(policy.usefile, policy.dataset)

    config = database_config or DatabaseConfig.from_environment()
    if not config.is_configured:
        raise LookupUnavailableError(
            "Dictionary lookup is enabled but no lookup file or database is configured",
            backend="database",
            recovery_hint="Set usefile on the policy or BRUTUS_DATABASE_URL in the environment",
        )
    return SqlDictionaryLookup(create_lookup_engine(config))
