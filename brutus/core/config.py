"""Configuration for the password grading engine.

Configuration is held in plain dataclasses validated on construction. A
``Policy`` is built once per evaluation request and is read-only afterwards;
infrastructure settings for the database-backed lookup are read from the
environment.

Architecture:
- EnvironmentLoader: typed environment variable access
- Policy: grading rules (lengths, class minima, thresholds, lookup options)
- DatabaseConfig: lookup database connection settings
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from brutus.core.errors import ConfigurationError
from brutus.domain.enums import CharacterClass, Dataset, EntropyModel

DEFAULT_HASHES_PER_SECOND = 1_000_000_000
DEFAULT_MAX_VARIANTS = 100_000

ENV_PREFIX = "BRUTUS_"


class EnvironmentLoader:
    """Typed access to ``BRUTUS_*`` environment variables."""

    def __init__(self, environ: Mapping[str, str] | None = None, prefix: str = ENV_PREFIX):
        self._environ = os.environ if environ is None else environ
        self._prefix = prefix

    def get_string(self, key: str, default: str | None = None) -> str | None:
        value = self._environ.get(self._prefix + key)
        if value is None or not value.strip():
            return default
        return value.strip()

    def get_bool(self, key: str, default: bool = False) -> bool:
        value = self.get_string(key)
        if value is None:
            return default
        lowered = value.lower()
        if lowered in ("1", "true", "yes", "on"):
            return True
        if lowered in ("0", "false", "no", "off"):
            return False
        raise ConfigurationError(
            f"{self._prefix}{key} must be a boolean, got {value!r}",
            config_key=self._prefix + key,
        )

    def get_int(self, key: str, default: int, min_value: int | None = None) -> int:
        value = self.get_string(key)
        if value is None:
            return default
        try:
            parsed = int(value)
        except ValueError as e:
            raise ConfigurationError(
                f"{self._prefix}{key} must be an integer, got {value!r}",
                config_key=self._prefix + key,
                cause=e,
            ) from e
        if min_value is not None and parsed < min_value:
            raise ConfigurationError(
                f"{self._prefix}{key} must be >= {min_value}",
                config_key=self._prefix + key,
            )
        return parsed


UseFile = bool | str | Path | tuple[str | Path, ...] | None


def _coerce_usefile(value: Any) -> UseFile:
    if value is None or value is False:
        return None
    if value is True or isinstance(value, str | Path):
        return value
    if isinstance(value, list | tuple):
        if not value:
            raise ConfigurationError("usefile list cannot be empty", config_key="usefile")
        for item in value:
            if not isinstance(item, str | Path):
                raise ConfigurationError(
                    "usefile entries must be paths", config_key="usefile"
                )
        return tuple(value)
    raise ConfigurationError(
        f"usefile must be a path, a list of paths or a boolean, got {type(value).__name__}",
        config_key="usefile",
    )


@dataclass(frozen=True)
class Policy:
    """
    Password grading policy.

    Option names match the keys accepted by ``Policy.from_mapping``. The
    defaults require a 10 to 50 character password with two lowercase, two
    uppercase, one numeric and one special character, 30 bits of entropy and
    60 days of brute force survival, and look it up in the common password
    list.
    """

    minlen: int = 10
    maxlen: int = 50
    lower: int = 2
    upper: int = 2
    numeric: int = 1
    special: int = 1
    lookup: bool = True
    diminishing: bool = True
    entropy: float = 30
    brute: float = 60
    dataset: Dataset = Dataset.COMMONS
    usefile: UseFile = None
    identity: tuple[str, ...] = ()
    hashes_per_second: int = DEFAULT_HASHES_PER_SECOND
    max_variants: int = DEFAULT_MAX_VARIANTS
    identity_literal: bool = False

    def __post_init__(self) -> None:
        # Coerce loosely typed input before validating; the instance is frozen.
        if isinstance(self.dataset, str):
            try:
                object.__setattr__(self, "dataset", Dataset(self.dataset.lower()))
            except ValueError as e:
                raise ConfigurationError(
                    f"dataset must be one of commons, dictionary, both; got {self.dataset!r}",
                    config_key="dataset",
                    cause=e,
                ) from e
        object.__setattr__(self, "usefile", _coerce_usefile(self.usefile))
        if isinstance(self.identity, str):
            object.__setattr__(self, "identity", (self.identity,))
        else:
            object.__setattr__(self, "identity", tuple(self.identity or ()))
        if isinstance(self.hashes_per_second, float) and self.hashes_per_second.is_integer():
            object.__setattr__(self, "hashes_per_second", int(self.hashes_per_second))

        self.validate()

    def validate(self) -> None:
        """
        Validate policy values.

        Raises:
            ConfigurationError: If any option is out of range or mistyped
        """
        for name in ("minlen", "maxlen", "lower", "upper", "numeric", "special"):
            self._require_int(name, getattr(self, name))

        if self.maxlen < self.minlen:
            raise ConfigurationError(
                f"maxlen ({self.maxlen}) cannot be less than minlen ({self.minlen})",
                config_key="maxlen",
            )

        for name in ("entropy", "brute"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int | float):
                raise ConfigurationError(f"{name} must be a number", config_key=name)
            if value < 0:
                raise ConfigurationError(f"{name} must be >= 0", config_key=name)

        for name in ("lookup", "diminishing", "identity_literal"):
            if not isinstance(getattr(self, name), bool):
                raise ConfigurationError(f"{name} must be a boolean", config_key=name)

        if not isinstance(self.dataset, Dataset):
            raise ConfigurationError("dataset must be a Dataset", config_key="dataset")

        for token in self.identity:
            if not isinstance(token, str):
                raise ConfigurationError(
                    "identity tokens must be strings", config_key="identity"
                )

        self._require_int("hashes_per_second", self.hashes_per_second, minimum=1)
        self._require_int("max_variants", self.max_variants, minimum=1)

    @staticmethod
    def _require_int(name: str, value: Any, minimum: int = 0) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigurationError(f"{name} must be an integer", config_key=name)
        if value < minimum:
            raise ConfigurationError(f"{name} must be >= {minimum}", config_key=name)

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None = None) -> "Policy":
        """
        Build a policy from an option mapping.

        Missing options keep their defaults; unknown options are rejected.
        """
        if options is None:
            return cls()
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise ConfigurationError(
                f"Unknown policy option(s): {', '.join(unknown)}",
                config_key=unknown[0],
            )
        return cls(**dict(options))

    def replace(self, **changes: Any) -> "Policy":
        """Return a validated copy with ``changes`` applied."""
        return replace(self, **changes)

    @property
    def entropy_model(self) -> EntropyModel:
        return EntropyModel.DIMINISHING if self.diminishing else EntropyModel.FLAT

    def minimum_for(self, character_class: CharacterClass) -> int:
        """Configured minimum count for ``character_class``."""
        return getattr(self, character_class.value)

    def to_dict(self) -> dict[str, Any]:
        """Serialize policy (identity tokens are omitted)."""
        usefile = self.usefile
        if isinstance(usefile, tuple):
            usefile = [str(path) for path in usefile]
        elif isinstance(usefile, Path):
            usefile = str(usefile)
        return {
            "minlen": self.minlen,
            "maxlen": self.maxlen,
            "lower": self.lower,
            "upper": self.upper,
            "numeric": self.numeric,
            "special": self.special,
            "lookup": self.lookup,
            "diminishing": self.diminishing,
            "entropy": self.entropy,
            "brute": self.brute,
            "dataset": self.dataset.value,
            "usefile": usefile,
            "hashes_per_second": self.hashes_per_second,
            "max_variants": self.max_variants,
            "identity_literal": self.identity_literal,
        }


@dataclass(frozen=True)
class DatabaseConfig:
    """
    Connection settings for the database-backed dictionary lookup.

    The lookup database holds two single-column tables, ``commons`` and
    ``words``, each with a ``text`` column.
    """

    url: str | None = None
    echo: bool = False
    pool_size: int = 5
    pool_pre_ping: bool = True

    def __post_init__(self) -> None:
        if self.pool_size < 1:
            raise ConfigurationError("pool_size must be >= 1", config_key="pool_size")

    @property
    def is_configured(self) -> bool:
        return bool(self.url)

    @property
    def is_sqlite(self) -> bool:
        return bool(self.url) and self.url.startswith("sqlite")

    @classmethod
    def from_environment(cls, environ: Mapping[str, str] | None = None) -> "DatabaseConfig":
        """
        Read settings from ``BRUTUS_DATABASE_URL``, ``BRUTUS_DB_ECHO``,
        ``BRUTUS_DB_POOL_SIZE`` and ``BRUTUS_DB_POOL_PRE_PING``.
        """
        loader = EnvironmentLoader(environ)
        return cls(
            url=loader.get_string("DATABASE_URL"),
            echo=loader.get_bool("DB_ECHO", default=False),
            pool_size=loader.get_int("DB_POOL_SIZE", default=5, min_value=1),
            pool_pre_ping=loader.get_bool("DB_POOL_PRE_PING", default=True),
        )

    def safe_url(self) -> str | None:
        """URL with any password component masked, for logging."""
        if not self.url:
            return None
        scheme, sep, rest = self.url.partition("://")
        if not sep or "@" not in rest:
            return self.url
        credentials, _, host = rest.rpartition("@")
        user = credentials.split(":", 1)[0]
        return f"{scheme}://{user}:***@{host}"
