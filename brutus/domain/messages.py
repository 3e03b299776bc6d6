"""
Violation Message Catalog

Human-readable templates for every violation the engine can report. A caller
may translate the catalog by supplying a complete replacement; partial
overrides are rejected so that no violation ever renders in a mixed language.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from brutus.core.errors import ConfigurationError

from .enums import MessageKey

DEFAULT_MESSAGES: Mapping[MessageKey, str] = MappingProxyType({
    MessageKey.MINLEN: "Password cannot be less than {required} characters",
    MessageKey.MAXLEN: "Password cannot be greater than {required} characters",
    MessageKey.LOWER: "Password must contain at least {required} lowercase letter{plural}",
    MessageKey.UPPER: "Password must contain at least {required} uppercase letter{plural}",
    MessageKey.NUMERIC: "Password must contain at least {required} number{plural}",
    MessageKey.SPECIAL: "Password must contain at least {required} special character{plural}",
    MessageKey.IDENTITY: "Password contains one or more personally identifiable tokens",
    MessageKey.COMMONS: "Password was found in the list of most common passwords",
    MessageKey.DICTIONARY: "Password was found in the list of dictionary terms",
    MessageKey.ENTROPY: "Password must have at least {required} bits of entropy; Currently at {current}",
    MessageKey.BRUTE: "Password must survive {required} days of brute force attempts; Currently at {current}",
})


class MessageCatalog:
    """Immutable set of the violation message templates."""

    def __init__(self, overrides: Mapping[str | MessageKey, str] | None = None) -> None:
        if overrides is None:
            self._templates = DEFAULT_MESSAGES
            return

        expected = len(MessageKey)
        if len(overrides) != expected:
            raise ConfigurationError(
                f"Message catalog requires {expected} entries; {len(overrides)} supplied.",
                config_key="messages",
            )

        templates: dict[MessageKey, str] = {}
        for key, template in overrides.items():
            try:
                message_key = key if isinstance(key, MessageKey) else MessageKey(key)
            except ValueError as e:
                raise ConfigurationError(
                    f"Unknown message key: {key!r}", config_key="messages", cause=e
                ) from e
            if not isinstance(template, str):
                raise ConfigurationError(
                    f"Message template for {message_key.value!r} must be a string",
                    config_key="messages",
                )
            try:
                template.format(required=1, current=0, plural="")
            except (KeyError, IndexError, ValueError) as e:
                raise ConfigurationError(
                    f"Message template for {message_key.value!r} is malformed: {e!r}",
                    config_key="messages",
                    cause=e,
                ) from e
            templates[message_key] = template

        if len(templates) != expected:
            raise ConfigurationError(
                "Message catalog contains duplicate keys", config_key="messages"
            )
        self._templates = MappingProxyType(templates)

    def template(self, key: MessageKey) -> str:
        return self._templates[key]

    def render(self, key: MessageKey, **values: Any) -> str:
        """Format the template for ``key``; ``plural`` is derived from ``required``."""
        required = values.get("required")
        if "plural" not in values:
            values["plural"] = "s" if isinstance(required, int | float) and required > 1 else ""
        return self._templates[key].format(**values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MessageCatalog):
            return NotImplemented
        return dict(self._templates) == dict(other._templates)

    def __hash__(self) -> int:
        return hash(tuple(sorted((k.value, v) for k, v in self._templates.items())))
