"""
Base Business Rule

Foundation for the grading rules: the violation value object every rule
reports, and the abstract rule interface.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..enums import MessageKey
from ..messages import MessageCatalog

if TYPE_CHECKING:
    from brutus.core.config import Policy


@dataclass(frozen=True)
class PolicyViolation:
    """A single failed check, with its rendered message."""

    rule: MessageKey
    message: str
    expected_value: Any = None
    current_value: Any = None

    @property
    def rule_name(self) -> str:
        return self.rule.value

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "rule_name": self.rule_name,
            "message": self.message,
            "expected_value": self.expected_value,
            "current_value": self.current_value,
        }

    def __str__(self) -> str:
        return self.message


class BusinessRule(ABC):
    """Base class for grading rules."""

    def __init__(self, messages: MessageCatalog | None = None, rule_name: str | None = None):
        self.rule_name = rule_name or self.__class__.__name__
        self.messages = messages or MessageCatalog()

    @abstractmethod
    def validate(self, password: str, policy: "Policy") -> list[PolicyViolation]:
        """Validate the rule and return any violations."""

    def is_compliant(self, password: str, policy: "Policy") -> bool:
        """Check if the password passes this rule."""
        return not self.validate(password, policy)

    def create_violation(
        self,
        rule: MessageKey,
        expected_value: Any = None,
        current_value: Any = None,
    ) -> PolicyViolation:
        """Create a violation with its message rendered from the catalog."""
        message = self.messages.render(
            rule, required=expected_value, current=current_value
        )
        return PolicyViolation(
            rule=rule,
            message=message,
            expected_value=expected_value,
            current_value=current_value,
        )
