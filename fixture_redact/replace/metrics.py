"""Metrics collection for recording redaction."""

from dataclasses import dataclass, field
from typing import ClassVar


@dataclass
class RedactionMetrics:
    """Counters for redaction passes.

    Attributes:
        passes_total: Entry point calls that ran, by kind.
        skipped_empty_total: Entry point calls skipped for an empty value.
        leaves_replaced_total: String leaves changed, by kind.
        sensitive_values_found_total: Values still present after redaction.
    """

    passes_total: dict[str, int] = field(default_factory=dict)
    skipped_empty_total: int = 0
    leaves_replaced_total: dict[str, int] = field(default_factory=dict)
    sensitive_values_found_total: int = 0

    _instance: ClassVar["RedactionMetrics | None"] = None

    @classmethod
    def get_instance(cls) -> "RedactionMetrics":
        """Get singleton metrics instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset metrics (primarily for testing)."""
        cls._instance = None

    def record_pass(self, kind: str, leaves_replaced: int) -> None:
        """Record a completed replacement pass.

        Args:
            kind: credential, parameter or input.
            leaves_replaced: Number of string leaves changed.
        """
        self.passes_total[kind] = self.passes_total.get(kind, 0) + 1
        self.leaves_replaced_total[kind] = (
            self.leaves_replaced_total.get(kind, 0) + leaves_replaced
        )

    def record_skipped_empty(self) -> None:
        """Record a call skipped because the value was empty."""
        self.skipped_empty_total += 1

    def record_sensitive_value_found(self) -> None:
        """Record a configured value found in recorded traffic."""
        self.sensitive_values_found_total += 1

    def to_dict(self) -> dict[str, int | dict[str, int]]:
        """Convert metrics to dictionary.

        Returns:
            Dictionary of metric name to value.
        """
        return {
            "passes_total": self.passes_total.copy(),
            "skipped_empty_total": self.skipped_empty_total,
            "leaves_replaced_total": self.leaves_replaced_total.copy(),
            "sensitive_values_found_total": self.sensitive_values_found_total,
        }
