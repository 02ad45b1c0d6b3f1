"""Error types raised by the domain and service layers."""

from dataclasses import dataclass


class BalanceLifeError(Exception):
    """Base class for application errors."""


@dataclass(frozen=True)
class Violation:
    """A single failed input check."""

    field: str
    constraint: str
    value: object = None

    def describe(self) -> str:
        return f"{self.field}: {self.constraint}"


class ValidationError(BalanceLifeError):
    """Input failed an enum, range or format check."""

    def __init__(self, violation: Violation) -> None:
        super().__init__(violation.describe())
        self.violation = violation

    @property
    def field(self) -> str:
        return self.violation.field

    @property
    def constraint(self) -> str:
        return self.violation.constraint


class ReferenceNotFound(BalanceLifeError):
    """A referenced user or package id does not resolve."""

    def __init__(self, kind: str, reference_id: str) -> None:
        super().__init__(f"{kind} not found: {reference_id}")
        self.kind = kind
        self.reference_id = reference_id


class DataIntegrityError(BalanceLifeError):
    """Seeded reference data makes a calculation undefined."""


class PersistenceError(BalanceLifeError):
    """The storage backend failed to complete an operation."""
