"""
Specification Pattern Implementation

A specification is one query criterion that can be evaluated two ways: against
an in-memory object (is_satisfied_by) or rendered as a SQLAlchemy filter
(to_sql_filter). Specifications compose with &, | and ~, which is how optional
search filters are combined into a single query.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from sqlalchemy import and_, or_, not_, true
from sqlalchemy.sql.elements import ColumnElement


T = TypeVar('T')


class Specification(ABC, Generic[T]):
    """Abstract base class for specifications."""

    @abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool:
        """
        Check if a candidate object satisfies this specification.

        Args:
            candidate: Object to check

        Returns:
            True if candidate satisfies specification
        """

    @abstractmethod
    def to_sql_filter(self) -> ColumnElement[bool]:
        """Convert specification to a SQLAlchemy filter expression."""

    def __and__(self, other: "Specification[T]") -> "Specification[T]":
        # MatchAll is the identity for AND; skip it to keep generated SQL flat
        if isinstance(other, MatchAllSpecification):
            return self
        if isinstance(self, MatchAllSpecification):
            return other
        return AndSpecification(self, other)

    def __or__(self, other: "Specification[T]") -> "Specification[T]":
        return OrSpecification(self, other)

    def __invert__(self) -> "Specification[T]":
        return NotSpecification(self)


class MatchAllSpecification(Specification[T]):
    """Specification satisfied by every candidate (an absent filter)."""

    def is_satisfied_by(self, candidate: T) -> bool:
        return True

    def to_sql_filter(self) -> ColumnElement[bool]:
        return true()


class AndSpecification(Specification[T]):
    """Both specifications must hold."""

    def __init__(self, left: Specification[T], right: Specification[T]):
        self.left = left
        self.right = right

    def is_satisfied_by(self, candidate: T) -> bool:
        return self.left.is_satisfied_by(candidate) and self.right.is_satisfied_by(candidate)

    def to_sql_filter(self) -> ColumnElement[bool]:
        return and_(self.left.to_sql_filter(), self.right.to_sql_filter())


class OrSpecification(Specification[T]):
    """Either specification must hold."""

    def __init__(self, left: Specification[T], right: Specification[T]):
        self.left = left
        self.right = right

    def is_satisfied_by(self, candidate: T) -> bool:
        return self.left.is_satisfied_by(candidate) or self.right.is_satisfied_by(candidate)

    def to_sql_filter(self) -> ColumnElement[bool]:
        return or_(self.left.to_sql_filter(), self.right.to_sql_filter())


class NotSpecification(Specification[T]):
    """Negation of another specification."""

    def __init__(self, spec: Specification[T]):
        self.spec = spec

    def is_satisfied_by(self, candidate: T) -> bool:
        return not self.spec.is_satisfied_by(candidate)

    def to_sql_filter(self) -> ColumnElement[bool]:
        return not_(self.spec.to_sql_filter())
