"""Validation and error handling for common database loading."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Optional


class DatabaseLoadError(Exception):
    """
    Base exception for database load failures.

    Carries the document, section and key the failure relates to so callers
    can point users at the offending line.
    """

    def __init__(
        self,
        message: str,
        document: Optional[str] = None,
        section: Optional[str] = None,
        key: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.document = document
        self.section = section
        self.key = key

    @property
    def location(self) -> str:
        parts = []
        if self.document:
            parts.append(f"document '{self.document}'")
        if self.section:
            parts.append(f"section [{self.section}]")
        if self.key:
            parts.append(f"key '{self.key}'")
        return ", ".join(parts)

    def __str__(self) -> str:
        location = self.location
        return f"{self.message} ({location})" if location else self.message


class MissingDocumentError(DatabaseLoadError):
    """Raised when a required settings document cannot be found."""
    pass


class MalformedValueError(DatabaseLoadError):
    """Raised when a value cannot be parsed into the expected type."""
    pass


class MissingKeyError(MalformedValueError):
    """Raised when a required section or key is absent."""
    pass


class InvalidTemplateError(MalformedValueError):
    """Raised when a name template has malformed placeholders."""
    pass


class InvalidIntervalError(DatabaseLoadError):
    """Raised when an interval's minimum exceeds its maximum."""
    pass


class MissingCategoryMemberError(DatabaseLoadError):
    """Raised when a category table has no value for some enumeration member."""
    pass


class AdvisoryAssetMissing(UserWarning):
    """Category of non-fatal reports about referenced assets missing on disk."""
    pass


@dataclass
class ValidationResult:
    """Result of a validation check."""
    valid: bool
    message: str = ""

    def raise_if_invalid(
        self,
        error_class: type = MalformedValueError,
        document: Optional[str] = None,
        section: Optional[str] = None,
        key: Optional[str] = None,
    ):
        """Raise an error if validation failed."""
        if not self.valid:
            raise error_class(self.message, document=document, section=section, key=key)


_MISSION_PART_PLACEHOLDER = re.compile(r"\$P([0-9]+)\$")
_WAYPOINT_NUMBER_PLACEHOLDER = re.compile(r"\$0+\$")


def validate_mission_name_template(template: str, part_count: int) -> ValidationResult:
    """
    Check that a mission name template only uses $P1$..$Pk$ placeholders.

    The template is not expanded. At least one placeholder must be present
    and no stray '$' may remain once the placeholders are removed.
    """
    if not template.strip():
        return ValidationResult(False, "Mission name template is empty")

    placeholders = _MISSION_PART_PLACEHOLDER.findall(template)
    if not placeholders:
        return ValidationResult(
            False,
            f"Mission name template '{template}' has no $P1$..$P{part_count}$ placeholder",
        )

    # Placeholders are matched literally, so $P01$ is not $P1$
    allowed = {str(i) for i in range(1, part_count + 1)}
    for number in placeholders:
        if number not in allowed:
            return ValidationResult(
                False,
                f"Mission name template placeholder $P{number}$ is out of range "
                f"(expected $P1$..$P{part_count}$)",
            )

    if "$" in _MISSION_PART_PLACEHOLDER.sub("", template):
        return ValidationResult(
            False, f"Mission name template '{template}' contains a malformed placeholder"
        )

    return ValidationResult(True)


def validate_waypoint_template(template: str) -> ValidationResult:
    """
    Check that a navigation waypoint template holds a number sentinel.

    Sentinels are $0$, $00$, $000$... (zero-padding width of the waypoint
    number). Any other use of '$' is rejected.
    """
    if not _WAYPOINT_NUMBER_PLACEHOLDER.search(template):
        return ValidationResult(
            False, f"Waypoint template '{template}' has no $0$ number placeholder"
        )
    if "$" in _WAYPOINT_NUMBER_PLACEHOLDER.sub("", template):
        return ValidationResult(
            False, f"Waypoint template '{template}' contains a malformed placeholder"
        )
    return ValidationResult(True)


def validate_non_empty(value: str, what: str) -> ValidationResult:
    if not value.strip():
        return ValidationResult(False, f"{what} is empty")
    return ValidationResult(True)


def validate_non_empty_sequence(values: Iterable[str], what: str) -> ValidationResult:
    if not list(values):
        return ValidationResult(False, f"{what} has no entries")
    return ValidationResult(True)
