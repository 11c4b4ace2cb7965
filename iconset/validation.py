"""
Validation for Icon Set Documents and Entries

Two kinds of checks:

- validate_document: structural validation of a JSON document against the
  bundled JSON schema, done before loading
- check_references: integrity report for aliases and variations of a loaded
  icon set (missing parents, reference loops, chains that are too long)

Neither check modifies data.
"""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, List

import jsonschema

from .config import MAX_ITERATION, load_schema
from .entry import AliasEntry, IconEntry, IconSetError, VariationEntry, unknown_entry

if TYPE_CHECKING:
    from .icon_set import IconSet

logger = logging.getLogger(__name__)


class DocumentValidationError(IconSetError):
    """Raised when icon set document does not match expected structure"""

    def __init__(self, message: str, errors: List[str]):
        super().__init__(message)
        self.errors = errors


@dataclass
class ValidationResult:
    """
    Outcome of a document or reference check.

    Messages in errors mark the checked data as unusable, warnings are
    informational only.
    """
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, message: str) -> None:
        """Record problem, result is no longer valid"""
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str) -> None:
        self.warnings.append(message)

    def merge(self, other: "ValidationResult") -> None:
        """Append messages of other result"""
        self.errors += other.errors
        self.warnings += other.warnings
        self.is_valid = self.is_valid and other.is_valid


def validate_document(data: Any) -> ValidationResult:
    """
    Validate icon set document against JSON schema.

    Args:
        data: Parsed JSON document

    Returns:
        ValidationResult with one error per schema violation

    Example:
        >>> validate_document({"prefix": "test", "icons": {}}).is_valid
        True
        >>> validate_document({"icons": {}}).is_valid
        False
    """
    result = ValidationResult(is_valid=True)

    validator = jsonschema.Draft7Validator(load_schema())
    for error in sorted(validator.iter_errors(data), key=lambda e: [str(part) for part in e.absolute_path]):
        path = "/".join(str(part) for part in error.absolute_path)
        if path:
            result.add_error(f"{path}: {error.message}")
        else:
            result.add_error(error.message)

    return result


def check_references(icon_set: "IconSet") -> ValidationResult:
    """
    Check integrity of aliases and variations in icon set.

    Reports aliases with missing parents, reference loops and chains that
    exceed MAX_ITERATION. Such aliases cannot be resolved and are dropped
    when icon set is exported with validation enabled.

    Args:
        icon_set: Icon set to check

    Returns:
        ValidationResult with detailed error messages
    """
    result = ValidationResult(is_valid=True)
    entries = icon_set.entries

    for name, item in entries.items():
        if isinstance(item, IconEntry):
            if item.chars and item.props.get("hidden"):
                result.add_warning(f"Hidden icon '{name}' has characters: {sorted(item.chars)}")
            continue
        if not isinstance(item, (AliasEntry, VariationEntry)):
            unknown_entry(item)

        path = [name]
        current = item
        while True:
            parent = current.parent
            if parent in path:
                result.add_error(
                    f"Circular reference detected: {' -> '.join(path + [parent])}"
                )
                break
            path.append(parent)
            if len(path) - 1 > MAX_ITERATION:
                result.add_error(
                    f"Alias '{name}' exceeds maximum depth of {MAX_ITERATION}: {' -> '.join(path)}"
                )
                break
            parent_item = entries.get(parent)
            if parent_item is None:
                result.add_error(f"Alias '{name}' references missing entry '{parent}'")
                break
            if isinstance(parent_item, IconEntry):
                break
            current = parent_item

    if not result.is_valid:
        logger.debug(f"Icon set '{icon_set.prefix}' has {len(result.errors)} broken references")
    return result
