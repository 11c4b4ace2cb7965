"""
Unit tests for document validation and reference integrity checks.
"""

from iconset import (
    MAX_ITERATION,
    AliasEntry,
    ValidationResult,
    blank_icon_set,
    check_references,
    filter_props,
    validate_document,
)
from iconset.props import DEFAULT_COMMON_PROPS, DEFAULT_ICON_DIMENSIONS


class TestValidationResult:
    """Test ValidationResult container."""

    def test_add_error(self):
        """Test that errors make result invalid."""
        result = ValidationResult(is_valid=True)
        result.add_warning("warning")
        assert result.is_valid is True

        result.add_error("error")
        assert result.is_valid is False
        assert result.errors == ["error"]
        assert result.warnings == ["warning"]

    def test_merge(self):
        """Test merging results."""
        result = ValidationResult(is_valid=True)
        other = ValidationResult(is_valid=True)
        other.add_error("error")

        result.merge(other)

        assert result.is_valid is False
        assert result.errors == ["error"]


class TestValidateDocument:
    """Test validate_document()."""

    def test_valid(self, sample_document):
        """Test that sample document is valid."""
        result = validate_document(sample_document)

        assert result.is_valid is True
        assert result.errors == []

    def test_not_an_object(self):
        """Test that non-object documents are rejected."""
        assert validate_document([]).is_valid is False

    def test_error_paths(self):
        """Test that errors include path to invalid value."""
        result = validate_document({
            "prefix": "test",
            "icons": {"bad": {"body": 5}},
        })

        assert result.is_valid is False
        assert result.errors[0].startswith("icons/bad/body:")

    def test_invalid_categories(self):
        """Test that categories must be lists of names."""
        result = validate_document({
            "prefix": "test",
            "icons": {},
            "categories": {"Arrows": "arrow"},
        })

        assert result.is_valid is False


class TestCheckReferences:
    """Test check_references()."""

    def test_sample(self, icon_set):
        """Test that broken alias in sample icon set is reported."""
        result = check_references(icon_set)

        assert result.is_valid is False
        assert result.errors == ["Alias 'broken' references missing entry 'missing'"]

    def test_valid(self, simple_set):
        """Test icon set without problems."""
        simple_set.set_alias("alias", "base")

        assert check_references(simple_set).is_valid is True

    def test_loop(self, simple_set):
        """Test that loops are reported with path."""
        simple_set.entries["a"] = AliasEntry(parent="b")
        simple_set.entries["b"] = AliasEntry(parent="a")

        result = check_references(simple_set)

        assert "Circular reference detected: a -> b -> a" in result.errors
        assert "Circular reference detected: b -> a -> b" in result.errors

    def test_too_deep(self):
        """Test that chains longer than limit are reported."""
        icon_set = blank_icon_set("chain")
        icon_set.set_icon("base", {"body": "<g/>"})
        parent = "base"
        for index in range(MAX_ITERATION + 1):
            icon_set.set_alias(f"a{index}", parent)
            parent = f"a{index}"

        result = check_references(icon_set)

        assert len(result.errors) == 1
        assert result.errors[0].startswith(f"Alias 'a{MAX_ITERATION}' exceeds maximum depth")

    def test_hidden_icon_with_characters(self, icon_set):
        """Test warning for characters of hidden icons."""
        icon_set.toggle_character("secret", "e050", True)

        result = check_references(icon_set)

        assert "Hidden icon 'secret' has characters: ['e050']" in result.warnings


class TestFilterProps:
    """Test filter_props()."""

    def test_compare_values(self):
        """Test that default values are removed."""
        data = {"body": "<g/>", "width": 16, "height": 24, "hFlip": False, "hidden": True}

        assert filter_props(data, DEFAULT_COMMON_PROPS, True) == {"height": 24, "hidden": True}

    def test_keep_values(self):
        """Test that default values are kept without comparison."""
        data = {"parent": "home", "rotate": 0, "vFlip": True}

        assert filter_props(data, DEFAULT_COMMON_PROPS, False) == {"rotate": 0, "vFlip": True}

    def test_wrong_types(self):
        """Test that values with wrong type are skipped."""
        data = {"width": True, "height": "24", "left": 1.5}

        assert filter_props(data, DEFAULT_ICON_DIMENSIONS, False) == {"left": 1.5}
