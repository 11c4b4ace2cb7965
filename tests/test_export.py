"""
Unit tests for exporting icon sets and document post-processing.
"""

from iconset import IconSet, convert_info, minify_icon_set


class TestExport:
    """Test exporting icon set to document."""

    def test_export_sample(self, icon_set):
        """Test complete export of sample icon set."""
        assert icon_set.export() == {
            "prefix": "demo",
            "info": {
                "name": "Demo Icons",
                "author": {"name": "Jane Doe"},
                "license": {"title": "MIT"},
                "total": 8,
            },
            "width": 24,
            "height": 24,
            "icons": {
                "arrow": {"body": '<path d="M2 12h20"/>'},
                "home": {"body": '<path d="M0 0h24v24H0z"/>'},
                "home-outline": {"body": '<path d="M0 0h20v20z"/>'},
                "mdi-home": {"body": '<path d="M1 1h22v22H1z"/>'},
                "secret": {"body": '<circle r="4"/>', "hidden": True},
                "small": {"body": '<path d="M0 0h16v16z"/>', "width": 16, "height": 16},
            },
            "aliases": {
                "arrow-down": {"parent": "arrow", "rotate": 1},
                "arrow-flipped": {"parent": "arrow", "hFlip": True},
                "arrow-left": {"parent": "arrow-down", "rotate": 1},
                "house": {"parent": "home"},
            },
            "chars": {"e001": "home", "e002": "house"},
            "categories": {
                "Arrows": ["arrow"],
                "Buildings": ["home", "mdi-home"],
            },
            "prefixes": {"mdi": "Material"},
            "suffixes": {"outline": "Outline", "": "Solid"},
        }

    def test_icons_are_sorted(self, icon_set):
        """Test that icons and aliases are sorted by name."""
        icon_set.set_icon("aaa", {"body": "<g/>"})
        result = icon_set.export()

        assert list(result["icons"]) == sorted(result["icons"])
        assert list(result["icons"])[0] == "aaa"
        assert list(result["aliases"]) == sorted(result["aliases"])

    def test_export_without_validation(self, icon_set):
        """Test that broken aliases are kept when validation is disabled."""
        result = icon_set.export(False)

        assert result["aliases"]["broken"] == {"parent": "missing"}

    def test_chars_of_dropped_aliases(self, icon_set):
        """Test that characters of dropped aliases are not exported."""
        icon_set.toggle_character("broken", "e100", True)

        assert "e100" not in icon_set.export()["chars"]
        assert icon_set.export(False)["chars"]["e100"] == "broken"

    def test_info_total_is_updated(self, icon_set):
        """Test that info total is recalculated and info is copied."""
        icon_set.remove("arrow")
        result = icon_set.export()

        assert result["info"]["total"] == 4
        result["info"]["name"] = "Changed"
        assert icon_set.info["name"] == "Demo Icons"

    def test_empty_categories_are_removed(self, icon_set):
        """Test that empty categories are not exported and are removed."""
        icon_set.toggle_category("arrow", "Arrows", False)
        result = icon_set.export()

        assert "Arrows" not in result["categories"]
        assert icon_set.find_category("Arrows", False) is None

    def test_empty_themes_are_not_exported(self, icon_set):
        """Test that themes without icons are skipped."""
        icon_set.prefixes["fa"] = "Font Awesome"
        result = icon_set.export()

        assert result["prefixes"] == {"mdi": "Material"}

    def test_minimal_export(self, simple_set):
        """Test exporting icon set without optional data."""
        assert simple_set.export() == {
            "prefix": "simple",
            "icons": {
                "base": {"body": '<path d="M0 0h24v24z"/>', "width": 24, "height": 24},
            },
        }

    def test_round_trip(self):
        """Test that exported icon-only set loads to same entries."""
        original = IconSet({
            "prefix": "trip",
            "height": 24,
            "icons": {
                "one": {"body": '<path d="M1 1"/>', "width": 24},
                "two": {"body": '<path d="M2 2"/>', "width": 24, "rotate": 1},
                "three": {"body": '<path d="M3 3"/>', "width": 32, "hFlip": True},
                "four": {"body": '<path d="M4 4"/>', "height": 16},
            },
        })

        reloaded = IconSet(original.export())

        assert sorted(reloaded.entries) == sorted(original.entries)
        for name, item in original.entries.items():
            assert reloaded.entries[name].body == item.body
            assert reloaded.entries[name].props == item.props


class TestMinifyIconSet:
    """Test minify_icon_set()."""

    def test_common_value_moved_to_root(self):
        """Test that most common dimension becomes root value."""
        data = {
            "prefix": "test",
            "icons": {
                "a": {"body": "", "width": 24},
                "b": {"body": "", "width": 24},
                "c": {"body": ""},
            },
        }

        minify_icon_set(data)

        assert data["width"] == 24
        assert data["icons"] == {
            "a": {"body": ""},
            "b": {"body": ""},
            "c": {"body": "", "width": 16},
        }

    def test_single_value_not_moved(self):
        """Test that value used by one icon stays in icon."""
        data = {
            "prefix": "test",
            "icons": {
                "a": {"body": "", "height": 20},
                "b": {"body": ""},
            },
        }

        minify_icon_set(data)

        assert "height" not in data
        assert data["icons"]["a"] == {"body": "", "height": 20}

    def test_default_root_values_removed(self):
        """Test that root values equal to defaults are removed."""
        data = {"prefix": "test", "left": 0, "width": 16, "icons": {}}

        minify_icon_set(data)

        assert data == {"prefix": "test", "icons": {}}

    def test_existing_root_value(self):
        """Test that icons without dimension use existing root value."""
        data = {
            "prefix": "test",
            "width": 20,
            "icons": {
                "a": {"body": ""},
                "b": {"body": "", "width": 24},
            },
        }

        minify_icon_set(data)

        assert data["width"] == 20
        assert data["icons"] == {
            "a": {"body": ""},
            "b": {"body": "", "width": 24},
        }


class TestConvertInfo:
    """Test convert_info()."""

    def test_legacy_format(self):
        """Test converting legacy info block."""
        info = convert_info({
            "title": "Legacy",
            "author": "John",
            "url": "https://example.com",
            "license": "Apache 2.0",
            "licenseID": "Apache-2.0",
            "samples": ["home", 5],
            "height": 24,
        })

        assert info == {
            "name": "Legacy",
            "author": {"name": "John", "url": "https://example.com"},
            "license": {"title": "Apache 2.0", "spdx": "Apache-2.0"},
            "samples": ["home"],
            "height": 24,
        }

    def test_current_format(self):
        """Test that current format is kept."""
        source = {
            "name": "Current",
            "total": 10,
            "version": "1.0.0",
            "author": {"name": "Jane", "url": "https://example.org"},
            "license": {"title": "MIT", "spdx": "MIT"},
            "category": "General",
            "palette": False,
        }

        assert convert_info(source) == source

    def test_missing_name(self):
        """Test that info without name is ignored."""
        assert convert_info({"author": "John"}) is None
        assert convert_info("invalid") is None
