"""Tests for the alias catalog."""

import pytest

from category_sorter.core.aliases import CATEGORY_ALIASES, DEFAULT_ALIASES, AliasCatalog
from category_sorter.core.categories import CANONICAL_NAMES


class TestAliasLookup:
    """Test resolving folder names."""

    @pytest.mark.parametrize(
        "folder, category",
        [
            ("pics", "Image Files"),
            ("Photos", "Image Files"),
            ("CAMERA ROLL", "Image Files"),
            ("music", "Audio Files"),
            ("Movies", "Video Files"),
            ("pdf", "PDF Files"),
            ("Spreadsheets", "Excel Files"),
            ("c++", "C++ Files"),
            ("Backups", "Archive Files"),
        ],
    )
    def test_known_aliases(self, folder, category):
        assert DEFAULT_ALIASES.lookup(folder) == category
        assert DEFAULT_ALIASES.is_alias(folder)

    def test_unknown_folder(self):
        assert DEFAULT_ALIASES.lookup("holiday 2019") is None
        assert not DEFAULT_ALIASES.is_alias("holiday 2019")

    def test_canonical_name_is_not_an_alias(self):
        assert DEFAULT_ALIASES.lookup("Image Files") is None

    def test_shared_recordings_alias_belongs_to_video(self):
        assert DEFAULT_ALIASES.lookup("recordings") == "Video Files"


class TestAliasTableInvariants:
    """Test the curated alias table."""

    def test_no_alias_is_shared_between_categories(self):
        owners = {}
        for category, aliases in CATEGORY_ALIASES.items():
            for alias in aliases:
                assert alias not in owners, (
                    f"{alias!r} listed for {owners.get(alias)!r} and {category!r}"
                )
                owners[alias] = category

    def test_aliases_point_at_canonical_categories(self):
        assert set(CATEGORY_ALIASES) <= CANONICAL_NAMES

    def test_aliases_are_lowercase(self):
        for aliases in CATEGORY_ALIASES.values():
            for alias in aliases:
                assert alias == alias.lower()

    def test_lookup_is_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_ALIASES.alias_lookup["stuff"] = "Image Files"


class TestCustomAliasCatalog:
    """Test alias catalogs built from other tables."""

    def test_names_are_lowercased(self):
        catalog = AliasCatalog({"Image Files": ["Snaps"]})

        assert catalog.lookup("snaps") == "Image Files"
        assert catalog.lookup("SNAPS") == "Image Files"
        assert catalog.aliases_for("Image Files") == frozenset({"snaps"})
        assert catalog.aliases_for("PDF Files") == frozenset()
        assert len(catalog) == 1

    def test_later_insertion_wins(self):
        catalog = AliasCatalog({"Video Files": ["clips"], "Audio Files": ["clips"]})
        assert catalog.lookup("clips") == "Audio Files"
