"""
Tests for the filter catalog.
"""

import pytest

from instafilter.core import FilterCategory, SkipReason
from instafilter.processing import (
    CATALOG_SOURCES,
    FilterCatalog,
    display_sort_key,
)

from .conftest import FakeEngine


class TestCatalogBuild:
    """Test building the catalog against an engine."""

    def test_only_instantiable_image_filters_included(self, catalog):
        assert set(d.identifier for d in catalog) == {
            "CISepiaTone",
            "CIGaussianBlur",
            "CITwirlDistortion",
            "CIColorControls",
            "CIColorMonochrome",
            "CIColorInvert",
        }

    def test_skip_reasons(self, catalog):
        reasons = {s.identifier: s.reason for s in catalog.skipped}
        assert reasons == {
            "CIRandomGenerator": SkipReason.NO_IMAGE_INPUT,
            "CIMissingFilter": SkipReason.UNSUPPORTED_IDENTIFIER,
        }

    def test_identifiers_unique(self, fake_engine):
        sources = [("CISepiaTone", FilterCategory.COLOR)] * 3 + [("CIColorInvert", FilterCategory.COLOR)]
        built = FilterCatalog.build(fake_engine, sources=sources)
        identifiers = [d.identifier for d in built]
        assert len(identifiers) == len(set(identifiers)) == 2

    def test_sorted_by_display_name(self, catalog):
        keys = [display_sort_key(d.display_name) for d in catalog]
        assert keys == sorted(keys)

    def test_display_names_translated(self, catalog):
        assert catalog.get("CISepiaTone").display_name == "Сепия"
        assert catalog.get("CITwirlDistortion").display_name == "Завихрение"

    def test_parameters_resolved(self, catalog):
        blur = catalog.get("CIGaussianBlur")
        assert [p.key for p in blur.parameters] == ["inputRadius"]
        assert blur.parameters[0].upper == 50.0

        twirl = catalog.get("CITwirlDistortion")
        assert [p.key for p in twirl.parameters] == ["inputRadius", "inputCenter", "inputAngle"]
        assert twirl.parameter("inputRadius").upper == 200.0

    def test_filter_without_parameters(self, catalog):
        assert catalog.get("CIColorInvert").parameters == ()

    def test_category_kept(self, catalog):
        assert catalog.get("CIGaussianBlur").category is FilterCategory.BLUR

    def test_live_handle_retained(self, catalog, fake_engine):
        assert catalog.handle("CISepiaTone") is fake_engine.handles["CISepiaTone"]

    def test_custom_sort_key(self, fake_engine):
        built = FilterCatalog.build(
            fake_engine,
            sources=[("CISepiaTone", FilterCategory.COLOR), ("CIColorInvert", FilterCategory.COLOR)],
            sort_key=lambda name: -len(name),
        )
        names = [d.display_name for d in built]
        assert names == sorted(names, key=len, reverse=True)

    def test_empty_engine(self):
        built = FilterCatalog.build(FakeEngine({}))
        assert len(built) == 0
        assert len(built.skipped) == len(CATALOG_SOURCES)


class TestCatalogLookup:
    """Test read access on a built catalog."""

    def test_get_unknown(self, catalog):
        assert catalog.get("CINope") is None
        assert catalog.handle("CINope") is None

    def test_contains(self, catalog):
        assert "CISepiaTone" in catalog
        assert "CIRandomGenerator" not in catalog

    def test_len(self, catalog):
        assert len(catalog) == 6

    def test_by_category(self, catalog):
        grouped = catalog.by_category()
        assert list(grouped) == [FilterCategory.COLOR, FilterCategory.DISTORTION, FilterCategory.BLUR]
        assert len(grouped[FilterCategory.COLOR]) == 4

    def test_descriptor_equality_by_identifier(self, catalog, fake_engine):
        rebuilt = FilterCatalog.build(fake_engine, sources=[("CISepiaTone", FilterCategory.OTHER)])
        assert rebuilt.get("CISepiaTone") == catalog.get("CISepiaTone")
        assert hash(rebuilt.get("CISepiaTone")) == hash(catalog.get("CISepiaTone"))

    def test_catalog_is_immutable(self, catalog):
        with pytest.raises(AttributeError):
            catalog.entries = ()


class TestCatalogSources:
    """Test the shipped source list."""

    def test_source_identifiers_unique(self):
        identifiers = [identifier for identifier, _ in CATALOG_SOURCES]
        assert len(identifiers) == len(set(identifiers))

    def test_every_category_used(self):
        used = {category for _, category in CATALOG_SOURCES}
        assert used == set(FilterCategory)


class TestDisplaySortKey:
    """Test display-name ordering."""

    def test_yo_sorts_with_ye(self):
        names = ["ёлка", "яблоко", "Ёж", "Жук"]
        assert sorted(names, key=display_sort_key) == ["Ёж", "ёлка", "Жук", "яблоко"]

    def test_yo_breaks_ties_after_ye(self):
        assert sorted(["всё", "все"], key=display_sort_key) == ["все", "всё"]

    def test_case_insensitive(self):
        assert sorted(["размытие", "Пикселизация"], key=display_sort_key) == ["Пикселизация", "размытие"]
