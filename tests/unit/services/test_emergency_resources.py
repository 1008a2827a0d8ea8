"""
Unit Tests for Resource Directory

Tests filtering, emergency lines and JSON overrides.
"""

import json

import pytest

from genibi.services.safety.emergency_resources import (
    BUILT_IN_RESOURCES,
    RESOURCE_CATEGORIES,
    SEARCH_SUGGESTIONS,
    MentalHealthResource,
    ResourceDirectory,
)


@pytest.fixture
def directory() -> ResourceDirectory:
    return ResourceDirectory()


class TestResourceDirectory:
    """Tests for built-in directory queries."""

    def test_find_all_keeps_order(self, directory) -> None:
        ids = [r.id for r in directory.find()]
        assert ids == [r.id for r in BUILT_IN_RESOURCES]

    def test_find_by_category(self, directory) -> None:
        results = directory.find(category="counseling")
        assert results
        assert all(r.category == "counseling" for r in results)

    def test_find_emergency_only(self, directory) -> None:
        results = directory.find(emergency_only=True)
        assert [r.phone for r in results] == ["112", "+234 806 027 0792", "199"]

    def test_search_matches_tags_case_insensitive(self, directory) -> None:
        titles = [r.title for r in directory.find(search="STRESS")]
        assert "Stress Management Techniques" in titles
        assert "Mindfulness for Students" in titles

    def test_search_without_results(self, directory) -> None:
        assert directory.find(search="zzz-no-such-thing") == []

    def test_get(self, directory) -> None:
        assert directory.get("2").title == "GENIBI 24/7 Helpline"
        assert directory.get("999") is None

    def test_categories_in_canonical_order(self, directory) -> None:
        assert directory.categories() == list(RESOURCE_CATEGORIES)

    def test_emergency_contacts_all_dialable(self, directory) -> None:
        contacts = directory.emergency_contacts()
        assert contacts
        assert all(r.emergency and r.phone for r in contacts)


class TestMentalHealthResource:

    def test_to_dict_omits_empty_optional_fields(self) -> None:
        resource = MentalHealthResource(
            id="x",
            title="Guide",
            description="A guide",
            category="self-help",
            resource_type="article",
        )
        data = resource.to_dict()

        assert data["type"] == "article"
        assert "phone" not in data
        assert "url" not in data

    def test_to_contact_strips_formatting(self) -> None:
        resource = MentalHealthResource(
            id="x",
            title="Helpline",
            description="",
            category="emergency",
            resource_type="contact",
            phone="+234 806-027-0792",
            emergency=True,
        )
        assert resource.to_contact() == {
            "name": "Helpline",
            "phone": "+234 806-027-0792",
            "link": "tel:+2348060270792",
        }


class TestConfigOverride:
    """Tests for JSON resource files."""

    def test_override_and_extend(self, tmp_path) -> None:
        config = tmp_path / "resources.json"
        config.write_text(json.dumps([
            {
                "id": "4",
                "title": "Replaced Counseling Center",
                "category": "counseling",
                "type": "contact",
                "phone": "0800",
            },
            {
                "id": "100",
                "title": "Campus Night Line",
                "category": "emergency",
                "phone": "0700 123",
                "emergency": True,
                "tags": ["night"],
            },
        ]))

        directory = ResourceDirectory(config_path=str(config))

        assert directory.get("4").title == "Replaced Counseling Center"
        assert directory.get("100").tags == ("night",)
        assert "0700 123" in [r.phone for r in directory.emergency_contacts()]
        assert len(directory.find()) == len(BUILT_IN_RESOURCES) + 1

    def test_malformed_file_keeps_built_ins(self, tmp_path) -> None:
        config = tmp_path / "resources.json"
        config.write_text("{not json")

        directory = ResourceDirectory(config_path=str(config))

        assert len(directory.find()) == len(BUILT_IN_RESOURCES)

    def test_entry_missing_fields_keeps_built_ins(self, tmp_path) -> None:
        config = tmp_path / "resources.json"
        config.write_text(json.dumps([{"id": "50"}]))

        directory = ResourceDirectory(config_path=str(config))

        assert directory.get("50") is None

    def test_missing_file_ignored(self, tmp_path) -> None:
        directory = ResourceDirectory(config_path=str(tmp_path / "absent.json"))
        assert len(directory.find()) == len(BUILT_IN_RESOURCES)


class TestFiltersAndPaging:
    """Tests for type filtering, pagination and category summaries."""

    def test_find_by_type(self, directory) -> None:
        results = directory.find(resource_type="article")
        assert results
        assert all(r.resource_type == "article" for r in results)

    def test_type_and_category_combine(self, directory) -> None:
        results = directory.find(category="counseling", resource_type="website")
        assert [r.id for r in results] == ["5", "6"]

    def test_all_category_is_unfiltered(self, directory) -> None:
        assert directory.find(category="all") == directory.find()

    def test_first_page(self, directory) -> None:
        page = directory.page(limit=5)

        assert [r.id for r in page.resources] == ["1", "2", "3", "4", "5"]
        assert page.total == len(BUILT_IN_RESOURCES)
        assert page.has_more

    def test_last_page(self, directory) -> None:
        page = directory.page(limit=10, offset=10)

        assert len(page.resources) == len(BUILT_IN_RESOURCES) - 10
        assert not page.has_more

    def test_offset_past_end(self, directory) -> None:
        page = directory.page(offset=100)
        assert page.resources == ()
        assert not page.has_more

    def test_page_applies_filters_before_slicing(self, directory) -> None:
        page = directory.page(limit=1, category="self-help")

        assert page.total == 4
        assert page.resources[0].category == "self-help"
        assert page.to_dict()["hasMore"] is True

    def test_category_summaries(self, directory) -> None:
        summaries = directory.category_summaries()

        assert [s["id"] for s in summaries] == list(RESOURCE_CATEGORIES)
        assert summaries[0] == {"id": "emergency", "label": "Emergency", "count": 3}
        assert summaries[3]["label"] == "Academic Support"
        assert sum(s["count"] for s in summaries) == len(BUILT_IN_RESOURCES)

    def test_category_summaries_include_config_categories(self, tmp_path) -> None:
        config = tmp_path / "resources.json"
        config.write_text(json.dumps([
            {"id": "200", "title": "Faith Counsel", "category": "faith-based"},
        ]))

        summaries = ResourceDirectory(config_path=str(config)).category_summaries()

        assert summaries[-1] == {"id": "faith-based", "label": "Faith Based", "count": 1}

    def test_search_suggestions(self) -> None:
        assert ResourceDirectory.search_suggestions() == list(SEARCH_SUGGESTIONS)
        assert len(SEARCH_SUGGESTIONS) == 10
