"""
Tests for section content validation and error reports.
"""

import copy

import pytest

from pagecms.models.section import SectionType
from pagecms.schemas.section_content import HeroContent
from pagecms.services.section_registry import (
    SectionSchemaEntry,
    SectionSchemaRegistry,
    build_default_registry,
)
from pagecms.services.section_validator import (
    UNDEFINED,
    FieldErrorType,
    SectionContentValidator,
    declared_type,
    example_value,
)

_REGISTRY = build_default_registry()

REQUIRED_FIELDS = [
    (section_type, name)
    for section_type in SectionType
    for name, field in _REGISTRY.schema_for(section_type).model_fields.items()
    if field.is_required()
]


def example(section_type: SectionType) -> dict:
    return _REGISTRY.example_for(section_type)


def only_error(result):
    assert not result.is_valid
    assert len(result.report.errors) == 1
    return result.report.errors[0]


# ============== Registered examples ==============


class TestExamples:
    """Registered examples are valid fixtures."""

    @pytest.mark.parametrize("section_type", list(SectionType))
    def test_example_validates(self, validator, section_type):
        result = validator.validate(section_type, example(section_type))

        assert result.is_valid, result.report and result.report.errors
        assert result.report is None

    @pytest.mark.parametrize("section_type, field_name", REQUIRED_FIELDS)
    def test_missing_required_field(self, validator, section_type, field_name):
        content = example(section_type)
        del content[field_name]

        error = only_error(validator.validate(section_type, content))

        assert error.field == field_name
        assert error.error_type is FieldErrorType.MISSING
        assert error.current_value == UNDEFINED

    @pytest.mark.parametrize("section_type", list(SectionType))
    def test_revalidation_is_stable(self, validator, section_type):
        content = example(section_type)
        snapshot = copy.deepcopy(content)

        first = validator.validate(section_type, content)
        second = validator.validate(section_type, content)

        assert first.is_valid and second.is_valid
        assert content == snapshot


# ============== Cardinality ==============


class TestCardinality:
    """Fixed-size arrays."""

    @pytest.mark.parametrize(
        "section_type, key, valid_count, invalid_counts",
        [
            (SectionType.TEAM, "members", 4, (3, 5)),
            (SectionType.SPORTS_CARD, "cards", 4, (3, 5)),
            (SectionType.MISSION, "buttons", 2, (1, 3)),
        ],
    )
    def test_exact_counts(self, validator, section_type, key, valid_count, invalid_counts):
        content = example(section_type)
        template = content[key][0]

        for count in invalid_counts:
            content[key] = [copy.deepcopy(template) for _ in range(count)]
            error = only_error(validator.validate(section_type, content))
            assert error.field == key
            assert error.error_type is FieldErrorType.INVALID_VALUE

        content[key] = [copy.deepcopy(template) for _ in range(valid_count)]
        assert validator.validate(section_type, content).is_valid

    def test_team_message(self, validator):
        content = example(SectionType.TEAM)
        content["members"] = content["members"][:3]

        error = only_error(validator.validate(SectionType.TEAM, content))

        assert error.message == "Exactly 4 team members are required"

    def test_empty_faq(self, validator):
        error = only_error(validator.validate(SectionType.FAQ, {"items": []}))

        assert error.field == "items"
        assert error.error_type is FieldErrorType.INVALID_VALUE


# ============== Formats and ranges ==============


class TestFormatsAndRanges:
    """Percentages, colors, opacity, URLs and strict types."""

    def test_percentage_out_of_range(self, validator):
        content = example(SectionType.OUR_STRENGTHS)
        content["strengths"][0]["percentage"] = 101

        error = only_error(validator.validate(SectionType.OUR_STRENGTHS, content))

        assert error.field == "strengths.0.percentage"
        assert error.error_type is FieldErrorType.INVALID_VALUE
        assert error.message == "Percentage must be a number between 0 and 100"
        assert error.current_value == 101

    def test_percentage_bounds_inclusive(self, validator):
        content = example(SectionType.OUR_STRENGTHS)
        content["strengths"][0]["percentage"] = 0
        content["strengths"][1]["percentage"] = 100

        assert validator.validate(SectionType.OUR_STRENGTHS, content).is_valid

    def test_percentage_string_not_coerced(self, validator):
        content = example(SectionType.OUR_STRENGTHS)
        content["strengths"][0]["percentage"] = "85"

        error = only_error(validator.validate(SectionType.OUR_STRENGTHS, content))

        assert error.error_type is FieldErrorType.INVALID_FORMAT
        assert error.expected_format == "number"

    @pytest.mark.parametrize("color", ["red", "#FFF", "#GGGGGG", "000000"])
    def test_bad_hex_color(self, validator, color):
        content = example(SectionType.HERO)
        content["background_image"]["overlay_color"] = color

        error = only_error(validator.validate(SectionType.HERO, content))

        assert error.field == "background_image.overlay_color"
        assert error.error_type is FieldErrorType.INVALID_FORMAT

    def test_opacity_out_of_range(self, validator):
        content = example(SectionType.HERO)
        content["background_image"]["overlay_opacity"] = 1.5

        error = only_error(validator.validate(SectionType.HERO, content))

        assert error.field == "background_image.overlay_opacity"
        assert error.error_type is FieldErrorType.INVALID_VALUE

    def test_optional_overlay_may_be_omitted(self, validator):
        content = example(SectionType.HERO)
        del content["background_image"]["overlay_color"]
        del content["background_image"]["overlay_opacity"]

        assert validator.validate(SectionType.HERO, content).is_valid

    def test_bad_url(self, validator):
        content = example(SectionType.MISSION)
        content["buttons"][1]["url"] = "not a url"

        error = only_error(validator.validate(SectionType.MISSION, content))

        assert error.field == "buttons.1.url"
        assert error.error_type is FieldErrorType.INVALID_FORMAT
        assert error.expected_format == "url"
        assert error.example == "https://example.com/action2"

    def test_bad_email(self, validator):
        content = example(SectionType.CONTACT)
        content["email"] = "not-an-email"

        error = only_error(validator.validate(SectionType.CONTACT, content))

        assert error.error_type is FieldErrorType.INVALID_FORMAT
        assert error.message == "Contact email must be a valid email address"

    def test_unknown_platform(self, validator):
        content = example(SectionType.FOOTER)
        content["social_links"][0]["platform"] = "myspace"

        error = only_error(validator.validate(SectionType.FOOTER, content))

        assert error.field == "social_links.0.platform"
        assert error.error_type is FieldErrorType.INVALID_VALUE

    def test_title_too_long(self, validator):
        content = example(SectionType.HISTORY)
        content["title"] = "x" * 101

        error = only_error(validator.validate(SectionType.HISTORY, content))

        assert error.error_type is FieldErrorType.INVALID_VALUE

    def test_wrong_type_for_title(self, validator):
        content = example(SectionType.HISTORY)
        content["title"] = 42

        error = only_error(validator.validate(SectionType.HISTORY, content))

        assert error.error_type is FieldErrorType.INVALID_FORMAT
        assert error.expected_format == "string"
        assert error.current_value == 42


# ============== Report contents ==============


class TestReport:
    """Report structure, messages and summaries."""

    @pytest.mark.parametrize("content", ["hero", None, 42, ["title"]])
    def test_non_object_content(self, validator, content):
        error = only_error(validator.validate(SectionType.HERO, content))

        assert error.field == ""
        assert error.error_type is FieldErrorType.INVALID_FORMAT

    def test_nested_missing_field(self, validator):
        content = example(SectionType.HERO)
        del content["background_image"]["url"]

        error = only_error(validator.validate(SectionType.HERO, content))

        assert error.field == "background_image.url"
        assert error.error_type is FieldErrorType.MISSING
        assert error.current_value == UNDEFINED
        assert error.expected_format == "url"
        assert error.example == "https://example.com/images/hero-bg.jpg"
        assert error.message == "URL for the large background image (e.g., stadium or sports-related)"

    def test_all_errors_collected(self, validator):
        result = validator.validate(SectionType.HERO, {})

        fields = [e.field for e in result.report.errors]
        assert fields == ["title", "description", "background_image"]
        assert all(e.error_type is FieldErrorType.MISSING for e in result.report.errors)

    def test_single_error_summary(self, validator):
        content = example(SectionType.HERO)
        del content["title"]

        result = validator.validate(SectionType.HERO, content)

        assert result.report.summary == "Missing required field 'title' in HERO section"

    def test_multiple_error_summary(self, validator):
        result = validator.validate(SectionType.HERO, {"background_image": {"url": "https://example.com/a.jpg"}})

        assert result.report.summary == "Invalid or missing keys in HERO section. Found: title, description"

    def test_schema_info(self, validator):
        result = validator.validate(SectionType.CONTACT, {})
        info = result.report.schema_info

        assert info.required_fields == ["title", "description"]
        assert info.optional_fields == ["address", "email", "phone", "map_coordinates"]
        assert set(info.field_descriptions) == set(info.required_fields + info.optional_fields)
        assert info.description.startswith("The CONTACT section")

    def test_report_serializes_schema_key(self, validator):
        report = validator.validate(SectionType.HERO, {}).report

        dumped = report.model_dump(by_alias=True, mode="json")

        assert "schema" in dumped
        assert dumped["example"]["data"]["title"] == "Welcome Title"
        assert dumped["section_type"] == "HERO"

    def test_example_index_is_clamped(self, validator):
        content = example(SectionType.TIMELINE)
        item = copy.deepcopy(content["items"][1])
        content["items"] = [copy.deepcopy(item) for _ in range(6)]
        del content["items"][5]["description"]

        error = only_error(validator.validate(SectionType.TIMELINE, content))

        assert error.field == "items.5.description"
        assert error.example == "Tennis coverage added."

    def test_generic_messages_without_section_help(self):
        bare = SectionSchemaRegistry(
            {SectionType.HERO: SectionSchemaEntry(schema=HeroContent, description="Hero")}
        )
        validator = SectionContentValidator(bare)

        result = validator.validate(
            SectionType.HERO,
            {"description": "d", "background_image": {"url": "nope"}},
        )
        messages = {e.field: e.message for e in result.report.errors}

        assert messages["title"] == "The field 'title' is required but was not provided"
        assert messages["background_image.url"] == (
            "The field 'background_image.url' must be a valid URL (e.g., https://example.com)"
        )
        assert result.report.example.data is None
        assert result.report.example.explanation == "Example content for this section type"

    def test_unregistered_type_uses_generic_schema(self):
        validator = SectionContentValidator(SectionSchemaRegistry({}))

        assert validator.validate(SectionType.TEAM, {"title": "Team", "description": "Our people"}).is_valid
        result = validator.validate(SectionType.TEAM, {"title": "Team"})
        assert [e.field for e in result.report.errors] == ["description"]

    def test_valid_result_drops_unknown_keys(self, validator):
        content = example(SectionType.TEAM)
        content["tracking"] = "utm"
        content["members"][2]["salary"] = 100
        snapshot = copy.deepcopy(content)

        result = validator.validate(SectionType.TEAM, content)

        assert result.is_valid
        assert result.content == example(SectionType.TEAM)
        assert content == snapshot

    def test_invalid_result_has_no_content(self, validator):
        assert validator.validate(SectionType.HERO, {}).content is None

    def test_is_section_content(self, validator):
        assert validator.is_section_content(SectionType.FAQ, example(SectionType.FAQ))
        assert not validator.is_section_content(SectionType.FAQ, {})


class TestHelpers:
    """Type labels and example lookup."""

    def test_declared_type(self):
        assert declared_type(HeroContent, ("title",)) == "string"
        assert declared_type(HeroContent, ("background_image",)) == "object"
        assert declared_type(HeroContent, ("background_image", "url")) == "url"
        assert declared_type(HeroContent, ("background_image", "overlay_opacity")) == "number"
        assert declared_type(HeroContent, ("nope",)) is None

    def test_example_value(self):
        data = {"a": [{"b": 1}, {"b": 2}]}

        assert example_value(data, ("a", 0, "b")) == 1
        assert example_value(data, ("a", 9, "b")) == 2
        assert example_value(data, ("x",)) is None
        assert example_value(None, ("a",)) is None
