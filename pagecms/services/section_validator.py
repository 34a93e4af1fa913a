"""
Section Content Validator.

Validates a section's content against the schema registered for its type
and turns pydantic's errors into a report a CMS editor can act on: one
entry per offending field with a category, a readable message, the
expected format and the matching value from the registered example.
"""

import copy
import inspect
import logging
import types
from enum import Enum
from typing import Annotated, Any, Literal, Union, get_args, get_origin

from pydantic import AnyUrl, BaseModel, ConfigDict, Field, HttpUrl, ValidationError

from pagecms.models.section import SectionType
from pagecms.services.section_registry import SectionSchemaRegistry

logger = logging.getLogger(__name__)

UNDEFINED = "undefined"

FORMAT_ERROR_TYPES = frozenset(
    {
        "string_type",
        "int_type",
        "int_parsing",
        "int_from_float",
        "float_type",
        "float_parsing",
        "bool_type",
        "model_type",
        "model_attributes_type",
        "dict_type",
        "list_type",
        "none_required",
        "string_pattern_mismatch",
        "url_type",
        "url_parsing",
        "url_scheme",
        "url_syntax_violation",
    }
)


class FieldErrorType(str, Enum):
    MISSING = "MISSING"
    INVALID_FORMAT = "INVALID_FORMAT"
    INVALID_VALUE = "INVALID_VALUE"


class FieldViolation(BaseModel):
    field: str
    error_type: FieldErrorType
    message: str
    expected_format: str | None = None
    example: Any = None
    current_value: Any = None


class SchemaInfo(BaseModel):
    required_fields: list[str]
    optional_fields: list[str]
    description: str
    field_descriptions: dict[str, str]


class ExampleInfo(BaseModel):
    data: dict[str, Any] | None = None
    explanation: str


class ValidationReport(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    section_type: SectionType
    summary: str
    errors: list[FieldViolation]
    schema_info: SchemaInfo = Field(alias="schema")
    example: ExampleInfo


class ValidationResult(BaseModel):
    is_valid: bool
    report: ValidationReport | None = None
    # Content reduced to the schema's fields; set only when valid
    content: dict[str, Any] | None = None


# ============== pydantic error translation ==============


def _unwrap(annotation: Any) -> Any:
    """Strip Annotated metadata and Optional wrappers."""
    while True:
        origin = get_origin(annotation)
        if origin is Annotated:
            annotation = get_args(annotation)[0]
        elif origin in (Union, types.UnionType):
            members = [a for a in get_args(annotation) if a is not type(None)]
            if len(members) != 1:
                return annotation
            annotation = members[0]
        else:
            return annotation


def _type_label(annotation: Any) -> str | None:
    if annotation is HttpUrl:
        return "url"
    annotation = _unwrap(annotation)
    origin = get_origin(annotation)
    if origin is list:
        return "array"
    if origin is dict:
        return "object"
    if origin is Literal:
        return "one of: " + ", ".join(str(a) for a in get_args(annotation))
    if not inspect.isclass(annotation):
        return None
    if issubclass(annotation, AnyUrl):
        return "url"
    if issubclass(annotation, (BaseModel, dict)):
        return "object"
    if issubclass(annotation, list):
        return "array"
    # bool before int: bool is an int subclass
    for python_type, label in ((bool, "boolean"), (int, "integer"), (float, "number"), (str, "string")):
        if issubclass(annotation, python_type):
            return label
    return None


def declared_type(schema: type[BaseModel], loc: tuple[int | str, ...]) -> str | None:
    """Label of the type declared at `loc` inside `schema`, if it can be resolved."""
    annotation: Any = schema
    for part in loc:
        annotation = _unwrap(annotation)
        if isinstance(part, int):
            if get_origin(annotation) is not list:
                return None
            annotation = get_args(annotation)[0]
            continue
        if not (inspect.isclass(annotation) and issubclass(annotation, BaseModel)):
            return None
        model_field = annotation.model_fields.get(part)
        if model_field is None:
            return None
        annotation = model_field.annotation
    return _type_label(annotation)


def json_type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def example_value(example: dict[str, Any] | None, loc: tuple[int | str, ...]) -> Any:
    """Value at `loc` in the example; list indices are clamped to the example's length."""
    value: Any = example
    for part in loc:
        if isinstance(part, int):
            if not isinstance(value, list) or not value:
                return None
            value = value[min(part, len(value) - 1)]
        elif isinstance(value, dict) and part in value:
            value = value[part]
        else:
            return None
    return copy.deepcopy(value)


def categorize(error_type: str) -> FieldErrorType:
    if error_type == "missing":
        return FieldErrorType.MISSING
    if error_type in FORMAT_ERROR_TYPES:
        return FieldErrorType.INVALID_FORMAT
    return FieldErrorType.INVALID_VALUE


class SectionContentValidator:
    """Validates section content against the registry's schemas."""

    def __init__(self, registry: SectionSchemaRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> SectionSchemaRegistry:
        return self._registry

    def validate(self, section_type: SectionType, content: Any) -> ValidationResult:
        """
        Validate content for a section type.

        Every violation is collected in one pass. Types without a registered
        schema are checked against the generic title/description schema.
        The content is never modified; unknown keys are left out of the
        returned copy at every level.

        Returns:
            ValidationResult with a report when the content is invalid,
            else with the cleaned content
        """
        schema = self._registry.schema_or_default(section_type)
        try:
            model = schema.model_validate(content)
        except ValidationError as exc:
            report = self._build_report(section_type, schema, exc.errors(include_url=False))
            logger.debug(f"Content rejected for {section_type.value}: {report.summary}")
            return ValidationResult(is_valid=False, report=report)
        return ValidationResult(is_valid=True, content=model.model_dump(mode="json", exclude_unset=True))

    def is_section_content(self, section_type: SectionType, content: Any) -> bool:
        return self.validate(section_type, content).is_valid

    def _build_report(
        self,
        section_type: SectionType,
        schema: type[BaseModel],
        raw_errors: list[dict[str, Any]],
    ) -> ValidationReport:
        example = self._registry.example_for(section_type)
        violations = [self._violation(section_type, schema, example, error) for error in raw_errors]

        required = [name for name, f in schema.model_fields.items() if f.is_required()]
        optional = [name for name, f in schema.model_fields.items() if not f.is_required()]

        return ValidationReport(
            section_type=section_type,
            summary=self._summary(section_type, violations),
            errors=violations,
            schema_info=SchemaInfo(
                required_fields=required,
                optional_fields=optional,
                description=self._registry.description_for(section_type),
                field_descriptions=self._registry.field_descriptions_for(
                    section_type, list(schema.model_fields)
                ),
            ),
            example=ExampleInfo(
                data=example,
                explanation=self._registry.example_explanation_for(section_type),
            ),
        )

    def _violation(
        self,
        section_type: SectionType,
        schema: type[BaseModel],
        example: dict[str, Any] | None,
        error: dict[str, Any],
    ) -> FieldViolation:
        loc = tuple(error["loc"])
        path = ".".join(str(part) for part in loc)
        category = categorize(error["type"])

        if category is FieldErrorType.MISSING:
            expected = declared_type(schema, loc) or error["msg"]
            current = UNDEFINED
        elif error["type"].startswith("url_"):
            expected = "url"
            current = error.get("input")
        elif category is FieldErrorType.INVALID_FORMAT and error["type"] != "string_pattern_mismatch":
            expected = declared_type(schema, loc) or error["msg"]
            current = error.get("input")
        else:
            expected = error["msg"]
            current = error.get("input")

        message = self._registry.field_message_for(section_type, path) or self._generic_message(
            path, error, category, expected
        )

        return FieldViolation(
            field=path,
            error_type=category,
            message=message,
            expected_format=expected,
            example=example_value(example, loc),
            current_value=current,
        )

    @staticmethod
    def _generic_message(path: str, error: dict[str, Any], category: FieldErrorType, expected: str) -> str:
        error_type = error["type"]
        ctx = error.get("ctx") or {}

        if not path:
            return f"Section content must be an object but received {json_type_name(error.get('input'))}"
        if category is FieldErrorType.MISSING:
            return f"The field '{path}' is required but was not provided"
        if error_type.startswith("url_"):
            return f"The field '{path}' must be a valid URL (e.g., https://example.com)"
        if error_type == "string_pattern_mismatch":
            return f"The field '{path}' does not match the expected format {ctx.get('pattern', '')}".rstrip()
        if category is FieldErrorType.INVALID_FORMAT:
            return f"The field '{path}' must be a {expected} but received {json_type_name(error.get('input'))}"
        if error_type in ("too_short", "string_too_short"):
            return f"The field '{path}' is too short. Minimum length is {ctx.get('min_length')}"
        if error_type in ("too_long", "string_too_long"):
            return f"The field '{path}' is too long. Maximum length is {ctx.get('max_length')}"
        if error_type == "greater_than_equal":
            return f"The field '{path}' must be greater than or equal to {ctx.get('ge')}"
        if error_type == "less_than_equal":
            return f"The field '{path}' must be less than or equal to {ctx.get('le')}"
        if error_type == "literal_error":
            return f"The field '{path}' must be one of: {ctx.get('expected')}"
        return f"The field '{path}' is invalid: {error['msg']}"

    @staticmethod
    def _summary(section_type: SectionType, violations: list[FieldViolation]) -> str:
        name = section_type.value
        if len(violations) == 1:
            violation = violations[0]
            label = violation.field or "content"
            if violation.error_type is FieldErrorType.MISSING:
                return f"Missing required field '{label}' in {name} section"
            if violation.error_type is FieldErrorType.INVALID_FORMAT:
                return f"Invalid format for '{label}' in {name} section"
            return f"Invalid value for '{label}' in {name} section"

        fields = list(dict.fromkeys(v.field or "content" for v in violations))
        return f"Invalid or missing keys in {name} section. Found: {', '.join(fields)}"
