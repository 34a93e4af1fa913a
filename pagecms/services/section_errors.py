"""
Structured errors for section placement and content writes.

Every error carries a ValidationErrorResponse: a machine-readable code,
a human message, details about the page state and help for fixing it.
"""

from enum import Enum
from typing import Any

from fastapi import status
from pydantic import BaseModel, Field

from pagecms.models.page import PageType
from pagecms.models.section import SectionType

SECTION_RESOURCE_PATH = "/api/v1/cms/sections"


class ValidationErrorCode(str, Enum):
    SECTION_NOT_ALLOWED = "SECTION_NOT_ALLOWED"
    INVALID_SECTION_TYPE = "INVALID_SECTION_TYPE"
    DUPLICATE_SECTION = "DUPLICATE_SECTION"
    INVALID_FIELDS = "INVALID_FIELDS"


class ValidationErrorDetails(BaseModel):
    page_type: PageType | None = None
    section_type: SectionType | None = None
    attempted_section: SectionType | None = None
    existing_section_id: str | None = None
    allowed_sections: list[SectionType] | None = None
    available_sections: list[SectionType] | None = None
    current_sections: list[SectionType] | None = None
    field_errors: list[dict[str, Any]] | None = None


class ValidationErrorHelp(BaseModel):
    suggestion: str
    examples: list[str] | None = None
    actions: list[str] | None = None


class ValidationErrorResponse(BaseModel):
    code: ValidationErrorCode
    message: str
    details: ValidationErrorDetails = Field(default_factory=ValidationErrorDetails)
    help: ValidationErrorHelp | None = None

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class SectionValidationError(Exception):
    """Base error for rejected section placement or content."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, response: ValidationErrorResponse):
        self.response = response
        super().__init__(response.message)

    @property
    def code(self) -> ValidationErrorCode:
        return self.response.code


class SectionsNotAllowedError(SectionValidationError):
    """The page type carries SEO data only."""

    def __init__(self, page_type: PageType):
        super().__init__(
            ValidationErrorResponse(
                code=ValidationErrorCode.SECTION_NOT_ALLOWED,
                message=f"Page type {page_type.value} does not support sections",
                details=ValidationErrorDetails(page_type=page_type),
                help=ValidationErrorHelp(suggestion="This page type only supports SEO data"),
            )
        )


class InvalidSectionTypeError(SectionValidationError):
    """The section type is not in the page type's fixed list."""

    def __init__(
        self,
        page_type: PageType,
        section_type: SectionType,
        allowed: list[SectionType],
        available: list[SectionType],
        current: list[SectionType],
    ):
        super().__init__(
            ValidationErrorResponse(
                code=ValidationErrorCode.INVALID_SECTION_TYPE,
                message=f"Section type {section_type.value} is not allowed for page type {page_type.value}",
                details=ValidationErrorDetails(
                    page_type=page_type,
                    attempted_section=section_type,
                    allowed_sections=allowed,
                    available_sections=available,
                    current_sections=current,
                ),
                help=ValidationErrorHelp(
                    suggestion="Choose from available sections that haven't been created yet",
                    examples=[t.value for t in available],
                ),
            )
        )


class DuplicateSectionError(SectionValidationError):
    """A non-repeatable section type already exists on the page."""

    def __init__(
        self,
        page_type: PageType,
        section_type: SectionType,
        existing_section_id: str,
        available: list[SectionType],
        current: list[SectionType],
    ):
        self.existing_section_id = existing_section_id
        super().__init__(
            ValidationErrorResponse(
                code=ValidationErrorCode.DUPLICATE_SECTION,
                message=f"Section {section_type.value} already exists in page {page_type.value}",
                details=ValidationErrorDetails(
                    page_type=page_type,
                    attempted_section=section_type,
                    existing_section_id=existing_section_id,
                    available_sections=available,
                    current_sections=current,
                ),
                help=ValidationErrorHelp(
                    suggestion="Update existing section or choose from available sections",
                    actions=[
                        f"Update existing section at {SECTION_RESOURCE_PATH}/{existing_section_id}",
                        "Create a different section type from available_sections",
                    ],
                ),
            )
        )


class ContentValidationError(SectionValidationError):
    """Content does not match the section type's schema."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY

    def __init__(self, report: Any):
        # report is a section_validator.ValidationReport
        self.report = report
        super().__init__(
            ValidationErrorResponse(
                code=ValidationErrorCode.INVALID_FIELDS,
                message=report.summary,
                details=ValidationErrorDetails(
                    section_type=report.section_type,
                    field_errors=[e.model_dump(mode="json") for e in report.errors],
                ),
                help=ValidationErrorHelp(
                    suggestion=f"Fix the listed fields; see the example for the {report.section_type.value} section",
                ),
            )
        )
