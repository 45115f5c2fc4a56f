"""
Shared building blocks for workbook JSON documents.

Every document and section model ignores unknown keys so that stored JSON
written by older or newer releases still loads. Blank strings coming from
HTML-style forms are treated as "no value" on fields that accept None;
plain ``str`` fields keep them.

Validation runs in two modes:
    strict   (default)             posted sections; bad values are rejected
    lenient  context={"lenient": True}   stored documents; bad values are dropped
"""

from typing import ClassVar, get_args

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator

LENIENT = {"lenient": True}


def is_lenient(info: ValidationInfo) -> bool:
    return bool(info.context and info.context.get("lenient"))


def _accepts_none(model, field_name):
    field = model.model_fields.get(field_name)
    return field is not None and type(None) in get_args(field.annotation)


class DocumentModel(BaseModel):
    """Base for every document fragment."""

    model_config = ConfigDict(extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def _blank_to_none(cls, value, info: ValidationInfo):
        if isinstance(value, str) and not value.strip() and _accepts_none(cls, info.field_name):
            return None
        return value


class WorkbookDocument(DocumentModel):
    """Root of a workbook document.

    Subclasses declare ``SECTION_MODELS``: the explicit section-key → model
    map used by the wizard and the document store (no attribute reflection).
    """

    SECTION_MODELS: ClassVar[dict[str, type[BaseModel]]] = {}

    @classmethod
    def create_default(cls):
        return cls()

    @classmethod
    def section_model(cls, key):
        return cls.SECTION_MODELS.get(key)

    def get_section(self, key):
        return getattr(self, key)

    def replace_section(self, key, section):
        """Replace one section wholesale with an already validated model."""
        if key not in self.SECTION_MODELS:
            raise KeyError(key)
        setattr(self, key, section)
