"""Request and response models for the title API."""

from typing import Literal

from pydantic import BaseModel


class PreviewRequest(BaseModel):
    template: str | None = None
    title: str = ""
    current_directory: str = ""
    rows: int = 0
    columns: int = 0


class SegmentModel(BaseModel):
    type: Literal["text", "field", "error"]
    start_column: int
    end_column: int
    text: str | None = None
    namespace: str | None = None
    key: str | None = None
    error: str | None = None


class PreviewResponse(BaseModel):
    template: str
    html: str
    diagnostic_html: str
    segments: list[SegmentModel]


class NamespaceModel(BaseModel):
    name: str
    fields: dict[str, str]


class NamespacesResponse(BaseModel):
    namespaces: list[NamespaceModel]
