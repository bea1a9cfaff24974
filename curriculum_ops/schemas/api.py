"""Request bodies and response envelopes for the HTTP API."""

from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, Field

from curriculum_ops.schemas.catalog import ImpactReportRecord, MappingRuleChanges, MappingRuleCreate
from curriculum_ops.schemas.generation import SlideDocument

T = TypeVar("T")


class DataResponse(BaseModel, Generic[T]):
    data: T
    message: str | None = None


class ListResponse(BaseModel, Generic[T]):
    data: list[T]
    total: int


class ActorRequest(BaseModel):
    actor: str | None = None


class AssignRequest(BaseModel):
    assignee: str | None = None
    actor: str | None = None


class MappingRuleCreateRequest(MappingRuleCreate):
    actor: str | None = None


class MappingRuleUpdateRequest(MappingRuleChanges):
    actor: str | None = None


class GenerateCourseRequest(BaseModel):
    report_ids: list[str] | Literal["all_approved"] = Field("all_approved")


class ExportDeckRequest(BaseModel):
    document: SlideDocument


class AnalysisFailureRecord(BaseModel):
    update_id: str
    error: str


class BatchAnalysisResponse(BaseModel):
    reports: list[ImpactReportRecord]
    failures: list[AnalysisFailureRecord]
