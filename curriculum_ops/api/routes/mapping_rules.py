"""Mapping rule API. Updates never edit in place: each one supersedes the active version."""

from fastapi import APIRouter, Depends

from curriculum_ops.api.deps import get_mapping_rule_service
from curriculum_ops.schemas.api import (
    DataResponse,
    ListResponse,
    MappingRuleCreateRequest,
    MappingRuleUpdateRequest,
)
from curriculum_ops.schemas.catalog import MappingRuleChanges, MappingRuleCreate, MappingRuleRecord
from curriculum_ops.services.mapping_rule_service import MappingRuleService

router = APIRouter()


@router.get("", response_model=ListResponse[MappingRuleRecord])
async def list_mapping_rules(
    question_id: str | None = None,
    is_active: bool | None = None,
    rules: MappingRuleService = Depends(get_mapping_rule_service),
):
    found = await rules.list_rules(question_id=question_id, is_active=is_active)
    return ListResponse(data=found, total=len(found))


@router.get("/history/{question_id}/{answer_value}", response_model=ListResponse[MappingRuleRecord])
async def mapping_rule_history(
    question_id: str,
    answer_value: str,
    rules: MappingRuleService = Depends(get_mapping_rule_service),
):
    history = await rules.version_history(question_id, answer_value)
    return ListResponse(data=history, total=len(history))


@router.get("/{rule_id}", response_model=DataResponse[MappingRuleRecord])
async def get_mapping_rule(rule_id: str, rules: MappingRuleService = Depends(get_mapping_rule_service)):
    return DataResponse(data=await rules.get(rule_id))


@router.post("", response_model=DataResponse[MappingRuleRecord], status_code=201)
async def create_mapping_rule(
    body: MappingRuleCreateRequest,
    rules: MappingRuleService = Depends(get_mapping_rule_service),
):
    rule = MappingRuleCreate(**body.model_dump(exclude={"actor"}))
    return DataResponse(data=await rules.create(rule, body.actor))


@router.put("/{rule_id}", response_model=DataResponse[MappingRuleRecord])
async def update_mapping_rule(
    rule_id: str,
    body: MappingRuleUpdateRequest,
    rules: MappingRuleService = Depends(get_mapping_rule_service),
):
    changes = MappingRuleChanges(**body.model_dump(exclude_unset=True, exclude={"actor"}))
    rule = await rules.update(rule_id, changes, body.actor)
    return DataResponse(data=rule, message=f"Mapping rule now at version {rule.version}")
