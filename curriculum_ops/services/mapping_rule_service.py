"""MappingRuleService: append-only versioning for questionnaire mapping rules."""

from curriculum_ops.core.config import get_settings
from curriculum_ops.core.exceptions import NotFoundError
from curriculum_ops.schemas.catalog import MappingRuleChanges, MappingRuleCreate, MappingRuleRecord
from curriculum_ops.store import CatalogStore


class MappingRuleService:
    def __init__(self, store: CatalogStore, default_actor: str | None = None):
        self.store = store
        self.default_actor = default_actor or get_settings().default_actor

    async def create(self, rule: MappingRuleCreate, actor: str | None = None) -> MappingRuleRecord:
        async with self.store.transaction() as catalog:
            return await catalog.mapping_rules.create(rule, actor or self.default_actor)

    async def get(self, rule_id: str) -> MappingRuleRecord:
        async with self.store.transaction() as catalog:
            rule = await catalog.mapping_rules.get(rule_id)
        if rule is None:
            raise NotFoundError("Mapping rule", rule_id)
        return rule

    async def list_rules(self, question_id: str | None = None, is_active: bool | None = None) -> list[MappingRuleRecord]:
        async with self.store.transaction() as catalog:
            return await catalog.mapping_rules.find_all(question_id=question_id, is_active=is_active)

    async def update(
        self,
        rule_id: str,
        changes: MappingRuleChanges,
        actor: str | None = None,
    ) -> MappingRuleRecord:
        """Supersede the active rule ``rule_id`` with version + 1.

        The old row is retired and the new one inserted in the same
        transaction, so a key never has two active versions.
        """
        async with self.store.transaction() as catalog:
            return await catalog.mapping_rules.update(rule_id, changes, actor or self.default_actor)

    async def version_history(self, question_id: str, answer_value: str) -> list[MappingRuleRecord]:
        async with self.store.transaction() as catalog:
            return await catalog.mapping_rules.version_history(question_id, answer_value)
