from fastapi import APIRouter

from curriculum_ops.api.routes import (
    audit_logs,
    catalog,
    dashboard,
    generation,
    health,
    impact_reports,
    mapping_rules,
    updates,
)

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(generation.router, tags=["generation"])
api_router.include_router(catalog.providers_router, prefix="/providers", tags=["providers"])
api_router.include_router(catalog.lessons_router, prefix="/lessons", tags=["lessons"])
api_router.include_router(catalog.courses_router, prefix="/courses", tags=["courses"])
api_router.include_router(updates.router, prefix="/updates", tags=["updates"])
api_router.include_router(impact_reports.router, prefix="/impact-reports", tags=["impact-reports"])
api_router.include_router(mapping_rules.router, prefix="/mapping-rules", tags=["mapping-rules"])
api_router.include_router(audit_logs.router, prefix="/audit-logs", tags=["audit-logs"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
