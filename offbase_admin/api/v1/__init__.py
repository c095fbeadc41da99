"""API v1 routes."""

from fastapi import APIRouter

from offbase_admin.api.v1 import admin_auth, health, properties, role_requests

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(admin_auth.router, prefix="/admin", tags=["admin-auth"])
router.include_router(properties.router, prefix="/admin/properties", tags=["properties"])
router.include_router(role_requests.router, prefix="/admin/role-requests", tags=["role-requests"])
