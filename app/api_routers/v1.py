from fastapi import APIRouter

from app.features.health.routes.health import router as health_router
from app.features.leads.routes.lead_route import router as leads_router

api_router = APIRouter()

# Register all feature routes
api_router.include_router(health_router)
api_router.include_router(leads_router)
