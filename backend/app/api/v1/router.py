#To aggregate all routes for API1


from fastapi import APIRouter

from app.api.v1.routes.calculate import router as calculate_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(calculate_router, prefix="/calculate", tags=["calculate"])
