#To aggregate all routes for API1


from fastapi import APIRouter

from flight_search.api.v1.routes.airports import router as airports_router
from flight_search.api.v1.routes.page import router as page_router
from flight_search.api.v1.routes.search import router as search_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(page_router, prefix="/page", tags=["page"])
api_router.include_router(search_router, prefix="/search", tags=["search"])
api_router.include_router(airports_router, prefix="/airports", tags=["airports"])
