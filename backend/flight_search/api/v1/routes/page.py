"""
Endpoint Pagina.

GET  /api/v1/page         stato loading / error / ready
POST /api/v1/page/reload  Retry: ricarica entrambi i documenti da zero
"""
from fastapi import APIRouter

from flight_search.api.v1.deps import PageDep
from flight_search.models.schemas import PageStatusOut

router = APIRouter()


@router.get("", response_model=PageStatusOut)
async def page_status(page: PageDep) -> PageStatusOut:
    return page.page_status()


@router.post("/reload", response_model=PageStatusOut)
async def reload_page(page: PageDep) -> PageStatusOut:
    await page.reload()
    return page.page_status()
