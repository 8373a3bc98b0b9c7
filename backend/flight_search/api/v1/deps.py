from typing import Annotated

from fastapi import Depends, HTTPException, Request

from flight_search.services.page_controller import FlightSearchPage


def get_page(request: Request) -> FlightSearchPage:
    return request.app.state.page


def get_ready_page(page: Annotated[FlightSearchPage, Depends(get_page)]) -> FlightSearchPage:
    """La pagina deve aver caricato entrambi i documenti, altrimenti 503."""
    if not page.is_ready:
        raise HTTPException(status_code=503, detail=page.error or "Flight data is still loading")
    return page


PageDep = Annotated[FlightSearchPage, Depends(get_page)]
ReadyPageDep = Annotated[FlightSearchPage, Depends(get_ready_page)]
