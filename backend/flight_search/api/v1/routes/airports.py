"""
Endpoint Aeroporti.

GET /api/v1/airports
    Tutti gli aeroporti di airports.json, nell'ordine del documento.

GET /api/v1/airports/{code}
    Singolo aeroporto (codice case-insensitive).
"""
from fastapi import APIRouter, HTTPException

from flight_search.api.v1.deps import ReadyPageDep
from flight_search.models.schemas import AirportOut
from flight_search.services.airport_lookup import find_by_code

router = APIRouter()


@router.get("", response_model=list[AirportOut])
async def list_airports(page: ReadyPageDep) -> list[AirportOut]:
    """To get all airports"""
    return [AirportOut.model_validate(a) for a in page.airports.airports]


@router.get("/{code}", response_model=AirportOut)
async def get_airport(page: ReadyPageDep, code: str) -> AirportOut:
    airport = find_by_code(page.airports, code)
    if airport is None:
        raise HTTPException(status_code=404, detail=f"Unknown airport {code.upper()}")
    return AirportOut.model_validate(airport)
