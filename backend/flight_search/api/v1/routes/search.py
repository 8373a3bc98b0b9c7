from fastapi import APIRouter, HTTPException

from flight_search.api.v1.deps import ReadyPageDep
from flight_search.models.schemas import AirportOptionOut, ResultsView, SearchFormOut, SearchIn
from flight_search.services.search_form import DEFAULT_ORIGIN

router = APIRouter()


@router.get("/form", response_model=SearchFormOut)
async def search_form(page: ReadyPageDep) -> SearchFormOut:
    """Valori iniziali del form: origine di default, limiti data, opzioni select."""
    form = page.new_form()
    return SearchFormOut(
        default_origin=DEFAULT_ORIGIN,
        min_date=form.min_date,
        max_date=form.max_date,
        options=[AirportOptionOut(code=code, label=label) for code, label in form.options],
    )


"""
Endpoint Search.-----------------------------------------------------------------------------------

POST /api/v1/search
  {"origin": "AMS", "destination": "FNC", "departureDate": "2022-11-10"}
"""
@router.post("", response_model=ResultsView)
async def search_flights(page: ReadyPageDep, body: SearchIn) -> ResultsView:

    form = page.new_form()
    # Origin omessa → resta quella di default del form
    if "origin" in body.model_fields_set:
        form.set_field("origin", body.origin)
    form.set_field("destination", body.destination)
    form.set_field("departureDate", body.departure_date)

    results = await page.submit(form)

    #Validation area -------------------------------------------
    if results is None:
        raise HTTPException(status_code=422, detail={"errors": form.errors})
    #Validation area -------------------------------------------

    return page.results_view()
