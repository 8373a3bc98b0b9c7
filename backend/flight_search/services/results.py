"""
Presentazione dei risultati: trasforma una lista di FlightOffer nella vista
mostrata all'utente (loading / nessun risultato / lista di card).

Nessuno stato: stessa lista in ingresso → stessa vista in uscita.
"""
from flight_search.models.airport import AirportsData
from flight_search.models.flight import FlightOffer
from flight_search.models.schemas import FlightCardOut, ResultsView
from flight_search.services.airport_lookup import display_name
from flight_search.utils.dates import format_date, format_time

LOADING_MESSAGE = "Searching for flights..."

EMPTY_TITLE = "No flights found"
EMPTY_MESSAGE = (
    "We couldn't find any flights matching your search criteria. "
    "Please try adjusting your destination or departure date."
)
EMPTY_HINTS_LABEL = "Available flights are limited to:"
EMPTY_HINTS = [
    "Origin: Amsterdam (AMS)",
    "Dates: November 10-30, 2022",
]


def format_price(amount: float) -> str:
    return f"€{amount:.2f}"


def count_label(count: int) -> str:
    return f"{count} flight{'' if count == 1 else 's'} found"


def _name_if_known(airports: AirportsData, code: str) -> str | None:
    name = display_name(airports, code)
    return name if name != code else None


def build_card(offer: FlightOffer, airports: AirportsData) -> FlightCardOut:
    return FlightCardOut(
        id=offer.id,
        origin_code=offer.origin_code,
        origin_name=_name_if_known(airports, offer.origin_code),
        destination_code=offer.destination_code,
        destination_name=_name_if_known(airports, offer.destination_code),
        departure_time=format_time(offer.departure_time),
        arrival_time=format_time(offer.arrival_time),
        flight_date=format_date(offer.departure_time),
        flight_label=f"{offer.airline_code} {offer.flight_number}",
        fare_class=offer.fare_class,
        total_price=format_price(offer.total_price),
        price_per_passenger=format_price(offer.price_per_passenger),
        base_fare=format_price(offer.base_fare),
        tax_surcharge=format_price(offer.tax_surcharge),
        currency_code=offer.currency_code,
        booking_link=offer.booking_link,
    )


def render_results(
    offers: list[FlightOffer],
    airports: AirportsData,
    is_loading: bool = False,
) -> ResultsView:
    if is_loading:
        return ResultsView(state="loading", message=LOADING_MESSAGE)

    if not offers:
        return ResultsView(
            state="empty",
            heading=EMPTY_TITLE,
            message=EMPTY_MESSAGE,
            hints_label=EMPTY_HINTS_LABEL,
            hints=list(EMPTY_HINTS),
        )

    return ResultsView(
        state="results",
        heading="Available Flights",
        count_label=count_label(len(offers)),
        flights=[build_card(offer, airports) for offer in offers],
    )
