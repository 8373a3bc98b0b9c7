"""
Search form: stato del form di ricerca e regole di validazione.

Stati:
    EDITING              → iniziale, e dopo ogni modifica di un campo
    VALIDATING           → durante submit()
    EDITING_WITH_ERRORS  → validazione fallita, errori per campo disponibili
    SUBMITTED            → validazione ok, SearchQuery passata al callback

Ad ogni submit gli errori vengono ricalcolati da zero: un campo corretto
perde il suo messaggio al passaggio successivo.
"""
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from flight_search.models.airport import AirportsData
from flight_search.services.airport_lookup import airport_options, all_codes
from flight_search.utils.dates import (
    AVAILABLE_RANGE_LABEL,
    from_input_format,
    in_range,
    max_selectable_date,
    min_selectable_date,
    to_input_format,
)

DEFAULT_ORIGIN = "AMS"


@dataclass(frozen=True)
class SearchQuery:
    origin: str
    destination: str
    departure_date: datetime  # mezzanotte UTC


class FormState(str, Enum):
    EDITING = "editing"
    VALIDATING = "validating"
    EDITING_WITH_ERRORS = "editing_with_errors"
    SUBMITTED = "submitted"


def validate(
    airports: AirportsData,
    origin: str,
    destination: str,
    departure_date: str,
) -> dict[str, str]:
    """Tutte le regole vengono valutate insieme: un messaggio per ogni campo non valido."""
    errors: dict[str, str] = {}
    known_codes = [code.upper() for code in all_codes(airports)]

    if not origin:
        errors["origin"] = "Please select an origin airport"
    elif origin.upper() not in known_codes:
        errors["origin"] = "Please select a valid origin airport"

    if not destination:
        errors["destination"] = "Please select a destination airport"
    elif destination.upper() not in known_codes:
        errors["destination"] = "Please select a valid destination airport"
    elif destination.upper() == origin.upper():
        errors["destination"] = "Destination must be different from origin"

    if not departure_date:
        errors["departureDate"] = "Please select a departure date"
    else:
        selected = from_input_format(departure_date)
        if selected is None:
            errors["departureDate"] = "Please enter a valid departure date (YYYY-MM-DD)"
        elif not in_range(selected):
            errors["departureDate"] = (
                f"Selected date is outside available range ({AVAILABLE_RANGE_LABEL})"
            )

    return errors


class SearchForm:

    def __init__(self, airports: AirportsData, origin: str = DEFAULT_ORIGIN) -> None:
        self.airports = airports
        self.origin = origin
        self.destination = ""
        self.departure_date = ""
        self.errors: dict[str, str] = {}
        self.state = FormState.EDITING

    @property
    def min_date(self) -> str:
        return to_input_format(min_selectable_date())

    @property
    def max_date(self) -> str:
        return to_input_format(max_selectable_date())

    @property
    def options(self) -> list[tuple[str, str]]:
        return airport_options(self.airports)

    def set_field(self, name: str, value: str) -> None:
        """Aggiorna un campo. Gli errori mostrati restano fino al prossimo submit."""
        if name == "origin":
            self.origin = value
        elif name == "destination":
            self.destination = value
        elif name == "departureDate":
            self.departure_date = value
        else:
            raise ValueError(f"Campo sconosciuto: {name}")
        self.state = FormState.EDITING

    def submit(self, on_search: Callable[[SearchQuery], object]) -> SearchQuery | None:
        """
        Valida il form. Se valido costruisce la SearchQuery, la passa a
        on_search e la restituisce; altrimenti restituisce None e on_search
        non viene chiamato.
        """
        self.state = FormState.VALIDATING
        self.errors = validate(self.airports, self.origin, self.destination, self.departure_date)

        if self.errors:
            self.state = FormState.EDITING_WITH_ERRORS
            return None

        query = SearchQuery(
            origin=self.origin.upper(),
            destination=self.destination.upper(),
            departure_date=from_input_format(self.departure_date),
        )
        self.state = FormState.SUBMITTED
        on_search(query)
        return query
