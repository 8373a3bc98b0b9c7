from typing import Literal

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Airports
# ---------------------------------------------------------------------------

class AirportOut(BaseModel):
    code: str
    display_name: str
    description: str

    # Permette a Pydantic di leggere i dati direttamente dal modello Airport
    model_config = {"from_attributes": True}


class AirportOptionOut(BaseModel):
    code: str
    label: str  # "AMS - Amsterdam (Schiphol)"


# ---------------------------------------------------------------------------
# Search form
# ---------------------------------------------------------------------------

class SearchFormOut(BaseModel):
    default_origin: str
    min_date: str
    max_date: str
    options: list[AirportOptionOut]


class SearchIn(BaseModel):
    # Stringhe grezze come arrivano dal form: la validazione vera è in search_form
    origin: str = ""
    destination: str = ""
    departure_date: str = Field(default="", alias="departureDate")

    model_config = {"populate_by_name": True}


# ---------------------------------------------------------------------------
# Results (una card per ogni offerta)
# ---------------------------------------------------------------------------

class FlightCardOut(BaseModel):
    id: str
    origin_code: str
    origin_name: str | None         # None quando il nome coincide con il codice
    destination_code: str
    destination_name: str | None
    departure_time: str             # "06:25"
    arrival_time: str
    flight_date: str                # "November 10, 2022"
    flight_label: str               # "HV 6629"
    fare_class: str
    total_price: str                # "€58.70"
    price_per_passenger: str
    base_fare: str
    tax_surcharge: str
    currency_code: str
    booking_link: str


class ResultsView(BaseModel):
    state: Literal["loading", "empty", "results"]
    message: str | None = None
    heading: str | None = None
    count_label: str | None = None
    hints_label: str | None = None
    hints: list[str] = []
    flights: list[FlightCardOut] = []


# ---------------------------------------------------------------------------
# Page status
# ---------------------------------------------------------------------------

class PageStatusOut(BaseModel):
    status: Literal["loading", "error", "ready"]
    error: str | None = None
    retry_available: bool
    has_searched: bool
    is_searching: bool
    offers_available: int | None = None  # resultSet.count del documento voli
