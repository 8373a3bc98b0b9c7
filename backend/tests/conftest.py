"""
Fixture condivise per la test suite della ricerca voli.

Nessun servizio reale: i documenti JSON sono costruiti qui e serviti tramite
httpx.MockTransport quando serve simulare il fetch.
"""
from datetime import datetime, timezone

import httpx
import pytest

from flight_search.config import Settings
from flight_search.models.airport import AirportsData
from flight_search.models.flight import FlightOffer, FlightsData, FlightsDocument


# ---------------------------------------------------------------------------
# Documenti fittizi (stessa struttura dei file reali)
# ---------------------------------------------------------------------------

AIRPORTS_DOC = {
    "Airports": [
        {
            "ItemName": "AMS",
            "AirportName": "Amsterdam (Schiphol)",
            "Description": "Amsterdam (Schiphol), Netherlands",
        },
        {
            "ItemName": "CDG",
            "AirportName": "Paris Charles de Gaulle",
            "Description": "Paris Charles de Gaulle, France",
        },
        {
            "ItemName": "LHR",
            "AirportName": "London Heathrow",
            "Description": "London Heathrow, United Kingdom",
        },
        {
            "ItemName": "FNC",
            "AirportName": "Funchal",
            "Description": "Funchal, Portugal",
        },
    ]
}


def make_offer_doc(
    offer_id: str,
    departure: str,
    arrival: str,
    destination: str,
    flight_number: int,
    total: float,
    base: float,
    tax: float,
) -> dict:
    return {
        "outboundFlight": {
            "id": offer_id,
            "departureDateTime": departure,
            "arrivalDateTime": arrival,
            "marketingAirline": {"companyShortName": "HV"},
            "flightNumber": flight_number,
            "departureAirport": {"locationCode": "AMS"},
            "arrivalAirport": {"locationCode": destination},
        },
        "pricingInfoSum": {
            "totalPriceAllPassengers": total,
            "totalPriceOnePassenger": total,
            "baseFare": base,
            "taxSurcharge": tax,
            "currencyCode": "EUR",
            "productClass": "Basic",
        },
        "deeplink": {"href": f"https://www.transavia.com/booking/{offer_id}"},
    }


FLIGHTS_DOC = {
    "resultSet": {"count": 3},
    "flightOffer": [
        make_offer_doc(
            "AMSCDG20221110HV1234", "2022-11-10T14:30:00", "2022-11-10T16:45:00",
            "CDG", 1234, 89.5, 45.25, 44.25,
        ),
        make_offer_doc(
            "AMSFNC20221110HV6629", "2022-11-10T06:25:00", "2022-11-10T09:35:00",
            "FNC", 6629, 58.7, 29.51, 29.19,
        ),
        make_offer_doc(
            "AMSFNC20221115HV5678", "2022-11-15T08:15:00", "2022-11-15T11:25:00",
            "FNC", 5678, 62.3, 31.15, 31.15,
        ),
    ],
}


def make_offer(offer_id: str, departure: str, destination: str = "FNC") -> FlightOffer:
    """FlightOffer minimale: conta solo id, partenza e destinazione."""
    return FlightOffer(
        id=offer_id,
        departure_time=departure,
        arrival_time=departure,
        airline_code="HV",
        flight_number=1000,
        origin_code="AMS",
        destination_code=destination,
        total_price=50.0,
        price_per_passenger=50.0,
        base_fare=25.0,
        tax_surcharge=25.0,
        currency_code="EUR",
        fare_class="Basic",
        booking_link=f"https://www.transavia.com/booking/{offer_id}",
    )


# ---------------------------------------------------------------------------
# Dati caricati
# ---------------------------------------------------------------------------

@pytest.fixture
def airports_data() -> AirportsData:
    return AirportsData.model_validate(AIRPORTS_DOC)


@pytest.fixture
def flights_data() -> FlightsData:
    return FlightsData.from_document(FlightsDocument.model_validate(FLIGHTS_DOC))


@pytest.fixture
def nov_10():
    return datetime(2022, 11, 10, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Fetch simulato
# ---------------------------------------------------------------------------

@pytest.fixture
def test_settings() -> Settings:
    """Settings senza ritardo artificiale, base url fittizio."""
    return Settings(
        data_base_url="http://data.test",
        search_delay_seconds=0,
    )


def make_client_factory(routes: dict):
    """
    Factory di client httpx che risponde in base al path richiesto.

    routes: {"/airports.json": callable che crea httpx.Response | Exception}
    I path non presenti rispondono 404.
    """
    requested: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requested.append(request.url.path)
        outcome = routes.get(request.url.path)
        if outcome is None:
            return httpx.Response(404)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome()

    def factory(config: Settings) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            transport=httpx.MockTransport(handler),
            base_url=config.data_base_url,
        )

    factory.requested = requested
    return factory


@pytest.fixture
def ok_routes() -> dict:
    return {
        "/airports.json": lambda: httpx.Response(200, json=AIRPORTS_DOC),
        "/flights-from-AMS.json": lambda: httpx.Response(200, json=FLIGHTS_DOC),
    }
