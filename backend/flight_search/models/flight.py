"""
Flight data: wire models for flights-from-AMS.json and the flat FlightOffer
record the search engine works on.

The nested document shape (outboundFlight / pricingInfoSum / deeplink) is
validated by pydantic at the loading boundary and flattened immediately, so
partial records never reach the filter pipeline.
"""
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class FlightOffer:
    """Offerta normalizzata: orario, prezzo e link di prenotazione."""
    id: str
    departure_time: str     # ISO datetime senza offset (es. "2022-11-10T06:25:00")
    arrival_time: str
    airline_code: str       # es. "HV" (Transavia)
    flight_number: int
    origin_code: str
    destination_code: str
    total_price: float      # totalPriceAllPassengers
    price_per_passenger: float
    base_fare: float
    tax_surcharge: float
    currency_code: str
    fare_class: str         # productClass, es. "Basic"
    booking_link: str


# ---------------------------------------------------------------------------
# Wire models (struttura del documento JSON)
# ---------------------------------------------------------------------------

class _WireModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class FlightAirport(_WireModel):
    locationCode: str


class MarketingAirline(_WireModel):
    companyShortName: str


class OutboundFlight(_WireModel):
    id: str
    departureDateTime: str
    arrivalDateTime: str
    marketingAirline: MarketingAirline
    flightNumber: int
    departureAirport: FlightAirport
    arrivalAirport: FlightAirport


class PricingInfoSum(_WireModel):
    totalPriceAllPassengers: float
    totalPriceOnePassenger: float
    baseFare: float
    taxSurcharge: float
    currencyCode: str
    productClass: str


class Deeplink(_WireModel):
    href: str


class FlightOfferDocument(_WireModel):
    outboundFlight: OutboundFlight
    pricingInfoSum: PricingInfoSum
    deeplink: Deeplink

    def to_offer(self) -> FlightOffer:
        flight = self.outboundFlight
        pricing = self.pricingInfoSum
        return FlightOffer(
            id=flight.id,
            departure_time=flight.departureDateTime,
            arrival_time=flight.arrivalDateTime,
            airline_code=flight.marketingAirline.companyShortName,
            flight_number=flight.flightNumber,
            origin_code=flight.departureAirport.locationCode,
            destination_code=flight.arrivalAirport.locationCode,
            total_price=pricing.totalPriceAllPassengers,
            price_per_passenger=pricing.totalPriceOnePassenger,
            base_fare=pricing.baseFare,
            tax_surcharge=pricing.taxSurcharge,
            currency_code=pricing.currencyCode,
            fare_class=pricing.productClass,
            booking_link=self.deeplink.href,
        )


class ResultSet(_WireModel):
    count: int


class FlightsDocument(_WireModel):
    resultSet: ResultSet
    flightOffer: list[FlightOfferDocument] = Field(default_factory=list)


@dataclass(frozen=True)
class FlightsData:
    """Collezione di offerte caricata una sola volta all'avvio."""
    result_count: int
    offers: tuple[FlightOffer, ...]

    @classmethod
    def from_document(cls, document: FlightsDocument) -> "FlightsData":
        return cls(
            result_count=document.resultSet.count,
            offers=tuple(item.to_offer() for item in document.flightOffer),
        )
