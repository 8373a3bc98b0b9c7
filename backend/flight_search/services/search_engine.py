"""
Core logic della ricerca voli: filtri per destinazione e data, ordinamento
per orario di partenza.

Tutte le funzioni sono pure: restituiscono liste nuove e non modificano mai
la sequenza ricevuta.

Timestamp di partenza non parsabili:
  - filter_by_date  → l'offerta non corrisponde mai
  - sort_by_departure_time → finisce in coda, nell'ordine di input
"""
import logging
from collections.abc import Iterable, Sequence
from datetime import date, datetime

from flight_search.models.flight import FlightOffer, FlightsData
from flight_search.utils.dates import parse_timestamp, same_utc_day

logger = logging.getLogger(__name__)


def filter_by_destination(offers: Iterable[FlightOffer], destination_code: str) -> list[FlightOffer]:
    wanted = destination_code.lower()
    return [o for o in offers if o.destination_code.lower() == wanted]


def filter_by_date(offers: Iterable[FlightOffer], departure_date: date | datetime) -> list[FlightOffer]:
    """Offerte che partono nello stesso giorno di calendario UTC di departure_date."""
    matches: list[FlightOffer] = []
    for offer in offers:
        departure = parse_timestamp(offer.departure_time)
        if departure is None:
            logger.warning("Offerta %s: departure_time non valido %r", offer.id, offer.departure_time)
            continue
        if same_utc_day(departure, departure_date):
            matches.append(offer)
    return matches


def search(flights: FlightsData, destination_code: str, departure_date: date | datetime) -> list[FlightOffer]:
    """Filtra prima per destinazione, poi per data."""
    destination_matches = filter_by_destination(flights.offers, destination_code)
    return filter_by_date(destination_matches, departure_date)


def _departure_sort_key(offer: FlightOffer) -> tuple[bool, datetime | None]:
    departure = parse_timestamp(offer.departure_time)
    # (False, instant) per i validi, (True, None) per i non parsabili → in coda
    return (departure is None, departure)


def sort_by_departure_time(offers: Sequence[FlightOffer]) -> list[FlightOffer]:
    """Nuova lista ordinata per partenza crescente (ordinamento stabile)."""
    return sorted(offers, key=_departure_sort_key)
