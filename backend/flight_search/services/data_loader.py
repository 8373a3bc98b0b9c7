"""
Caricamento dei due documenti statici (airports.json, flights-from-AMS.json).

Flusso:
  1. GET del documento con httpx (errore HTTP/di rete → DataLoadError)
  2. Decodifica JSON; payload vuoto o "falsy" → DataLoadError
  3. Validazione pydantic e conversione nei record del dominio
     (struttura non valida → DataLoadError, fail fast)

Senza DATA_BASE_URL i file inclusi nel pacchetto vengono serviti in-process
da uno StaticFiles montato dietro httpx.ASGITransport: il codice di fetch
resta identico a quello verso un host remoto.
"""
import logging

import httpx
from fastapi.staticfiles import StaticFiles
from pydantic import ValidationError

from flight_search.config import Settings, settings
from flight_search.models.airport import AirportsData
from flight_search.models.flight import FlightsData, FlightsDocument

logger = logging.getLogger(__name__)

_LOCAL_BASE_URL = "http://static.local"


class DataLoadError(RuntimeError):
    """Uno dei documenti non è stato caricato: errore fatale per la pagina."""


def build_client(config: Settings = settings) -> httpx.AsyncClient:
    """Client verso l'host dei dati: remoto se configurato, altrimenti la cartella data/."""
    if config.data_base_url:
        return httpx.AsyncClient(
            base_url=config.data_base_url.rstrip("/"),
            timeout=config.fetch_timeout_seconds,
        )

    static_app = StaticFiles(directory=config.data_dir)
    return httpx.AsyncClient(
        transport=httpx.ASGITransport(app=static_app),
        base_url=_LOCAL_BASE_URL,
        timeout=config.fetch_timeout_seconds,
    )


async def _fetch_json(client: httpx.AsyncClient, path: str, failure_message: str) -> object:
    try:
        resp = await client.get(f"/{path.lstrip('/')}")
        resp.raise_for_status()
    except httpx.HTTPError as exc:
        logger.warning("Fetch %s fallito: %s: %s", path, type(exc).__name__, exc)
        raise DataLoadError(failure_message) from exc

    try:
        return resp.json()
    except ValueError as exc:
        logger.warning("Fetch %s: body non è JSON valido", path)
        raise DataLoadError(failure_message) from exc


async def load_airports(client: httpx.AsyncClient, path: str = settings.airports_path) -> AirportsData:
    payload = await _fetch_json(client, path, "Failed to load airports data")
    if not payload:
        raise DataLoadError("Airports data is empty or invalid")
    try:
        return AirportsData.model_validate(payload)
    except ValidationError as exc:
        logger.warning("airports.json non valido: %s", exc)
        raise DataLoadError("Airports data is empty or invalid") from exc


async def load_flights(client: httpx.AsyncClient, path: str = settings.flights_path) -> FlightsData:
    payload = await _fetch_json(client, path, "Failed to load flights data")
    if not payload:
        raise DataLoadError("Flights data is empty or invalid")
    try:
        document = FlightsDocument.model_validate(payload)
    except ValidationError as exc:
        logger.warning("flights.json non valido: %s", exc)
        raise DataLoadError("Flights data is empty or invalid") from exc
    return FlightsData.from_document(document)
