"""
Page controller: orchestrazione della pagina di ricerca.

Ciclo di vita:
  LOADING → load() carica airports e poi flights (in sequenza)
  READY   → entrambi i documenti disponibili, il form può essere usato
  ERROR   → il primo documento fallito blocca il caricamento; il messaggio
            viene mostrato insieme al pulsante Retry (= reload completo)

La ricerca non solleva mai: origin non supportata o errori imprevisti
producono una lista vuota.
"""
import asyncio
import logging
from collections.abc import Callable
from enum import Enum

import httpx

from flight_search.config import Settings, settings
from flight_search.models.airport import AirportsData
from flight_search.models.flight import FlightOffer, FlightsData
from flight_search.models.schemas import PageStatusOut, ResultsView
from flight_search.services.data_loader import DataLoadError, build_client, load_airports, load_flights
from flight_search.services.results import render_results
from flight_search.services.search_engine import search, sort_by_departure_time
from flight_search.services.search_form import SearchForm, SearchQuery

logger = logging.getLogger(__name__)

_GENERIC_LOAD_ERROR = "Failed to load flight data. Please refresh the page to try again."


class PageStatus(str, Enum):
    LOADING = "loading"
    ERROR = "error"
    READY = "ready"


class FlightSearchPage:

    def __init__(
        self,
        config: Settings = settings,
        client_factory: Callable[[Settings], httpx.AsyncClient] = build_client,
    ) -> None:
        self.config = config
        self._client_factory = client_factory
        self._reset()

    def _reset(self) -> None:
        self.status = PageStatus.LOADING
        self.error: str | None = None
        self.airports: AirportsData | None = None
        self.flights: FlightsData | None = None
        self.results: list[FlightOffer] = []
        self.last_query: SearchQuery | None = None
        self.has_searched = False
        self._active_searches = 0

    # ------------------------------------------------------------------
    # Caricamento dati
    # ------------------------------------------------------------------

    async def load(self) -> PageStatus:
        """Carica i due documenti. Il primo errore interrompe il caricamento."""
        self.status = PageStatus.LOADING
        try:
            async with self._client_factory(self.config) as client:
                self.airports = await load_airports(client, self.config.airports_path)
                self.flights = await load_flights(client, self.config.flights_path)
        except DataLoadError as exc:
            self._fail(str(exc))
        except Exception as exc:
            logger.exception("Caricamento dati fallito")
            self._fail(str(exc) or _GENERIC_LOAD_ERROR)
        else:
            self.status = PageStatus.READY
            logger.info(
                "Dati caricati: %d aeroporti, %d offerte",
                len(self.airports.airports), len(self.flights.offers),
            )
        return self.status

    def _fail(self, message: str) -> None:
        logger.warning("Pagina in stato di errore: %s", message)
        self.status = PageStatus.ERROR
        self.error = message

    async def reload(self) -> PageStatus:
        """Retry: riparte da zero, come un refresh completo della pagina."""
        self._reset()
        return await self.load()

    @property
    def is_ready(self) -> bool:
        return self.status is PageStatus.READY

    @property
    def is_searching(self) -> bool:
        # Resta True finché almeno una ricerca è ancora in corso
        return self._active_searches > 0

    def page_status(self) -> PageStatusOut:
        return PageStatusOut(
            status=self.status.value,
            error=self.error,
            retry_available=self.status is PageStatus.ERROR,
            has_searched=self.has_searched,
            is_searching=self.is_searching,
            offers_available=self.flights.result_count if self.flights else None,
        )

    # ------------------------------------------------------------------
    # Ricerca
    # ------------------------------------------------------------------

    def new_form(self) -> SearchForm:
        if self.airports is None:
            raise RuntimeError("Airports data not loaded")
        return SearchForm(self.airports)

    async def search(self, query: SearchQuery) -> list[FlightOffer]:
        if self.flights is None:
            logger.error("Flights data not available while searching")
            return []

        self._active_searches += 1
        self.has_searched = True
        self.last_query = query

        try:
            # Breve attesa prima di mostrare i risultati
            await asyncio.sleep(self.config.search_delay_seconds)

            if query.origin != self.config.supported_origin:
                # Solo AMS è presente nei dati: nessun risultato, nessun errore
                self.results = []
                return self.results

            matches = search(self.flights, query.destination, query.departure_date)
            self.results = sort_by_departure_time(matches)
        except Exception:
            logger.exception("Errore durante la ricerca voli")
            self.results = []
        finally:
            self._active_searches -= 1

        return self.results

    async def submit(self, form: SearchForm) -> list[FlightOffer] | None:
        """Submit del form: None se la validazione fallisce, altrimenti i risultati."""
        query = form.submit(self._log_query)
        if query is None:
            return None
        return await self.search(query)

    def _log_query(self, query: SearchQuery) -> None:
        logger.info("Ricerca %s → %s il %s", query.origin, query.destination, query.departure_date.date())

    def results_view(self) -> ResultsView:
        return render_results(self.results, self.airports, is_loading=self.is_searching)
