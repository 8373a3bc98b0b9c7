"""
Test per il modulo search_engine: filtri, search combinata, ordinamento.
Funzioni pure su FlightOffer: nessun mock.
"""
from datetime import date, datetime, timezone

from conftest import make_offer

from flight_search.models.flight import FlightsData
from flight_search.services.search_engine import (
    filter_by_date,
    filter_by_destination,
    search,
    sort_by_departure_time,
)

UTC = timezone.utc


def _ids(offers):
    return [o.id for o in offers]


# ---------------------------------------------------------------------------
# filter_by_destination
# ---------------------------------------------------------------------------

class TestFilterByDestination:

    def test_matching_destination(self, flights_data):
        result = filter_by_destination(flights_data.offers, "FNC")
        assert _ids(result) == ["AMSFNC20221110HV6629", "AMSFNC20221115HV5678"]

    def test_case_insensitive(self, flights_data):
        assert len(filter_by_destination(flights_data.offers, "fnc")) == 2

    def test_no_match(self, flights_data):
        assert filter_by_destination(flights_data.offers, "LHR") == []

    def test_single_match(self, flights_data):
        assert _ids(filter_by_destination(flights_data.offers, "CDG")) == ["AMSCDG20221110HV1234"]


# ---------------------------------------------------------------------------
# filter_by_date
# ---------------------------------------------------------------------------

class TestFilterByDate:

    def test_matching_date(self, flights_data, nov_10):
        result = filter_by_date(flights_data.offers, nov_10)
        assert _ids(result) == ["AMSCDG20221110HV1234", "AMSFNC20221110HV6629"]

    def test_other_date(self, flights_data):
        result = filter_by_date(flights_data.offers, datetime(2022, 11, 15, tzinfo=UTC))
        assert _ids(result) == ["AMSFNC20221115HV5678"]

    def test_no_flights_that_day(self, flights_data):
        assert filter_by_date(flights_data.offers, datetime(2022, 11, 20, tzinfo=UTC)) == []

    def test_time_of_day_ignored(self, flights_data):
        evening = datetime(2022, 11, 10, 23, 59, tzinfo=UTC)
        assert len(filter_by_date(flights_data.offers, evening)) == 2

    def test_plain_date_accepted(self, flights_data):
        assert len(filter_by_date(flights_data.offers, date(2022, 11, 10))) == 2

    def test_malformed_departure_never_matches(self, nov_10):
        offers = [make_offer("BAD", "invalid-date"), make_offer("OK", "2022-11-10T08:00:00")]
        assert _ids(filter_by_date(offers, nov_10)) == ["OK"]


# ---------------------------------------------------------------------------
# search
# ---------------------------------------------------------------------------

class TestSearch:

    def test_destination_and_date(self, flights_data, nov_10):
        assert _ids(search(flights_data, "FNC", nov_10)) == ["AMSFNC20221110HV6629"]

    def test_destination_matches_date_does_not(self, flights_data):
        assert search(flights_data, "CDG", datetime(2022, 11, 15, tzinfo=UTC)) == []

    def test_date_matches_destination_does_not(self, flights_data, nov_10):
        assert search(flights_data, "LHR", nov_10) == []

    def test_case_insensitive_destination(self, flights_data, nov_10):
        assert _ids(search(flights_data, "fnc", nov_10)) == ["AMSFNC20221110HV6629"]

    def test_empty_data(self, nov_10):
        assert search(FlightsData(result_count=0, offers=()), "FNC", nov_10) == []


# ---------------------------------------------------------------------------
# sort_by_departure_time
# ---------------------------------------------------------------------------

class TestSortByDepartureTime:

    def test_ascending(self, flights_data):
        result = sort_by_departure_time(list(flights_data.offers))
        assert _ids(result) == [
            "AMSFNC20221110HV6629",
            "AMSCDG20221110HV1234",
            "AMSFNC20221115HV5678",
        ]

    def test_does_not_mutate_input(self, flights_data):
        original = list(flights_data.offers)
        snapshot = list(original)
        result = sort_by_departure_time(original)
        assert original == snapshot
        assert result is not original

    def test_empty(self):
        assert sort_by_departure_time([]) == []

    def test_single(self):
        offer = make_offer("ONE", "2022-11-10T08:00:00")
        assert sort_by_departure_time([offer]) == [offer]

    def test_ties_keep_input_order(self):
        offers = [
            make_offer("B", "2022-11-10T08:00:00"),
            make_offer("A", "2022-11-10T08:00:00"),
            make_offer("C", "2022-11-10T07:00:00"),
        ]
        assert _ids(sort_by_departure_time(offers)) == ["C", "B", "A"]

    def test_malformed_sorted_last(self):
        offers = [
            make_offer("BAD", "not-a-timestamp"),
            make_offer("LATE", "2022-11-10T20:00:00"),
            make_offer("EARLY", "2022-11-10T06:00:00"),
        ]
        assert _ids(sort_by_departure_time(offers)) == ["EARLY", "LATE", "BAD"]

    def test_non_decreasing(self, flights_data):
        result = sort_by_departure_time(flights_data.offers)
        departures = [datetime.fromisoformat(o.departure_time) for o in result]
        assert departures == sorted(departures)
