"""
Airport lookup su airports.json caricato in memoria.

I codici sono confrontati case-insensitive. Se il documento contiene codici
duplicati vince sempre il primo record.
"""
from flight_search.models.airport import Airport, AirportsData


def find_by_code(data: AirportsData, code: str) -> Airport | None:
    wanted = code.lower()
    for airport in data.airports:
        if airport.code.lower() == wanted:
            return airport
    return None


def display_name(data: AirportsData, code: str) -> str:
    """
    Nome leggibile dell'aeroporto.

    Fallback al codice in maiuscolo solo se il record non esiste: un record
    con AirportName vuoto restituisce stringa vuota.
    """
    airport = find_by_code(data, code)
    if airport is None:
        return code.upper()
    return airport.display_name


def all_codes(data: AirportsData) -> list[str]:
    """Codici nell'ordine del documento. Ogni chiamata restituisce una lista nuova."""
    return [airport.code for airport in data.airports]


def airport_options(data: AirportsData) -> list[tuple[str, str]]:
    """Coppie (codice, "AMS - Amsterdam (Schiphol)") per le select del form."""
    return [(code, f"{code} - {display_name(data, code)}") for code in all_codes(data)]
