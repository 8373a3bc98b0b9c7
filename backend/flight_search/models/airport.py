from pydantic import BaseModel, ConfigDict, Field


class Airport(BaseModel):
    """Un record di airports.json. Il codice IATA è in ItemName."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    code: str = Field(alias="ItemName")
    display_name: str = Field(alias="AirportName")
    description: str = Field(default="", alias="Description")


class AirportsData(BaseModel):
    """Documento airports.json completo: {"Airports": [...]}"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    airports: tuple[Airport, ...] = Field(alias="Airports")
