"""Data models for MTR line direction data."""

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..utils.localization import Language, get_localized_name

CanonicalDirection = Literal["DT", "UT"]
UrlDirection = Literal["down", "up"]

URL_DIRECTIONS: dict[str, UrlDirection] = {"DT": "down", "UT": "up"}


class CsvRow(BaseModel):
    """One parsed row of the lines-and-stations CSV."""

    model_config = ConfigDict(frozen=True)

    line_code: str = Field(..., description="Line code, e.g. EAL")
    raw_direction: str = Field(
        ..., description="Direction as written in the CSV (DT, UT or LMC-DT)"
    )
    station_code: str = Field(..., description="Three-letter station code")
    station_id: str = Field(..., description="Numeric station ID as text")
    name_zh: str = Field(..., description="Station name in Chinese")
    name_en: str = Field(..., description="Station name in English")
    sequence: Decimal = Field(..., description="Raw position along the direction")


class Station(BaseModel):
    """A station as it appears within one direction entry."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="Three-letter station code")
    id: str = Field(..., description="Numeric station ID as text")
    name_zh: str = Field(..., description="Station name in Chinese")
    name_en: str = Field(..., description="Station name in English")
    sequence: int = Field(..., ge=1, description="1-based position in direction")

    def display_name(self, language: Language = "en") -> str:
        """Station name in the requested language."""
        return get_localized_name(self, language)

    def __str__(self) -> str:
        return f"{self.name_en} ({self.code})"


class DirectionEntry(BaseModel):
    """Ordered station list of one line travelling in one canonical direction."""

    model_config = ConfigDict(frozen=True)

    line_code: str = Field(..., description="Line code, e.g. TWL")
    direction: CanonicalDirection = Field(..., description="DT (down) or UT (up)")
    url_direction: UrlDirection = Field(
        ..., description="URL-friendly direction used in board routes"
    )
    stations: tuple[Station, ...] = Field(
        default_factory=tuple, description="Stations in travel order"
    )
    # Multiple codes indicate alternative branch termini
    start_termini: tuple[str, ...] = Field(
        default_factory=tuple, description="Origin terminus codes, sorted"
    )
    end_termini: tuple[str, ...] = Field(
        default_factory=tuple, description="Destination terminus codes, sorted"
    )

    @model_validator(mode="after")
    def _check_invariants(self) -> "DirectionEntry":
        if self.url_direction != URL_DIRECTIONS[self.direction]:
            raise ValueError(
                f"{self.line_code} {self.direction}: url_direction must be "
                f"{URL_DIRECTIONS[self.direction]!r}, got {self.url_direction!r}"
            )

        codes = [s.code for s in self.stations]
        if len(set(codes)) != len(codes):
            raise ValueError(f"{self.line_code} {self.direction}: duplicate codes")

        sequences = [s.sequence for s in self.stations]
        if sequences != list(range(1, len(sequences) + 1)):
            raise ValueError(
                f"{self.line_code} {self.direction}: sequences must run 1..N in order"
            )

        for label, termini in (
            ("start_termini", self.start_termini),
            ("end_termini", self.end_termini),
        ):
            if list(termini) != sorted(termini):
                raise ValueError(
                    f"{self.line_code} {self.direction}: {label} must be sorted"
                )
        return self

    def station_codes(self) -> list[str]:
        """Station codes in travel order."""
        return [s.code for s in self.stations]

    def get_station(self, code: str) -> Station | None:
        """Get the station with the given code, if it is served in this direction."""
        for station in self.stations:
            if station.code == code:
                return station
        return None

    def __str__(self) -> str:
        return f"{self.line_code} {self.direction} ({len(self.stations)} stations)"


class MtrLineInfo(BaseModel):
    """Static metadata for an MTR line."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="Line code")
    name_en: str = Field(..., description="Line name in English")
    name_zh: str = Field(..., description="Line name in Chinese")
    color: str = Field(..., description="Brand color as #RRGGBB")

    def display_name(self, language: Language = "en") -> str:
        """Line name in the requested language."""
        return get_localized_name(self, language)

    def __str__(self) -> str:
        return self.name_en
