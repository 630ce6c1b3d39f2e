from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class Coordinate:
    lon: float
    lat: float


@dataclass(frozen=True)
class Record:
    id: int
    name: str
    country: str
    coord: Coordinate = Coordinate(0.0, 0.0)

    @property
    def display_label(self) -> str:
        return f"{self.name}, {self.country}"

    # ---- JSON codec ----
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Record":
        """
        Build a Record from the catalog JSON shape:
            {"_id": 1, "name": "...", "country": "...", "coord": {"lon": .., "lat": ..}}
        `id` is accepted in place of `_id`. Raises ValueError on missing/mistyped fields.
        """
        if not isinstance(data, Mapping):
            raise ValueError(f"record must be an object, got {type(data).__name__}")
        rid = data.get("_id", data.get("id"))
        name = data.get("name")
        country = data.get("country")
        if isinstance(rid, bool) or not isinstance(rid, int):
            raise ValueError(f"record id must be an integer: {rid!r}")
        if not isinstance(name, str) or not isinstance(country, str):
            raise ValueError(f"record {rid}: name and country must be strings")

        raw = data.get("coord") or {}
        if not isinstance(raw, Mapping):
            raise ValueError(f"record {rid}: coord must be an object")
        try:
            coord = Coordinate(lon=float(raw.get("lon", 0.0)), lat=float(raw.get("lat", 0.0)))
        except (TypeError, ValueError) as exc:
            raise ValueError(f"record {rid}: bad coordinate {dict(raw)!r}") from exc
        return cls(id=rid, name=name, country=country, coord=coord)

    def to_dict(self) -> dict:
        return {
            "_id": self.id,
            "name": self.name,
            "country": self.country,
            "coord": {"lon": self.coord.lon, "lat": self.coord.lat},
        }
