"""
Pydantic models for geolocation provider payloads.
"""

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, field_validator


class GeoLocation(BaseModel):
    """Location for one address, as returned by ``<provider>/geo``."""

    model_config = ConfigDict(extra="ignore")

    ip: str
    city: Optional[str] = None
    region: Optional[str] = None
    country: Optional[str] = None
    loc: str

    @field_validator("loc")
    @classmethod
    def _check_loc(cls, value: str) -> str:
        lat, sep, lng = value.partition(",")
        if not sep:
            raise ValueError("loc must be '<lat>,<lng>'")
        float(lat)
        float(lng)
        return value

    @property
    def lat_lng(self) -> Tuple[float, float]:
        """Map center for this location."""
        lat, _, lng = self.loc.partition(",")
        return float(lat), float(lng)

    def describe(self) -> str:
        """One-line summary, the first line of the CLI location output."""
        place = ", ".join(part for part in (self.city, self.region, self.country) if part)
        return f"{place or 'Unknown location'} (IP: {self.ip})"
