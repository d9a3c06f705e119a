from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class CountryName(BaseModel):
    model_config = ConfigDict(extra="allow")

    common: str
    official: Optional[str] = None


class Country(BaseModel):
    """
    Country metadata as returned by REST Countries v3.1 with
    fields=name,capital,region,subregion.
    Some territories have no capital or subregion, so those default to empty.
    """
    model_config = ConfigDict(extra="allow")

    name: CountryName
    capital: List[str] = Field(default_factory=list)
    region: str = ""
    subregion: str = ""


class LeaderboardEntry(BaseModel):
    country: Optional[Country] = None
    votes: int = Field(..., ge=1)
    # voted name, kept for tie-breaking even when no metadata matched
    country_name: str = Field(..., exclude=True)
