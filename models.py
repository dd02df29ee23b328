# models.py
from typing import Optional, List, Literal
from pydantic import BaseModel, ConfigDict, Field, constr, field_validator

# ===== PROVIDER (DHL location finder) =====
class OpeningHoursEntry(BaseModel):
    model_config = ConfigDict(extra="ignore")

    dayOfWeek: str = ""   # например "http://schema.org/Monday"
    opens: str = ""
    closes: str = ""

    @field_validator("dayOfWeek", "opens", "closes", mode="before")
    @classmethod
    def _null_to_empty(cls, v):
        return "" if v is None else v

class Place(BaseModel):
    model_config = ConfigDict(extra="ignore")

    address: dict = Field(default_factory=dict)

    @field_validator("address", mode="before")
    @classmethod
    def _null_address(cls, v):
        return {} if v is None else v

class RawLocation(BaseModel):
    model_config = ConfigDict(extra="ignore")

    url: str = ""         # например "/locations/8003-4102103"
    name: str = ""
    place: Place = Field(default_factory=Place)
    openingHours: List[OpeningHoursEntry] = Field(default_factory=list)

    # DHL иногда присылает null вместо пустых значений
    @field_validator("url", "name", mode="before")
    @classmethod
    def _null_to_empty(cls, v):
        return "" if v is None else v

    @field_validator("place", mode="before")
    @classmethod
    def _null_place(cls, v):
        return {} if v is None else v

    @field_validator("openingHours", mode="before")
    @classmethod
    def _null_hours(cls, v):
        return [] if v is None else v

class CountryCodeResult(BaseModel):
    totalCount: int = 0
    iso2Code: Optional[str] = None

# ===== SEARCH =====
class SearchQuery(BaseModel):
    country: str = ""
    city: str = ""
    postalCode: str = ""

    @property
    def complete(self) -> bool:
        return bool(self.country and self.city and self.postalCode)

class FilteredLocation(BaseModel):
    locationName: str
    address: dict
    openingHours: dict[str, str]

SearchStatus = Literal[
    "configuration_missing",
    "awaiting_input",
    "country_not_found",
    "error",
    "empty",
    "found",
]

class SearchForm(BaseModel):
    country: str = ""
    city: str = ""
    postCode: str = ""

class SearchResult(BaseModel):
    status: SearchStatus
    message: Optional[str] = None
    form: Optional[SearchForm] = None
    locations: List[FilteredLocation] = Field(default_factory=list)

# ===== SETTINGS =====
class ApiKeyIn(BaseModel):
    api_key: constr(strip_whitespace=True, min_length=1)

class SettingsForm(BaseModel):
    api_key: Optional[str] = None
    title: str = "API Key"
    description: str
    required: bool = True

class SettingsSaved(BaseModel):
    message: str
    api_key: str
