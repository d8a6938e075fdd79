"""Fixed lookup tables for US address normalization.

This module provides the single source of truth for state name mappings,
street type abbreviations, and city name exceptions used by the normalizer.
All tables are read-only mappings built once at import time.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

# State name to abbreviation mapping (lowercase name -> abbreviation)
# Includes all 50 US states plus District of Columbia
STATE_NAME_TO_ABBREV: Mapping[str, str] = MappingProxyType(
    {
        "alabama": "AL",
        "alaska": "AK",
        "arizona": "AZ",
        "arkansas": "AR",
        "california": "CA",
        "colorado": "CO",
        "connecticut": "CT",
        "delaware": "DE",
        "florida": "FL",
        "georgia": "GA",
        "hawaii": "HI",
        "idaho": "ID",
        "illinois": "IL",
        "indiana": "IN",
        "iowa": "IA",
        "kansas": "KS",
        "kentucky": "KY",
        "louisiana": "LA",
        "maine": "ME",
        "maryland": "MD",
        "massachusetts": "MA",
        "michigan": "MI",
        "minnesota": "MN",
        "mississippi": "MS",
        "missouri": "MO",
        "montana": "MT",
        "nebraska": "NE",
        "nevada": "NV",
        "new hampshire": "NH",
        "new jersey": "NJ",
        "new mexico": "NM",
        "new york": "NY",
        "north carolina": "NC",
        "north dakota": "ND",
        "ohio": "OH",
        "oklahoma": "OK",
        "oregon": "OR",
        "pennsylvania": "PA",
        "rhode island": "RI",
        "south carolina": "SC",
        "south dakota": "SD",
        "tennessee": "TN",
        "texas": "TX",
        "utah": "UT",
        "vermont": "VT",
        "virginia": "VA",
        "washington": "WA",
        "west virginia": "WV",
        "wisconsin": "WI",
        "wyoming": "WY",
        "district of columbia": "DC",
    }
)

# All valid state abbreviations (50 states + DC)
STATE_ABBREVS: frozenset[str] = frozenset(STATE_NAME_TO_ABBREV.values())

# Street type (lowercase, full or abbreviated) -> canonical USPS-style abbreviation
STREET_TYPE_ABBREVS: Mapping[str, str] = MappingProxyType(
    {
        "st": "St",
        "street": "St",
        "ave": "Ave",
        "avenue": "Ave",
        "rd": "Rd",
        "road": "Rd",
        "blvd": "Blvd",
        "boulevard": "Blvd",
        "dr": "Dr",
        "drive": "Dr",
        "ln": "Ln",
        "lane": "Ln",
        "ct": "Ct",
        "court": "Ct",
        "pkwy": "Pkwy",
        "parkway": "Pkwy",
        "pl": "Pl",
        "place": "Pl",
        "cir": "Cir",
        "circle": "Cir",
    }
)

# Multi-word city names matched exactly (case-insensitive) before title casing
CITY_NAME_EXCEPTIONS: Mapping[str, str] = MappingProxyType(
    {
        "new york": "New York",
        "los angeles": "Los Angeles",
        "san francisco": "San Francisco",
        "san diego": "San Diego",
        "las vegas": "Las Vegas",
    }
)
