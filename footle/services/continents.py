"""Country code to continent buckets for the nationality hint.

Two players with different nationalities on the same continent get a yellow
(partial) nationality tile. Codes are Sorare country codes, upper-cased,
including the home nations ("GB-ENG", "GB-SCT", ...).

The table is kept as historically shipped so verdicts stay stable. Some
entries are known to be wrong and should be corrected as data, not relied on:
"--" maps to Asia, RU/TR/CY/GE/AM/AZ are Asia, and anything missing falls into
OTHER, which makes two unrelated unmapped countries a partial match.
"""

from enum import Enum


class Continent(str, Enum):
    ASIA = "asia"
    EUROPE = "europe"
    AFRICA = "africa"
    OCEANIA = "oceania"
    AMERICAS = "americas"
    OTHER = "other"


CONTINENTS: dict[str, Continent] = {
    "AF": Continent.ASIA,
    "AL": Continent.EUROPE,
    "DZ": Continent.AFRICA,
    "AS": Continent.OCEANIA,
    "AD": Continent.EUROPE,
    "AO": Continent.AFRICA,
    "AI": Continent.AMERICAS,
    "AG": Continent.AMERICAS,
    "AR": Continent.AMERICAS,
    "AM": Continent.ASIA,
    "AW": Continent.AMERICAS,
    "AU": Continent.OCEANIA,
    "AT": Continent.EUROPE,
    "AZ": Continent.ASIA,
    "BS": Continent.AMERICAS,
    "BH": Continent.ASIA,
    "BD": Continent.ASIA,
    "BB": Continent.AMERICAS,
    "BY": Continent.EUROPE,
    "BE": Continent.EUROPE,
    "BZ": Continent.AMERICAS,
    "BJ": Continent.AFRICA,
    "BM": Continent.AMERICAS,
    "BT": Continent.ASIA,
    "BO": Continent.AMERICAS,
    "BA": Continent.EUROPE,
    "BW": Continent.AFRICA,
    "BR": Continent.AMERICAS,
    "VG": Continent.AMERICAS,
    "BN": Continent.ASIA,
    "BG": Continent.EUROPE,
    "BF": Continent.AFRICA,
    "BI": Continent.AFRICA,
    "KH": Continent.ASIA,
    "CM": Continent.AFRICA,
    "CA": Continent.AMERICAS,
    "CV": Continent.AFRICA,
    "KY": Continent.AMERICAS,
    "CF": Continent.AFRICA,
    "TD": Continent.AFRICA,
    "CL": Continent.AMERICAS,
    "CN": Continent.ASIA,
    "CX": Continent.ASIA,
    "CC": Continent.ASIA,
    "CO": Continent.AMERICAS,
    "KM": Continent.AFRICA,
    "CG": Continent.AFRICA,
    "CK": Continent.OCEANIA,
    "CR": Continent.AMERICAS,
    "CI": Continent.AFRICA,
    "HR": Continent.EUROPE,
    "CU": Continent.AMERICAS,
    "CY": Continent.ASIA,
    "CZ": Continent.EUROPE,
    "DK": Continent.EUROPE,
    "DJ": Continent.AFRICA,
    "DM": Continent.AMERICAS,
    "DO": Continent.AMERICAS,
    "EC": Continent.AMERICAS,
    "EG": Continent.AFRICA,
    "SV": Continent.AMERICAS,
    "GQ": Continent.AFRICA,
    "ER": Continent.AFRICA,
    "EE": Continent.EUROPE,
    "ET": Continent.AFRICA,
    "FK": Continent.AMERICAS,
    "FO": Continent.EUROPE,
    "FJ": Continent.OCEANIA,
    "FI": Continent.EUROPE,
    "FR": Continent.EUROPE,
    "GF": Continent.AMERICAS,
    "PF": Continent.OCEANIA,
    "GA": Continent.AFRICA,
    "GM": Continent.AFRICA,
    "GE": Continent.ASIA,
    "DE": Continent.EUROPE,
    "GH": Continent.AFRICA,
    "GI": Continent.EUROPE,
    "GR": Continent.EUROPE,
    "GL": Continent.AMERICAS,
    "GD": Continent.AMERICAS,
    "GP": Continent.AMERICAS,
    "GU": Continent.OCEANIA,
    "GT": Continent.AMERICAS,
    "GN": Continent.AFRICA,
    "GW": Continent.AFRICA,
    "GY": Continent.AMERICAS,
    "HT": Continent.AMERICAS,
    "VA": Continent.EUROPE,
    "HN": Continent.AMERICAS,
    "HU": Continent.EUROPE,
    "IS": Continent.EUROPE,
    "IN": Continent.ASIA,
    "ID": Continent.ASIA,
    "IR": Continent.ASIA,
    "IQ": Continent.ASIA,
    "IE": Continent.EUROPE,
    "IL": Continent.ASIA,
    "IT": Continent.EUROPE,
    "JM": Continent.AMERICAS,
    "JP": Continent.ASIA,
    "JO": Continent.ASIA,
    "KZ": Continent.ASIA,
    "KE": Continent.AFRICA,
    "KI": Continent.OCEANIA,
    "KP": Continent.ASIA,
    "KR": Continent.ASIA,
    "KW": Continent.ASIA,
    "KG": Continent.ASIA,
    "LA": Continent.ASIA,
    "LV": Continent.EUROPE,
    "LB": Continent.ASIA,
    "LS": Continent.AFRICA,
    "LR": Continent.AFRICA,
    "LY": Continent.AFRICA,
    "LI": Continent.EUROPE,
    "LT": Continent.EUROPE,
    "LU": Continent.EUROPE,
    "MK": Continent.EUROPE,
    "MG": Continent.AFRICA,
    "MW": Continent.AFRICA,
    "MY": Continent.ASIA,
    "MV": Continent.ASIA,
    "ML": Continent.AFRICA,
    "MT": Continent.EUROPE,
    "MH": Continent.OCEANIA,
    "MQ": Continent.AMERICAS,
    "MR": Continent.AFRICA,
    "MU": Continent.AFRICA,
    "YT": Continent.AFRICA,
    "MX": Continent.AMERICAS,
    "FM": Continent.OCEANIA,
    "MD": Continent.EUROPE,
    "MC": Continent.EUROPE,
    "MN": Continent.ASIA,
    "MS": Continent.AMERICAS,
    "MA": Continent.AFRICA,
    "MZ": Continent.AFRICA,
    "NA": Continent.AFRICA,
    "NR": Continent.OCEANIA,
    "NP": Continent.ASIA,
    "NL": Continent.EUROPE,
    "AN": Continent.AMERICAS,
    "NC": Continent.OCEANIA,
    "NZ": Continent.OCEANIA,
    "NI": Continent.AMERICAS,
    "NE": Continent.AFRICA,
    "NG": Continent.AFRICA,
    "NU": Continent.OCEANIA,
    "NF": Continent.OCEANIA,
    "MP": Continent.OCEANIA,
    "NO": Continent.EUROPE,
    "OM": Continent.ASIA,
    "PK": Continent.ASIA,
    "PW": Continent.OCEANIA,
    "--": Continent.ASIA,
    "PA": Continent.AMERICAS,
    "PG": Continent.OCEANIA,
    "PY": Continent.AMERICAS,
    "PE": Continent.AMERICAS,
    "PH": Continent.ASIA,
    "PN": Continent.OCEANIA,
    "PL": Continent.EUROPE,
    "PT": Continent.EUROPE,
    "PR": Continent.AMERICAS,
    "QA": Continent.ASIA,
    "RE": Continent.AFRICA,
    "RO": Continent.EUROPE,
    "RU": Continent.ASIA,
    "RW": Continent.AFRICA,
    "KN": Continent.AMERICAS,
    "LC": Continent.AMERICAS,
    "PM": Continent.AMERICAS,
    "VC": Continent.AMERICAS,
    "SM": Continent.EUROPE,
    "ST": Continent.AFRICA,
    "SA": Continent.ASIA,
    "SN": Continent.AFRICA,
    "SC": Continent.AFRICA,
    "SL": Continent.AFRICA,
    "SG": Continent.ASIA,
    "SK": Continent.EUROPE,
    "SI": Continent.EUROPE,
    "SB": Continent.OCEANIA,
    "SO": Continent.AFRICA,
    "ZA": Continent.AFRICA,
    "ES": Continent.EUROPE,
    "LK": Continent.ASIA,
    "SD": Continent.AFRICA,
    "SR": Continent.AMERICAS,
    "SJ": Continent.EUROPE,
    "SZ": Continent.AFRICA,
    "SE": Continent.EUROPE,
    "CH": Continent.EUROPE,
    "SY": Continent.ASIA,
    "TW": Continent.ASIA,
    "TJ": Continent.ASIA,
    "TZ": Continent.AFRICA,
    "TH": Continent.ASIA,
    "TG": Continent.AFRICA,
    "TK": Continent.OCEANIA,
    "TO": Continent.OCEANIA,
    "TT": Continent.AMERICAS,
    "TN": Continent.AFRICA,
    "TR": Continent.ASIA,
    "TM": Continent.ASIA,
    "TC": Continent.AMERICAS,
    "TV": Continent.OCEANIA,
    "UG": Continent.AFRICA,
    "UA": Continent.EUROPE,
    "AE": Continent.ASIA,
    "GB": Continent.EUROPE,
    "GB-ENG": Continent.EUROPE,
    "GB-WLS": Continent.EUROPE,
    "GB-SCT": Continent.EUROPE,
    "GB-NIR": Continent.EUROPE,
    "US": Continent.AMERICAS,
    "UY": Continent.AMERICAS,
    "UZ": Continent.ASIA,
    "VU": Continent.OCEANIA,
    "VE": Continent.AMERICAS,
    "VN": Continent.ASIA,
    "VI": Continent.AMERICAS,
    "WF": Continent.OCEANIA,
    "EH": Continent.AFRICA,
    "WS": Continent.OCEANIA,
    "YE": Continent.ASIA,
    "ZR": Continent.AFRICA,
    "ZM": Continent.AFRICA,
    "ZW": Continent.AFRICA,
}


def continent_of(code: str) -> Continent:
    """Continent bucket for a country code (OTHER when unmapped)."""
    return CONTINENTS.get(code.upper(), Continent.OTHER)
