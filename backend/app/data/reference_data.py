"""
Banknote Verifier Backend — Reference Rule Table
=================================================

What:  Countries and per-denomination serial rules loaded by the seeder.
Why:   The verification engine is only as good as this table; keeping it as
       plain data makes additions reviewable without touching any logic.

Serial rules are grouped by country because every denomination of a given
series shares the same format. `DENOMINATIONS` expands them into one row per
face value.
"""

from typing import Dict, List, NamedTuple, Tuple


class CountrySeed(NamedTuple):
    code: str
    name: str
    currency: str
    currency_symbol: str


class DenominationSeed(NamedTuple):
    country_code: str
    value: str
    display_name: str
    serial_format: str
    serial_length: int
    pattern_description: str


COUNTRIES: List[CountrySeed] = [
    CountrySeed("US", "United States", "USD", "$"),
    CountrySeed("UK", "United Kingdom", "GBP", "£"),
    CountrySeed("EU", "European Union", "EUR", "€"),
    CountrySeed("JP", "Japan", "JPY", "¥"),
    CountrySeed("CA", "Canada", "CAD", "C$"),
    CountrySeed("AU", "Australia", "AUD", "A$"),
    CountrySeed("CH", "Switzerland", "CHF", "CHF"),
    CountrySeed("CN", "China", "CNY", "¥"),
    CountrySeed("IN", "India", "INR", "₹"),
    CountrySeed("KR", "South Korea", "KRW", "₩"),
    CountrySeed("SG", "Singapore", "SGD", "S$"),
    CountrySeed("HK", "Hong Kong", "HKD", "HK$"),
    CountrySeed("NO", "Norway", "NOK", "kr"),
    CountrySeed("SE", "Sweden", "SEK", "kr"),
    CountrySeed("DK", "Denmark", "DKK", "kr"),
    CountrySeed("NZ", "New Zealand", "NZD", "NZ$"),
    CountrySeed("RU", "Russia", "RUB", "₽"),
    CountrySeed("BR", "Brazil", "BRL", "R$"),
    CountrySeed("MX", "Mexico", "MXN", "$"),
    CountrySeed("SA", "South Africa", "ZAR", "R"),
    CountrySeed("LK", "Sri Lanka", "LKR", "Rs"),
    CountrySeed("MY", "Malaysia", "MYR", "RM"),
    CountrySeed("TH", "Thailand", "THB", "฿"),
    CountrySeed("ID", "Indonesia", "IDR", "Rp"),
    CountrySeed("PH", "Philippines", "PHP", "₱"),
]


# country code → (display prefix, face values, pattern, length, description)
_SERIES: Dict[str, Tuple[str, List[str], str, int, str]] = {
    "US": (
        "$",
        ["1", "2", "5", "10", "20", "50", "100"],
        r"^[A-L]\d{8}[A-Z]$",
        10,
        "Letter + 8 digits + Letter",
    ),
    # Bank of England notes carry a space between the prefix and the number
    "UK": (
        "£",
        ["5", "10", "20", "50"],
        r"^[A-Z]{2}\d{2}\s\d{6}$",
        11,
        "2 Letters + 2 digits + space + 6 digits",
    ),
    "EU": (
        "€",
        ["5", "10", "20", "50", "100", "200", "500"],
        r"^[A-Z]\d{11}$",
        12,
        "Letter + 11 digits",
    ),
    "JP": (
        "¥",
        ["1000", "2000", "5000", "10000"],
        r"^[A-Z]\d{6}[A-Z]$",
        8,
        "Letter + 6 digits + Letter",
    ),
    "CA": (
        "C$",
        ["5", "10", "20", "50", "100"],
        r"^[A-Z]{3}\d{7}$",
        10,
        "3 Letters + 7 digits",
    ),
    "AU": (
        "A$",
        ["5", "10", "20", "50", "100"],
        r"^[A-Z]{2}\d{8}$",
        10,
        "2 Letters + 8 digits",
    ),
    "CH": (
        "CHF ",
        ["10", "20", "50", "100", "200", "1000"],
        r"^\d{2}[A-Z]\d{7}$",
        10,
        "2 digits + Letter + 7 digits",
    ),
    "SA": (
        "R",
        ["10", "20", "50", "100", "200"],
        r"^[A-Z]{2}\d{7}$",
        9,
        "2 Letters + 7 digits",
    ),
    "LK": (
        "Rs ",
        ["20", "50", "100", "500", "1000", "5000"],
        r"^[A-Z]\d{6}$",
        7,
        "Letter + 6 digits",
    ),
}


DENOMINATIONS: List[DenominationSeed] = [
    DenominationSeed(code, value, f"{prefix}{value}", serial_format, serial_length, description)
    for code, (prefix, values, serial_format, serial_length, description) in _SERIES.items()
    for value in values
]
