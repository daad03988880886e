"""Display formatting helpers and reference lists for entry forms."""

import math
from typing import Optional

from nivesh.config import settings


def _group_indian(digits: str) -> str:
    # Last three digits, then groups of two: 12,34,567
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups) + "," + tail


def format_currency(amount: Optional[float], symbol: Optional[str] = None) -> str:
    """Whole-rupee amount with Indian digit grouping, e.g. ₹1,07,186."""
    symbol = settings.currency_symbol if symbol is None else symbol
    if amount is None or math.isnan(amount) or math.isinf(amount):
        amount = 0
    rounded = int(round(abs(amount)))
    sign = "-" if amount < 0 and rounded else ""
    return f"{sign}{symbol}{_group_indian(str(rounded))}"


def format_percentage(percentage: Optional[float]) -> str:
    if percentage is None or math.isnan(percentage):
        percentage = 0.0
    return f"{'+' if percentage >= 0 else ''}{percentage:.2f}%"


def format_weight(weight: float, unit: str = "gm") -> str:
    return f"{weight:.2f} {unit}"


BANK_NAMES = [
    "State Bank of India",
    "HDFC Bank",
    "ICICI Bank",
    "Punjab National Bank",
    "Bank of Baroda",
    "Canara Bank",
    "Union Bank of India",
    "Bank of India",
    "Central Bank of India",
    "Indian Overseas Bank",
    "UCO Bank",
    "Axis Bank",
    "Kotak Mahindra Bank",
    "Yes Bank",
    "IndusInd Bank",
    "Federal Bank",
    "South Indian Bank",
    "Karur Vysya Bank",
    "Tamilnad Mercantile Bank",
    "Indian Post Office",
    "Other",
]

POPULAR_STOCKS = [
    {"symbol": "RELIANCE", "name": "Reliance Industries"},
    {"symbol": "TCS", "name": "Tata Consultancy Services"},
    {"symbol": "HDFCBANK", "name": "HDFC Bank"},
    {"symbol": "INFY", "name": "Infosys"},
    {"symbol": "ICICIBANK", "name": "ICICI Bank"},
    {"symbol": "HINDUNILVR", "name": "Hindustan Unilever"},
    {"symbol": "SBIN", "name": "State Bank of India"},
    {"symbol": "BHARTIARTL", "name": "Bharti Airtel"},
    {"symbol": "ITC", "name": "ITC"},
    {"symbol": "KOTAKBANK", "name": "Kotak Mahindra Bank"},
    {"symbol": "LT", "name": "Larsen & Toubro"},
    {"symbol": "AXISBANK", "name": "Axis Bank"},
    {"symbol": "MARUTI", "name": "Maruti Suzuki"},
    {"symbol": "ASIANPAINT", "name": "Asian Paints"},
    {"symbol": "BAJFINANCE", "name": "Bajaj Finance"},
    {"symbol": "HCLTECH", "name": "HCL Technologies"},
    {"symbol": "WIPRO", "name": "Wipro"},
    {"symbol": "ULTRACEMCO", "name": "UltraTech Cement"},
    {"symbol": "TITAN", "name": "Titan Company"},
    {"symbol": "POWERGRID", "name": "Power Grid Corporation"},
]

POPULAR_MUTUAL_FUNDS = [
    {"code": "SBI-BLUECHIP", "name": "SBI Blue Chip Fund"},
    {"code": "HDFC-EQUITY", "name": "HDFC Equity Fund"},
    {"code": "ICICI-BLUECHIP", "name": "ICICI Prudential Blue Chip Fund"},
    {"code": "AXIS-BLUECHIP", "name": "Axis Blue Chip Fund"},
    {"code": "KOTAK-BLUECHIP", "name": "Kotak Blue Chip Fund"},
    {"code": "NIPPON-LARGECAP", "name": "Nippon India Large Cap Fund"},
    {"code": "FRANKLIN-BLUECHIP", "name": "Franklin India Blue Chip Fund"},
    {"code": "MIRAE-LARGECAP", "name": "Mirae Asset Large Cap Fund"},
    {"code": "UTI-EQUITY", "name": "UTI Equity Fund"},
    {"code": "ADITYA-FRONTLINE", "name": "Aditya Birla Sun Life Frontline Equity Fund"},
    {"code": "SBI-SMALLCAP", "name": "SBI Small Cap Fund"},
    {"code": "HDFC-MIDCAP", "name": "HDFC Mid-Cap Opportunities Fund"},
    {"code": "ICICI-MIDCAP", "name": "ICICI Prudential Mid Cap Fund"},
    {"code": "AXIS-MIDCAP", "name": "Axis Mid Cap Fund"},
    {"code": "KOTAK-MIDCAP", "name": "Kotak Mid Cap Fund"},
    {"code": "NIPPON-MIDCAP", "name": "Nippon India Mid Cap Fund"},
    {"code": "FRANKLIN-MIDCAP", "name": "Franklin India Mid Cap Fund"},
    {"code": "MIRAE-MIDCAP", "name": "Mirae Asset Mid Cap Fund"},
    {"code": "UTI-MIDCAP", "name": "UTI Mid Cap Fund"},
    {"code": "ADITYA-MIDCAP", "name": "Aditya Birla Sun Life Mid Cap Fund"},
]
