"""
Asset class enumeration shared by the repository, valuation and dashboard.
"""

import enum


class AssetClass(str, enum.Enum):
    """Asset classes a user can record transactions for."""
    gold = "gold"
    silver = "silver"
    fd = "fd"
    rd = "rd"
    stocks = "stocks"
    mutualfunds = "mutualfunds"


ASSET_CLASS_LABELS = {
    AssetClass.gold: "Gold",
    AssetClass.silver: "Silver",
    AssetClass.fd: "Fixed Deposits",
    AssetClass.rd: "Recurring Deposits",
    AssetClass.stocks: "Stocks",
    AssetClass.mutualfunds: "Mutual Funds",
}
