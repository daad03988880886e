"""
Database models package.
"""

from nivesh.models.asset_class import AssetClass, ASSET_CLASS_LABELS
from nivesh.models.metal_transaction import MetalTransaction, Metal
from nivesh.models.fixed_deposit import FixedDeposit, InterestType
from nivesh.models.recurring_deposit import RecurringDeposit
from nivesh.models.stock_transaction import StockTransaction, TransactionType
from nivesh.models.mutual_fund_transaction import MutualFundTransaction
from nivesh.models.rate_setting import RateSetting

__all__ = [
    "AssetClass",
    "ASSET_CLASS_LABELS",
    "MetalTransaction",
    "Metal",
    "FixedDeposit",
    "InterestType",
    "RecurringDeposit",
    "StockTransaction",
    "TransactionType",
    "MutualFundTransaction",
    "RateSetting",
]
