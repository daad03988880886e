"""
Pydantic schemas package.
"""

from nivesh.schemas.metal import (
    MetalTransactionBase,
    MetalTransactionCreate,
    MetalTransactionResponse,
    MetalTransactionList,
)
from nivesh.schemas.deposit import (
    FixedDepositCreate,
    FixedDepositResponse,
    FixedDepositList,
    RecurringDepositCreate,
    RecurringDepositResponse,
    RecurringDepositList,
)
from nivesh.schemas.trade import (
    StockTransactionCreate,
    StockTransactionResponse,
    StockTransactionList,
    MutualFundTransactionCreate,
    MutualFundTransactionResponse,
    MutualFundTransactionList,
)
from nivesh.schemas.valuation import (
    FDCalculationResult,
    RDMaturityResult,
    InvestmentResult,
    Holding,
    HoldingList,
    DepositStatus,
    DepositStatusList,
)
from nivesh.schemas.dashboard import (
    AssetClassSummary,
    DistributionSlice,
    PortfolioSummary,
)

__all__ = [
    "MetalTransactionBase",
    "MetalTransactionCreate",
    "MetalTransactionResponse",
    "MetalTransactionList",
    "FixedDepositCreate",
    "FixedDepositResponse",
    "FixedDepositList",
    "RecurringDepositCreate",
    "RecurringDepositResponse",
    "RecurringDepositList",
    "StockTransactionCreate",
    "StockTransactionResponse",
    "StockTransactionList",
    "MutualFundTransactionCreate",
    "MutualFundTransactionResponse",
    "MutualFundTransactionList",
    "FDCalculationResult",
    "RDMaturityResult",
    "InvestmentResult",
    "Holding",
    "HoldingList",
    "DepositStatus",
    "DepositStatusList",
    "AssetClassSummary",
    "DistributionSlice",
    "PortfolioSummary",
]
