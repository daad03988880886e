"""
Main API router.
"""

from fastapi import APIRouter
from nivesh.api import metals, deposits, trades, rates, calculators, dashboard

api_router = APIRouter()

api_router.include_router(metals.router)
api_router.include_router(deposits.fd_router)
api_router.include_router(deposits.rd_router)
api_router.include_router(trades.stocks_router)
api_router.include_router(trades.funds_router)
api_router.include_router(rates.router)
api_router.include_router(calculators.router)
api_router.include_router(dashboard.router)
