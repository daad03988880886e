"""
Valuation, persistence and formatting services.
"""
