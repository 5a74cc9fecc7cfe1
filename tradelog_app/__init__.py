"""
Tradelog App - Chat Trade Log Price Analyzer

Reads a CSV export of chat trade messages, recognises which catalogued item
each message talks about, extracts the asking price and buy/sell intent, and
rolls the results up into a per-item price and activity report.
"""

__version__ = "0.1.0"
__author__ = "Tradelog Team"
