"""
FRA Atlas Decision Support System
"""
__version__ = "1.0.0"
