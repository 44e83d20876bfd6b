"""
tablefinder - table availability lookup for restaurants.
"""

__version__ = "0.1.0"
