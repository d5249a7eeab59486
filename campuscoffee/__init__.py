"""
CampusCoffee: Import von Point-of-Sale-Daten aus OpenStreetMap.
"""

__version__ = "0.1.0"
