"""
Externe Datenquellen.
"""
