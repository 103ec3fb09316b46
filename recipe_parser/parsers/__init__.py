"""
Recipe parsers: leaf text parsers plus the extraction tiers and coordinator.
"""
