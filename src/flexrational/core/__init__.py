"""
Core package: checked integer math, domain types, serialization contracts.
"""
