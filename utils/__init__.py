"""
utils/ - Shared Helpers
=======================
Logging setup and currency conversions used across layers.
"""
