"""
models/ - Domain Models
=======================
Plain dataclasses returned by the repositories. Driver row types never
leave the data access layer.
"""
