"""
models/ - Domain Models
=======================
Plain dataclasses passed between the repositories and the HTTP handlers.
"""
