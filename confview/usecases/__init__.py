"""Use-case layer for conference UI workflows.

Each module coordinates domain objects and ports without touching the
renderer or the native audio implementation directly.
"""
