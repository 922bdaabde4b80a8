"""Application composition layer for the conference UI.

Controllers and presenters in this package wire the store, view models,
adapters and use cases together without placing derivation logic in views.
"""
