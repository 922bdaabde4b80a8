"""ViewModel package for conference UI state and command surfaces.

Call context:
    ``confview/app`` presenters and controllers import concrete viewmodels
    from this package to bind view callbacks to state transitions.

Dependencies:
    Modules in this package depend on domain types and use cases only. The
    store implementation and the native audio subsystem remain outside.

Responsibilities:
    - Derive render state from store entities without mutating them.
    - Expose command intent callbacks (tile click, picker submit/cancel).
    - Keep MVVM boundaries explicit by routing writes through dispatch.
"""
