"""Presenter that keeps filmstrip tile states in sync with the store.

On every store notification it re-derives each participant's
``ThumbnailRenderState`` and pushes only the tiles that changed, plus the ids
of participants that left, to the view callback.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional, Tuple

from ..domain.entities import ParticipantId
from ..domain.intents import DispatchFn, SetPinnedParticipant
from ..domain.ports import ConferenceStorePort, Unsubscribe
from ..viewmodels.thumbnail_vm import ThumbnailRenderState, ThumbnailVM

log = logging.getLogger(__name__)

TileStates = Dict[ParticipantId, ThumbnailRenderState]
UpdateFn = Callable[[TileStates, Tuple[ParticipantId, ...]], None]


class FilmstripPresenter:
    """Subscribe to the store, recompute tile states, diff, notify."""

    def __init__(
        self,
        *,
        store: ConferenceStorePort,
        dispatch: DispatchFn,
        on_update: Optional[UpdateFn] = None,
    ) -> None:
        self._store = store
        self._dispatch = dispatch
        self.on_update = on_update
        self._tiles: Dict[ParticipantId, ThumbnailVM] = {}
        self._states: TileStates = {}
        self._unsubscribe: Optional[Unsubscribe] = None

    @property
    def states(self) -> TileStates:
        """Last derived states in roster order."""
        return dict(self._states)

    def start(self) -> None:
        if self._unsubscribe is None:
            self._unsubscribe = self._store.subscribe(self.refresh)
        self.refresh()

    def stop(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def refresh(self) -> None:
        """Re-derive all tiles and emit the difference to the previous pass."""
        current: TileStates = {}
        for participant in self._store.get_participants():
            state = self._tile(participant.id).state()
            if state is not None:
                current[participant.id] = state

        changed = {pid: state for pid, state in current.items() if self._states.get(pid) != state}
        removed = tuple(pid for pid in self._states if pid not in current)
        for pid in removed:
            self._tiles.pop(pid, None)

        order_changed = list(current) != [pid for pid in self._states if pid in current]
        self._states = current
        if not changed and not removed and not order_changed:
            return
        log.debug("Filmstrip update: %d changed, %d removed", len(changed), len(removed))
        if self.on_update:
            self.on_update(changed, removed)

    def click(self, participant_id: ParticipantId) -> Optional[SetPinnedParticipant]:
        tile = self._tiles.get(participant_id) or ThumbnailVM(
            participant_id, store=self._store, dispatch=self._dispatch
        )
        return tile.cmd_click()

    def _tile(self, participant_id: ParticipantId) -> ThumbnailVM:
        tile = self._tiles.get(participant_id)
        if tile is None:
            tile = ThumbnailVM(participant_id, store=self._store, dispatch=self._dispatch)
            self._tiles[participant_id] = tile
        return tile


__all__ = ["FilmstripPresenter"]
