"""Use case behind a thumbnail click: pin the participant or unpin them.

The pinned flag is read from the store when the click is handled so that two
rapid clicks each resolve against the state left by the previous one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..domain.entities import ParticipantId
from ..domain.intents import DispatchFn, SetPinnedParticipant
from ..domain.ports import ConferenceStorePort

log = logging.getLogger(__name__)


@dataclass
class TogglePinnedParticipant:
    """Use-case callable dispatching ``SetPinnedParticipant`` for a click."""

    store: ConferenceStorePort
    dispatch: DispatchFn

    def __call__(self, participant_id: ParticipantId) -> Optional[SetPinnedParticipant]:
        """Toggle the pin for ``participant_id``.

        Returns:
            The dispatched intent, or ``None`` when the participant is no
            longer in the roster and nothing was dispatched.

        Side Effects:
            Exactly one ``dispatch`` call when the participant is present.
        """
        participant = next(
            (p for p in self.store.get_participants() if p.id == participant_id),
            None,
        )
        if participant is None:
            log.debug("Ignoring click for departed participant %s", participant_id)
            return None

        intent = SetPinnedParticipant(None if participant.pinned else participant.id)
        self.dispatch(intent)
        return intent
