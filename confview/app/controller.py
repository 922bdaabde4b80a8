"""Composition root for the conference UI layer.

``AppController`` wires the store, the dispatch boundary and the audio
subsystem into presenters. The audio route picker capability is checked here,
exactly once, and the resulting flag is injected into the picker controller;
nothing else re-checks it.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from ..domain.intents import DispatchFn
from ..domain.ports import AudioModePort, ConferenceStorePort
from ..viewmodels.audio_route_vm import AudioRoutePickerVM
from .audio_route_controller import AudioRoutePickerController
from .filmstrip_presenter import FilmstripPresenter, UpdateFn
from .settings import ClientSettings, settings_to_dict

log = logging.getLogger(__name__)


def resolve_audio_route_picker(settings: ClientSettings, audio_mode: AudioModePort) -> bool:
    """Decide whether the audio route picker is offered at all.

    ``off`` skips the capability check. ``on`` and ``auto`` both require the subsystem
    to report enumeration support; a missing capability cannot be forced on.
    """
    if settings.audio_route_picker == "off":
        return False
    capable = bool(audio_mode.has_device_enumeration_capability())
    if not capable and settings.audio_route_picker == "on":
        log.warning("Audio route picker requested but the audio subsystem cannot enumerate devices")
    return capable


class AppController:
    """Create presenters from injected collaborators and resolved settings.

    Call chain:
        The host application builds one instance at startup and asks it for
        the filmstrip presenter and the audio route picker controller.
    """

    def __init__(
        self,
        *,
        store: ConferenceStorePort,
        dispatch: DispatchFn,
        audio_mode: AudioModePort,
        settings: Optional[ClientSettings] = None,
    ) -> None:
        self.settings = settings or ClientSettings()
        self.store = store
        self.dispatch = dispatch
        self.audio_mode = audio_mode
        self.audio_route_picker_enabled = resolve_audio_route_picker(self.settings, audio_mode)
        log.info(
            "Audio route picker %s (settings: %s)",
            "enabled" if self.audio_route_picker_enabled else "disabled",
            settings_to_dict(self.settings),
        )
        self._filmstrip: Optional[FilmstripPresenter] = None
        self._audio_route: Optional[AudioRoutePickerController] = None

    def filmstrip(self, on_update: Optional[UpdateFn] = None) -> FilmstripPresenter:
        """Return the cached filmstrip presenter, creating it on first use."""
        if self._filmstrip is None:
            self._filmstrip = FilmstripPresenter(
                store=self.store,
                dispatch=self.dispatch,
                on_update=on_update,
            )
        elif on_update is not None:
            self._filmstrip.on_update = on_update
        return self._filmstrip

    def audio_route_picker(
        self,
        on_changed: Optional[Callable[[AudioRoutePickerVM], None]] = None,
    ) -> Optional[AudioRoutePickerController]:
        """Return the picker controller, or ``None`` when the feature is not offered."""
        if not self.audio_route_picker_enabled:
            return None
        if self._audio_route is None:
            self._audio_route = AudioRoutePickerController(
                audio_mode=self.audio_mode,
                dispatch=self.dispatch,
                enabled=True,
                on_changed=on_changed,
            )
        elif on_changed is not None:
            # Applies to activations opened from now on.
            self._audio_route.on_changed = on_changed
        return self._audio_route

    def shutdown(self) -> None:
        if self._filmstrip is not None:
            self._filmstrip.stop()
        if self._audio_route is not None:
            self._audio_route.close()


__all__ = ["AppController", "resolve_audio_route_picker"]
