"""Activation lifecycle for the audio route picker.

Each ``open`` creates a new ``AudioRoutePickerVM`` and schedules its device
query as an asyncio task on the running loop. Opening again, or closing,
supersedes the previous activation: its pending task is cancelled and, should
the result still arrive, the old view model drops it.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional

from ..domain.intents import AUDIO_ROUTE_PICKER_DIALOG, DialogHandle, DispatchFn
from ..domain.ports import AudioModePort
from ..usecases.load_audio_devices import LoadAudioDevices
from ..usecases.set_audio_device import SetAudioDevice
from ..viewmodels.audio_route_vm import AudioRoutePickerVM

log = logging.getLogger(__name__)


class AudioRoutePickerController:
    """Own the current picker activation and its pending device query."""

    def __init__(
        self,
        *,
        audio_mode: AudioModePort,
        dispatch: DispatchFn,
        enabled: bool,
        dialog: DialogHandle = AUDIO_ROUTE_PICKER_DIALOG,
        on_changed: Optional[Callable[[AudioRoutePickerVM], None]] = None,
    ) -> None:
        """Bind collaborators; ``enabled`` is resolved by the composition root.

        Args:
            audio_mode: Audio subsystem used for queries and commits.
            dispatch: Store dispatch receiving ``HideDialog`` and route intents.
            enabled: Whether the subsystem can enumerate devices at all.
            dialog: Handle passed to ``HideDialog`` on dismissal.
            on_changed: Forwarded to each activation's view model.
        """
        self._enabled = bool(enabled)
        self._dispatch = dispatch
        self._dialog = dialog
        self.on_changed = on_changed
        self._load_devices = LoadAudioDevices(audio_mode)
        self._set_device = SetAudioDevice(audio_mode, dispatch=dispatch)
        self._current: Optional[AudioRoutePickerVM] = None
        self._pending: Optional[asyncio.Task] = None

    @property
    def available(self) -> bool:
        return self._enabled

    @property
    def current(self) -> Optional[AudioRoutePickerVM]:
        return self._current

    @property
    def pending(self) -> Optional[asyncio.Task]:
        return self._pending

    def open(self) -> Optional[AudioRoutePickerVM]:
        """Start a fresh activation; must be called with a running event loop.

        Returns:
            The new view model, or ``None`` when the picker is not offered.
        """
        if not self._enabled:
            log.debug("Audio route picker unavailable; ignoring open request")
            return None

        self.close()
        vm = AudioRoutePickerVM(
            load_devices=self._load_devices,
            set_device=self._set_device,
            dispatch=self._dispatch,
            dialog=self._dialog,
            on_changed=self.on_changed,
        )
        self._current = vm
        self._pending = asyncio.get_running_loop().create_task(vm.load())
        log.debug("Opened audio route picker activation %s", vm.activation_id)
        return vm

    def close(self) -> None:
        """Retire the current activation, if any, without dispatching."""
        vm, task = self._current, self._pending
        self._current = None
        self._pending = None
        if vm is not None:
            vm.supersede()
        if task is not None and not task.done():
            task.cancel()


__all__ = ["AudioRoutePickerController"]
