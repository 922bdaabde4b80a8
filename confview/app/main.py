# confview/app/main.py
from __future__ import annotations

import asyncio
import logging
from typing import Optional, Tuple

from ..adapters.audio_mode_mock import AudioModeMock
from ..adapters.store_memory import InMemoryConferenceStore
from ..domain.entities import MediaType, Participant, ParticipantId, ParticipantRole, Track
from ..utils import logging as logging_utils
from ..viewmodels.audio_route_vm import AudioRoutePickerVM
from .controller import AppController
from .filmstrip_presenter import TileStates
from .settings import ClientSettings, load_settings

log = logging.getLogger("confview.demo")


def build_demo_store() -> InMemoryConferenceStore:
    """Three-person call: local user, a moderator, and a late joiner with no media."""
    return InMemoryConferenceStore(
        participants=[
            Participant("local", local=True, name="Me"),
            Participant("p1", role=ParticipantRole.MODERATOR, name="Ada"),
            Participant("p2", name="Grace"),
        ],
        tracks=[
            Track("local", MediaType.AUDIO, local=True, media_handle="mic-stream"),
            Track("local", MediaType.VIDEO, local=True, media_handle="cam-stream"),
            Track("p1", MediaType.AUDIO, media_handle="p1-audio"),
            Track("p1", MediaType.VIDEO, muted=True, media_handle="p1-video"),
        ],
    )


def _log_tiles(changed: TileStates, removed: Tuple[ParticipantId, ...]) -> None:
    for pid, state in changed.items():
        log.info(
            "tile %s: audio_muted=%s render_audio=%s video_muted=%s focused=%s pinned=%s",
            pid,
            state.audio_muted,
            state.render_audio,
            state.video_muted,
            state.is_focused,
            state.highlight_pinned,
        )
    for pid in removed:
        log.info("tile %s removed", pid)


def _log_picker(vm: AudioRoutePickerVM) -> None:
    sheet = vm.render()
    if sheet is None:
        log.info("picker %s: %s (hidden)", vm.activation_id, vm.state.value)
        return
    rows = ", ".join(
        f"{option.display_name}{'*' if option.selected else ''}" for option in sheet.options
    )
    log.info("picker %s: %s [%s]", vm.activation_id, vm.state.value, rows)


async def run_demo(settings: Optional[ClientSettings] = None) -> InMemoryConferenceStore:
    """Drive the filmstrip and audio picker against in-memory adapters."""
    store = build_demo_store()
    audio_mode = AudioModeMock(devices=("SPEAKER", "BLUETOOTH", "EARPIECE"), selected="EARPIECE")
    controller = AppController(
        store=store,
        dispatch=store.dispatch,
        audio_mode=audio_mode,
        settings=settings,
    )

    filmstrip = controller.filmstrip(on_update=_log_tiles)
    filmstrip.start()
    filmstrip.click("p1")
    store.set_dominant_speaker("p1")
    store.add_track(Track("p2", MediaType.VIDEO, media_handle="p2-video"))
    filmstrip.click("p1")

    picker = controller.audio_route_picker(on_changed=_log_picker)
    if picker is not None:
        vm = picker.open()
        if vm is not None and picker.pending is not None:
            await picker.pending
            sheet = vm.render()
            if sheet is not None:
                bluetooth = next(o for o in sheet.options if o.type.value == "BLUETOOTH")
                sheet.on_submit(bluetooth)
        log.info("active audio route: %s", store.active_audio_device)

    controller.shutdown()
    return store


def main(settings: Optional[ClientSettings] = None) -> None:
    settings = settings or load_settings()
    logging_utils.configure_logging(settings)
    asyncio.run(run_demo(settings))


if __name__ == "__main__":
    main()
