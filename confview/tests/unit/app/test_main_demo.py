import asyncio

from confview.app.main import run_demo
from confview.app.settings import ClientSettings
from confview.domain.intents import AUDIO_ROUTE_PICKER_DIALOG, SetPinnedParticipant


def test_demo_flow_pins_unpins_and_switches_route():
    store = asyncio.run(run_demo(ClientSettings()))

    pins = [intent for intent in store.dispatched if isinstance(intent, SetPinnedParticipant)]
    assert pins == [SetPinnedParticipant("p1"), SetPinnedParticipant(None)]
    assert store.hidden_dialogs == [AUDIO_ROUTE_PICKER_DIALOG]
    assert store.active_audio_device == "BLUETOOTH"


def test_demo_without_picker_leaves_route_untouched():
    store = asyncio.run(run_demo(ClientSettings(audio_route_picker="off")))

    assert store.hidden_dialogs == []
    assert store.active_audio_device is None
