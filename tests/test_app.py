"""Tests for the mob start application flow."""

from __future__ import annotations

import asyncio
from typing import Any

from mobtimer.config.settings import Settings
from mobtimer.start.request import StartDecision
from mobtimer.tui.app import MobApp
from mobtimer.tui.screens.settings import SettingsModal
from mobtimer.tui.screens.start_dialog import StartDialog


def test_confirm_returns_request_and_remembers_values(
    fresh_settings: Settings,
) -> None:
    fresh_settings.timer_minutes = 25
    seen: dict[str, Any] = {}

    async def run() -> MobApp:
        app = MobApp(settings=fresh_settings)
        async with app.run_test(size=(100, 40)) as pilot:
            await pilot.pause()
            dialog = app.screen
            assert isinstance(dialog, StartDialog)
            seen["minutes"] = dialog.timer_minutes
            seen["can_execute"] = dialog.can_execute
            await pilot.click("#timer-sound")
            await pilot.pause()
            await pilot.click("#btn-ok")
        return app

    app = asyncio.run(run())

    assert seen == {"minutes": 25, "can_execute": True}
    request = app.return_value
    assert request is not None
    assert request.decision is StartDecision.CONFIRMED
    assert request.timer_minutes == 25
    assert request.timer_sound is True
    assert fresh_settings.timer_sound is True


def test_minutes_override_prefills_dialog(fresh_settings: Settings) -> None:
    async def run() -> MobApp:
        app = MobApp(settings=fresh_settings, timer_minutes=7)
        async with app.run_test(size=(100, 40)) as pilot:
            await pilot.pause()
            await pilot.press("enter")
        return app

    app = asyncio.run(run())

    assert app.return_value is not None
    assert app.return_value.timer_minutes == 7
    assert fresh_settings.timer_minutes == 7


def test_cancel_returns_none(fresh_settings: Settings) -> None:
    async def run() -> MobApp:
        app = MobApp(settings=fresh_settings)
        async with app.run_test(size=(100, 40)) as pilot:
            await pilot.pause()
            await pilot.press("escape")
        return app

    app = asyncio.run(run())

    assert app.return_value is None
    assert fresh_settings.get("timer") is None


def test_precondition_failure_is_shown(fresh_settings: Settings) -> None:
    fresh_settings.wip_branch = "master"
    seen: dict[str, Any] = {}

    async def run() -> MobApp:
        app = MobApp(settings=fresh_settings)
        async with app.run_test(size=(100, 40)) as pilot:
            await pilot.pause()
            dialog = app.screen
            assert isinstance(dialog, StartDialog)
            seen["can_execute"] = dialog.can_execute
            seen["message"] = dialog.message
            await pilot.press("escape")
        return app

    app = asyncio.run(run())

    assert seen["can_execute"] is False
    assert "WIP branch must differ from base branch" in seen["message"]
    assert app.return_value is None


def test_open_settings_then_reopen_start_dialog(fresh_settings: Settings) -> None:
    seen: dict[str, Any] = {}

    async def run() -> MobApp:
        app = MobApp(settings=fresh_settings)
        async with app.run_test(size=(100, 40)) as pilot:
            await pilot.pause()
            first = app.screen
            await pilot.click("#btn-open-settings")
            await pilot.pause()
            seen["settings_shown"] = isinstance(app.screen, SettingsModal)
            await pilot.press("escape")
            await pilot.pause()
            seen["reopened"] = isinstance(app.screen, StartDialog)
            seen["new_instance"] = app.screen is not first
            await pilot.press("escape")
        return app

    app = asyncio.run(run())

    assert seen == {"settings_shown": True, "reopened": True, "new_instance": True}
    assert app.return_value is None


def test_quit_while_dialog_open_counts_as_cancel(fresh_settings: Settings) -> None:
    seen: dict[str, Any] = {}

    async def run() -> MobApp:
        app = MobApp(settings=fresh_settings)
        async with app.run_test(size=(100, 40)) as pilot:
            await pilot.pause()
            seen["dialog_open"] = isinstance(app.screen, StartDialog)
            await pilot.press("ctrl+q")
        return app

    app = asyncio.run(run())

    assert seen == {"dialog_open": True}
    assert app.return_value is None
    assert fresh_settings.get("timer") is None
    assert fresh_settings.get("start_with_share") is None
