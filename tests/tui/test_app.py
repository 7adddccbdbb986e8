"""TUI behaviour through Textual's test pilot."""

import asyncio

from textual.widgets import Input

from memocalc.cli.session import Session
from memocalc.tui.app import CalcApp


async def submit(app: CalcApp, pilot, line: str) -> None:
    app.query_one("#command", Input).value = line
    await pilot.press("enter")
    await pilot.pause()


def test_input_runs_operations():
    async def run():
        app = CalcApp()
        async with app.run_test() as pilot:
            await pilot.pause()
            await submit(app, pilot, "+ 5")
            await submit(app, pilot, "* 3")

            assert app.session.value == 15.0
            assert app.last_message == "OK. Value = 15.0"
            assert app.query_one("#command", Input).value == ""

    asyncio.run(run())


def test_key_bindings_undo_and_redo():
    async def run():
        session = Session()
        session.handle_line("+ 5")
        session.handle_line("* 3")
        app = CalcApp(session=session)
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("ctrl+z")
            await pilot.pause()
            assert session.value == 5.0
            assert app.last_message == "Undone. Value = 5.0"

            await pilot.press("ctrl+y")
            await pilot.pause()
            assert session.value == 15.0

            await pilot.press("ctrl+y")
            await pilot.pause()
            assert app.last_message == "Nothing to redo."

    asyncio.run(run())


def test_errors_are_shown_not_raised():
    async def run():
        app = CalcApp()
        async with app.run_test() as pilot:
            await pilot.pause()
            await submit(app, pilot, "/ 0")
            assert app.last_message == "Error: Division by zero"
            await submit(app, pilot, "add")
            assert app.last_message.startswith("Input error:")
            assert not app.session.history.can_undo()

    asyncio.run(run())


def test_quit_command_exits():
    async def run():
        app = CalcApp()
        async with app.run_test() as pilot:
            await pilot.pause()
            app.query_one("#command", Input).value = "exit"
            await pilot.press("enter")
        assert app.return_code == 0
        assert app.last_message == ""

    asyncio.run(run())
