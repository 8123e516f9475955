"""Tests for generation.cli — the interactive chat loop."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from generation import cli


def _scripted_input(monkeypatch, lines):
    remaining = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


class TestRepl:
    @pytest.mark.asyncio
    async def test_end_of_input_leaves_cleanly(self, monkeypatch, capsys):
        _scripted_input(monkeypatch, [])
        service = MagicMock()
        service.ask = AsyncMock()

        await cli.repl(service, None)

        service.ask.assert_not_awaited()
        assert "Traceback" not in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_answers_until_exit(self, monkeypatch, capsys):
        _scripted_input(monkeypatch, ["", "how do I allocate?", "exit", "never read"])
        service = MagicMock()
        service.ask = AsyncMock(return_value=SimpleNamespace(answer="Pass an allocator."))

        await cli.repl(service, 2)

        service.ask.assert_awaited_once_with("how do I allocate?", k_per_corpus=2)
        assert "Pass an allocator." in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_answer_after_end_of_input_is_not_requested(self, monkeypatch):
        _scripted_input(monkeypatch, ["what is comptime?"])
        service = MagicMock()
        service.ask = AsyncMock(return_value=SimpleNamespace(answer="Compile-time execution."))

        await cli.repl(service, None)

        assert service.ask.await_count == 1


class TestMain:
    def test_interrupt_exits_without_traceback(self, monkeypatch, tmp_path):
        async def interrupted_repl(service, k):
            raise KeyboardInterrupt

        service = MagicMock()
        monkeypatch.setattr(cli, "setup_logging", lambda **kwargs: None)
        monkeypatch.setattr(cli, "AssistantService", MagicMock(return_value=service))
        monkeypatch.setattr(cli, "repl", interrupted_repl)

        cli.main(["--env-file", str(tmp_path / "missing.env")])

        service.initialize_from_files.assert_called_once_with(None, None)
