import click
import pytest

from diffpick.config import get_default_mode, get_editor, get_remote_override
from diffpick.plan import DiffMode


class TestGetEditor:
    def test_explicit_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EDITOR", "emacs")
        assert get_editor("code --wait") == "code --wait"

    def test_env_var(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EDITOR", "emacs")
        assert get_editor() == "emacs"

    def test_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("EDITOR", raising=False)
        assert get_editor() == "nvim"

    def test_empty_env_var_uses_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EDITOR", "")
        assert get_editor() == "nvim"


class TestGetDefaultMode:
    def test_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("DIFFPICK_MODE", raising=False)
        assert get_default_mode() == DiffMode.REVLIST_REMOTE

    def test_env_var(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DIFFPICK_MODE", "upstream")
        assert get_default_mode() == DiffMode.UPSTREAM

    def test_invalid_env_var(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DIFFPICK_MODE", "sideways")
        with pytest.raises(click.BadParameter):
            get_default_mode()


class TestGetRemoteOverride:
    def test_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("DIFFPICK_REMOTE", raising=False)
        assert get_remote_override() is None

    def test_set(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DIFFPICK_REMOTE", "fork")
        assert get_remote_override() == "fork"
