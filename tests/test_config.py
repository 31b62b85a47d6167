"""Tests for PostConfig resolution and post.toml parsing."""

from pathlib import Path

import pytest

from post.config import init_config, load_config, resolve_home


class TestResolveHome:
    def test_explicit(self, tmp_path, monkeypatch):
        monkeypatch.setenv("POST_HOME", str(tmp_path / "env"))
        assert resolve_home(tmp_path / "arg") == tmp_path / "arg"

    def test_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("POST_HOME", str(tmp_path / "env"))
        assert resolve_home() == tmp_path / "env"

    def test_default(self, monkeypatch):
        monkeypatch.delenv("POST_HOME", raising=False)
        assert resolve_home() == Path("~/.config/post").expanduser()


class TestLoadConfig:
    def test_defaults(self, tmp_path):
        cfg = load_config(tmp_path)
        assert cfg.home == tmp_path
        assert cfg.notes_path == tmp_path / "notes"
        assert cfg.view.default_top == 10
        assert cfg.clipboard.command == []
        assert cfg.clipboard.timeout == 1.0

    def test_toml(self, tmp_path):
        (tmp_path / "post.toml").write_text(
            '[post]\nfile = "stack.txt"\n\n'
            "[view]\ndefault_top = 3\n\n"
            '[clipboard]\ncommand = ["xclip", "-selection", "clipboard"]\ntimeout = 2\n'
        )
        cfg = load_config(tmp_path)
        assert cfg.notes_path == tmp_path / "stack.txt"
        assert cfg.view.default_top == 3
        assert cfg.clipboard.command == ["xclip", "-selection", "clipboard"]
        assert cfg.clipboard.timeout == 2.0

    def test_file_must_be_plain_name(self, tmp_path):
        (tmp_path / "post.toml").write_text('[post]\nfile = "../elsewhere"\n')
        with pytest.raises(ValueError, match="plain file name"):
            load_config(tmp_path)

    def test_negative_default_top(self, tmp_path):
        (tmp_path / "post.toml").write_text("[view]\ndefault_top = -1\n")
        with pytest.raises(ValueError):
            load_config(tmp_path)

    def test_malformed_toml(self, tmp_path):
        (tmp_path / "post.toml").write_text("[post\n")
        with pytest.raises(ValueError):
            load_config(tmp_path)


class TestInitConfig:
    def test_writes_loadable_file(self, tmp_path):
        home = tmp_path / "new-home"
        path = init_config(home)
        assert path == home / "post.toml"
        assert load_config(home).notes_path == home / "notes"

    def test_refuses_overwrite(self, tmp_path):
        init_config(tmp_path)
        with pytest.raises(FileExistsError):
            init_config(tmp_path)
