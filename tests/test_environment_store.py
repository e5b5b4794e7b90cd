"""Tests for the KEY=VALUE env store."""

import pytest

from infra.errors import EnvironmentStoreError
from storage.environment_store import EnvironmentStore


class TestParsing:
    def test_parses_simple_lines(self):
        env = EnvironmentStore.from_text("MODEL_DEPLOYMENT_NAME=gpt-4o\ncart_manager=asst_1\n")

        assert env["MODEL_DEPLOYMENT_NAME"] == "gpt-4o"
        assert env["cart_manager"] == "asst_1"
        assert list(env) == ["MODEL_DEPLOYMENT_NAME", "cart_manager"]

    def test_comments_blank_lines_and_quotes(self):
        text = '# pipeline secret\n\nexport FOUNDRY_PROJECT_ENDPOINT="https://x/api/projects/p"\nloyalty=\n'
        env = EnvironmentStore.from_text(text)

        assert env["FOUNDRY_PROJECT_ENDPOINT"] == "https://x/api/projects/p"
        assert env["loyalty"] == ""
        assert len(env) == 2

    def test_loaded_store_is_clean(self):
        env = EnvironmentStore.from_text("a=1\n")
        assert not env.dirty
        assert env.changes == {}

    def test_missing_file_starts_empty(self, tmp_path):
        env = EnvironmentStore.from_file(tmp_path / "absent.env")
        assert len(env) == 0


class TestMutation:
    def test_set_tracks_changes(self):
        env = EnvironmentStore({"a": "1"})
        env["inventory"] = "asst_9"

        assert env.dirty
        assert env.changes == {"inventory": "asst_9"}

    def test_overwrite(self):
        env = EnvironmentStore({"inventory": "old"})
        env["inventory"] = "new"
        assert env["inventory"] == "new"

    def test_delete_is_refused(self):
        env = EnvironmentStore({"a": "1"})
        with pytest.raises(EnvironmentStoreError):
            del env["a"]

    @pytest.mark.parametrize("key", ["", "a=b", "a\nb"])
    def test_invalid_keys(self, key):
        with pytest.raises(EnvironmentStoreError):
            EnvironmentStore()[key] = "x"

    def test_multiline_value_rejected(self):
        with pytest.raises(EnvironmentStoreError):
            EnvironmentStore()["a"] = "x\ny"


class TestPersistence:
    def test_save_creates_missing_file(self, tmp_path):
        path = tmp_path / "src" / ".env"
        env = EnvironmentStore.from_file(path)
        env["shopper"] = "asst_42"

        env.save(path)
        reloaded = EnvironmentStore.from_file(path)

        assert dict(reloaded) == {"shopper": "asst_42"}
        assert not env.dirty

    def test_values_with_spaces_are_quoted(self, tmp_path):
        env = EnvironmentStore()
        env["GREETING"] = 'say "hi" # now'
        path = env.save(tmp_path / ".env")

        assert EnvironmentStore.from_file(path)["GREETING"] == 'say "hi" # now'

    def test_save_only_touches_changed_keys(self, tmp_path):
        path = tmp_path / ".env"
        original = "# pipeline secret\nexport TOKEN='abc${X}def'\nMODEL_DEPLOYMENT_NAME=gpt-4o\n"
        path.write_text(original, encoding="utf-8")
        env = EnvironmentStore.from_file(path)
        assert env["TOKEN"] == "abc${X}def"

        env["cart_manager"] = "H1"
        env.save(path)

        text = path.read_text(encoding="utf-8")
        assert text.startswith(original)
        assert "cart_manager" in text.splitlines()[-1]
        reloaded = EnvironmentStore.from_file(path)
        assert reloaded["TOKEN"] == "abc${X}def"
        assert reloaded["cart_manager"] == "H1"

    def test_save_overwrites_existing_line_in_place(self, tmp_path):
        path = tmp_path / ".env"
        path.write_text("inventory=old\nMODEL_DEPLOYMENT_NAME=gpt-4o\n", encoding="utf-8")
        env = EnvironmentStore.from_file(path)

        env["inventory"] = "new"
        env.save(path)

        lines = path.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 2
        assert lines[1] == "MODEL_DEPLOYMENT_NAME=gpt-4o"
        assert EnvironmentStore.from_file(path)["inventory"] == "new"

    def test_interpolation_is_not_expanded(self):
        env = EnvironmentStore.from_text("A=1\nB=${A}2\n")
        assert env["B"] == "${A}2"
