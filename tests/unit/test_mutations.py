"""Unit tests for alias mutations."""

import json
import tempfile
from pathlib import Path

import pytest

from sessalias.core import AliasRegistry
from sessalias.core.models import AliasEntry

OLD_STAMP = "2020-01-01T00:00:00.000Z"


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as td:
        yield Path(td)


@pytest.fixture
def registry(temp_dir: Path) -> AliasRegistry:
    """Create a registry for testing."""
    return AliasRegistry(temp_dir / "session-aliases.json")


def age_entry(registry: AliasRegistry, name: str) -> None:
    """Backdate an entry's timestamps so refreshes are observable."""
    db = registry.load()
    db.aliases[name].created_at = OLD_STAMP
    db.aliases[name].updated_at = OLD_STAMP
    assert registry.save(db)


class TestSetAlias:
    """Tests for set_alias."""

    def test_creates_new_alias(self, registry: AliasRegistry) -> None:
        result = registry.mutations.set_alias("my-session", "/path/to/session", "Test Session")

        assert result.success is True
        assert result.is_new is True
        assert result.alias == "my-session"
        entry = registry.load().aliases["my-session"]
        assert entry.created_at == entry.updated_at
        assert entry.title == "Test Session"

    def test_updates_existing_alias(self, registry: AliasRegistry) -> None:
        registry.mutations.set_alias("my-session", "/path/v1", "V1")
        age_entry(registry, "my-session")

        result = registry.mutations.set_alias("my-session", "/path/v2", "V2")

        assert result.success is True
        assert result.is_new is False
        entry = registry.load().aliases["my-session"]
        assert entry.session_path == "/path/v2"
        assert entry.title == "V2"
        assert entry.created_at == OLD_STAMP
        assert entry.updated_at != OLD_STAMP

    def test_update_without_title_keeps_title(self, registry: AliasRegistry) -> None:
        registry.mutations.set_alias("keep-title", "/path/v1", "Original")
        registry.mutations.set_alias("keep-title", "/path/v2")
        assert registry.load().aliases["keep-title"].title == "Original"

    def test_accepts_underscores_and_dashes(self, registry: AliasRegistry) -> None:
        assert registry.mutations.set_alias("my_session-v2", "/path").success is True

    @pytest.mark.parametrize(
        ("name", "keyword"),
        [
            ("", "empty"),
            (None, "empty"),
            ("my alias!", "letters"),
            ("a" * 129, "128"),
            ("list", "reserved"),
            ("set", "reserved"),
        ],
    )
    def test_rejects_invalid_names(self, registry: AliasRegistry, name: object, keyword: str) -> None:
        result = registry.mutations.set_alias(name, "/path")  # type: ignore[arg-type]
        assert result.success is False
        assert keyword in (result.error or "")
        assert not registry.store.exists()

    def test_accepts_name_of_128_chars(self, registry: AliasRegistry) -> None:
        assert registry.mutations.set_alias("a" * 128, "/path").success is True

    @pytest.mark.parametrize("session_path", ["", "   "])
    def test_rejects_blank_session_path(self, registry: AliasRegistry, session_path: str) -> None:
        result = registry.mutations.set_alias("valid-name", session_path)
        assert result.success is False
        assert "empty" in (result.error or "")

    def test_rejects_non_string_session_path(self, registry: AliasRegistry) -> None:
        result = registry.mutations.set_alias("valid-name", 42)  # type: ignore[arg-type]
        assert result.success is False
        assert "string" in (result.error or "")

    def test_updates_metadata(self, registry: AliasRegistry) -> None:
        registry.mutations.set_alias("meta-test", "/path")
        db = registry.load()
        assert db.metadata.total_count == 1
        assert db.metadata.last_updated

    def test_reports_save_failure(self, temp_dir: Path) -> None:
        target = temp_dir / "as-directory"
        target.mkdir()
        result = AliasRegistry(target).mutations.set_alias("api", "/path")
        assert result.success is False
        assert "save" in (result.error or "")


class TestDeleteAlias:
    """Tests for delete_alias."""

    def test_deletes_existing_alias(self, registry: AliasRegistry) -> None:
        registry.mutations.set_alias("to-delete", "/path")

        result = registry.mutations.delete_alias("to-delete")

        assert result.success is True
        assert result.alias == "to-delete"
        assert registry.queries.resolve_alias("to-delete") is None
        assert registry.load().metadata.total_count == 0

    def test_unknown_alias(self, registry: AliasRegistry) -> None:
        result = registry.mutations.delete_alias("nonexistent")
        assert result.success is False
        assert "not found" in (result.error or "")

    def test_deletes_entry_that_is_not_an_object(self, registry: AliasRegistry) -> None:
        registry.store.path.write_text(json.dumps({"aliases": {"junk": 42, "ok": {"sessionPath": "/p"}}}))

        result = registry.mutations.delete_alias("junk")

        assert result.success is True
        raw = json.loads(registry.store.path.read_text())
        assert list(raw["aliases"]) == ["ok"]
        assert raw["metadata"]["totalCount"] == 1

    def test_can_delete_hand_edited_key(self, registry: AliasRegistry) -> None:
        db = registry.load()
        db.aliases["bad name"] = AliasEntry.new("/p")
        registry.save(db)

        assert registry.mutations.delete_alias("bad name").success is True


class TestRenameAlias:
    """Tests for rename_alias."""

    def test_renames_alias(self, registry: AliasRegistry) -> None:
        registry.mutations.set_alias("original", "/path", "My Session")
        age_entry(registry, "original")

        result = registry.mutations.rename_alias("original", "renamed")

        assert result.success is True
        assert result.old_alias == "original"
        assert result.new_alias == "renamed"
        assert registry.queries.resolve_alias("original") is None
        entry = registry.load().aliases["renamed"]
        assert entry.session_path == "/path"
        assert entry.title == "My Session"
        assert entry.created_at == OLD_STAMP
        assert entry.updated_at != OLD_STAMP

    def test_rejects_existing_target(self, registry: AliasRegistry) -> None:
        registry.mutations.set_alias("alias-a", "/path/a")
        registry.mutations.set_alias("alias-b", "/path/b")
        before = registry.load().to_dict()["aliases"]

        result = registry.mutations.rename_alias("alias-a", "alias-b")

        assert result.success is False
        assert "already exists" in (result.error or "")
        assert registry.load().to_dict()["aliases"] == before

    def test_rejects_target_held_by_unreadable_entry(self, registry: AliasRegistry) -> None:
        registry.store.path.write_text(
            json.dumps({"aliases": {"taken": "legacy", "mine": {"sessionPath": "/p"}}})
        )

        result = registry.mutations.rename_alias("mine", "taken")

        assert result.success is False
        assert "already exists" in (result.error or "")

    def test_rejects_unknown_source(self, registry: AliasRegistry) -> None:
        result = registry.mutations.rename_alias("nonexistent", "new-name")
        assert result.success is False
        assert "not found" in (result.error or "")

    @pytest.mark.parametrize("new_name", ["invalid name!", "", "help", "x" * 129])
    def test_rejects_invalid_target(self, registry: AliasRegistry, new_name: str) -> None:
        registry.mutations.set_alias("valid", "/path")
        result = registry.mutations.rename_alias("valid", new_name)
        assert result.success is False
        assert registry.queries.resolve_alias("valid") is not None

    def test_rename_to_same_name(self, registry: AliasRegistry) -> None:
        registry.mutations.set_alias("same", "/path")
        age_entry(registry, "same")

        result = registry.mutations.rename_alias("same", "same")

        assert result.success is True
        assert registry.load().aliases["same"].updated_at != OLD_STAMP


class TestUpdateAliasTitle:
    """Tests for update_alias_title."""

    def test_updates_title(self, registry: AliasRegistry) -> None:
        registry.mutations.set_alias("titled", "/path", "Old Title")
        age_entry(registry, "titled")

        result = registry.mutations.update_alias_title("titled", "New Title")

        assert result.success is True
        assert result.title == "New Title"
        entry = registry.load().aliases["titled"]
        assert entry.title == "New Title"
        assert entry.updated_at != OLD_STAMP
        assert entry.created_at == OLD_STAMP

    @pytest.mark.parametrize("title", [None, ""])
    def test_clears_title(self, registry: AliasRegistry, title: str | None) -> None:
        registry.mutations.set_alias("titled", "/path", "Original Title")

        result = registry.mutations.update_alias_title("titled", title)

        assert result.success is True
        assert result.title is None
        resolved = registry.queries.resolve_alias("titled")
        assert resolved is not None
        assert resolved.title is None
        raw = json.loads(registry.store.path.read_text())
        assert raw["aliases"]["titled"]["title"] is None

    def test_clearing_absent_title_stores_null(self, registry: AliasRegistry) -> None:
        registry.store.path.write_text(json.dumps({"aliases": {"bare": {"sessionPath": "/p"}}}))

        assert registry.mutations.update_alias_title("bare", None).success is True

        raw = json.loads(registry.store.path.read_text())
        assert raw["aliases"]["bare"]["title"] is None

    def test_rejects_non_string_title(self, registry: AliasRegistry) -> None:
        registry.mutations.set_alias("titled", "/path", "Keep")
        result = registry.mutations.update_alias_title("titled", 42)
        assert result.success is False
        assert "string" in (result.error or "")
        assert registry.load().aliases["titled"].title == "Keep"

    def test_unknown_alias(self, registry: AliasRegistry) -> None:
        result = registry.mutations.update_alias_title("nonexistent", "Title")
        assert result.success is False
        assert "not found" in (result.error or "")
