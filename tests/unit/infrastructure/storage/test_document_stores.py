"""
Name: Document Store Adapter Tests

Responsibilities:
  - Validate LocalVaultStore against a temporary vault folder
  - Validate InMemoryDocumentStore mirrors the same contract
  - Verify exclusive create and error mapping
"""

import pytest

from cardify.exceptions import CollaboratorIOError
from cardify.infrastructure.storage import InMemoryDocumentStore, LocalVaultStore


pytestmark = pytest.mark.unit


class TestLocalVaultStore:
    """Test suite for LocalVaultStore."""

    def test_write_then_read_is_byte_exact(self, tmp_path):
        store = LocalVaultStore(tmp_path)
        text = "---\ntitle: x\n---\r\nA\r\n\r\nB\n^abc"

        store.write_document("Deck.md", text)

        assert store.read_document("Deck.md") == text
        assert (tmp_path / "Deck.md").read_bytes() == text.encode("utf-8")

    def test_create_file_never_overwrites(self, tmp_path):
        store = LocalVaultStore(tmp_path)
        store.create_file("0.md", "first")

        with pytest.raises(FileExistsError):
            store.create_file("0.md", "second")

        assert (tmp_path / "0.md").read_text(encoding="utf-8") == "first"

    def test_create_folder_and_exists(self, tmp_path):
        store = LocalVaultStore(tmp_path)

        assert not store.file_exists("notes/Deck")
        store.create_folder("notes/Deck")
        store.create_folder("notes/Deck")

        assert store.file_exists("notes/Deck")
        assert (tmp_path / "notes" / "Deck").is_dir()

    def test_read_missing_document_maps_to_io_error(self, tmp_path):
        store = LocalVaultStore(tmp_path)

        with pytest.raises(CollaboratorIOError) as exc_info:
            store.read_document("missing.md")

        assert exc_info.value.resource == "missing.md"
        assert "missing.md" in exc_info.value.message

    def test_create_in_missing_folder_maps_to_io_error(self, tmp_path):
        store = LocalVaultStore(tmp_path)

        with pytest.raises(CollaboratorIOError) as exc_info:
            store.create_file("no/such/folder/0.md", "x")

        assert exc_info.value.resource == "no/such/folder/0.md"

    def test_paths_cannot_escape_the_vault(self, tmp_path):
        store = LocalVaultStore(tmp_path / "vault")

        with pytest.raises(CollaboratorIOError):
            store.write_document("../outside.md", "x")

        assert not (tmp_path / "outside.md").exists()


class TestInMemoryDocumentStore:
    """Test suite for InMemoryDocumentStore."""

    def test_read_write(self):
        store = InMemoryDocumentStore({"Deck.md": "A"})

        store.write_document("Deck.md", "B")

        assert store.read_document("Deck.md") == "B"

    def test_read_missing_raises_io_error(self):
        with pytest.raises(CollaboratorIOError):
            InMemoryDocumentStore().read_document("missing.md")

    def test_create_file_is_exclusive(self):
        store = InMemoryDocumentStore()
        store.create_file("Deck/0.md", "first")

        with pytest.raises(FileExistsError):
            store.create_file("Deck/0.md", "second")

        assert store.get("Deck/0.md") == "first"

    def test_folders_count_as_existing(self):
        store = InMemoryDocumentStore()
        store.create_folder("Deck")

        assert store.file_exists("Deck")
        assert store.folders == {"Deck"}
        assert list(store.paths()) == []
