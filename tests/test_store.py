from clipsel.items import TagMetadata
from clipsel.store import TagMetadataStore, default_store_path


def test_round_trip(tmp_path):
    store = TagMetadataStore(tmp_path / "nested" / "tags.json")
    tags = {
        "work": TagMetadata("work", color="red", emoji="🔥"),
        "home": TagMetadata("home"),
    }
    store.save(tags)
    assert store.load() == tags


def test_missing_file_loads_empty(tmp_path):
    assert TagMetadataStore(tmp_path / "absent.json").load() == {}


def test_corrupt_file_loads_empty(tmp_path):
    path = tmp_path / "tags.json"
    path.write_text("{not json", encoding="utf-8")
    assert TagMetadataStore(path).load() == {}


def test_wrong_shape_loads_empty(tmp_path):
    path = tmp_path / "tags.json"
    path.write_text('[{"name": 5}]', encoding="utf-8")
    assert TagMetadataStore(path).load() == {}


def test_save_replaces_previous(tmp_path):
    store = TagMetadataStore(tmp_path / "tags.json")
    store.save({"a": TagMetadata("a")})
    store.save({"b": TagMetadata("b", color="blue")})
    assert list(store.load()) == ["b"]


def test_clear_removes_metadata(tmp_path):
    store = TagMetadataStore(tmp_path / "tags.json")
    store.save({"a": TagMetadata("a")})
    store.clear()
    assert store.load() == {}
    store.clear()
    assert not store.path.exists()


def test_default_path_uses_xdg_data_home(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
    path = default_store_path()
    assert path.parent.parent == tmp_path
    assert TagMetadataStore().path == path