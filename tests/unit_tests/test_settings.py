import pytest
from pydantic import ValidationError

from object_store.config import create_store
from object_store.config.settings import Settings, get_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ("ROOT_FOLDER_ID", "ROOT_FOLDER_NAME", "SEED_DIR", "MAX_SEED_FILE_BYTES", "LOG_LEVEL"):
        monkeypatch.delenv(f"OBJECT_STORE_{name}", raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults():
    """Test settings defaults"""
    settings = Settings()
    assert settings.root_folder_id is None
    assert settings.root_folder_name == "root"
    assert settings.seed_dir is None
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch):
    """Test environment variables override defaults"""
    monkeypatch.setenv("OBJECT_STORE_ROOT_FOLDER_ID", "drive-root")
    monkeypatch.setenv("OBJECT_STORE_LOG_LEVEL", "debug")
    settings = get_settings()
    assert settings.root_folder_id == "drive-root"
    assert settings.log_level == "DEBUG"


def test_env_file(tmp_path):
    """Test settings are read from a .env file"""
    (tmp_path / ".env").write_text("OBJECT_STORE_ROOT_FOLDER_NAME=My Drive\n", encoding="utf-8")
    assert Settings().root_folder_name == "My Drive"


def test_blank_root_id_is_unset(monkeypatch):
    """Test a blank root id means no override"""
    monkeypatch.setenv("OBJECT_STORE_ROOT_FOLDER_ID", "")
    assert Settings().root_folder_id is None


def test_invalid_log_level():
    """Test unknown log levels are rejected"""
    with pytest.raises(ValidationError):
        Settings(log_level="chatty")


def test_create_store_from_settings():
    """Test building a store from settings"""
    store = create_store(Settings(root_folder_id="drive-root", root_folder_name="My Drive"))
    root = store.get_folder("drive-root")
    assert root.name == "My Drive"
    assert root.entries == []


def test_create_store_seeds_directory(tmp_path):
    """Test building a store seeded from a directory"""
    seed = tmp_path / "seed"
    seed.mkdir()
    (seed / "a.txt").write_text("abc", encoding="utf-8")
    store = create_store(Settings(seed_dir=str(seed)))
    entries = store.get_folder(store.root_id).entries
    assert [(e.name, e.size) for e in entries] == [("a.txt", 3)]
