import pytest

WICHTEL_VARS = ("WICHTEL_MAX_ATTEMPTS", "WICHTEL_SEED", "WICHTEL_LOG_LEVEL", "WICHTEL_ENV_FILE")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test without WICHTEL_* vars and drop any a .env file loaded."""
    for name in WICHTEL_VARS:
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)


@pytest.fixture
def names_file(tmp_path):
    path = tmp_path / "names.txt"
    path.write_text(
        "Alice Smith\nBob Jones\n# comment\nCara Lee\nDave Novak\n",
        encoding="utf-8",
    )
    return path
