import pytest


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Isolate tests from calculator settings in the environment or a .env file."""
    for name in ("MUZZ_UNITS", "MUZZ_PRECISE", "MUZZ_CONSTANT", "LOGGING_LEVEL", "DEBUG"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
