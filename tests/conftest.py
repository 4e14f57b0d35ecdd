import pytest

from passgen.entropy import EntropySource, SeededEntropySource


class ScriptedSource(EntropySource):
    """Feeds predetermined raw 64-bit values to the rejection sampler."""

    def __init__(self, raws):
        super().__init__()
        self.raws = list(raws)
        self.calls = 0

    def _raw(self):
        self.calls += 1
        return self.raws.pop(0)


@pytest.fixture
def seeded():
    return SeededEntropySource(1234)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    # keep the user's real config out of tests
    path = tmp_path / "config.json"
    monkeypatch.setenv("PASSGEN_CONFIG", str(path))
    return path
