import numpy as np
import pytest

from lottogen.frequency import FrequencyTable


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def write_history(tmp_path):
    def _write(text, name="history.txt"):
        p = tmp_path / name
        p.write_text(text, encoding="utf-8")
        return p
    return _write


@pytest.fixture
def flat_table():
    return FrequencyTable()
