import pytest
from planexplain.utils import get_env_variable, parse_bool


def test_get_env_variable(monkeypatch):
    monkeypatch.setenv("PLANEXPLAIN_TEST_VARIABLE", "value")
    monkeypatch.delenv("PLANEXPLAIN_TEST_MISSING", raising=False)
    assert get_env_variable("PLANEXPLAIN_TEST_VARIABLE", "default") == "value"
    assert get_env_variable("PLANEXPLAIN_TEST_MISSING", "default") == "default"


@pytest.mark.parametrize("value", ["1", "true", "On", " YES "])
def test_parse_bool_true(value):
    assert parse_bool(value) is True


@pytest.mark.parametrize("value", ["0", "false", "OFF", "no"])
def test_parse_bool_false(value):
    assert parse_bool(value) is False


def test_parse_bool_invalid():
    with pytest.raises(ValueError):
        parse_bool("maybe")
