from deltaview.env import get_boolean_env_var, get_env_var

NAME = "DELTAVIEW_TEST_VARIABLE"


def test_get_env_var_unset(monkeypatch):
    monkeypatch.delenv(NAME, raising=False)
    assert get_env_var(NAME) is None


def test_get_env_var_empty(monkeypatch):
    monkeypatch.setenv(NAME, "")
    assert get_env_var(NAME) is None


def test_get_env_var_whitespace_only(monkeypatch):
    monkeypatch.setenv(NAME, "  \t ")
    assert get_env_var(NAME) is None


def test_get_env_var_trims(monkeypatch):
    monkeypatch.setenv(NAME, "  less -R  ")
    assert get_env_var(NAME) == "less -R"


def test_get_env_var_plain_value(monkeypatch):
    monkeypatch.setenv(NAME, "0.6")
    assert get_env_var(NAME) == "0.6"


def test_get_boolean_env_var_unset(monkeypatch):
    monkeypatch.delenv(NAME, raising=False)
    assert get_boolean_env_var(NAME) is False


def test_get_boolean_env_var_empty_counts_as_set(monkeypatch):
    monkeypatch.setenv(NAME, "")
    assert get_boolean_env_var(NAME) is True


def test_get_boolean_env_var_any_value(monkeypatch):
    monkeypatch.setenv(NAME, "false")
    assert get_boolean_env_var(NAME) is True