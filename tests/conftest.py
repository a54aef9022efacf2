import pytest

from jiramd.config import defaults


@pytest.fixture(autouse=True)
def quiet_env(monkeypatch):
    """Run every test with verbose logging and theme overrides unset."""
    monkeypatch.delenv(defaults.VERBOSE_ENV, raising=False)
    monkeypatch.delenv(defaults.CODE_THEME_ENV, raising=False)


@pytest.fixture
def verbose_env(monkeypatch):
    monkeypatch.setenv(defaults.VERBOSE_ENV, "1")


@pytest.fixture
def sample_jira():
    """Return a Jira description mixing tables, emphasis and colors."""
    return (
        "h2. Release notes\r\n"
        "\r\n"
        "||Component||Status||\r\n"
        "|api|{color:green}done{color}|\r\n"
        "|ui|{color:#de350b}blocked{color}|\r\n"
        "\r\n"
        "{*}Owner{*}: {_}platform{_}"
    )
