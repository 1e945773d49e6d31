import pytest


ACTION_VARIABLES = (
    "GITHUB_ACTOR",
    "GITHUB_REPOSITORY",
    "ACCESS_TOKEN",
    "GIT_EMAIL",
    "GIT_USERNAME",
    "POM_PATH",
    "VERSION_PREFIX",
    "CREATE_TAG",
    "DEPLOY_ACTION",
    "GITHUB_OUTPUT",
)


@pytest.fixture(autouse=True)
def isolate_action_environment(monkeypatch):
    """Remove action settings inherited from the environment (e.g. a CI runner).

    Tests that need a setting set it explicitly.
    """
    for name in ACTION_VARIABLES:
        monkeypatch.delenv(name, raising=False)
    yield
