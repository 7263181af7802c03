from sananmuunnin.app.config import EXECUTOR_ENV, THREADS_ENV, SearchSettings
from sananmuunnin.utils.logging_config import LOG_LEVEL_ENV


def test_defaults_without_environment():
    settings = SearchSettings.from_env({})

    assert settings == SearchSettings(parallelism=1, executor="thread", log_level=None)


def test_environment_values_are_read():
    settings = SearchSettings.from_env(
        {THREADS_ENV: "8", EXECUTOR_ENV: "Process", LOG_LEVEL_ENV: "debug"}
    )

    assert settings.parallelism == 8
    assert settings.executor == "process"
    assert settings.log_level == "debug"


def test_malformed_environment_falls_back_to_defaults():
    settings = SearchSettings.from_env({THREADS_ENV: "lots", EXECUTOR_ENV: "gpu"})

    assert settings.parallelism == 1
    assert settings.executor == "thread"


def test_override_only_applies_given_values():
    base = SearchSettings(parallelism=4, executor="process", log_level="INFO")

    assert base.override(parallelism=None, executor=None) == base
    assert base.override(parallelism=2).parallelism == 2
    assert base.override(log_level="DEBUG").executor == "process"
