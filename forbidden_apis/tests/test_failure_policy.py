from forbidden_apis.app.config import ForbiddenApisConfig
from forbidden_apis.app.coordinator.policy import FailurePolicy
from forbidden_apis.app.engine.interface import EngineOption


def test_defaults_match_the_configuration_defaults():
    assert FailurePolicy() == FailurePolicy.from_config(ForbiddenApisConfig())


def test_default_engine_options():
    assert FailurePolicy().engine_options() == frozenset(
        {
            EngineOption.FAIL_ON_MISSING_CLASSES,
            EngineOption.FAIL_ON_VIOLATION,
            EngineOption.FAIL_ON_UNRESOLVABLE_SIGNATURES,
        }
    )


def test_orchestrator_only_flags_are_not_forwarded():
    policy = FailurePolicy(
        fail_on_unsupported_java=True,
        ignore_empty_file_set=True,
        fail_on_missing_classes=False,
        fail_on_violation=False,
        fail_on_unresolvable_signatures=False,
    )

    assert policy.engine_options() == frozenset()


def test_disable_classloading_cache_is_forwarded():
    config = ForbiddenApisConfig(DISABLE_CLASSLOADING_CACHE=True, FAIL_ON_VIOLATION=False)

    options = FailurePolicy.from_config(config).engine_options()

    assert EngineOption.DISABLE_CLASSLOADING_CACHE in options
    assert EngineOption.FAIL_ON_VIOLATION not in options
