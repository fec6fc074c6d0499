from forbidden_apis.app.signatures.suppression import SuppressionRegistry
from forbidden_apis.tests.fixtures.fake_engine import FakeEngine, RecordingListener


def test_duplicates_collapse():
    registry = SuppressionRegistry(
        ["com.example.SuppressForbidden", "com.example.SuppressForbidden"]
    )

    assert len(registry) == 1
    assert "com.example.SuppressForbidden" in registry


def test_every_name_is_registered_with_the_engine():
    engine = FakeEngine(None, frozenset(), RecordingListener())
    registry = SuppressionRegistry(["a.Suppress", "b.Suppress"])
    registry.add("a.Suppress")

    registry.register_with(engine)

    assert sorted(engine.suppress_annotations) == ["a.Suppress", "b.Suppress"]


def test_unresolvable_names_are_not_validated():
    engine = FakeEngine(None, frozenset(), RecordingListener())

    SuppressionRegistry(["does.not.Exist"]).register_with(engine)

    assert engine.suppress_annotations == ["does.not.Exist"]
