import pytest

from forbidden_apis.app.classpath.context import ClassResolutionContext
from forbidden_apis.app.classpath.loader import (
    ClasspathClassLoader,
    SystemClassLoader,
)


class CountingLoader(ClasspathClassLoader):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.close_calls = 0

    def close(self):
        self.close_calls += 1
        super().close()


def test_empty_classpath_uses_the_system_loader():
    system = SystemClassLoader()
    context = ClassResolutionContext([], parent=system)

    with context as loader:
        assert loader is system
        assert context.owns_loader is False

    assert context.loader is system


def test_classpath_gets_a_dedicated_loader_under_the_system_loader(tmp_path):
    system = SystemClassLoader()
    context = ClassResolutionContext([tmp_path], parent=system, loader_class=CountingLoader)

    with context as loader:
        assert isinstance(loader, CountingLoader)
        assert loader.parent is system
        assert context.owns_loader is True

    assert loader.close_calls == 1
    assert context.owns_loader is False


def test_loader_is_released_once_when_the_scope_raises(tmp_path):
    context = ClassResolutionContext(
        [tmp_path], parent=SystemClassLoader(), loader_class=CountingLoader
    )

    with pytest.raises(ValueError):
        with context as loader:
            raise ValueError("boom")

    context.release()
    assert loader.close_calls == 1


def test_failed_loader_construction_releases_nothing(tmp_path):
    def exploding_loader(*args, **kwargs):
        raise OSError("cannot open classpath")

    context = ClassResolutionContext(
        [tmp_path], parent=SystemClassLoader(), loader_class=exploding_loader
    )

    with pytest.raises(OSError):
        with context:
            pytest.fail("scope must not be entered")

    assert context.owns_loader is False
    assert context.loader is None
