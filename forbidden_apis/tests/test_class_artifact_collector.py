"""
Tests for class artifact enumeration.

Coverage matrix:

  CLASSES_DIR                      only '**/*.class', even without restriction
  file set, restricted             non-class resources filtered out
  file set, unrestricted           every resource yielded as-is
  file list                        declaration order, unreadable entry → ResourceIOError
  missing or unreadable directory  → ResourceIOError
  add_to                           count returned, bytes handed to the engine
"""

import pathlib

import pytest

from forbidden_apis.app.config import ForbiddenApisConfig
from forbidden_apis.app.errors import ConfigurationError, ResourceIOError
from forbidden_apis.app.resources.collector import ClassArtifactCollector
from forbidden_apis.app.schemas.resources import FileList, FileSet
from forbidden_apis.tests.fixtures.class_factory import (
    class_bytes,
    write_class,
    write_file,
)
from forbidden_apis.tests.fixtures.fake_engine import FakeEngine, RecordingListener


@pytest.fixture
def build_dir(tmp_path):
    root = tmp_path / "build"
    write_class(root, "com/example/A.class", "a")
    write_class(root, "com/example/B.class", "b")
    write_file(root, "com/example/readme.txt", "not a class")
    write_file(root, "META-INF/MANIFEST.MF", "Manifest-Version: 1.0")
    return root


def names(collector):
    return [artifact.binary_name for artifact in collector]


def test_classes_dir_only_yields_class_files(build_dir):
    for restrict in (True, False):
        collector = ClassArtifactCollector(
            classes_dir=build_dir, restrict_class_filename=restrict
        )
        assert names(collector) == ["com/example/A.class", "com/example/B.class"]


def test_file_set_is_filtered_by_class_suffix(build_dir):
    collector = ClassArtifactCollector(file_sets=[FileSet(dir=build_dir)])

    assert names(collector) == ["com/example/A.class", "com/example/B.class"]


def test_unrestricted_file_set_yields_every_resource(build_dir):
    collector = ClassArtifactCollector(
        file_sets=[FileSet(dir=build_dir)],
        restrict_class_filename=False,
    )

    assert names(collector) == [
        "META-INF/MANIFEST.MF",
        "com/example/A.class",
        "com/example/B.class",
        "com/example/readme.txt",
    ]


def test_file_set_excludes(build_dir):
    collector = ClassArtifactCollector(
        file_sets=[FileSet(dir=build_dir, excludes=["**/B.class"])]
    )

    assert names(collector) == ["com/example/A.class"]


def test_file_list_keeps_declaration_order(build_dir):
    collector = ClassArtifactCollector(
        file_lists=[
            FileList(
                dir=build_dir,
                files=["com/example/B.class", "com/example/A.class"],
            )
        ]
    )

    assert names(collector) == ["com/example/B.class", "com/example/A.class"]


def test_from_config_combines_inputs_in_order(build_dir, tmp_path):
    single = write_class(tmp_path / "single", "Solo.class", "solo")
    config = ForbiddenApisConfig(
        CLASSES_DIR=build_dir,
        CLASS_FILE_LISTS=[FileList(dir=build_dir, files=["com/example/A.class"])],
        CLASS_FILES=[single],
    )

    collected = names(ClassArtifactCollector.from_config(config))

    assert collected == [
        "com/example/A.class",
        "com/example/B.class",
        "com/example/A.class",
        single.as_posix(),
    ]


def test_artifacts_are_opened_lazily(build_dir):
    artifacts = list(ClassArtifactCollector(classes_dir=build_dir))

    with artifacts[0].open() as stream:
        assert stream.read() == class_bytes("a")


def test_add_to_hands_every_artifact_to_the_engine(build_dir):
    engine = FakeEngine(None, frozenset(), RecordingListener())

    count = ClassArtifactCollector(classes_dir=build_dir).add_to(engine)

    assert count == 2
    assert engine.classes["com/example/B.class"] == class_bytes("b")


def test_add_to_with_nothing_to_add_returns_zero(tmp_path):
    engine = FakeEngine(None, frozenset(), RecordingListener())
    (tmp_path / "empty").mkdir()

    assert ClassArtifactCollector(classes_dir=tmp_path / "empty").add_to(engine) == 0


def test_unreadable_artifact_names_the_resource(build_dir):
    engine = FakeEngine(None, frozenset(), RecordingListener())
    collector = ClassArtifactCollector(
        file_lists=[FileList(dir=build_dir, files=["com/example/Gone.class"])]
    )

    with pytest.raises(ResourceIOError) as excinfo:
        collector.add_to(engine)

    assert isinstance(excinfo.value, ConfigurationError)
    assert excinfo.value.resource == "com/example/Gone.class"
    assert "Failed to load one of the given class files" in str(excinfo.value)


def test_missing_file_set_directory(tmp_path):
    collector = ClassArtifactCollector(file_sets=[FileSet(dir=tmp_path / "nowhere")])

    with pytest.raises(ResourceIOError):
        list(collector)


def test_unreadable_file_set_directory_is_a_resource_error(build_dir, monkeypatch):
    def unreadable(self, pattern):
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(pathlib.Path, "rglob", unreadable)
    collector = ClassArtifactCollector(file_sets=[FileSet(dir=build_dir)])

    with pytest.raises(ResourceIOError) as excinfo:
        collector.add_to(FakeEngine(None, frozenset(), RecordingListener()))

    assert excinfo.value.resource == str(build_dir)
