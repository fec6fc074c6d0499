import pytest

from forbidden_apis.app.resources.patterns import is_selected, match_path


@pytest.mark.parametrize(
    "path, pattern, expected",
    [
        ("Foo.class", "**/*.class", True),
        ("a/b/Foo.class", "**/*.class", True),
        ("a/b/Foo.txt", "**/*.class", False),
        ("a/Foo.class", "*.class", False),
        ("Foo.class", "*.class", True),
        ("a/b/c", "**", True),
        ("a/x/Foo.class", "a/**/Foo.class", True),
        ("a/Foo.class", "a/**/Foo.class", True),
        ("a/Fo.class", "a/F?.class", True),
        ("a/Foo.class", "a/F?.class", False),
        ("gen/X.class", "gen/", True),
        ("a+b/X.class", "a+b/*.class", True),
    ],
)
def test_match_path(path, pattern, expected):
    assert match_path(path, pattern) is expected


def test_excludes_take_precedence():
    assert is_selected("a/Foo.class", ["**/*.class"], [])
    assert not is_selected("a/Foo.class", ["**/*.class"], ["a/**"])
    assert not is_selected("a/Foo.txt", ["**/*.class"], [])
