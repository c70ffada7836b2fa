from xeddsa.version import (
    VERSION_MAJOR,
    VERSION_MINOR,
    VERSION_REVISION,
    version_string,
)


def test_version_string_matches_release():
    assert version_string() == "2.0.0"


def test_version_string_is_built_from_components():
    parts = tuple(int(part) for part in version_string().split("."))
    assert parts == (VERSION_MAJOR, VERSION_MINOR, VERSION_REVISION)