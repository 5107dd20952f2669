import pytest

from hashmesh.project import (
    InvalidArgumentInVersion,
    enabled_or_disabled,
    project_version_info,
)


def test_enabled_or_disabled():
    assert enabled_or_disabled(True) == "ENABLED"
    assert enabled_or_disabled(False) == "disabled"


def test_invalid_argument_message():
    err = InvalidArgumentInVersion("--gen-key")
    assert str(err) == "This argument is not supported in this version of program; --gen-key"
    assert isinstance(err, ValueError)


def test_default_version_info():
    text = project_version_info()
    lines = text.splitlines()
    assert lines[0] == "Program build options: "
    assert lines[1] == "Code level: normal code: ENABLED"
    assert lines[2] == "Code level: preview code: disabled"
    assert text.endswith("\n")


def test_features_are_reported():
    text = project_version_info({"preview": True, "ntru": True})
    assert "Code level: preview code: ENABLED" in text
    assert "  * NTRU: ENABLED" in text
    assert "  * SIDH: disabled" in text


def test_inconsistent_levels_rejected():
    with pytest.raises(ValueError, match="not consistent"):
        project_version_info({"experiment": True})


def test_unknown_feature_rejected():
    with pytest.raises(ValueError, match="Unknown"):
        project_version_info({"quantum": True})