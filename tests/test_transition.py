import pytest

from envswitch import FileOperationError, switch_to
from envswitch.transition import copy_file, rename_file


def _snapshot(root):
    return {p.name: p.read_text() for p in root.iterdir()}


def test_first_activation_seeds_from_template(layout, tmp_path):
    layout.template_file.write_text("TEMPLATE=1\n")

    switch_to(layout, "dev", None)

    assert layout.live_file.read_text() == "TEMPLATE=1\n"
    assert layout.marker_file("dev").read_text() == "TEMPLATE=1\n"
    assert not layout.base_file("dev").exists()
    assert [p.name for p in tmp_path.glob("*.active")] == [".env.dev.active"]


def test_switch_persists_live_edits_of_previous_profile(layout):
    layout.template_file.write_text("TEMPLATE=1\n")
    layout.marker_file("dev").write_text("X")
    layout.live_file.write_text("Y")

    switch_to(layout, "prod", "dev")

    assert layout.base_file("dev").read_text() == "Y"
    assert not layout.marker_file("dev").exists()
    assert layout.live_file.read_text() == "TEMPLATE=1\n"
    assert layout.marker_file("prod").exists()
    assert not layout.base_file("prod").exists()


def test_existing_profile_is_not_reseeded(layout):
    layout.template_file.write_text("TEMPLATE=1\n")
    layout.base_file("prod").write_text("PROD=1\n")
    layout.marker_file("dev").write_text("DEV=1\n")
    layout.live_file.write_text("DEV=1\n")

    switch_to(layout, "prod", "dev")

    assert layout.live_file.read_text() == "PROD=1\n"
    assert layout.marker_file("prod").read_text() == "PROD=1\n"


def test_deactivation_overwrites_stale_base_file(layout):
    layout.base_file("dev").write_text("STALE")
    layout.marker_file("dev").write_text("OLD")
    layout.live_file.write_text("FRESH")
    layout.base_file("prod").write_text("PROD")

    switch_to(layout, "prod", "dev")

    assert layout.base_file("dev").read_text() == "FRESH"


def test_same_target_is_a_no_op(layout, tmp_path):
    layout.marker_file("dev").write_text("X")
    layout.live_file.write_text("Y")
    before = _snapshot(tmp_path)

    switch_to(layout, "dev", "dev")

    assert _snapshot(tmp_path) == before


def test_missing_template_fails_and_names_both_paths(layout, tmp_path):
    with pytest.raises(FileOperationError) as excinfo:
        switch_to(layout, "dev", None)

    err = excinfo.value
    assert err.operation == "copy"
    assert err.source == layout.template_file
    assert err.destination == layout.base_file("dev")
    assert str(layout.template_file) in str(err)
    assert str(layout.base_file("dev")) in str(err)
    assert list(tmp_path.iterdir()) == []


def test_failure_after_deactivation_is_not_rolled_back(layout):
    layout.marker_file("dev").write_text("X")
    layout.live_file.write_text("Y")

    with pytest.raises(FileOperationError):
        switch_to(layout, "prod", "dev")

    assert layout.base_file("dev").read_text() == "Y"
    assert not layout.marker_file("dev").exists()
    assert not layout.marker_file("prod").exists()
    assert layout.live_file.read_text() == "Y"


def test_missing_live_file_aborts_before_any_change(layout):
    layout.marker_file("dev").write_text("X")
    layout.template_file.write_text("T")

    with pytest.raises(FileOperationError) as excinfo:
        switch_to(layout, "prod", "dev")

    assert excinfo.value.source == layout.live_file
    assert layout.marker_file("dev").read_text() == "X"
    assert not layout.base_file("prod").exists()


def test_copy_and_rename_log_success(layout, caplog):
    source = layout.root / "a"
    source.write_text("1")
    with caplog.at_level("INFO", logger="envswitch"):
        copy_file(source, layout.root / "b")
        rename_file(layout.root / "b", layout.root / "c")

    assert (layout.root / "c").read_text() == "1"
    assert [r.levelname for r in caplog.records] == ["SUCCESS", "SUCCESS"]
    assert "Copied" in caplog.records[0].getMessage()
    assert "Renamed" in caplog.records[1].getMessage()


def test_rename_missing_source_raises(layout):
    with pytest.raises(FileOperationError, match="Error renaming file"):
        rename_file(layout.root / "missing", layout.root / "other")
