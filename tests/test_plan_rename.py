"""
Tests for the dry-run plan.
"""

from add_prefix.core import plan_prefix_rename, scan_directory, ItemKind


def test_plan_targets_use_prefix(populated_dir):
    plan = plan_prefix_rename(scan_directory(populated_dir), "new_")

    assert [op.new_name for op in plan.ops] == ["new_a.txt", "new_b.md", "new_docs"]
    assert all(op.dst.parent == populated_dir for op in plan.ops)
    assert plan.conflict_count == 0


def test_plan_does_not_touch_filesystem(populated_dir):
    before = sorted(p.name for p in populated_dir.iterdir())

    plan_prefix_rename(scan_directory(populated_dir), "new_")

    assert sorted(p.name for p in populated_dir.iterdir()) == before


def test_plan_flags_existing_target(temp_dir):
    (temp_dir / "a.txt").write_text("")
    (temp_dir / "x_a.txt").write_text("")

    plan = plan_prefix_rename(scan_directory(temp_dir), "x_")

    conflicts = [op.item.name for op in plan.conflicts]
    assert conflicts == ["a.txt"]
    assert plan.conflict_count == 1
    assert plan.total_count == 2


def test_directory_and_file_with_similar_names(temp_dir):
    (temp_dir / "report").mkdir()
    (temp_dir / "report.txt").write_text("")

    plan = plan_prefix_rename(scan_directory(temp_dir), "old_")

    assert [(op.item.kind, op.new_name) for op in plan.ops] == [
        (ItemKind.DIRECTORY, "old_report"),
        (ItemKind.FILE, "old_report.txt"),
    ]
    assert plan.conflict_count == 0


def test_describe_line(temp_dir):
    (temp_dir / "a.txt").write_text("")

    plan = plan_prefix_rename(scan_directory(temp_dir), "new_")

    assert plan.ops[0].describe() == "[file] a.txt -> new_a.txt"
