from planexplain.core.explain import Attribute, check_inputs_present
from planexplain.core.plan import Join, PlanCluster, TableScan


def make_join():
    cluster = PlanCluster()
    left = TableScan(cluster, ["a"])
    right = TableScan(cluster, ["b"])
    return Join(cluster, left, right, "=($0, $1)"), left, right


def test_consistent():
    join, left, right = make_join()
    attributes = [Attribute.of("left", left), Attribute.of("right", right), Attribute.of("condition", "x")]
    assert check_inputs_present(join, attributes) is None


def test_leaf_without_attributes():
    scan = TableScan(PlanCluster(), ["a"])
    assert check_inputs_present(scan, []) is None


def test_subset_marker_is_skipped():
    join, left, right = make_join()
    attributes = [Attribute.of("subset", "rel#1"), Attribute.of("left", left), Attribute.of("right", right)]
    assert check_inputs_present(join, attributes) is None


def test_other_markers_are_not_skipped():
    join, left, right = make_join()
    attributes = [Attribute.of("marker", "m"), Attribute.of("left", left), Attribute.of("right", right)]
    mismatch = check_inputs_present(join, attributes)
    assert mismatch is not None
    assert mismatch.position == 0
    assert mismatch.expected is left


def test_wrong_order():
    join, left, right = make_join()
    mismatch = check_inputs_present(join, [Attribute.of("left", right), Attribute.of("right", left)])
    assert mismatch is not None
    assert mismatch.position == 0
    assert mismatch.found.value is right
    assert "expected input" in mismatch.describe()


def test_missing_input():
    join, left, right = make_join()
    mismatch = check_inputs_present(join, [Attribute.of("left", left)])
    assert mismatch is not None
    assert mismatch.position == 1
    assert mismatch.expected is right
    assert mismatch.found is None
    assert "was not registered" in mismatch.describe()


def test_identity_not_equality():
    cluster = PlanCluster()
    scan = TableScan(cluster, ["a"])
    twin = TableScan(cluster, ["a"])
    node = Join(cluster, scan, twin, "true")
    mismatch = check_inputs_present(node, [Attribute.of("left", scan), Attribute.of("right", scan)])
    assert mismatch is not None
    assert mismatch.expected is twin
