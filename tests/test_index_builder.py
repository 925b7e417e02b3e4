# tests/test_index_builder.py
from drawbridge.builders.group_builder import group_records
from drawbridge.builders.index_builder import BranchVisit, RecordVisit, flatten, sort_leaf_records, walk_group_tree


def test_flatten_orders_buckets_ascending(env_records):
    index = flatten(group_records(env_records, ["env"]), ["env"])

    assert [r["user"] for r in index] == ["b", "a", "c"]


def test_flatten_is_a_permutation(stack_records):
    for keys in ([], ["environment"], ["environment", "username"], ["domain", "username", "environment"]):
        index = flatten(group_records(stack_records, keys), keys)
        assert len(index) == len(stack_records)
        assert sorted(r["domain"] for r in index) == sorted(r["domain"] for r in stack_records)


def test_flatten_is_deterministic(stack_records):
    keys = ["environment", "username"]
    root = group_records(stack_records, keys)

    assert flatten(root, keys) == flatten(root, keys)


def test_empty_bucket_sorts_first(stack_records):
    keys = ["environment", "username"]
    index = flatten(group_records(stack_records, keys), keys)

    assert [r["username"] for r in index] == ["guest", "admin", "deploy", "root"]


def test_leaf_records_sort_descending_with_empty_values_last():
    records = [{"name": "a"}, {"name": ""}, {"name": "c"}, {}, {"name": "b"}, {"name": "c", "n": 2}]

    ordered = sort_leaf_records(records, "name")

    assert ordered == [records[2], records[5], records[4], records[0], records[1], records[3]]


def test_leaf_sort_without_key_keeps_store_order(env_records):
    assert sort_leaf_records(env_records, None) == env_records


def test_walk_reports_branch_depths_and_leaf_levels(env_records):
    steps = list(walk_group_tree(group_records(env_records, ["env"]), ["env"]))

    assert steps[0] == BranchVisit(0, "env", "dev", True)
    assert steps[1] == RecordVisit(1, env_records[1])
    assert steps[2] == BranchVisit(0, "env", "prod", True)
    assert [s.record["user"] for s in steps[3:]] == ["a", "c"]
