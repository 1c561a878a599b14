from genome_matcher.algorithms.prefix_index import PrefixIndex
from genome_matcher.core.models import Occurrence


def build_index():
    index = PrefixIndex()
    index.insert("GATTACA", 42)
    index.insert("GATTACA", 17)
    index.insert("GATTACA", 42)
    index.insert("GATT", 15)
    index.insert("GANT", 10)
    return index


def test_find_exact_returns_values_in_insertion_order():
    index = build_index()
    assert index.find("GATTACA", True) == [42, 17, 42]
    assert index.find("GATT", True) == [15]


def test_find_exact_missing_key():
    index = build_index()
    assert index.find("GATTACT", True) == []
    assert index.find("CAT", True) == []
    # intermediate node with no values
    assert index.find("GAT", True) == []


def test_find_with_snp_includes_exact_key_first():
    index = build_index()
    assert index.find("GATT", False) == [15, 10]


def test_find_with_snp_single_substitution():
    index = build_index()
    assert index.find("GACTACA", False) == [42, 17, 42]
    assert index.find("GATTACC", False) == [42, 17, 42]


def test_find_with_snp_allows_first_position_substitution():
    index = build_index()
    assert index.find("TATT", False) == [15]
    assert index.find("TATT", True) == []


def test_find_with_snp_rejects_two_substitutions():
    index = build_index()
    assert index.find("GACCACA", False) == []
    assert index.find("CCTT", False) == []


def test_find_only_matches_same_length_keys():
    index = build_index()
    assert index.find("GATTA", False) == []
    assert index.find("GATTACAG", False) == []


def test_empty_key_is_ignored():
    index = PrefixIndex()
    index.insert("", 1)
    assert len(index) == 0
    assert index.find("", True) == []
    assert index.find("", False) == []


def test_empty_index_lookups():
    index = PrefixIndex()
    assert not index
    assert index.find("ACG", True) == []
    assert index.find("ACG", False) == []


def test_counts():
    index = build_index()
    assert len(index) == 5
    assert index.key_count == 3
    # root + GATTACA path (7) + N branch under GA (2)
    assert index.node_count == 10


def test_occurrence_values():
    index = PrefixIndex()
    index.insert("ACG", Occurrence(0, 0))
    index.insert("ACG", Occurrence(1, 2))
    index.insert("ACC", Occurrence(0, 5))
    assert index.find("ACG", True) == [Occurrence(0, 0), Occurrence(1, 2)]
    assert sorted(index.find("ACG", False)) == [Occurrence(0, 0), Occurrence(0, 5), Occurrence(1, 2)]
    assert set(index.find("ACT", False)) == {Occurrence(0, 0), Occurrence(1, 2), Occurrence(0, 5)}
