# src/e2e/test_huffman.py

import pytest

from fingers.config import ConfigurationError
from fingers.huffman import HuffmanHintAssigner
from fingers.models import RawMatch, ResolvedMatch


def fake_matches(n: int) -> list[ResolvedMatch]:
    return [
        ResolvedMatch(id=i, raw=RawMatch(0, "p", i * 2, i * 2 + 1, i * 2, i * 2 + 1, "x"))
        for i in range(n)
    ]


def codes(alphabet, n: int) -> list[str]:
    return [h.code for h in HuffmanHintAssigner(alphabet).assign(fake_matches(n))]


def optimal_total_length(n: int, k: int) -> int:
    """Smallest sum of code lengths for n equally likely codes over k symbols."""
    if n <= k:
        return n
    depth = 1
    while k ** depth < n:
        depth += 1
    slots = k ** (depth - 1)
    for shallow in range(min(n, slots), -1, -1):
        if shallow + -(-(n - shallow) // k) <= slots:
            return shallow * (depth - 1) + (n - shallow) * depth
    raise AssertionError("unreachable")


def test_two_matches_on_four_keys():
    assert codes("fjdk", 2) == ["f", "j"]


def test_two_matches_on_binary_alphabet():
    assert codes("ab", 2) == ["a", "b"]


def test_fits_in_alphabet_uses_first_symbols():
    assert codes("asdf", 3) == ["a", "s", "d"]
    assert codes("asdf", 4) == ["a", "s", "d", "f"]


def test_five_on_four_keys():
    assert codes("asdf", 5) == ["a", "s", "d", "fa", "fs"]


def test_five_on_binary_alphabet():
    result = codes("ab", 5)
    lengths = sorted(len(c) for c in result)
    assert lengths in ([2, 2, 2, 3, 3], [2, 2, 3, 3, 3])
    assert sum(lengths) == optimal_total_length(5, 2)


def test_zero_and_one_match():
    assert codes("asdf", 0) == []
    assert codes("asdf", 1) == ["a"]


@pytest.mark.parametrize("alphabet", ["", "a", ["a", "a"], ["ab", "c"]])
def test_bad_alphabets_rejected_before_assignment(alphabet):
    with pytest.raises(ConfigurationError):
        HuffmanHintAssigner(alphabet)


def test_dummy_count_makes_tree_full():
    h = HuffmanHintAssigner("asdf")
    assert h.dummy_count(5) == 2
    assert h.dummy_count(7) == 0
    assert HuffmanHintAssigner("ab").dummy_count(5) == 0


def test_tree_shape():
    h = HuffmanHintAssigner("asdf")
    arena, root = h.build_tree(50)
    internal = [node for node in arena if not node.is_leaf]
    leaves = [node for node in arena if node.is_leaf]

    assert all(len(node.children) == 4 for node in internal)
    assert len([n for n in leaves if not n.dummy]) == 50
    assert len([n for n in leaves if n.dummy]) == h.dummy_count(50)
    assert arena[root].weight == 50


@pytest.mark.parametrize("alphabet", ["ab", "abc", "asdf", "asdfjklgh", "asdfqwerzxcvjklmiuopghtybn"])
def test_code_properties(alphabet):
    k = len(alphabet)
    for n in range(0, 80):
        hints = HuffmanHintAssigner(alphabet).assign(fake_matches(n))
        result = [h.code for h in hints]

        # bijection
        assert [h.match_id for h in hints] == list(range(n))
        assert len(set(result)) == n
        # prefix-free
        for a in result:
            for b in result:
                assert a == b or not b.startswith(a)
        # only alphabet symbols
        assert all(ch in alphabet for c in result for ch in c)
        if n == 0:
            continue
        lengths = [len(c) for c in result]
        # balanced and optimal
        assert max(lengths) - min(lengths) <= 1
        assert sum(lengths) == optimal_total_length(n, k)
        # earlier matches never get longer codes than later ones
        assert lengths == sorted(lengths)
        # deterministic
        assert codes(alphabet, n) == result


def test_earlier_matches_get_earlier_symbols():
    result = codes("asdf", 50)
    assert result[0] == "aa"
    assert result == sorted(result, key=lambda c: (len(c), ["asdf".index(ch) for ch in c]))


def test_spell_rejects_values_longer_than_the_code():
    asg = HuffmanHintAssigner("ab")
    assert asg._spell(2, 2) == "ba"
    with pytest.raises(RuntimeError):
        asg._spell(4, 2)
