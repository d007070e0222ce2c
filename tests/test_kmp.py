import pytest

from leetkit.kmp import KMPBuildError, build_kmp


def test_build():
    table = build_kmp("abababca")
    assert table.next == [-1, 0, 0, 1, 2, 3, 4, 0]


def test_partial_build():
    table = build_kmp("abababca", 5)
    assert table.next == [-1, 0, 0, 1, 2]

    table.continue_build()
    assert table.next == [-1, 0, 0, 1, 2, 3, 4, 0]


def test_table_length_matches_pattern():
    pattern = "abababca"
    table = build_kmp(pattern)
    assert len(table.next) == len(pattern)
    assert table.pattern == pattern


def test_single_character_pattern_cannot_be_built():
    with pytest.raises(KMPBuildError):
        build_kmp("a")


def test_empty_pattern_cannot_be_built():
    with pytest.raises(KMPBuildError):
        build_kmp("")


def test_next_is_a_copy():
    table = build_kmp("abababca")
    snapshot = table.next
    snapshot.append(99)
    assert table.next == [-1, 0, 0, 1, 2, 3, 4, 0]