import pytest

from catalog import DEFAULT_TABLE_SIZE, char_sum_hash


def test_hash_is_character_sum_modulo_size():
    assert char_sum_hash("A", 179) == 65
    assert char_sum_hash("CS101", 179) == (67 + 83 + 49 + 48 + 49) % 179


def test_hash_uses_default_prime_size():
    assert DEFAULT_TABLE_SIZE == 179
    assert char_sum_hash("CS101") == char_sum_hash("CS101", 179)


@pytest.mark.parametrize("size", [1, 7, 179, 1024])
def test_hash_stays_in_range(size):
    for key in ["", "CS101", "MATH201", "ZZZZZZZZZZ", "éèê"]:
        assert 0 <= char_sum_hash(key, size) < size


def test_anagrams_collide():
    assert char_sum_hash("CS101") == char_sum_hash("CS011") == char_sum_hash("10SC1")


def test_empty_key_maps_to_zero():
    assert char_sum_hash("", 13) == 0


@pytest.mark.parametrize("size", [0, -3])
def test_non_positive_size_is_rejected(size):
    with pytest.raises(ValueError):
        char_sum_hash("CS101", size)
