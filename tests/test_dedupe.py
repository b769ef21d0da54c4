"""Unit tests for solution deduplication."""

import pytest

from carcassonne.solver.dedupe import Location, Solution, SolutionSet, interchangeable_masks


def solution(*locations: tuple[int, int, int]) -> Solution:
    return Solution(tuple(Location(*loc) for loc in locations))


@pytest.fixture
def distinct_tiles(make_tile):
    return [make_tile("pasture road pasture pasture"), make_tile("pasture pasture pasture road")]


def test_first_solution_is_always_new(distinct_tiles):
    results = SolutionSet(distinct_tiles)
    assert results.add(solution((0, 0, 0), (0, 1, 0)))
    assert len(results) == 1


def test_exact_repeat_is_duplicate(distinct_tiles):
    results = SolutionSet(distinct_tiles)
    results.add(solution((0, 0, 0), (0, 1, 0)))
    assert not results.add(solution((0, 0, 0), (0, 1, 0)))
    assert len(results) == 1


def test_translated_solution_is_duplicate(distinct_tiles):
    results = SolutionSet(distinct_tiles)
    results.add(solution((0, 0, 0), (0, 1, 0)))
    assert results.is_duplicate(solution((1, 1, 0), (1, 2, 0)))


def test_uniform_rotation_offset_is_duplicate(distinct_tiles):
    results = SolutionSet(distinct_tiles)
    results.add(solution((0, 0, 0), (0, 1, 90)))
    assert results.is_duplicate(solution((0, 0, 90), (0, 1, 180)))


def test_swapping_different_tiles_is_new(distinct_tiles):
    results = SolutionSet(distinct_tiles)
    results.add(solution((0, 0, 0), (0, 1, 0)))
    assert results.add(solution((0, 1, 0), (0, 0, 0)))
    assert len(results) == 2


def test_swapping_interchangeable_tiles_is_duplicate(pasture):
    results = SolutionSet([pasture, pasture])
    results.add(solution((0, 0, 0), (0, 1, 0)))
    assert not results.add(solution((0, 1, 0), (0, 0, 0)))


def test_swap_plus_translation_of_twins_is_duplicate(make_tile, pasture):
    tiles = [make_tile("pasture road pasture pasture"), pasture, pasture]
    results = SolutionSet(tiles)
    results.add(solution((1, 0, 0), (0, 0, 0), (0, 1, 0)))
    # Shift by one column, tiles 1 and 2 trade places.
    assert results.is_duplicate(solution((1, 1, 0), (0, 1, 0), (0, 2, 0)))
    assert results.is_duplicate(solution((1, 1, 0), (0, 2, 0), (0, 1, 0)))
    assert not results.is_duplicate(solution((1, 1, 0), (0, 2, 0), (0, 3, 0)))


def test_inconsistent_offsets_are_new(distinct_tiles):
    results = SolutionSet(distinct_tiles)
    results.add(solution((0, 0, 0), (0, 1, 0)))
    assert not results.is_duplicate(solution((0, 0, 0), (1, 0, 0)))


def test_wrong_length_rejected(distinct_tiles):
    results = SolutionSet(distinct_tiles)
    with pytest.raises(ValueError):
        results.add(solution((0, 0, 0)))


def test_interchangeable_masks(make_tile, pasture):
    tiles = [pasture, make_tile("road road road road"), pasture, pasture]
    masks = interchangeable_masks(tiles)
    assert list(masks[0]) == [0, 0, 1, 1]
    assert list(masks[1]) == [0, 0, 0, 0]
    assert list(masks[3]) == [1, 0, 1, 0]


def test_location_offset_and_str():
    assert Location(2, 3, 180).offset(Location(1, 1, 90)) == (1, 2, 90)
    assert str(solution((0, 0, 0), (0, 1, 90))) == "(0,0,0) (0,1,90)"
