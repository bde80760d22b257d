import pytest

from judgekit.graphs import (
    bfs_order,
    count_components,
    count_worm_groups,
    dfs_order,
    hide_and_seek,
    infected_count,
)

SAMPLE_EDGES = [(1, 2), (1, 3), (1, 4), (2, 4), (3, 4)]
PATH_EDGES = [(1, 2), (2, 3), (3, 4), (4, 5)]


def test_worm_groups_connected_line_is_one_group():
    cabbages = [(x, 2) for x in range(6)]
    assert count_worm_groups(8, 5, cabbages) == 1


def test_worm_groups_diagonal_cells_are_separate():
    cabbages = [(i, i) for i in range(5)]
    assert count_worm_groups(5, 5, cabbages) == len(cabbages)


def test_worm_groups_ignore_duplicates_and_transpose():
    cabbages = [(0, 0), (1, 0), (3, 2), (3, 3), (4, 0)]
    base = count_worm_groups(5, 4, cabbages)
    assert count_worm_groups(5, 4, cabbages + cabbages) == base
    assert count_worm_groups(4, 5, [(y, x) for x, y in cabbages]) == base


def test_worm_groups_empty_field():
    assert count_worm_groups(3, 3, []) == count_components(0, [])


def test_worm_groups_reject_out_of_field():
    with pytest.raises(ValueError):
        count_worm_groups(3, 3, [(3, 0)])


def test_components_without_edges():
    assert count_components(5, []) == 5


def test_components_of_disjoint_union_add_up():
    left = [(1, 2), (2, 3)]
    right = [(u + 3, v + 3) for u, v in left]
    assert count_components(6, left + right) == count_components(3, left) * 2


def test_components_reject_unknown_vertex():
    with pytest.raises(ValueError):
        count_components(3, [(1, 4)])


def test_dfs_order_sample():
    assert dfs_order(4, SAMPLE_EDGES, 1) == [1, 2, 4, 3]


def test_bfs_order_sample_is_by_distance():
    order = bfs_order(4, SAMPLE_EDGES, 1)
    assert order[0] == 1
    assert order == sorted(order)
    assert set(order) == {1, 2, 3, 4}


def test_dfs_and_bfs_agree_on_a_path():
    assert dfs_order(5, PATH_EDGES, 5) == bfs_order(5, PATH_EDGES, 5)
    assert dfs_order(5, PATH_EDGES, 5)[0] == 5


def test_orders_skip_unreachable_vertices():
    assert 3 not in dfs_order(3, [(1, 2)], 1)
    assert 3 not in bfs_order(3, [(1, 2)], 1)


def test_orders_reject_bad_start():
    with pytest.raises(ValueError):
        dfs_order(3, [(1, 2)], 4)
    with pytest.raises(ValueError):
        bfs_order(3, [(1, 2)], 0)


def test_hide_and_seek_sample():
    assert hide_and_seek(5, 17) == 4


def test_hide_and_seek_backwards_walks():
    assert hide_and_seek(100, 37) == 100 - 37


@pytest.mark.parametrize("power", range(1, 16))
def test_hide_and_seek_doubling_bound(power):
    assert hide_and_seek(1, 2**power) <= power


def test_hide_and_seek_rejects_out_of_range():
    with pytest.raises(ValueError):
        hide_and_seek(0, 100_001)


def test_infected_star():
    edges = [(1, v) for v in range(2, 8)]
    assert infected_count(7, edges) == 7 - 1


def test_infected_only_own_component():
    component = [1, 2, 3]
    edges = [(1, 2), (2, 3), (4, 5)]
    assert infected_count(5, edges) == len(component) - 1


def test_infected_needs_a_computer():
    with pytest.raises(ValueError):
        infected_count(0, [])