import pytest

from algodrills.dp_optimization import (
    knapsack,
    longest_increasing_subsequence,
    max_apples,
    max_problem_points,
    max_sum_no_double_skip,
    max_wrapping_path,
    min_cost_dice_rolls,
    min_job_time,
    min_painting_cost,
)


def test_max_apples_single_cell():
    assert max_apples([[5]]) == 5


def test_max_apples_single_row_and_column_take_everything():
    assert max_apples([[1, 2, 3, 4]]) == sum([1, 2, 3, 4])
    assert max_apples([[1], [2], [3]]) == sum([1, 2, 3])


def test_max_apples_square():
    assert max_apples([[1, 2], [3, 4]]) == 8


@pytest.mark.parametrize("grid", [[], [[]], [[1, 2], [3]]])
def test_max_apples_rejects_bad_grids(grid):
    with pytest.raises(ValueError):
        max_apples(grid)


def test_no_double_skip_takes_all_nonnegative_values():
    values = [3, 0, 4, 1, 5]
    assert max_sum_no_double_skip(values) == sum(values)


def test_no_double_skip_single_value():
    assert max_sum_no_double_skip([7]) == 7


def test_no_double_skip_must_take_one_of_each_pair():
    assert max_sum_no_double_skip([-1, -1, -1]) == -1


def test_no_double_skip_rejects_empty():
    with pytest.raises(ValueError):
        max_sum_no_double_skip([])


def test_min_job_time_huge_switch_cost_stays_on_cheaper_machine():
    first = [2, 2, 2]
    second = [3, 3, 3]
    assert min_job_time(first, second, 10**6) == sum(first)


def test_min_job_time_free_switching_picks_per_job_minimum():
    first = [5, 1, 7, 2]
    second = [2, 6, 3, 9]
    assert min_job_time(first, second, 0) == sum(min(a, b) for a, b in zip(first, second))


def test_min_job_time_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        min_job_time([1, 2], [1], 3)


def test_knapsack_everything_fits():
    items = [(1, 4), (2, 5), (3, 6)]
    assert knapsack(10, items) == sum(v for _, v in items)


def test_knapsack_zero_capacity_and_heavy_item():
    assert knapsack(0, [(1, 5), (2, 3)]) == 0
    assert knapsack(3, [(4, 9)]) == 0


def test_knapsack_classic_example():
    assert knapsack(4, [(1, 15), (3, 20), (4, 30)]) == 35


def test_knapsack_rejects_negative_capacity():
    with pytest.raises(ValueError):
        knapsack(-1, [(1, 1)])


def test_lis_sorted_and_decreasing():
    values = [1, 4, 6, 9, 12]
    assert longest_increasing_subsequence(values) == len(values)
    assert longest_increasing_subsequence(list(reversed(values))) == 1


def test_lis_is_strict():
    assert longest_increasing_subsequence([3, 3, 3, 3]) == 1


def test_lis_mixed():
    assert longest_increasing_subsequence([10, 9, 2, 5, 3, 7, 101, 18]) == 4


def test_lis_never_exceeds_length():
    values = [5, 1, 8, 2, 9, 3, 7]
    assert 1 <= longest_increasing_subsequence(values) <= len(values)


def test_dice_rolls_zero_sum_costs_nothing():
    assert min_cost_dice_rolls(0, [1, 2, 3, 4, 5, 6]) == 0


def test_dice_rolls_one_roll_of_six():
    assert min_cost_dice_rolls(6, [1] * 6) == 1


def test_dice_rolls_only_face_one_is_cheap():
    n = 5
    assert min_cost_dice_rolls(n, [1, 100, 100, 100, 100, 100]) == n


def test_dice_rolls_rejects_wrong_face_count():
    with pytest.raises(ValueError):
        min_cost_dice_rolls(3, [1, 2, 3])


def test_painting_single_house():
    assert min_painting_cost([[4, 2, 7]]) == min([4, 2, 7])


def test_painting_alternating_minima():
    houses = [[1, 9, 9], [9, 1, 9], [1, 9, 9]]
    assert min_painting_cost(houses) == sum(min(h) for h in houses)


def test_painting_never_below_per_house_minimum():
    houses = [[1, 5, 9], [1, 5, 9], [1, 5, 9]]
    assert min_painting_cost(houses) > sum(min(h) for h in houses)


def test_painting_rejects_wrong_colour_count():
    with pytest.raises(ValueError):
        min_painting_cost([[1, 2]])


def test_wrapping_path_single_column():
    assert max_wrapping_path([[3], [8], [1]]) == 8


def test_wrapping_path_small_grid_reaches_column_maxima():
    grid = [[1, 0, 4], [0, 2, 0], [0, 5, 1]]
    assert max_wrapping_path(grid) == sum(max(col) for col in zip(*grid))


def test_wrapping_path_invariant_under_row_rotation():
    grid = [[1, 7, 2, 0], [4, 0, 0, 3], [0, 2, 9, 1], [6, 1, 0, 5], [0, 3, 4, 2]]
    rotated = grid[2:] + grid[:2]
    assert max_wrapping_path(rotated) == max_wrapping_path(grid)


def test_problem_points_without_skips_takes_all():
    problems = [(3, 0), (4, 0), (2, 0)]
    assert max_problem_points(problems) == sum(p for p, _ in problems)


def test_problem_points_big_first_problem():
    assert max_problem_points([(10, 5), (1, 0), (1, 0)]) == 10


def test_problem_points_rejects_empty():
    with pytest.raises(ValueError):
        max_problem_points([])