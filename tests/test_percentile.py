from logic.percentile import inverted_percentile, percentile


def test_minimum_and_maximum_of_five():
    population = [0.1, 0.2, 0.3, 0.4, 0.5]

    assert percentile(0.1, population) == 10
    assert percentile(0.5, population) == 90
    assert percentile(0.3, population) == 50


def test_all_equal_population_is_fiftieth():
    assert percentile(0.25, [0.25] * 7) == 50


def test_empty_population_is_zero():
    assert percentile(0.4, []) == 0


def test_value_outside_population():
    population = [1, 2, 3]

    assert percentile(10, population) == 100
    assert percentile(0, population) == 0


def test_rounds_half_up():
    # (1 + 0.5) / 4 * 100 == 37.5
    assert percentile(2, [1, 2, 3, 4]) == 38
    # (0 + 0.5) / 8 * 100 == 6.25
    assert percentile(1, [1, 2, 3, 4, 5, 6, 7, 8]) == 6


def test_stays_within_bounds():
    population = [3, 1, 4, 1, 5, 9, 2, 6]
    for value in population + [-1, 100]:
        assert 0 <= percentile(value, population) <= 100


def test_inverted_percentile_rewards_low_values():
    population = [0.05, 0.10, 0.20, 0.30, 0.40]

    assert inverted_percentile(0.05, population) == 90
    assert inverted_percentile(0.40, population) == 10
