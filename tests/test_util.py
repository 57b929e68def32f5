import pytest
from twentyone.common.util import calculate_chi_square, uniformity_chi_square


def test_calculate_chi_square():
    observed_values = [10, 20, 30, 40]
    expected_values = [15, 25, 35, 45]
    chi_square_stat = calculate_chi_square(observed_values, expected_values)
    expected_chi_square_stat = sum(
        (o - e) ** 2 / e for o, e in zip(observed_values, expected_values)
    )
    assert chi_square_stat == expected_chi_square_stat

    # Test with empty lists
    assert calculate_chi_square([], []) == 0

    # Test with different lengths of observed and expected values
    with pytest.raises(ValueError) as exc_info:
        calculate_chi_square([10, 20, 30, 40], [15, 25])
    assert (
        str(exc_info.value)
        == "Observed and expected value lists must have the same length."
    )


def test_uniformity_chi_square_perfectly_even():
    samples = ["a", "b", "c"] * 10
    assert uniformity_chi_square(samples, ["a", "b", "c"]) == 0


def test_uniformity_chi_square_counts_missing_categories():
    # 30 samples, all "a": expected 10 each -> (20^2 + 10^2 + 10^2) / 10
    samples = ["a"] * 30
    assert uniformity_chi_square(samples, ["a", "b", "c"]) == pytest.approx(60.0)
