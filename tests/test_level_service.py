import pytest

from services.level_service import calculate_level, calculate_until_next_level


@pytest.mark.parametrize(
    "experience, level, until_next",
    [
        (0, 0, 100),
        (99, 0, 1),
        (100, 1, 200),
        (299, 1, 1),
        (300, 2, 300),
        (1000, 4, 500),
        (9_999_999, 446, 12_801),
    ],
)
def test_level_and_until_next_level(experience, level, until_next):
    assert calculate_level(experience) == level
    assert calculate_until_next_level(experience) == until_next


def test_level_is_non_negative_and_non_decreasing():
    samples = list(range(0, 10_000_000, 9_973)) + [9_999_999]
    previous = 0
    for experience in samples:
        level = calculate_level(experience)
        assert level >= 0
        assert level >= previous
        assert calculate_until_next_level(experience) >= 0
        previous = level
