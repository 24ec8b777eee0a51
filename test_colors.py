import random

import pytest

from colors import ColorScale
from errors import ConfigurationError


def test_from_source_drops_blank_lines():
    scale = ColorScale.from_source("000000\n\n888888\nffffff\n", max_views=10)
    assert scale.colors == ("000000", "888888", "ffffff")


def test_from_source_empty_is_configuration_error():
    with pytest.raises(ConfigurationError):
        ColorScale.from_source("\n\n", max_views=10)


def test_zero_max_views_is_configuration_error():
    with pytest.raises(ConfigurationError):
        ColorScale(["000000"], max_views=0)


@pytest.mark.parametrize("count, expected", [
    (0, "000000"),
    (5, "888888"),
    (10, "ffffff"),
    (100, "ffffff"),
])
def test_color_for_count_examples(scale, count, expected):
    assert scale.color_for_count(count) == expected


def test_negative_count_clamps_to_first_color(scale):
    assert scale.color_for_count(-3) == "000000"


def test_max_views_hits_last_color_on_uneven_scales():
    colors = [f"{i:06x}" for i in range(14)]
    for max_views in (3, 7, 10, 10_400):
        scale = ColorScale(colors, max_views)
        assert scale.color_for_count(max_views) == colors[-1]
        assert scale.color_for_count(max_views * 50) == colors[-1]


def test_color_index_is_monotonic():
    colors = [f"{i:06x}" for i in range(7)]
    scale = ColorScale(colors, max_views=100)
    indices = [colors.index(scale.color_for_count(n)) for n in range(101)]
    assert indices == sorted(indices)
    assert indices[0] == 0 and indices[-1] == len(colors) - 1


def test_random_color_is_member_and_skips_last(scale):
    rng = random.Random(1234)
    seen = {scale.random_color(rng) for _ in range(200)}
    assert seen <= set(scale.colors)
    assert "ffffff" not in seen
    assert seen == {"000000", "888888"}


def test_random_color_with_two_colors_never_fails():
    scale = ColorScale(["aaaaaa", "bbbbbb"], max_views=1)
    assert all(scale.random_color() == "aaaaaa" for _ in range(20))


def test_random_color_single_color():
    scale = ColorScale(["aaaaaa"], max_views=5)
    assert scale.random_color() == "aaaaaa"
