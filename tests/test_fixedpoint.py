import pytest

from mk1tools.fixedpoint import (
    SpriteLayout,
    a_shl6,
    addsign,
    black_colour_byte,
    distance,
    hl_shr6,
    limit,
    sprite_layout,
    with_sign,
)


@pytest.mark.parametrize("a", range(256))
def test_shift_round_trip(a):
    assert hl_shr6(a_shl6(a)) == a


def test_hl_shr6_keeps_low_byte():
    assert hl_shr6(0xFFFF) == 0xFF
    assert hl_shr6(0) == 0


def test_a_shl6_fits_16_bits():
    assert all(a_shl6(a) < 0x4000 for a in range(256))


@pytest.mark.parametrize("a", range(256))
def test_with_sign_sign_extends(a):
    signed = a - 256 if a >= 128 else a
    assert with_sign(a, a_shl6(a)) == (signed * 64) & 0xFFFF


def test_with_sign_positive_unchanged():
    assert with_sign(0x7F, a_shl6(0x7F)) == a_shl6(0x7F)


def test_black_colour_byte_pen_zero():
    assert black_colour_byte(0, 0) == 0
    assert black_colour_byte(0, 1) == 0


def test_black_colour_byte_all_bits():
    assert black_colour_byte(15, 0) == 0xFF
    assert black_colour_byte(3, 1) == 0xFF


def test_black_colour_byte_config_pen():
    assert black_colour_byte(1, 0) == 0xC0
    assert black_colour_byte(1, 1) == 0xF0


@pytest.mark.parametrize("pen,mode", [(16, 0), (-1, 0), (4, 1)])
def test_black_colour_byte_rejects_bad_pen(pen, mode):
    with pytest.raises(ValueError):
        black_colour_byte(pen, mode)


def test_sprite_layout_groups_follow_each_other():
    layout = sprite_layout(3, 2, 3, 1)
    assert isinstance(layout, SpriteLayout)
    assert layout.player == 0
    assert layout.enems_base == 1
    assert layout.bullets_base == layout.enems_base + 3
    assert layout.cocos_base == layout.bullets_base + 2
    assert layout.extra_base == layout.cocos_base + 3
    assert layout.total == layout.extra_base + 1


def test_sprite_layout_without_extras():
    layout = sprite_layout(3)
    assert layout.bullets_base == layout.cocos_base == layout.extra_base
    assert layout.total == layout.extra_base


def test_sprite_layout_rejects_negative():
    with pytest.raises(ValueError):
        sprite_layout(-1)


@pytest.mark.parametrize("n,value,expected", [(0, 5, 5), (3, 5, 5), (-1, 5, -5), (-7, -2, 2)])
def test_addsign(n, value, expected):
    assert addsign(n, value) == expected


@pytest.mark.parametrize("val,expected", [(-10, -3), (0, 0), (10, 4), (4, 4), (-3, -3)])
def test_limit(val, expected):
    assert limit(val, -3, 4) == expected


@pytest.mark.parametrize("d", [0, 1, 17, 200])
def test_distance_along_axis_is_exact(d):
    assert distance(0, 0, d, 0) == d
    assert distance(10, 0, 10, d) == d


def test_distance_is_symmetric():
    assert distance(3, 90, 120, 17) == distance(120, 17, 3, 90)


def test_distance_diagonal_shorter_than_manhattan():
    assert distance(0, 0, 40, 40) < 80
    assert distance(0, 0, 40, 40) > 40