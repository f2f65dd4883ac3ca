import pytest

from splot3d.styles import (
    FILLED_HEAD,
    PrimitiveKind,
    Style,
    StyleKey,
    canonicalize,
    clamp_width,
)


def point_style(**kwargs):
    return Style(kind=PrimitiveKind.POINT, **kwargs)


def test_unset_segment_style_resolves_defaults():
    assert canonicalize(Style()) == StyleKey(PrimitiveKind.SEGMENT, 1, 'black', 'nohead')


def test_unset_point_style_resolves_defaults():
    assert canonicalize(point_style()) == StyleKey(PrimitiveKind.POINT, 3, 'black', '')


def test_explicit_defaults_compare_equal_to_unset():
    explicit = Style(color='black', width=1, line_attr='nohead')

    assert canonicalize(explicit) == canonicalize(Style())


def test_point_key_ignores_line_attribute():
    assert canonicalize(point_style(line_attr=FILLED_HEAD)) == canonicalize(point_style())


def test_segment_key_ignores_point_attribute():
    assert canonicalize(Style(point_attr='pointtype 7')) == canonicalize(Style())


@pytest.mark.parametrize(
    'other',
    [
        Style(color='red'),
        Style(width=2),
        Style(line_attr=FILLED_HEAD),
        point_style(width=1),
    ],
)
def test_visually_different_styles_never_collide(other):
    assert canonicalize(other) != canonicalize(Style())


def test_segment_keys_sort_before_point_keys():
    keys = [
        canonicalize(point_style(width=1, color='aaa')),
        canonicalize(Style(width=99, color='zzz', line_attr='zzz')),
        canonicalize(point_style(width=50)),
        canonicalize(Style(width=2)),
    ]

    ordered = sorted(keys)

    assert [key.kind for key in ordered] == [
        PrimitiveKind.SEGMENT,
        PrimitiveKind.SEGMENT,
        PrimitiveKind.POINT,
        PrimitiveKind.POINT,
    ]
    assert ordered[0].width == 2
    assert ordered[2].width == 1


def test_keys_order_by_width_then_color_then_attribute():
    keys = sorted(
        [
            canonicalize(Style(width=2, color='blue')),
            canonicalize(Style(width=1, color='red', line_attr=FILLED_HEAD)),
            canonicalize(Style(width=1, color='red')),
            canonicalize(Style(width=1, color='green')),
        ]
    )

    assert [(k.width, k.color, k.attr) for k in keys] == [
        (1, 'green', 'nohead'),
        (1, 'red', FILLED_HEAD),
        (1, 'red', 'nohead'),
        (2, 'blue', 'nohead'),
    ]


@pytest.mark.parametrize('width, expected', [(0, 1), (-4, 1), (1, 1), (42, 42), (99, 99)])
def test_clamp_width_rounds_low_values_up(width, expected):
    assert clamp_width(width) == expected


def test_clamp_width_wraps_large_values_to_zero():
    # Values above 99 collapse to 0 rather than 99; kept for compatibility.
    assert clamp_width(100) == 0
    assert clamp_width(150) == 0


def test_wrapped_width_resolves_to_kind_default():
    assert canonicalize(Style(width=clamp_width(150))).width == 1
    assert canonicalize(point_style(width=clamp_width(150))).width == 3


def test_empty_color_resolves_to_black():
    assert canonicalize(Style(color='')).color == 'black'


def test_negative_width_on_style_clamps_to_one():
    assert canonicalize(Style(width=-2)).width == 1
    assert canonicalize(point_style(width=-7)).width == 1
