import math

import pytest

from plox.types import (
    String, Number, Bool, Nil, NIL,
    format_number, is_truthy, to_string, type_name, values_equal,
)


def test_debug_forms():
    assert repr(String('abc')) == 'String("abc")'
    assert repr(String('say "hi"')) == 'String("say \\"hi\\"")'
    assert repr(Number(7)) == 'Number(7.0)'
    assert repr(Number(0.1)) == 'Number(0.1)'
    assert repr(Number(math.nan)) == 'Number(NaN)'
    assert repr(Bool(True)) == 'Bool(true)'
    assert repr(NIL) == 'Nil'


def test_debug_form_exponents():
    assert repr(Number(1e23)) == 'Number(1e23)'
    assert repr(Number(1e-07)) == 'Number(1e-7)'
    assert repr(Number(-2.5e-10)) == 'Number(-2.5e-10)'
    assert repr(Number(1e15)) == 'Number(1000000000000000.0)'


@pytest.mark.parametrize('value, expected', [
    (1.0, '1'),
    (-2.0, '-2'),
    (1.5, '1.5'),
    (1e-07, '0.0000001'),
    (-0.0, '-0'),
    (math.inf, 'inf'),
    (-math.inf, '-inf'),
    (math.nan, 'NaN'),
    (1e23, '100000000000000000000000'),
    (float(2**53 + 2), '9007199254740994'),
    (1e16, '10000000000000000'),
])
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_display_forms():
    assert to_string(String('s')) == 's'
    assert to_string(Bool(False)) == 'false'
    assert to_string(NIL) == 'nil'


def test_equality_is_per_variant():
    assert values_equal(Number(1), Number(1.0))
    assert values_equal(Nil(), NIL)
    assert not values_equal(Number(1), Bool(True))
    assert not values_equal(Number(0), NIL)
    assert not values_equal(String('1'), Number(1))
    assert not values_equal(Number(math.nan), Number(math.nan))
    # the dataclasses agree on cross-variant pairs
    assert Number(1) != Bool(True)


def test_truthiness():
    assert not is_truthy(NIL)
    assert not is_truthy(Bool(False))
    assert is_truthy(Number(0))
    assert is_truthy(String(''))


def test_type_names():
    assert [type_name(v) for v in (String(''), Number(0), Bool(True), NIL)] == ['String', 'Number', 'Bool', 'Nil']
