import math

import pytest

from hybrid.values import NULL, TRUE, FALSE, BooleanVal, NumberVal, to_string, type_name


@pytest.mark.parametrize('value, text', [
    (NULL, 'null'),
    (TRUE, 'true'),
    (FALSE, 'false'),
    (NumberVal(7.0), '7'),
    (NumberVal(-5.0), '-5'),
    (NumberVal(-0.0), '0'),
    (NumberVal(2.5), '2.5'),
    (NumberVal(1 / 3), '0.3333333333333333'),
    (NumberVal(1e21), '1e+21'),
    (NumberVal(math.inf), 'Infinity'),
    (NumberVal(-math.inf), '-Infinity'),
    (NumberVal(math.nan), 'NaN'),
])
def test_to_string(value, text):
    assert to_string(value) == text


def test_to_string_rejects_foreign_objects():
    with pytest.raises(TypeError):
        to_string(3)


def test_type_names():
    assert type_name(NULL) == 'null'
    assert type_name(NumberVal(1.0)) == 'number'
    assert type_name(BooleanVal(True)) == 'boolean'


def test_values_are_immutable():
    value = NumberVal(1.0)
    with pytest.raises(AttributeError):
        value.value = 2.0


@pytest.mark.parametrize('x, text', [
    (1e-7, '1e-7'),
    (1.5e-10, '1.5e-10'),
    (-2.5e-8, '-2.5e-8'),
    (1e300, '1e+300'),
    (0.0001, '0.0001'),
])
def test_exponent_form_has_no_zero_padding(x, text):
    assert to_string(NumberVal(x)) == text
