import pytest

from plox.environment import Environment
from plox.errors import LoxError
from plox.types import Number, String


def test_define_and_lookup():
    env = Environment()
    env.define('a', Number(1))
    assert env.lookup('a') == Number(1)
    assert 'a' in env


def test_define_overwrites():
    env = Environment()
    env.define('a', Number(1))
    env.define('a', String('again'))
    assert env.lookup('a') == String('again')


def test_lookup_missing_raises_undefined_variable():
    env = Environment()
    with pytest.raises(LoxError) as excinfo:
        env.lookup('ghost')
    assert excinfo.value.err.name == 'UndefinedVariable'
    assert 'ghost' not in env


def test_lookup_walks_parent_chain():
    outer = Environment()
    outer.define('a', Number(1))
    inner = Environment(parent=outer)
    inner.define('b', Number(2))
    assert inner.lookup('a') == Number(1)
    assert 'a' in inner
    assert 'b' not in outer
