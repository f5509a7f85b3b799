import pytest

from toylisp.builtin.env_builtin import define_primitive, register, PRIMITIVES
from toylisp.errors import ToyLispTypeError
from toylisp.types.environment import Environment
from toylisp.types.sexpression import Integer
from toylisp.types.values import Datum, Primitive, NIL, make_int


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(add 1 2 3)", "6"),
        ("(add)", "0"),
        ("(add 7)", "7"),
        ("(add -1 5 -3)", "1"),
        ("(add 0 0)", "0"),
        ("(add (add 1 2) (add 3 (add 4 5)))", "15"),
        ("(add 123456789012345678901234567890 1)", "123456789012345678901234567891"),
    ]
)
def test_add(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,position,rendered",
    [
        ('(add "a")', 0, '"a"'),
        ('(add 1 "a")', 1, '"a"'),
        ("(add 1 2 (quote (x)))", 2, "(x)"),
        ("(add 1 (lambda () 1))", 1, "#<lambda>"),
        ("(add nil)", 0, "()"),
    ]
)
def test_add_rejects_non_integers(interp, source, position, rendered):
    with pytest.raises(ToyLispTypeError) as info:
        interp.eval(source)
    assert info.value.position == position
    assert str(info.value.value) == rendered
    assert str(info.value) == f"add argument[{position}] is not int: {rendered}"


def test_register_populates_nil_and_primitives():
    env = Environment()
    register(env)
    assert env.lookup("nil") is NIL
    for name in PRIMITIVES:
        assert isinstance(env.lookup(name), Primitive)
    assert str(env.lookup("add")) == "#<primitive add>"


def test_host_registered_primitive(interp):
    def double(args):
        (value,) = args
        return make_int(value.expr.value * 2)

    define_primitive(interp.env, "double", double)
    assert str(interp.eval("(double (add 2 3))")[0]) == "10"


def test_primitive_receives_evaluated_arguments(interp):
    seen = []

    def record(args):
        seen.extend(args)
        return NIL

    define_primitive(interp.env, "record", record)
    interp.eval("(set x 4)")
    interp.eval('(record x "s" (quote y))')
    assert [str(v) for v in seen] == ["4", '"s"', "y"]
    assert seen[0] == Datum(Integer(4))
