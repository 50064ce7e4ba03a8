import io

import pytest

from shapekit.cli import main, read_menu_option, run
from shapekit.ellipse import Circle, Ellipse
from shapekit.rectangle import Rectangle, Square
from shapekit.triangle import Triangle


def _run(text):
    out, err = io.StringIO(), io.StringIO()
    shapes = run(io.StringIO(text), out, err)
    return shapes, out.getvalue(), err.getvalue()


def test_read_menu_option_valid():
    out, err = io.StringIO(), io.StringIO()
    assert read_menu_option(io.StringIO("5\n"), out, err) == 5
    assert "11. Exit" in out.getvalue()
    assert err.getvalue() == ""


def test_read_menu_option_retries_bad_input():
    out, err = io.StringIO(), io.StringIO()
    assert read_menu_option(io.StringIO("abc\n12\n3\n"), out, err) == 3
    assert "Incorrect input!" in err.getvalue()
    assert "Incorrect menu option!" in err.getvalue()


def test_read_menu_option_end_of_input_exits():
    assert read_menu_option(io.StringIO(""), io.StringIO(), io.StringIO()) == 11


def test_add_square_and_list_all():
    shapes, out, _ = _run("6\n2\n10\n11\n")
    assert len(shapes) == 1
    assert isinstance(shapes[0], Square)
    assert str(Square(2)) in out
    assert "Inserted... " in out


def test_add_each_kind():
    shapes, _, _ = _run("1\n3\n2\n2\n1\n3\n3 4 5\n5\n2\n3\n11\n")
    assert [type(s) for s in shapes] == [Ellipse, Circle, Triangle, Rectangle]


def test_list_ellipses_filters_other_shapes():
    _, out, _ = _run("1\n3 2\n5\n1 1\n7\n11\n")
    listing = out.split("Only Ellipses", 1)[1]
    assert str(Ellipse(3, 2)) in listing
    assert "Eccentricity:" in listing
    assert "Rectangle" not in listing.split("1. Add an Ellipse", 1)[0]


def test_list_triangles_shows_hypotenuse():
    _, out, _ = _run("4\n5\n3\n8\n11\n")
    listing = out.split("Only Triangles", 1)[1]
    assert "{Isosceles " in listing
    assert "\tHypotenuse: 5" in listing


def test_invalid_triangle_is_reported_and_skipped():
    shapes, _, err = _run("3\n0 1 1\n11\n")
    assert shapes == []
    assert "positive" in err


def test_bad_number_reprompts():
    shapes, out, err = _run("2\nxyz\n4\n11\n")
    assert isinstance(shapes[0], Circle)
    assert shapes[0].radius_a == 4
    assert "Incorrect input!" in err
    assert out.count("Input radius length: ") == 2


def test_end_of_input_while_adding():
    shapes, _, _ = _run("1\n3\n")
    assert shapes == []


def test_main_uses_standard_streams(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("11\n"))
    assert main([]) == 0
    assert "11. Exit" in capsys.readouterr().out


def test_main_rejects_unknown_argument():
    with pytest.raises(SystemExit):
        main(["--bogus"])