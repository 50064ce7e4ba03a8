# shapekit

A small collection of plane shapes that know their own area and perimeter.
It also has an interactive menu where you build a list of shapes and then
list them.

## Shapes

| Class       | Module               | Built from                                | Extra measures                                           |
|-------------|----------------------|-------------------------------------------|----------------------------------------------------------|
| `Ellipse`   | `shapekit.ellipse`   | `radius_a`, `radius_b` (semi-axes)        | `eccentricity()`                                         |
| `Circle`    | `shapekit.ellipse`   | `radius`                                  | same as `Ellipse`                                        |
| `Triangle`  | `shapekit.triangle`  | side lengths `a`, `b`, `c`                | `hypotenuse()`, `angle_ab()`, `angle_bc()`, `angle_ac()` |
| `Isosceles` | `shapekit.triangle`  | `equal_sides_length`, `other_side_length` | same as `Triangle`                                       |
| `Rectangle` | `shapekit.rectangle` | `base`, `height`                          |                                                          |
| `Square`    | `shapekit.rectangle` | `length`                                  |                                                          |

Every shape derives from the abstract `shapekit.shape.Shape`. Each one has
`area()`, `perimeter()` and a descriptive `str()`, for example
`{Circle {Ellipse {Shape}, a: 2, b: 2}}`.

```python
from shapekit.ellipse import Circle, Ellipse
from shapekit.triangle import Triangle
from shapekit.rectangle import Square

e = Ellipse(5, 3)
print(e, e.area(), e.perimeter(), e.eccentricity())

print(Circle(2).perimeter())

t = Triangle(3, 4, 5)
print(t.area(), t.hypotenuse(), t.angle_ab())   # 6.0 5 1.5707963267948966

print(Square(4).area())                          # 16
```

Notes on the measures:

- `Ellipse.perimeter()` uses Ramanujan's second approximation.
  `Circle.perimeter()` is exactly `2 * pi * radius`.
- `Ellipse.eccentricity()` returns NaN when `radius_b` is larger than
  `radius_a`.
- `Triangle` raises `ValueError` unless all three sides are positive.
- `Triangle.area()` uses Heron's formula. It returns NaN when the sides cannot
  close a triangle.
- `Triangle.hypotenuse()` returns the longest side.
- `Triangle.perimeter()` returns `a + b + a`. It is the true perimeter only
  when `c` equals `a`, as in an `Isosceles` triangle.
- Triangle angles are in radians:
  - `angle_ab()` is the angle between sides `a` and `b`.
  - `angle_bc()` is the angle between sides `b` and `c`.
  - `angle_ac()` is the angle between sides `a` and `c`.
- `find_angle(opposite_length, side1, side2)` in `shapekit.triangle` applies
  the law of cosines directly. It returns NaN when the lengths give no angle.

## Interactive menu

```
shapekit
```

The menu offers:

1. Add an Ellipse
2. Add a Circle
3. Add a Triangle
4. Add an Isosceles Triangle
5. Add a Rectangle
6. Add a Square
7. List all Ellipses
8. List all Triangles
9. List all Rectangles
10. List all Shapes
11. Exit

Enter the number of an option, then the lengths it asks for. A triangle takes
its three sides on one line.

- If you type something that is not a number, the program reports
  `Incorrect input!` and asks again.
- A number outside 1–11 gives `Incorrect menu option!`.
- A triangle with a non-positive side is reported on standard error and is
  not added.
- Option 11, or the end of input, ends the session.

Each listing shows every matching shape with its perimeter and area. The
ellipse listing also shows eccentricity, and the triangle listing also shows
the hypotenuse. Numbers are printed with six significant digits.

Which shapes appear in which listing:

- Circles appear among the ellipses.
- Isosceles triangles appear among the triangles.
- Squares appear among the rectangles.

From Python, `shapekit.cli.run(stdin, stdout, stderr)` runs the same loop on
any text streams and returns the list of shapes that were entered.

## What it does not do

Shapes are kept only in memory for the length of one session. Nothing is
saved to or loaded from a file.

## Tests

```
pip install -e ".[test]"
pytest
```