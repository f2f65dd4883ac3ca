"""Example: draw the edges and corners of a unit cube and print the script."""

from itertools import product

from splot3d import Scene, render_script

CORNERS = list(product((0.0, 1.0), repeat=3))


def main() -> None:
    scene = Scene("Unit cube")
    for a, b in ((a, b) for a in CORNERS for b in CORNERS if a < b):
        if sum(x != y for x, y in zip(a, b)) == 1:
            scene.line(a, b).set_color("#0A53C2").set_width(2)
    for corner in CORNERS:
        scene.point(corner).set_color("black").set_label("%d%d%d", *map(int, corner))
    print(render_script(scene), end="")


if __name__ == "__main__":
    main()
