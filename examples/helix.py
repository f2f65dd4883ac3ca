"""Example: a pen-up/pen-down helix with a labelled axis, written to helix.plt."""

import math

from splot3d import Scene, write_script


def main() -> None:
    scene = Scene("Helix")
    scene.vector((0, 0, 0), (0, 0, 3)).set_color("purple").filled_head().set_label("z")

    turns, steps = 3, 90
    for i in range(turns * steps + 1):
        angle = 2 * math.pi * i / steps
        pt = (math.cos(angle), math.sin(angle), 3.0 * i / (turns * steps))
        if i == 0:
            scene.move_to(pt).set_std_color(2).no_head()
        else:
            scene.line_to(pt)

    scene.break_path()
    scene.circle((0, 0, 0), (0, 0, 1), 1.0, color="#808080")
    path = write_script(scene, "helix.plt")
    print(f"Wrote {len(scene)} primitives to {path}")


if __name__ == "__main__":
    main()
