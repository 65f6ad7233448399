"""Demo: a 2 x 5 x 11 block of cubes coloured by exposed faces.

Pass ``--interactive`` to open the orbit viewer instead of writing a file.
"""

import logging
import sys
from pathlib import Path

from solidscene import build_prism_grid, grid_scene
from solidscene.model import ViewState

OUTPUT = Path(__file__).resolve().parent / "prism.pdf"


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    grid = build_prism_grid(2, 5, 11, cube_size=1.0, spacing=0.2)
    for category, count in grid.category_counts().items():
        print(f"{category.value:>8}: {count}")

    scene = grid_scene(
        grid,
        title="2 x 5 x 11 prism",
        view=ViewState(zoom=0.9).look_along([-1.0, -1.0, -3.0]),
    )

    if "--interactive" in sys.argv:
        scene.render_mpl_interactive()
    else:
        scene.render_mpl(output=OUTPUT, show=False, face_shading=0.8)
        print(f"Rendered to {OUTPUT}")


if __name__ == "__main__":
    main()
