"""Demo: a 2 x 2 x 2 diamond cubic supercell with its C-C bonds.

Pass ``--interactive`` to open the orbit viewer, or ``--plotly`` to
write an HTML page with the plotly renderer.
"""

import logging
import sys
from pathlib import Path

from solidscene import build_diamond_lattice, lattice_scene
from solidscene.model import ViewState

HERE = Path(__file__).resolve().parent


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    lattice = build_diamond_lattice(2, 2, 2)
    coordination = lattice.coordination()
    print(f"Atoms: {len(lattice.atoms)}")
    print(f"Bonds: {len(lattice.bonds)}")
    print(f"Coordination: min {coordination.min()}, max {coordination.max()}")

    scene = lattice_scene(lattice, title="Diamond cubic")
    scene.view = ViewState(centre=scene.centroid(), perspective=0.3).look_along(
        [1.0, 0.8, 1.2],
    )

    if "--interactive" in sys.argv:
        scene.render_mpl_interactive()
    elif "--plotly" in sys.argv:
        out = HERE / "diamond.html"
        scene.render_plotly().write_html(out)
        print(f"Rendered to {out}")
    else:
        out = HERE / "diamond.pdf"
        scene.render_mpl(output=out, show=False, background="black")
        print(f"Rendered to {out}")


if __name__ == "__main__":
    main()
