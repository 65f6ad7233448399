"""Demo: five tetrahedra sharing corners, rendered with matplotlib.

Pass ``--interactive`` to open the orbit viewer instead of writing a file.
"""

import logging
import sys
from pathlib import Path

from solidscene import build_tetrahedron_cluster, cluster_scene

OUTPUT = Path(__file__).resolve().parent / "tetrahedra.pdf"


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    cluster = build_tetrahedron_cluster(1.0)
    print(f"Tetrahedra: {len(cluster)}")
    print(f"Vertex instances: {len(cluster.vertex_instances)}")
    print(f"Distinct corners: {len(cluster.unique_vertices())}")

    scene = cluster_scene(cluster, title="Shared-corner tetrahedra")
    scene.view.look_along([1.0, 0.6, 1.4])

    if "--interactive" in sys.argv:
        view, style = scene.render_mpl_interactive()
        print(f"Final zoom: {view.zoom:.2f}")
    else:
        scene.render_mpl(output=OUTPUT, show=False)
        print(f"Rendered to {OUTPUT}")


if __name__ == "__main__":
    main()
