"""Generate static images for the documentation."""

from pathlib import Path

from solidscene import RenderStyle, diamond_scene, prism_scene, tetrahedron_scene

OUT = Path(__file__).resolve().parent


def generate_docs_images() -> None:
    # Shared-corner tetrahedra -- hero image
    tetra = tetrahedron_scene()
    tetra.render_mpl(OUT / "tetrahedra.svg", show=False, figsize=(5, 5), dpi=150)
    print(f"  wrote {OUT / 'tetrahedra.svg'}")

    # Prism coloured by exposed faces
    prism = prism_scene()
    prism.render_mpl(
        OUT / "prism.svg", show=False,
        figsize=(4, 4), dpi=150, face_shading=0.8,
    )
    print(f"  wrote {OUT / 'prism.svg'}")

    # Style variations for user guide
    prism.render_mpl(
        OUT / "prism_edges_only.svg", show=False,
        figsize=(4, 4), dpi=150, show_faces=False,
    )
    print(f"  wrote {OUT / 'prism_edges_only.svg'}")

    # Diamond lattice on a dark background
    diamond = diamond_scene(3, 3, 3)
    style = RenderStyle(
        marker_scale=0.8,
        outline_width=0.3,
        circle_segments=72,
    )
    diamond.render_mpl(
        OUT / "diamond.svg", show=False,
        figsize=(5, 5), dpi=150, style=style, background="#111111",
    )
    print(f"  wrote {OUT / 'diamond.svg'}")


def main() -> None:
    generate_docs_images()


if __name__ == "__main__":
    main()
