"""Shared constants used across the model and construction layers."""

TETRAHEDRON_OFFSET_FACTOR: float = 1.63
"""Distance (in units of *scale*) from a shared face's centroid to the
new apex of a derived tetrahedron."""

DIAMOND_LATTICE_CONSTANT: float = 3.57
"""Diamond lattice constant in angstroms."""

DIAMOND_BOND_THRESHOLD: float = 1.8
"""Maximum C-C separation (exclusive) treated as a bond.  Independent of
the lattice constant."""

DEDUP_DECIMALS: int = 6
"""Decimal places kept when deciding whether two vertices coincide."""

FCC_OFFSETS: tuple[tuple[float, float, float], ...] = (
    (0.0, 0.0, 0.0),
    (0.0, 0.5, 0.5),
    (0.5, 0.0, 0.5),
    (0.5, 0.5, 0.0),
)
"""Fractional positions of the four FCC sites in a cubic unit cell."""

DIAMOND_BASIS_SHIFT: tuple[float, float, float] = (0.25, 0.25, 0.25)
"""Fractional shift of the second interpenetrating FCC lattice."""
