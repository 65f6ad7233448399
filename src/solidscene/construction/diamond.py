"""Construction of the diamond cubic lattice."""

from __future__ import annotations

import logging

import numpy as np

from solidscene._constants import (
    DIAMOND_BASIS_SHIFT,
    DIAMOND_BOND_THRESHOLD,
    DIAMOND_LATTICE_CONSTANT,
    FCC_OFFSETS,
)
from solidscene.construction._checks import _integer, _positive_real
from solidscene.construction.bonds import compute_bonds
from solidscene.model import Atom, Bond, DiamondLattice, Point3

logger = logging.getLogger(__name__)


def diamond_positions(
    cells_x: int,
    cells_y: int,
    cells_z: int,
    lattice_constant: float,
) -> np.ndarray:
    """Atom positions of a ``cells_x x cells_y x cells_z`` diamond supercell.

    Unit cell ``(x, y, z)`` has its origin at
    ``(coord - cells / 2) * lattice_constant`` on each axis, which
    centres the supercell's cell grid on the origin.  Each cell
    contributes, for every FCC site in :data:`FCC_OFFSETS`, the site
    itself followed by its partner on the second FCC lattice shifted by
    ``(1/4, 1/4, 1/4) * lattice_constant``: 8 atoms per cell.

    Returns:
        Array of shape ``(8 * cells_x * cells_y * cells_z, 3)``.
    """
    n_cells = cells_x * cells_y * cells_z
    if n_cells == 0:
        return np.zeros((0, 3))

    a = lattice_constant
    grid = np.array([
        (x, y, z)
        for x in range(cells_x)
        for y in range(cells_y)
        for z in range(cells_z)
    ], dtype=float)
    bases = (grid - np.array([cells_x, cells_y, cells_z]) / 2.0) * a

    fcc = np.asarray(FCC_OFFSETS, dtype=float) * a
    shift = np.asarray(DIAMOND_BASIS_SHIFT, dtype=float) * a
    # Per cell: site 0, partner 0, site 1, partner 1, ...
    basis = np.empty((2 * len(fcc), 3))
    basis[0::2] = fcc
    basis[1::2] = fcc + shift

    return (bases[:, np.newaxis, :] + basis[np.newaxis, :, :]).reshape(-1, 3)


def build_diamond_lattice(
    cells_x: int = 2,
    cells_y: int = 2,
    cells_z: int = 2,
    lattice_constant: float = DIAMOND_LATTICE_CONSTANT,
    bond_threshold: float = DIAMOND_BOND_THRESHOLD,
    *,
    method: str = "auto",
) -> DiamondLattice:
    """Build a diamond cubic supercell and infer its C-C bonds.

    Atoms come from :func:`diamond_positions`.  Two atoms are bonded
    iff they are closer than *bond_threshold*; the threshold is an
    absolute distance and does not scale with *lattice_constant*.
    With the defaults every atom bonds to its (up to four) nearest
    neighbours at ``sqrt(3) / 4 * 3.57 ≈ 1.55`` angstroms.

    Example::

        lattice = build_diamond_lattice(2, 2, 2)
        len(lattice.atoms)                 # 64
        lattice.coordination().max()       # 4

    Args:
        cells_x: Unit cells along x.  Zero is allowed and gives an
            empty lattice.
        cells_y: Unit cells along y.
        cells_z: Unit cells along z.
        lattice_constant: Cubic cell edge in angstroms.
        bond_threshold: Exclusive upper bound on bonded separations.
        method: Bond search method passed to
            :func:`~solidscene.construction.bonds.compute_bonds`.

    Returns:
        The lattice with atoms in generation order and bonds sorted by
        index pair.

    Raises:
        TypeError: If a cell count is not an integer or a length is not
            a real number.
        ValueError: If a cell count is negative, a length is not a
            positive finite number, or *method* is unknown.
    """
    cells_x = _integer("cells_x", cells_x, minimum=0)
    cells_y = _integer("cells_y", cells_y, minimum=0)
    cells_z = _integer("cells_z", cells_z, minimum=0)
    lattice_constant = _positive_real("lattice_constant", lattice_constant)
    bond_threshold = _positive_real("bond_threshold", bond_threshold)

    coords = diamond_positions(cells_x, cells_y, cells_z, lattice_constant)
    atoms = tuple(Atom(Point3.from_array(row)) for row in coords)
    bonds = tuple(
        Bond(i, j, atoms[i], atoms[j])
        for i, j, _ in compute_bonds(coords, bond_threshold, method=method)
    )

    logger.debug(
        "Built %dx%dx%d diamond lattice: %d atoms, %d bonds",
        cells_x, cells_y, cells_z, len(atoms), len(bonds),
    )
    return DiamondLattice(
        cells=(cells_x, cells_y, cells_z),
        lattice_constant=lattice_constant,
        bond_threshold=bond_threshold,
        atoms=atoms,
        bonds=bonds,
    )
