from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from solidscene.model.point import Point3


@dataclass(frozen=True)
class Atom:
    """An atom of the lattice.

    Attributes:
        position: Cartesian position in angstroms.
        species: Element label.  Diamond lattices are all carbon.
    """

    position: Point3
    species: str = "C"


@dataclass(frozen=True)
class Bond:
    """A bond between two atoms closer than the bonding threshold.

    Bonds are unordered pairs: *index_a* is always the smaller index,
    and equality / hashing use the index pair only.

    Attributes:
        index_a: Index of the first atom in the owning lattice.
        index_b: Index of the second atom in the owning lattice.
        atom_a: The atom at *index_a*.
        atom_b: The atom at *index_b*.

    Raises:
        ValueError: If the two indices are equal.
    """

    index_a: int
    index_b: int
    atom_a: Atom = field(compare=False)
    atom_b: Atom = field(compare=False)

    def __post_init__(self) -> None:
        if self.index_a == self.index_b:
            raise ValueError(f"an atom cannot bond to itself (index {self.index_a})")
        if self.index_a > self.index_b:
            a, b = self.index_a, self.index_b
            atom_a, atom_b = self.atom_a, self.atom_b
            object.__setattr__(self, "index_a", b)
            object.__setattr__(self, "index_b", a)
            object.__setattr__(self, "atom_a", atom_b)
            object.__setattr__(self, "atom_b", atom_a)

    def __hash__(self) -> int:
        return hash((self.index_a, self.index_b))

    @property
    def length(self) -> float:
        """Interatomic distance."""
        return self.atom_a.position.distance_to(self.atom_b.position)

    @property
    def midpoint(self) -> Point3:
        """Point halfway between the two atoms."""
        return (self.atom_a.position + self.atom_b.position) * 0.5

    @property
    def direction(self) -> Point3:
        """Unit vector from :attr:`atom_a` to :attr:`atom_b`."""
        return (self.atom_b.position - self.atom_a.position).normalised()


@dataclass(frozen=True)
class DiamondLattice:
    """Atoms of a diamond cubic supercell and the bonds between them.

    Attributes:
        cells: Number of unit cells along x, y and z.
        lattice_constant: Cubic cell edge in angstroms.
        bond_threshold: Exclusive upper bound on bonded separations.
        atoms: Atoms in generation order (8 per unit cell).
        bonds: Bonds sorted by ``(index_a, index_b)``.
    """

    cells: tuple[int, int, int]
    lattice_constant: float
    bond_threshold: float
    atoms: tuple[Atom, ...]
    bonds: tuple[Bond, ...]

    @property
    def coords(self) -> np.ndarray:
        """Atom positions, shape ``(n_atoms, 3)``."""
        if not self.atoms:
            return np.zeros((0, 3))
        return np.array([tuple(a.position) for a in self.atoms], dtype=float)

    @property
    def bond_pairs(self) -> np.ndarray:
        """Bonded index pairs, shape ``(n_bonds, 2)``."""
        if not self.bonds:
            return np.zeros((0, 2), dtype=int)
        return np.array([(b.index_a, b.index_b) for b in self.bonds], dtype=int)

    def coordination(self) -> np.ndarray:
        """Number of bonds at each atom, shape ``(n_atoms,)``."""
        counts = np.zeros(len(self.atoms), dtype=int)
        pairs = self.bond_pairs
        if len(pairs):
            np.add.at(counts, pairs[:, 0], 1)
            np.add.at(counts, pairs[:, 1], 1)
        return counts
