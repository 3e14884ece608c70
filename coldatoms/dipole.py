"""Optical dipole forces from far-detuned laser beams."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np

from coldatoms import constants
from coldatoms.atom import Atom


@dataclass(frozen=True)
class DipoleLight:
    """Properties of a laser beam used for dipole trapping.

    ``wavelength`` is in m.
    """

    wavelength: float

    def frequency(self) -> float:
        """Frequency of the light, in Hz."""
        return constants.C / self.wavelength

    def wavenumber(self) -> float:
        """Wavenumber of the light, in units of 2 pi / m."""
        return 2.0 * constants.PI / self.wavelength


@dataclass(frozen=True)
class Polarizability:
    """Polarizability of an atom in dipole light.

    The force on the atom, in N, is ``prefactor`` times the intensity
    gradient, in W/m^3.
    """

    prefactor: float

    @classmethod
    def calculate_for(
        cls,
        dipole_beam_wavelength: float,
        optical_transition_wavelength: float,
        optical_transition_linewidth: float,
    ) -> "Polarizability":
        """Polarizability in a dipole beam detuned from a strong optical transition.

        Both wavelengths are in m; the transition linewidth is in Hz.
        """
        transition_f = constants.C / optical_transition_wavelength
        dipole_f = constants.C / dipole_beam_wavelength
        prefactor = (
            -3.0
            * constants.PI
            * constants.C**2
            / (2.0 * (2.0 * constants.PI * transition_f) ** 3)
            * optical_transition_linewidth
            * -(1.0 / (transition_f - dipole_f) + 1.0 / (transition_f + dipole_f))
        )
        return cls(prefactor)


def _as_prefactor(polarizability) -> float:
    if isinstance(polarizability, Polarizability):
        return polarizability.prefactor
    return float(polarizability)


def dipole_force(polarizability, gradients: Iterable) -> np.ndarray:
    """Total dipole force, in N, from the intensity gradients of dipole beams.

    ``gradients`` holds one intensity gradient 3-vector per dipole beam at
    the atom's position.
    """
    prefactor = _as_prefactor(polarizability)
    total = np.zeros(3)
    for gradient in gradients:
        vector = np.asarray(gradient, dtype=float)
        if vector.shape != (3,):
            raise ValueError(f"gradient must be a 3-vector, got shape {vector.shape}")
        total = total + prefactor * vector
    return total


def apply_dipole_force(atom: Atom, polarizability, gradients: Iterable) -> None:
    """Add the dipole force from the given beam gradients to the atom's force."""
    atom.force = atom.force + dipole_force(polarizability, gradients)