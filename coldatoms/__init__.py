"""Building blocks for cold-atom simulations: atoms, integration, gravity, collisions and dipole forces."""

__version__ = "0.1.0"