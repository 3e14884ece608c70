# coldatoms

Building blocks for simulating clouds of cold atoms: atom state, time
integration, gravity, s-wave collisions, atom sources (ovens, hot
surfaces, gaussian emitters) and optical dipole forces.

All quantities are in SI units, except atomic masses, which are in atomic
mass units.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

- `coldatoms.constants` – physical and mathematical constants (`HBAR`,
  `GC`, `AMU`, `BOLTZCONST`, `C`, `BOHRMAG`, `PI`, `EXP`, `SQRT2`).
- `coldatoms.atom` – `Atom`, a dataclass holding position, velocity,
  force, mass, initial velocity, previous force and the `newly_created` /
  `to_be_destroyed` flags; `AtomCloud`, an ordered collection with
  `clear_forces`, `deflag_new_atoms` and `destroy_marked`; and
  `format_vector`, which writes a 3-vector as `(x,y,z)`.
- `coldatoms.gravity` – `gravitational_force(mass)` and
  `apply_gravity(atoms)`, acting along -z.
- `coldatoms.integrator` – `Integrator(timestep)` with `euler_step`,
  and the velocity-Verlet pair `integrate_position` / `integrate_velocity`;
  `euler_update` for a single atom; `add_old_force_to_new_atoms`, which
  gives newly created atoms the stored previous force that velocity-Verlet
  needs (atoms without one are skipped by the Verlet steps).
- `coldatoms.collisions` – Direct Simulation Monte Carlo collisions on a
  cubic grid centred on the origin: `CollisionParameters`,
  `apply_collisions` (returns a `CollisionsTracker` of per-box counts),
  `CollisionBox`, `do_collision` and `pos_to_id` (returns `None` for
  positions outside the grid). `CollisionLimitError` is raised when a box
  would need more collisions in one frame than `collision_limit`.
- `coldatoms.sources.mass` – `MassRatio` and `MassDistribution`, which
  normalises the ratios and draws random masses.
- `coldatoms.sources.emit` – emission rules `EmitNumberPerFrame` and
  `EmitFixedRate`, and `Emission`, which gives the number to emit each
  frame, optionally only once.
- `coldatoms.sources.distribution` – `WeightedProbabilityDistribution`, a
  discrete weighted distribution.
- `coldatoms.sources.precalc` – `probability_v`, `create_v_distribution`
  and `PrecalculatedSpeciesInformation`, which draws `(mass, speed)`
  pairs for a thermal source.
- `coldatoms.sources.oven` – `OvenBuilder` and `Oven`, with
  `CircularAperture` or `CubicAperture`, the channel-flow angular profile
  `jtheta`, `create_jtheta_distribution` and `velocity_generate`.
- `coldatoms.sources.surface` – `SurfaceSource` and
  `lambert_emission_direction` for atoms leaving a hot surface.
- `coldatoms.sources.gaussian` – `GaussianVelocitySource` and
  `create_gaussian_velocity_distribution`.
- `coldatoms.dipole` – `DipoleLight`, `Polarizability.calculate_for`,
  `dipole_force` and `apply_dipole_force`.

Random draws take an optional `random.Random` instance (the `rng`
argument), so results can be reproduced by seeding it; without one the
module-level `random` functions are used.

## Example

```python
import random

from coldatoms.atom import AtomCloud
from coldatoms.collisions import CollisionParameters, apply_collisions
from coldatoms.gravity import apply_gravity
from coldatoms.integrator import Integrator, add_old_force_to_new_atoms
from coldatoms.sources.mass import MassDistribution, MassRatio
from coldatoms.sources.oven import CircularAperture, OvenBuilder
from coldatoms.sources.precalc import PrecalculatedSpeciesInformation

rng = random.Random(1)

oven = (
    OvenBuilder(776.0, [1.0, 0.0, 0.0])
    .with_aperture(CircularAperture(radius=0.005, thickness=0.001))
    .build()
)
species = PrecalculatedSpeciesInformation(
    oven.temperature, MassDistribution([MassRatio(88.0, 1.0)]), oven.v_dist_power
)
cloud = AtomCloud(
    oven.create_atoms([-0.083, 0.0, 0.0], species, 1000, rng=rng, max_speed=200.0)
)

params = CollisionParameters(
    macroparticle=400.0, box_number=200, box_width=20e-6,
    sigma=3.5e-16, collision_limit=1e7,
)
integrator = Integrator(timestep=1e-6)

for _ in range(1000):
    add_old_force_to_new_atoms(cloud)
    cloud.deflag_new_atoms()
    integrator.integrate_position(cloud)
    cloud.clear_forces()
    apply_gravity(cloud)
    integrator.integrate_velocity(cloud)
    tracker = apply_collisions(cloud, params, integrator.timestep, rng)
    cloud.destroy_marked()
```

## What the package does not do

- There is no scheduler that runs a simulation step for you: the caller
  calls the functions above in the order wanted, as in the example.
- It has no laser-cooling forces, magnetic fields or laser beam models.
  `dipole_force` takes the beams' intensity gradients at the atom from the
  caller rather than computing them.
- It writes no output files and has no command-line program.
- `SurfaceSource.create_atoms` takes the surface points and normals from
  the caller; it has no surface shapes of its own.