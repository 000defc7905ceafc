"""Demo script: frame and render a small ring molecule with matplotlib."""

from pathlib import Path

import numpy as np

from molframe import Scene, bond_cylinder, frame_scene, render_mpl, sphere

OUTPUT = Path(__file__).resolve().parent / "ring.png"


def ring_scene(n_atoms: int = 6, bond_length: float = 1.4) -> Scene:
    """Build a planar ring of carbon atoms with hydrogens pointing outwards."""
    ring_radius = bond_length / (2 * np.sin(np.pi / n_atoms))
    angles = np.linspace(0, 2 * np.pi, n_atoms, endpoint=False)
    carbons = [(ring_radius * np.cos(a), ring_radius * np.sin(a), 0.0) for a in angles]
    hydrogens = [(1.8 * x, 1.8 * y, 0.0) for x, y, _ in carbons]

    primitives = [sphere(*c, radius=0.4, colour="dimgrey") for c in carbons]
    primitives += [sphere(*h, radius=0.25, colour="white") for h in hydrogens]
    for i, c in enumerate(carbons):
        primitives.append(bond_cylinder(c, carbons[(i + 1) % n_atoms]))
        primitives.append(bond_cylinder(c, hydrogens[i]))
    return Scene(primitives)


def main():
    framed = frame_scene(ring_scene(), lights="both", angle=(-50, 20, 0))
    print(f"Widest extent: {framed.extent.widest:.3f}")
    print(f"Field of view: {framed.camera.fov:.2f} deg from {framed.camera.lookfrom}")
    print(f"Primitives after lighting: {len(framed.scene)}")

    render_mpl(framed.scene, camera=framed.camera, width=600, height=600,
               output=OUTPUT, show=False)
    print(f"Rendered to {OUTPUT}")


if __name__ == "__main__":
    main()
