"""
Simple Beam Example

A 24 ft simply supported W-shape under a 1.5 k/ft uniform load (case 1).
Prints the governing results and a coarse shear/moment/deflection table.
"""

from beamload import STEEL, BeamInput, compute_summary, generate_diagram

# 1. Define properties (W16x26: Ix = 301 in^4)
beam = BeamInput(load=1.5, length=24.0, inertia=301.0, elasticity=STEEL.E)

# 2. Extreme values
summary = compute_summary("1", beam)
for label, value, units in summary.rows():
    print(f"{label:<22}{value:>12.4f} {units}")

# 3. Diagram (13 stations, every 2 ft)
series = generate_diagram("1", beam, summary, points=13)
print()
print(f"{'x (ft)':>8}{'V (k)':>10}{'M (k-ft)':>12}{'D (in)':>10}")
for p in series:
    print(f"{p.beam_length:>8.2f}{p.shear:>10.3f}{p.moment:>12.3f}{p.deflection:>10.4f}")
