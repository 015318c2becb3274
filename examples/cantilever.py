"""
Cantilever Example

An 8 ft HSS8x4x1/4 cantilever with a 5 k load at the free end (case 13),
bent about its strong axis.
"""

from sectiony.library import rhs

from beamload import STEEL, BeamInput, compute_summary, generate_diagram

section = rhs(b=4.0, h=8.0, t=0.25, r=0.0)
beam = BeamInput.from_section(load=5.0, length=8.0, section=section, material=STEEL)

summary = compute_summary("13", beam)
print(summary.to_dict())
print(f"Deflection limit: L/{summary.l_over:.0f}")

series = generate_diagram("13", beam, summary)
print(f"Max |M| = {series.moment.abs_max:.2f} k-ft, tip deflection = {series.deflection.max:.4f} in")
