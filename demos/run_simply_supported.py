# File: demos/run_simply_supported.py
"""
Simply supported beam under UDL: print the headline values, compare them with
the textbook formulas and plot the three curves.
"""

import argparse

from beam_analysis import Beam, analyze_all
from beam_analysis.catalog import get_material
from beam_analysis.diagrams import get_beam_summary
from beam_analysis.kernel.units import DEFLECTION_UNIT_SCALE, RIGIDITY_UNIT_SCALE
from beam_analysis.logging_setup import setup_logging
from beam_analysis.viz import plot_beam_curves


def main():
    parser = argparse.ArgumentParser(description="Simply supported beam under UDL")
    parser.add_argument("--span", type=float, default=6.0, help="Span (m)")
    parser.add_argument("--load", type=float, default=10.0, help="UDL (kN/m)")
    parser.add_argument("--material", default="steel-ipe200", help="Catalog key")
    parser.add_argument("--out", default="artifacts/simply_supported.png")
    args = parser.parse_args()

    setup_logging()

    material = get_material(args.material)
    beam = Beam(primary_span=args.span, secondary_span=0.0, material=material)
    results = analyze_all(beam, args.load, "simply-supported")
    summary = get_beam_summary(results)

    L, w, EI = args.span, args.load, material.EI

    print("Simply Supported Beam - Uniform Distributed Load")
    print("=" * 50)
    print(f"Material: {material.name} (EI = {EI:.3e} N·mm²)")
    print(f"Max |deflection| (mm): {summary['max_deflection']:.2f}")
    print(f"Max |moment| (kN·m):   {summary['max_moment']:.2f}")
    print(f"Max |shear| (kN):      {summary['max_shear']:.2f}")
    print()
    print("Expected (from textbook):")
    print(f"Deflection: 5wL⁴/384EI = {5 * w * L**4 / (384 * EI / RIGIDITY_UNIT_SCALE) * DEFLECTION_UNIT_SCALE:.2f} mm")
    print(f"Moment:     wL²/8      = {w * L**2 / 8:.2f} kN·m")
    print(f"Shear:      wL/2       = {w * L / 2:.2f} kN")

    plot_beam_curves(results, outpath=args.out, title=f"Simply supported, L = {L} m, w = {w} kN/m")
    print(f"\nPlot saved to {args.out}")


if __name__ == "__main__":
    main()
