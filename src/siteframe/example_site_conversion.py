"""
example_site_conversion.py — Demonstration of the siteframe Library
=====================================================================

Builds a site at 124°E, 28°N and converts a handful of sample points
between geodetic coordinates and the site's measurement frame.

Run:  python -m siteframe.example_site_conversion
"""

import logging

import numpy as np

from siteframe import SiteFrame, RAD2DEG, DEG2RAD, is_orthonormal

SITE_DEG = (124.0, 28.0, 0.0, 0.0)       # lon, lat, height, azimuth

# lon [deg], lat [deg], height [m]
SAMPLE_LBH = [
    (124.0, 28.0, 0.0),
    (125.0, 28.0, 0.0),
    (123.0, 28.0, 0.0),
    (124.0, 27.0, 0.0),
]

# measurement-frame x, y, z [m]  (z is down)
SAMPLE_XYZ = [
    (0.0, 0.0, 0.0),
    (1500.0, 0.0, 2400.0),
    (10000.0, 0.0, 2400.0),
    (10000.0, 10000.0, 2400.0),
]


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Route ``siteframe`` log records to stderr for a command-line run.

    Repeated calls only change the level.
    """
    root = logging.getLogger("siteframe")
    if not any(getattr(h, "_siteframe_cli", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)-7s %(name)s: %(message)s"))
        handler._siteframe_cli = True
        root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.INFO)
    return root


def main():
    print("=" * 70)
    print("  siteframe — Deployment Site Conversion Demo")
    print("=" * 70)

    site = SiteFrame.from_degrees(*SITE_DEG)

    # ── 1. Site ─────────────────────────────────────────────────────────
    print("\n1. SITE")
    print("-" * 40)
    lon_deg, lat_deg, h, az_deg = site.degrees
    a, f = site.get_ellipsoid()
    print(f"  Location:         {lon_deg:.4f}°E  {lat_deg:.4f}°N  {h:.1f} m")
    print(f"  Azimuth offset:   {az_deg:.2f}°")
    print(f"  Ellipsoid:        a = {a:.1f} m,  1/f = {1.0 / f:.4f}")
    o = site.origin_ecef
    print(f"  Origin (ECEF):    [{o[0]/1e3:.3f}, {o[1]/1e3:.3f}, {o[2]/1e3:.3f}] km")
    print("  DCM (ECEF → measurement):")
    for i, label in enumerate(["x (north)", "y (east) ", "z (down) "]):
        C = site.dcm
        print(f"    {label}: [{C[i,0]:+.6f}, {C[i,1]:+.6f}, {C[i,2]:+.6f}]")
    print(f"  Orthonormal:      {is_orthonormal(site.dcm)}")

    # ── 2. Geodetic → measurement ───────────────────────────────────────
    print("\n2. GEODETIC → MEASUREMENT XYZ")
    print("-" * 40)
    xyz_rows = []
    for lon, lat, hgt in SAMPLE_LBH:
        x, y, z = site.geodetic_to_measurement(lon * DEG2RAD, lat * DEG2RAD, hgt)
        xyz_rows.append((float(x), float(y), float(z)))
        print(f"  LBH: {lon:8.3f}° {lat:8.3f}° {hgt:8.1f} m"
              f"  →  xyz: [{x:12.3f}, {y:12.3f}, {z:10.3f}] m")

    # ── 3. Measurement → geodetic ───────────────────────────────────────
    print("\n3. MEASUREMENT XYZ → GEODETIC")
    print("-" * 40)
    lbh_rows = []
    for x, y, z in SAMPLE_XYZ:
        lon, lat, hgt = site.measurement_to_geodetic(x, y, z)
        lbh_rows.append((float(lon * RAD2DEG), float(lat * RAD2DEG), float(hgt)))
        print(f"  xyz: [{x:9.1f}, {y:9.1f}, {z:8.1f}] m"
              f"  →  LBH: {lon * RAD2DEG:.8f}° {lat * RAD2DEG:.8f}° {hgt:.3f} m")

    # ── 4. Round trip ───────────────────────────────────────────────────
    print("\n4. ROUND TRIP (xyz → LBH → xyz)")
    print("-" * 40)
    pts = np.array(SAMPLE_XYZ)
    back = np.column_stack(site.geodetic_to_measurement(
        *site.measurement_to_geodetic(pts[:, 0], pts[:, 1], pts[:, 2])))
    err = np.max(np.linalg.norm(back - pts, axis=1))
    print(f"  Max position error: {err:.3e} m  (series inverse)")

    print("\n" + "=" * 70)
    print("  Demo complete.")
    print("=" * 70)
    return xyz_rows, lbh_rows


if __name__ == "__main__":
    import sys
    configure_logging(verbose="-v" in sys.argv[1:])
    main()
