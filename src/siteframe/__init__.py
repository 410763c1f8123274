"""
siteframe — Deployment-Site Coordinate Frame Library
======================================================

A pure-NumPy library for converting positions and vectors between the
geodetic, ECEF, local-vertical and measurement frames of a fixed
deployment site.

Rotations route through ECEF; positions cross the geodetic/ECEF boundary
with the site origin added or removed::

    geodetic  ←→  ECEF  ←→  local vertical (any origin)
                        ←→  measurement (site origin, azimuth offset)

Coordinate Frame Definitions
-----------------------------

**ECEF (Earth-Centered Earth-Fixed)**
  - X: Greenwich meridian in the equatorial plane
  - Z: North pole
  - Y: Completes RHS.  Rotates with the Earth.

**Local vertical**
  - X: North, Y: East (local horizontal plane)
  - Z: Down along the local vertical

**Measurement**
  - Local vertical rotated about Z by the site azimuth offset so that X
    points along the instrument reference axis.

Angles are radians everywhere except the degree-based site constructors
(:meth:`SiteFrame.from_degrees`, :class:`SiteConfig`).  Use ``DEG2RAD`` /
``RAD2DEG`` to convert.
"""

from .utils import (
    PI, DEG2RAD, RAD2DEG,
    RE_DEFAULT, RP_DEFAULT, F_DEFAULT,
    apply_dcm, is_orthonormal,
)

from .ellipsoid import Ellipsoid, DEFAULT_ELLIPSOID, WGS84

from .geodetic import (
    Geodetic, Cartesian,
    geodetic_to_ecef, ecef_to_geodetic,
)

from .frames import (
    # ── ECEF ↔ Local ──
    ecef_to_local_matrix, local_to_ecef_matrix,
    ecef_to_local, local_to_ecef,
    # ── Local ↔ Measurement ──
    local_to_measurement_matrix, measurement_to_local_matrix,
    # ── ECEF ↔ Measurement ──
    ecef_to_measurement_matrix, measurement_to_ecef_matrix,
    # ── Unified API ──
    get_dcm, transform, transform_covariance,
    FRAMES,
)

from .site import SiteFrame

from .config import SiteConfig

from .validation import (
    ValidatedSite,
    SiteFrameError, EllipsoidError, LatitudeRangeError,
    ZeroRadiusError, NonFiniteError,
    validate_ellipsoid, validate_geodetic, validate_cartesian,
)

__version__ = "1.0.0"
__all__ = [
    # ── Constants ──
    "PI", "DEG2RAD", "RAD2DEG", "RE_DEFAULT", "RP_DEFAULT", "F_DEFAULT",
    # ── Ellipsoid ──
    "Ellipsoid", "DEFAULT_ELLIPSOID", "WGS84",
    # ── Geodetic ↔ ECEF ──
    "Geodetic", "Cartesian", "geodetic_to_ecef", "ecef_to_geodetic",
    # ── Frame rotation matrices ──
    "ecef_to_local_matrix", "local_to_ecef_matrix",
    "local_to_measurement_matrix", "measurement_to_local_matrix",
    "ecef_to_measurement_matrix", "measurement_to_ecef_matrix",
    # ── Vector rotations ──
    "ecef_to_local", "local_to_ecef",
    # ── Unified API ──
    "get_dcm", "transform", "transform_covariance", "FRAMES",
    # ── Site ──
    "SiteFrame", "SiteConfig",
    # ── Validation ──
    "ValidatedSite", "SiteFrameError", "EllipsoidError", "LatitudeRangeError",
    "ZeroRadiusError", "NonFiniteError",
    "validate_ellipsoid", "validate_geodetic", "validate_cartesian",
    # ── Utilities ──
    "apply_dcm", "is_orthonormal",
]
