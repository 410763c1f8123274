"""
siteframe.geodetic — Geodetic ⟷ ECEF Conversions
==================================================

Forward (geodetic → ECEF)
-------------------------
Closed form, no iteration.  The surface point with geodetic latitude ``B``
is located on the meridian ellipse through its geocentric latitude
``Φ = atan(b²/a² · tan B)``; the height is then added along the ellipsoid
normal by solving the triangle (earth centre, surface point, target)::

    Roh = a·b / √((b cosΦ)² + (a sinΦ)²)       ellipse radius at Φ
    u   = B − Φ                                 normal vs. radius angle
    Ro  = √(Roh² + h² + 2·h·Roh·cos u)          geocentric distance
    u'  = asin(h·sin u / Ro)
    φ'  = u' + Φ                                geocentric latitude

Inverse (ECEF → geodetic)
-------------------------
A single-pass second-order series in the flattening ``f``::

    φ = asin(z / Ro)
    h = Ro − a·(1 − f sin²φ − ½ f² sin²2φ (a/Ro − ¼))
    B = φ + asin((a/Ro)·(f sin2φ + f² sin4φ (a/Ro − ¼)))

This is *not* an exact inverse of the forward map.  For Earth-like
flattening the residual is of order ``f³·a``: a few centimetres in height
and ~1e-8 rad in latitude.  It grows with ``f`` and as ``Ro`` shrinks
relative to ``a``.

Singularities
-------------
- ``B = ±π/2`` exactly: ``tan B`` is not finite in exact arithmetic.  NumPy
  returns a huge finite value, so results stay finite but lose precision.
- ``Ro = 0`` in the inverse: division by zero (NaN with a runtime warning).
- ``x = y = 0``: longitude is ``atan2(0, 0) = 0``.

All functions broadcast over NumPy arrays.
"""

from typing import NamedTuple

import numpy as np
from numpy.typing import ArrayLike

from .ellipsoid import Ellipsoid, DEFAULT_ELLIPSOID


class Geodetic(NamedTuple):
    """Geodetic position: longitude, latitude [rad], height [m]."""
    lon: ArrayLike
    lat: ArrayLike
    height: ArrayLike


class Cartesian(NamedTuple):
    """Cartesian position or vector components [m], frame set by context."""
    x: ArrayLike
    y: ArrayLike
    z: ArrayLike


def geodetic_to_ecef(lon: ArrayLike, lat: ArrayLike, height: ArrayLike,
                     ellipsoid: Ellipsoid = DEFAULT_ELLIPSOID) -> Cartesian:
    """Geodetic (L, B, h) → ECEF (x, y, z).

    Parameters
    ----------
    lon : float or array — longitude L [rad]
    lat : float or array — geodetic latitude B [rad]
    height : float or array — height above the ellipsoid h [m]
    ellipsoid : Ellipsoid — reference ellipsoid

    Returns
    -------
    Cartesian — ECEF coordinates [m]
    """
    a = ellipsoid.a
    b = ellipsoid.b
    L = np.asarray(lon, dtype=np.float64)
    B = np.asarray(lat, dtype=np.float64)
    h = np.asarray(height, dtype=np.float64)

    PHI = np.arctan(b * b / (a * a) * np.tan(B))
    tmp1 = b * np.cos(PHI)
    tmp2 = a * np.sin(PHI)
    Roh = a * b / np.sqrt(tmp1 * tmp1 + tmp2 * tmp2)
    u = B - PHI
    Ro = np.sqrt(Roh * Roh + h * h + 2.0 * h * Roh * np.cos(u))
    u_ = np.arcsin(h * np.sin(u) / Ro)
    phi_ = u_ + PHI

    cos_phi_ = np.cos(phi_)
    return Cartesian(
        Ro * cos_phi_ * np.cos(L),
        Ro * cos_phi_ * np.sin(L),
        Ro * np.sin(phi_),
    )


def ecef_to_geodetic(x: ArrayLike, y: ArrayLike, z: ArrayLike,
                     ellipsoid: Ellipsoid = DEFAULT_ELLIPSOID) -> Geodetic:
    """ECEF (x, y, z) → geodetic (L, B, h) by the second-order series.

    Parameters
    ----------
    x, y, z : float or array — ECEF coordinates [m]
    ellipsoid : Ellipsoid — reference ellipsoid

    Returns
    -------
    Geodetic — longitude, latitude [rad], height [m]
    """
    a, f = ellipsoid.a, ellipsoid.f
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    z = np.asarray(z, dtype=np.float64)

    Ro = np.sqrt(x * x + y * y + z * z)
    phi = np.arcsin(z / Ro)
    L = np.arctan2(y, x)

    s_phi = np.sin(phi)
    s2phi = np.sin(2.0 * phi)
    s4phi = np.sin(4.0 * phi)
    k = a / Ro - 0.25

    h = Ro - a * (1.0 - f * s_phi * s_phi - 0.5 * f * f * s2phi * s2phi * k)
    A = np.arcsin(a / Ro * (f * s2phi + f * f * s4phi * k))
    return Geodetic(L, A + phi, h)
