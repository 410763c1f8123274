"""
siteframe.frames — ECEF / Local-Vertical / Measurement Frame Hub
==================================================================

Pure rotations (no translation) between three frames.  ECEF is the hub.

Frame Definitions
-----------------

**ECEF (Earth-Centered Earth-Fixed)**
  - X: Greenwich meridian in the equatorial plane
  - Z: North pole
  - Y: Completes right-hand system.  Rotates with the Earth.

**Local vertical (north-east-down) at origin (L, B)**
  - X: North, in the local horizontal plane
  - Y: East, in the local horizontal plane
  - Z: Down along the ellipsoid normal

**Measurement**
  - The local frame rotated about its Z (down) axis by the azimuth
    offset ``θ``, positive from local X toward local Y, so that X lies
    along the instrument's reference axis.

Matrix Convention
-----------------
Every ``a_to_b_matrix`` returns a DCM ``R`` such that ``v_b = R @ v_a``.
The reverse direction is always the transpose.  Rows of the ECEF→local
DCM are the north, east and down unit vectors expressed in ECEF::

    ⎡ −sB·cL   −sB·sL    cB ⎤
    ⎢   −sL       cL      0 ⎥
    ⎣ −cB·cL   −cB·sL   −sB ⎦

Transform Graph
---------------
::

    measurement ←→ ECEF ←→ local

  local→measurement = (ECEF→measurement) ∘ (local→ECEF)

The local-frame origin and the measurement-frame origin need not coincide:
vectors are rotated, never translated, so the composition is exact for
relative vectors (deltas) regardless of where the two frames are anchored.
"""

import numpy as np
from numpy.typing import NDArray

from .utils import apply_dcm


# ════════════════════════════════════════════════════════════════════════════
#  Internal Helpers
# ════════════════════════════════════════════════════════════════════════════

def _transform_covariance(P: NDArray, R: NDArray) -> NDArray:
    """Generic covariance rotation: P' = R P Rᵀ (3×3 position covariance)."""
    P = np.asarray(P, dtype=np.float64)
    if P.shape != (3, 3):
        raise ValueError(f"Covariance must be (3,3), got {P.shape}")
    return R @ P @ R.T


# ════════════════════════════════════════════════════════════════════════════
#  ECEF ↔ Local vertical
# ════════════════════════════════════════════════════════════════════════════

def ecef_to_local_matrix(lon: float, lat: float) -> NDArray:
    """Build the ECEF→local (north-east-down) DCM at origin (lon, lat).

    Parameters
    ----------
    lon : float — origin longitude [rad]
    lat : float — origin geodetic latitude [rad]

    Returns
    -------
    R : (3,3) ndarray — DCM such that v_local = R @ v_ecef
    """
    sL, cL = np.sin(lon), np.cos(lon)
    sB, cB = np.sin(lat), np.cos(lat)
    return np.array([
        [-sB * cL, -sB * sL,  cB],
        [-sL,       cL,       0.0],
        [-cB * cL, -cB * sL, -sB],
    ])


def local_to_ecef_matrix(lon: float, lat: float) -> NDArray:
    """Local→ECEF DCM (transpose of ECEF→local)."""
    return ecef_to_local_matrix(lon, lat).T


def ecef_to_local(vec_ecef: NDArray, lon: float, lat: float) -> NDArray:
    """Rotate vector(s) from ECEF to the local frame at origin (lon, lat).

    The matrix is rebuilt on each call, so any origin may be used.

    Parameters
    ----------
    vec_ecef : (3,) or (N,3) — vector(s) in ECEF [m]
    lon, lat : float — local-frame origin [rad]

    Returns
    -------
    vec_local : same shape — vector(s) in the local frame [m]
    """
    return apply_dcm(ecef_to_local_matrix(lon, lat), vec_ecef)


def local_to_ecef(vec_local: NDArray, lon: float, lat: float) -> NDArray:
    """Rotate vector(s) from the local frame at origin (lon, lat) to ECEF."""
    return apply_dcm(local_to_ecef_matrix(lon, lat), vec_local)


# ════════════════════════════════════════════════════════════════════════════
#  Local ↔ Measurement  (rotation about the down axis)
# ════════════════════════════════════════════════════════════════════════════

def local_to_measurement_matrix(azimuth: float) -> NDArray:
    """Local→measurement DCM for an azimuth offset [rad].

    Positive azimuth turns the measurement X axis from north toward east.
    """
    c, s = np.cos(azimuth), np.sin(azimuth)
    return np.array([
        [ c,  s, 0.0],
        [-s,  c, 0.0],
        [0.0, 0.0, 1.0],
    ])


def measurement_to_local_matrix(azimuth: float) -> NDArray:
    """Measurement→local DCM (transpose of local→measurement)."""
    return local_to_measurement_matrix(azimuth).T


# ════════════════════════════════════════════════════════════════════════════
#  ECEF ↔ Measurement
# ════════════════════════════════════════════════════════════════════════════
#
#  C = R_z(θ) · R_ecef→local(L, B), written out element-wise:
#
#    c11 = −cθ·sB·cL − sθ·sL    c12 = −cθ·sB·sL + sθ·cL    c13 =  cθ·cB
#    c21 =  sθ·sB·cL − cθ·sL    c22 =  sθ·sB·sL + cθ·cL    c23 = −sθ·cB
#    c31 = −cB·cL               c32 = −cB·sL               c33 = −sB
# ════════════════════════════════════════════════════════════════════════════

def ecef_to_measurement_matrix(lon: float, lat: float, azimuth: float) -> NDArray:
    """Build the ECEF→measurement DCM ``C`` for a site.

    Parameters
    ----------
    lon : float — site longitude [rad]
    lat : float — site geodetic latitude [rad]
    azimuth : float — measurement-frame azimuth offset [rad]

    Returns
    -------
    C : (3,3) ndarray — DCM such that v_meas = C @ v_ecef
    """
    sL, cL = np.sin(lon), np.cos(lon)
    sB, cB = np.sin(lat), np.cos(lat)
    st, ct = np.sin(azimuth), np.cos(azimuth)
    return np.array([
        [-ct * sB * cL - st * sL, -ct * sB * sL + st * cL,  ct * cB],
        [ st * sB * cL - ct * sL,  st * sB * sL + ct * cL, -st * cB],
        [-cB * cL,                -cB * sL,                -sB],
    ])


def measurement_to_ecef_matrix(lon: float, lat: float, azimuth: float) -> NDArray:
    """Measurement→ECEF DCM (transpose of ``C``)."""
    return ecef_to_measurement_matrix(lon, lat, azimuth).T


# ════════════════════════════════════════════════════════════════════════════
#  Unified Transform API
# ════════════════════════════════════════════════════════════════════════════

# Valid frame names
FRAMES = {"ecef", "local", "measurement"}


def get_dcm(from_frame: str, to_frame: str,
            lon: float | None = None,
            lat: float | None = None,
            azimuth: float | None = None,
            site_lon: float | None = None,
            site_lat: float | None = None) -> NDArray:
    """Get the 3×3 DCM for any supported frame pair.

    Parameters
    ----------
    from_frame : str — one of 'ecef', 'local', 'measurement'
    to_frame : str — one of 'ecef', 'local', 'measurement'
    lon, lat : float or None — local-frame origin [rad]
        (required if 'local' is involved)
    azimuth : float or None — measurement azimuth offset [rad]
        (required if 'measurement' is involved)
    site_lon, site_lat : float or None — measurement-frame origin [rad];
        default to ``lon`` / ``lat`` when omitted

    Returns
    -------
    R : (3,3) ndarray — DCM such that v_to = R @ v_from
    """
    fr = from_frame.lower()
    to = to_frame.lower()
    if fr not in FRAMES or to not in FRAMES:
        raise ValueError(f"Unknown frame. Valid: {FRAMES}")
    if fr == to:
        return np.eye(3)

    if site_lon is None:
        site_lon = lon
    if site_lat is None:
        site_lat = lat

    def _require_local():
        if lon is None or lat is None:
            raise ValueError("lon, lat required for local-frame transforms")

    def _require_measurement():
        if site_lon is None or site_lat is None or azimuth is None:
            raise ValueError("site origin and azimuth required for "
                             "measurement-frame transforms")

    # Step 1: from_frame → ECEF
    if fr == "ecef":
        R_to_ecef = np.eye(3)
    elif fr == "local":
        _require_local()
        R_to_ecef = local_to_ecef_matrix(lon, lat)
    else:
        _require_measurement()
        R_to_ecef = measurement_to_ecef_matrix(site_lon, site_lat, azimuth)

    # Step 2: ECEF → to_frame
    if to == "ecef":
        R_from_ecef = np.eye(3)
    elif to == "local":
        _require_local()
        R_from_ecef = ecef_to_local_matrix(lon, lat)
    else:
        _require_measurement()
        R_from_ecef = ecef_to_measurement_matrix(site_lon, site_lat, azimuth)

    return R_from_ecef @ R_to_ecef


def transform(vec: NDArray,
              from_frame: str, to_frame: str,
              lon: float | None = None,
              lat: float | None = None,
              azimuth: float | None = None,
              site_lon: float | None = None,
              site_lat: float | None = None) -> NDArray:
    """Rotate vector(s) between any two frames.

    Parameters
    ----------
    vec : (3,) or (N,3) — vector(s) in from_frame
    from_frame, to_frame : str — frame names ('ecef','local','measurement')
    lon, lat, azimuth, site_lon, site_lat : context (same rules as get_dcm)

    Returns
    -------
    vec_out : same shape — vector(s) in to_frame
    """
    R = get_dcm(from_frame, to_frame, lon=lon, lat=lat, azimuth=azimuth,
                site_lon=site_lon, site_lat=site_lat)
    return apply_dcm(R, vec)


def transform_covariance(P: NDArray,
                         from_frame: str, to_frame: str,
                         lon: float | None = None,
                         lat: float | None = None,
                         azimuth: float | None = None,
                         site_lon: float | None = None,
                         site_lat: float | None = None) -> NDArray:
    """Rotate a 3×3 position covariance between any two frames.

    Returns
    -------
    P_out : (3,3) — covariance in to_frame
    """
    R = get_dcm(from_frame, to_frame, lon=lon, lat=lat, azimuth=azimuth,
                site_lon=site_lon, site_lat=site_lat)
    return _transform_covariance(P, R)
