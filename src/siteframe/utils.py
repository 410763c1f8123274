"""
siteframe.utils — Foundational Utilities
==========================================

Angle constants, default ellipsoid radii and small vector helpers.  All
helpers are pure NumPy.
"""

import numpy as np
from numpy.typing import NDArray

# ── Angle Constants ─────────────────────────────────────────────────────────
PI = np.pi
DEG2RAD = PI / 180.0            # degrees → radians
RAD2DEG = 180.0 / PI            # radians → degrees

# ── Default Ellipsoid ───────────────────────────────────────────────────────
RE_DEFAULT = 6_378_140.0        # semi-major (equatorial) axis      [m]
RP_DEFAULT = 6_356_755.0        # semi-minor (polar) axis           [m]
F_DEFAULT = (RE_DEFAULT - RP_DEFAULT) / RE_DEFAULT

# ── Default Deployment Site ─────────────────────────────────────────────────
DEFAULT_LON_DEG = 116.38
DEFAULT_LAT_DEG = 39.9
DEFAULT_HEIGHT_M = 0.0
DEFAULT_AZIMUTH_DEG = 0.0


# ── Vector Helpers ──────────────────────────────────────────────────────────

def as_vectors(vec: NDArray) -> NDArray:
    """Coerce a (3,) or (N,3) input to float64, rejecting other shapes."""
    v = np.asarray(vec, dtype=np.float64)
    if v.ndim == 1 and v.shape[0] == 3:
        return v
    if v.ndim == 2 and v.shape[1] == 3:
        return v
    raise ValueError(f"Expected (3,) or (N,3) array, got shape {v.shape}.")


def apply_dcm(R: NDArray, vec: NDArray) -> NDArray:
    """Apply 3×3 DCM to a single (3,) or batch (N,3) of vectors."""
    v = as_vectors(vec)
    if v.ndim == 1:
        return R @ v
    return (R @ v.T).T


def is_orthonormal(R: NDArray, atol: float = 1e-12) -> bool:
    """True when R·Rᵀ = I and det(R) = +1 within ``atol``."""
    R = np.asarray(R, dtype=np.float64)
    return bool(
        np.allclose(R @ R.T, np.eye(3), atol=atol)
        and abs(np.linalg.det(R) - 1.0) < atol
    )
