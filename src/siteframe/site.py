"""
siteframe.site — Deployment Site Frame
========================================

A :class:`SiteFrame` describes one deployment point: where it is (geodetic
longitude, latitude, height), how its measurement frame is turned
(azimuth offset) and which ellipsoid it lives on.  Two quantities are
derived once at construction:

- ``dcm`` — the ECEF→measurement direction-cosine matrix ``C``
- ``origin_ecef`` — the ECEF position of the site origin

The record is frozen and both arrays are read-only.  Changing anything,
the ellipsoid included, means building a new site with :meth:`rebuild` or
:meth:`with_ellipsoid`; the derived values are therefore always consistent
with the inputs.

Positions vs. Vectors
---------------------
Rotation methods (``*_vector``) act on relative vectors and never
translate.  Only the composite position methods
(:meth:`geodetic_to_measurement`, :meth:`measurement_to_geodetic`) add or
remove ``origin_ecef``, at the geodetic/ECEF boundary.
"""

import logging
from dataclasses import dataclass, field, replace

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .ellipsoid import Ellipsoid, DEFAULT_ELLIPSOID
from .frames import ecef_to_measurement_matrix, ecef_to_local, local_to_ecef
from .geodetic import Cartesian, Geodetic, geodetic_to_ecef, ecef_to_geodetic
from .utils import (
    DEG2RAD, RAD2DEG, apply_dcm,
    DEFAULT_LON_DEG, DEFAULT_LAT_DEG, DEFAULT_HEIGHT_M, DEFAULT_AZIMUTH_DEG,
)

logger = logging.getLogger(__name__)


def _readonly(arr: NDArray) -> NDArray:
    arr = np.array(arr, dtype=np.float64)
    arr.flags.writeable = False
    return arr


def _stack_components(x: ArrayLike, y: ArrayLike, z: ArrayLike) -> NDArray:
    """Component arrays → (..., 3) vector array."""
    return np.stack(np.broadcast_arrays(x, y, z), axis=-1).astype(np.float64)


def _rotate_points(R: NDArray, pts: NDArray) -> NDArray:
    """Apply a 3×3 DCM to a (..., 3) array of any batch shape."""
    flat = apply_dcm(R, pts.reshape(-1, 3))
    return flat.reshape(pts.shape)


# ════════════════════════════════════════════════════════════════════════════
#  Site Dataclass
# ════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class SiteFrame:
    """Deployment site and its measurement frame.

    Parameters
    ----------
    lon : float — site longitude [rad]
    lat : float — site geodetic latitude [rad]
    height : float — site height above the ellipsoid [m]
    azimuth : float — measurement X axis angle from local north,
        positive toward east [rad]
    ellipsoid : Ellipsoid — reference ellipsoid

    Derived (read-only)
    -------------------
    dcm : (3,3) ndarray — ECEF→measurement DCM ``C``
    origin_ecef : (3,) ndarray — site origin in ECEF [m]
    """
    lon: float = DEFAULT_LON_DEG * DEG2RAD
    lat: float = DEFAULT_LAT_DEG * DEG2RAD
    height: float = DEFAULT_HEIGHT_M
    azimuth: float = DEFAULT_AZIMUTH_DEG * DEG2RAD
    ellipsoid: Ellipsoid = DEFAULT_ELLIPSOID

    dcm: NDArray = field(init=False, repr=False, compare=False)
    origin_ecef: NDArray = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        C = ecef_to_measurement_matrix(self.lon, self.lat, self.azimuth)
        origin = geodetic_to_ecef(self.lon, self.lat, self.height, self.ellipsoid)
        object.__setattr__(self, "dcm", _readonly(C))
        object.__setattr__(self, "origin_ecef", _readonly(origin))
        logger.debug("site built at L=%.6f° B=%.6f° h=%.3f m az=%.6f°, "
                     "origin ECEF = [%.3f, %.3f, %.3f] m",
                     self.lon * RAD2DEG, self.lat * RAD2DEG, self.height,
                     self.azimuth * RAD2DEG, *self.origin_ecef)

    # ── Construction ────────────────────────────────────────────────────

    @classmethod
    def from_degrees(cls,
                     lon_deg: float = DEFAULT_LON_DEG,
                     lat_deg: float = DEFAULT_LAT_DEG,
                     height: float = DEFAULT_HEIGHT_M,
                     azimuth_deg: float = DEFAULT_AZIMUTH_DEG,
                     ellipsoid: Ellipsoid = DEFAULT_ELLIPSOID) -> "SiteFrame":
        """Build a site from angles in degrees (height in metres)."""
        return cls(lon=lon_deg * DEG2RAD, lat=lat_deg * DEG2RAD,
                   height=float(height), azimuth=azimuth_deg * DEG2RAD,
                   ellipsoid=ellipsoid)

    def rebuild(self, **changes) -> "SiteFrame":
        """Return a new site with ``changes`` applied and everything re-derived."""
        return replace(self, **changes)

    def with_ellipsoid(self, a: float, f: float) -> "SiteFrame":
        """Return this site re-derived on ellipsoid ``(a, f)``."""
        return self.rebuild(ellipsoid=self.ellipsoid.with_parameters(a, f))

    def get_ellipsoid(self) -> tuple[float, float]:
        """Ellipsoid ``(a, f)`` in use."""
        return self.ellipsoid.parameters

    @property
    def degrees(self) -> tuple[float, float, float, float]:
        """``(lon_deg, lat_deg, height_m, azimuth_deg)``."""
        return (self.lon * RAD2DEG, self.lat * RAD2DEG,
                self.height, self.azimuth * RAD2DEG)

    # ── Geodetic ↔ ECEF on this site's ellipsoid ────────────────────────

    def geodetic_to_ecef(self, lon: ArrayLike, lat: ArrayLike,
                         height: ArrayLike) -> Cartesian:
        return geodetic_to_ecef(lon, lat, height, self.ellipsoid)

    def ecef_to_geodetic(self, x: ArrayLike, y: ArrayLike,
                         z: ArrayLike) -> Geodetic:
        return ecef_to_geodetic(x, y, z, self.ellipsoid)

    # ── ECEF ↔ Measurement (cached C) ───────────────────────────────────

    def ecef_to_measurement_vector(self, vec_ecef: NDArray) -> NDArray:
        """Rotate (3,) or (N,3) ECEF vector(s) into the measurement frame."""
        return apply_dcm(self.dcm, vec_ecef)

    def measurement_to_ecef_vector(self, vec_meas: NDArray) -> NDArray:
        """Rotate (3,) or (N,3) measurement-frame vector(s) into ECEF."""
        return apply_dcm(self.dcm.T, vec_meas)

    # ── ECEF ↔ Local (any origin) ───────────────────────────────────────

    def ecef_to_local_vector(self, vec_ecef: NDArray,
                             lon: float, lat: float) -> NDArray:
        """Rotate ECEF vector(s) into the local frame at origin (lon, lat)."""
        return ecef_to_local(vec_ecef, lon, lat)

    def local_to_ecef_vector(self, vec_local: NDArray,
                             lon: float, lat: float) -> NDArray:
        """Rotate local-frame vector(s) at origin (lon, lat) into ECEF."""
        return local_to_ecef(vec_local, lon, lat)

    # ── Local ↔ Measurement (through ECEF) ──────────────────────────────

    def local_to_measurement_vector(self, vec_local: NDArray,
                                    lon: float, lat: float) -> NDArray:
        """Local frame at (lon, lat) → ECEF → this site's measurement frame."""
        return self.ecef_to_measurement_vector(local_to_ecef(vec_local, lon, lat))

    def measurement_to_local_vector(self, vec_meas: NDArray,
                                    lon: float, lat: float) -> NDArray:
        """This site's measurement frame → ECEF → local frame at (lon, lat)."""
        return ecef_to_local(self.measurement_to_ecef_vector(vec_meas), lon, lat)

    # ── Composite positions ─────────────────────────────────────────────

    def measurement_to_ecef(self, x: ArrayLike, y: ArrayLike,
                            z: ArrayLike) -> Cartesian:
        """Measurement-frame coordinates [m] → ECEF position [m].

        Rotated by ``Cᵀ`` plus the site origin.  Inputs broadcast; the
        result has the broadcast shape.
        """
        delta = _rotate_points(self.dcm.T, _stack_components(x, y, z))
        return Cartesian(*np.moveaxis(delta + self.origin_ecef, -1, 0))

    def geodetic_to_measurement(self, lon: ArrayLike, lat: ArrayLike,
                                height: ArrayLike) -> Cartesian:
        """Geodetic position → measurement-frame coordinates [m].

        ECEF of the point, minus the site origin, rotated by ``C``.
        Inputs broadcast; scalars give scalars, grids give grids.
        """
        ecef = _stack_components(*self.geodetic_to_ecef(lon, lat, height))
        meas = _rotate_points(self.dcm, ecef - self.origin_ecef)
        return Cartesian(*np.moveaxis(meas, -1, 0))

    def measurement_to_geodetic(self, x: ArrayLike, y: ArrayLike,
                                z: ArrayLike) -> Geodetic:
        """Measurement-frame coordinates [m] → geodetic position.

        :meth:`measurement_to_ecef`, then the series inverse.
        """
        return self.ecef_to_geodetic(*self.measurement_to_ecef(x, y, z))
