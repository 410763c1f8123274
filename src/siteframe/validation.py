"""
siteframe.validation — Input Checking Around the Core
=======================================================

The conversion core trusts its inputs.  Physically invalid values do not
raise there; they surface as NaN, infinities or silently wrong numbers:

- **Invalid ellipsoid** — ``a <= 0`` or ``f >= 1``.
- **Pole singularity** — ``B = ±π/2`` exactly in the forward conversion.
- **Zero radius** — ``x = y = z = 0`` in the inverse conversion.
- **Series error** — the inverse is a second-order series, so a
  forward→inverse round trip is close to, not exactly, the identity.

This module is the thin layer that turns the first three into exceptions.
:class:`ValidatedSite` offers the same conversions as
:class:`~siteframe.site.SiteFrame` but checks every input first.  The
series error is intrinsic and is not checked.
"""

import logging

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .config import SiteConfig
from .geodetic import Cartesian, Geodetic
from .site import SiteFrame
from .utils import DEG2RAD

logger = logging.getLogger(__name__)


# ════════════════════════════════════════════════════════════════════════════
#  Exceptions
# ════════════════════════════════════════════════════════════════════════════

class SiteFrameError(ValueError):
    """Base class for rejected conversion inputs."""


class EllipsoidError(SiteFrameError):
    """Semi-major axis not positive, or flattening outside [0, 1)."""


class LatitudeRangeError(SiteFrameError):
    """Latitude outside [−π/2, π/2], or exactly at a pole."""


class ZeroRadiusError(SiteFrameError):
    """ECEF position at the earth centre."""


class NonFiniteError(SiteFrameError):
    """NaN or infinite coordinate."""


def _reject(exc_type: type, message: str):
    logger.warning(message)
    raise exc_type(message)


# ════════════════════════════════════════════════════════════════════════════
#  Checks
# ════════════════════════════════════════════════════════════════════════════

def _require_finite(name: str, *values: ArrayLike) -> None:
    for v in values:
        if not np.all(np.isfinite(np.asarray(v, dtype=np.float64))):
            _reject(NonFiniteError, f"{name} must be finite, got {v!r}")


def validate_ellipsoid(a: float, f: float) -> None:
    """Raise :class:`EllipsoidError` unless ``a > 0`` and ``0 <= f < 1``."""
    _require_finite("ellipsoid parameters", a, f)
    if a <= 0.0:
        _reject(EllipsoidError, f"semi-major axis must be > 0, got {a}")
    if not 0.0 <= f < 1.0:
        _reject(EllipsoidError, f"flattening must be in [0, 1), got {f}")


def validate_geodetic(lon: ArrayLike, lat: ArrayLike, height: ArrayLike,
                      allow_pole: bool = False) -> None:
    """Check geodetic coordinates [rad, rad, m].

    ``allow_pole`` admits ``|lat| = π/2`` for callers that accept the
    imprecise forward conversion there.
    """
    _require_finite("geodetic coordinates", lon, lat, height)
    abs_lat = np.abs(np.asarray(lat, dtype=np.float64))
    if np.any(abs_lat > np.pi / 2):
        _reject(LatitudeRangeError, f"latitude outside [-pi/2, pi/2]: {lat!r}")
    if not allow_pole and np.any(abs_lat == np.pi / 2):
        _reject(LatitudeRangeError, f"latitude exactly at a pole: {lat!r}")


def validate_cartesian(x: ArrayLike, y: ArrayLike, z: ArrayLike,
                       require_nonzero: bool = False) -> None:
    """Check Cartesian components; optionally reject the zero vector."""
    _require_finite("cartesian coordinates", x, y, z)
    if require_nonzero:
        x, y, z = (np.asarray(v, dtype=np.float64) for v in (x, y, z))
        if np.any(x * x + y * y + z * z == 0.0):
            _reject(ZeroRadiusError, "ECEF position at the earth centre")


def validate_vectors(vec: NDArray) -> None:
    _require_finite("vector components", vec)


# ════════════════════════════════════════════════════════════════════════════
#  Validating Wrapper
# ════════════════════════════════════════════════════════════════════════════

class ValidatedSite:
    """A :class:`SiteFrame` whose conversions check their inputs.

    Parameters
    ----------
    site : SiteFrame — the wrapped site (its own parameters are checked)

    Attributes not defined here (``dcm``, ``origin_ecef``, ``lon`` …) are
    read through to the wrapped site.
    """

    def __init__(self, site: SiteFrame):
        validate_ellipsoid(*site.get_ellipsoid())
        validate_geodetic(site.lon, site.lat, site.height)
        _require_finite("azimuth", site.azimuth)
        self.site = site

    @classmethod
    def from_config(cls, config: SiteConfig) -> "ValidatedSite":
        """Check a configuration, then build and wrap its site."""
        validate_ellipsoid(config.semi_major_axis_m, config.flattening)
        validate_geodetic(config.lon_deg * DEG2RAD, config.lat_deg * DEG2RAD,
                          config.height_m)
        return cls(config.build())

    def __getattr__(self, name):
        if name == "site":
            raise AttributeError(name)
        return getattr(self.site, name)

    def __repr__(self):
        return f"ValidatedSite({self.site!r})"

    def with_ellipsoid(self, a: float, f: float) -> "ValidatedSite":
        validate_ellipsoid(a, f)
        return ValidatedSite(self.site.with_ellipsoid(a, f))

    # ── Geodetic ↔ ECEF ─────────────────────────────────────────────────

    def geodetic_to_ecef(self, lon: ArrayLike, lat: ArrayLike,
                         height: ArrayLike) -> Cartesian:
        validate_geodetic(lon, lat, height)
        return self.site.geodetic_to_ecef(lon, lat, height)

    def ecef_to_geodetic(self, x: ArrayLike, y: ArrayLike,
                         z: ArrayLike) -> Geodetic:
        validate_cartesian(x, y, z, require_nonzero=True)
        return self.site.ecef_to_geodetic(x, y, z)

    # ── Composite positions ─────────────────────────────────────────────

    def geodetic_to_measurement(self, lon: ArrayLike, lat: ArrayLike,
                                height: ArrayLike) -> Cartesian:
        validate_geodetic(lon, lat, height)
        return self.site.geodetic_to_measurement(lon, lat, height)

    def measurement_to_geodetic(self, x: ArrayLike, y: ArrayLike,
                                z: ArrayLike) -> Geodetic:
        validate_cartesian(x, y, z)
        ecef = self.site.measurement_to_ecef(x, y, z)
        validate_cartesian(*ecef, require_nonzero=True)
        return self.site.ecef_to_geodetic(*ecef)

    # ── Vector rotations ────────────────────────────────────────────────

    def ecef_to_measurement_vector(self, vec_ecef: NDArray) -> NDArray:
        validate_vectors(vec_ecef)
        return self.site.ecef_to_measurement_vector(vec_ecef)

    def measurement_to_ecef_vector(self, vec_meas: NDArray) -> NDArray:
        validate_vectors(vec_meas)
        return self.site.measurement_to_ecef_vector(vec_meas)

    def ecef_to_local_vector(self, vec_ecef: NDArray,
                             lon: float, lat: float) -> NDArray:
        validate_vectors(vec_ecef)
        validate_geodetic(lon, lat, 0.0, allow_pole=True)
        return self.site.ecef_to_local_vector(vec_ecef, lon, lat)

    def local_to_ecef_vector(self, vec_local: NDArray,
                             lon: float, lat: float) -> NDArray:
        validate_vectors(vec_local)
        validate_geodetic(lon, lat, 0.0, allow_pole=True)
        return self.site.local_to_ecef_vector(vec_local, lon, lat)

    def local_to_measurement_vector(self, vec_local: NDArray,
                                    lon: float, lat: float) -> NDArray:
        validate_vectors(vec_local)
        validate_geodetic(lon, lat, 0.0, allow_pole=True)
        return self.site.local_to_measurement_vector(vec_local, lon, lat)

    def measurement_to_local_vector(self, vec_meas: NDArray,
                                    lon: float, lat: float) -> NDArray:
        validate_vectors(vec_meas)
        validate_geodetic(lon, lat, 0.0, allow_pole=True)
        return self.site.measurement_to_local_vector(vec_meas, lon, lat)
