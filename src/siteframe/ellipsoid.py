"""
siteframe.ellipsoid — Two-Parameter Reference Ellipsoid
=========================================================

The ellipsoid is described by its semi-major axis ``a`` and flattening
``f = (a − b) / a``.  Everything else (semi-minor axis, eccentricity) is
derived on demand.

Instances are frozen.  "Setting" parameters returns a new ellipsoid so
that anything derived from an old one (a site's cached rotation matrix
and origin vector) can never silently go stale.

Degenerate inputs are not rejected here: ``a <= 0`` or ``f >= 1`` produce
NaN or meaningless values downstream.  See :mod:`siteframe.validation`.
"""

from dataclasses import dataclass, replace

from .utils import RE_DEFAULT, F_DEFAULT


@dataclass(frozen=True)
class Ellipsoid:
    """Reference ellipsoid.

    Parameters
    ----------
    a : float — semi-major axis [m]
    f : float — flattening (0 = sphere)
    """
    a: float = RE_DEFAULT
    f: float = F_DEFAULT

    @property
    def b(self) -> float:
        """Semi-minor axis [m]."""
        return self.a * (1.0 - self.f)

    @property
    def e2(self) -> float:
        """First eccentricity squared."""
        return self.f * (2.0 - self.f)

    @property
    def parameters(self) -> tuple[float, float]:
        """Current ``(a, f)``."""
        return self.a, self.f

    @property
    def is_sphere(self) -> bool:
        return self.f == 0.0

    def with_parameters(self, a: float, f: float) -> "Ellipsoid":
        """Return an ellipsoid with both parameters replaced (no validation)."""
        return replace(self, a=float(a), f=float(f))

    @classmethod
    def from_axes(cls, a: float, b: float) -> "Ellipsoid":
        """Build from semi-major and semi-minor axes [m]."""
        return cls(a=float(a), f=(a - b) / a)


DEFAULT_ELLIPSOID = Ellipsoid()
WGS84 = Ellipsoid(a=6_378_137.0, f=1.0 / 298.257223563)
