"""Site configuration objects."""

from collections.abc import Mapping
from dataclasses import dataclass, fields

from .ellipsoid import Ellipsoid
from .site import SiteFrame
from .utils import (
    DEFAULT_AZIMUTH_DEG,
    DEFAULT_HEIGHT_M,
    DEFAULT_LAT_DEG,
    DEFAULT_LON_DEG,
    F_DEFAULT,
    RE_DEFAULT,
)


@dataclass(frozen=True)
class SiteConfig:
    """Deployment site description in degrees and metres."""

    lon_deg: float = DEFAULT_LON_DEG
    lat_deg: float = DEFAULT_LAT_DEG
    height_m: float = DEFAULT_HEIGHT_M
    azimuth_deg: float = DEFAULT_AZIMUTH_DEG
    semi_major_axis_m: float = RE_DEFAULT
    flattening: float = F_DEFAULT

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, float]) -> "SiteConfig":
        """Build from a plain mapping; missing keys keep their defaults."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(mapping) - known)
        if unknown:
            raise ValueError(f"Unknown site config keys: {', '.join(unknown)}")
        return cls(**{key: float(value) for key, value in mapping.items()})

    def ellipsoid(self) -> Ellipsoid:
        return Ellipsoid(a=self.semi_major_axis_m, f=self.flattening)

    def build(self) -> SiteFrame:
        return SiteFrame.from_degrees(
            self.lon_deg,
            self.lat_deg,
            self.height_m,
            self.azimuth_deg,
            ellipsoid=self.ellipsoid(),
        )
