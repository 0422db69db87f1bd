"""Basic vector types, UTM coordinates and small geometric utilities."""

from __future__ import annotations

import math
from dataclasses import dataclass

_RADIANS_PER_DEGREE = math.pi / 180.0

# WGS84 ellipsoid and UTM projection constants.
_WGS84_A = 6378137.0
_WGS84_F = 1.0 / 298.257223563
_UTM_K0 = 0.9996
_FALSE_EASTING = 500000.0
_FALSE_NORTHING_SOUTH = 10000000.0


@dataclass(frozen=True)
class Vec2:
    """A two-dimensional vector."""

    x: float
    y: float

    @classmethod
    def from_vec3(cls, vec3: Vec3) -> Vec2:
        """Drop the z component of a 3D vector."""
        return cls(vec3.x, vec3.y)


@dataclass(frozen=True)
class Vec3:
    """A three-dimensional vector."""

    x: float
    y: float
    z: float

    @classmethod
    def from_utm(cls, utm: UTMCoordinate) -> Vec3:
        """Convert a UTM coordinate to (easting, northing, elevation)."""
        return utm.to_vec3()

    @classmethod
    def from_lat_lon(cls, latitude: float, longitude: float, elevation: float) -> Vec3:
        """Project latitude/longitude in degrees through UTM to a vector."""
        return UTMCoordinate.from_lat_lon(latitude, longitude, elevation).to_vec3()

    def add(self, other: Vec3) -> Vec3:
        """Component-wise sum."""
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def sub(self, other: Vec3) -> Vec3:
        """Component-wise difference."""
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.sub(other)

    def dot(self, other: Vec3) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length_squared(self) -> float:
        """Squared Euclidean length."""
        return self.x * self.x + self.y * self.y + self.z * self.z


@dataclass(frozen=True)
class UTMCoordinate:
    """A UTM position: zone, hemisphere, easting, northing and elevation in metres."""

    zone_number: int
    northern_hemisphere: bool
    easting: float
    northing: float
    elevation: float

    def __post_init__(self) -> None:
        if not 1 <= self.zone_number <= 60:
            raise ValueError("UTM zone number must be between 1 and 60")

    def to_vec3(self) -> Vec3:
        """Return (easting, northing, elevation) as a vector."""
        return Vec3(self.easting, self.northing, self.elevation)

    @classmethod
    def from_lat_lon(cls, latitude: float, longitude: float, elevation: float) -> UTMCoordinate:
        """Project WGS84 latitude/longitude in degrees to UTM."""
        if latitude < -80.0 or latitude > 84.0:
            raise ValueError("Latitude must be between -80 and 84 degrees for UTM")

        zone_number = math.floor((longitude + 180.0) / 6.0) + 1
        zone_number = min(max(zone_number, 1), 60)

        northern = latitude >= 0.0
        lat = latitude * _RADIANS_PER_DEGREE
        lon = longitude * _RADIANS_PER_DEGREE
        central_meridian = (-183.0 + zone_number * 6.0) * _RADIANS_PER_DEGREE

        a = _WGS84_A
        e2 = _WGS84_F * (2.0 - _WGS84_F)
        e_prime2 = e2 / (1.0 - e2)

        sin_lat = math.sin(lat)
        cos_lat = math.cos(lat)
        tan_lat = math.tan(lat)

        n = a / math.sqrt(1.0 - e2 * sin_lat * sin_lat)
        t = tan_lat * tan_lat
        c = e_prime2 * cos_lat * cos_lat
        a_lon = cos_lat * (lon - central_meridian)

        m = a * (
            (1.0 - e2 / 4.0 - 3.0 * e2 * e2 / 64.0 - 5.0 * e2 * e2 * e2 / 256.0) * lat
            - (3.0 * e2 / 8.0 + 3.0 * e2 * e2 / 32.0 + 45.0 * e2 * e2 * e2 / 1024.0) * math.sin(2.0 * lat)
            + (15.0 * e2 * e2 / 256.0 + 45.0 * e2 * e2 * e2 / 1024.0) * math.sin(4.0 * lat)
            - (35.0 * e2 * e2 * e2 / 3072.0) * math.sin(6.0 * lat)
        )

        easting = (
            _UTM_K0
            * n
            * (
                a_lon
                + (1.0 - t + c) * a_lon**3 / 6.0
                + (5.0 - 18.0 * t + t * t + 72.0 * c - 58.0 * e_prime2) * a_lon**5 / 120.0
            )
            + _FALSE_EASTING
        )

        northing = _UTM_K0 * (
            m
            + n
            * tan_lat
            * (
                a_lon * a_lon / 2.0
                + (5.0 - t + 9.0 * c + 4.0 * c * c) * a_lon**4 / 24.0
                + (61.0 - 58.0 * t + t * t + 600.0 * c - 330.0 * e_prime2) * a_lon**6 / 720.0
            )
        )
        if not northern:
            northing += _FALSE_NORTHING_SOUTH

        return cls(zone_number, northern, easting, northing, elevation)


def volume_of_unit_cube() -> float:
    """Volume of the unit cube."""
    return 1.0


def distance_3d(x1: float, y1: float, z1: float, x2: float, y2: float, z2: float) -> float:
    """Euclidean distance between two points in 3D."""
    dx = x2 - x1
    dy = y2 - y1
    dz = z2 - z1
    return math.sqrt(dx * dx + dy * dy + dz * dz)