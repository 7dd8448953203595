"""
Shared geometry utilities for stroke normalization and matching.

Strokes are handled as (n, 2) float arrays of x/y coordinates.
"""

import math
from typing import Dict, Iterable, List, Sequence, Tuple, Union

import numpy as np

PointLike = Union[Tuple[float, float], Dict[str, float]]


class PathUtils:
    """Utility class for path conversion."""

    @staticmethod
    def to_array(points: Iterable[PointLike]) -> np.ndarray:
        """Convert (x, y) tuples or {'x', 'y'} dicts to an (n, 2) array."""
        coords = []
        for p in points:
            if isinstance(p, dict):
                coords.append((float(p['x']), float(p['y'])))
            else:
                coords.append((float(p[0]), float(p[1])))
        return np.array(coords, dtype=float).reshape(-1, 2)

    @staticmethod
    def to_dicts(points: np.ndarray) -> List[Dict[str, float]]:
        """Convert an (n, 2) array to a list of {'x', 'y'} dicts."""
        return [{'x': float(x), 'y': float(y)} for x, y in points]

    @staticmethod
    def polyline(vertices: Sequence[Tuple[float, float]], step: float = 10.0) -> np.ndarray:
        """Densify a polyline so consecutive points are at most `step` apart."""
        vertices = np.asarray(vertices, dtype=float)
        pieces = [vertices[:1]]
        for start, end in zip(vertices[:-1], vertices[1:]):
            length = float(np.hypot(*(end - start)))
            count = max(1, int(math.ceil(length / step)))
            t = np.linspace(0.0, 1.0, count + 1)[1:, None]
            pieces.append(start + t * (end - start))
        return np.vstack(pieces)


class GeometryUtils:
    """Utility class for geometric calculations."""

    @staticmethod
    def path_length(points: np.ndarray) -> float:
        """Calculate total path length."""
        if len(points) < 2:
            return 0.0
        return float(np.sum(np.hypot(*np.diff(points, axis=0).T)))

    @staticmethod
    def centroid(points: np.ndarray) -> np.ndarray:
        """Calculate the centroid of a point array."""
        if len(points) == 0:
            return np.zeros(2)
        return points.mean(axis=0)

    @staticmethod
    def resample(points: np.ndarray, num_points: int) -> np.ndarray:
        """Resample a path to num_points equally spaced points along its length."""
        if len(points) == 0:
            return np.zeros((num_points, 2))
        steps = np.hypot(*np.diff(points, axis=0).T) if len(points) > 1 else np.zeros(0)
        cumulative = np.concatenate(([0.0], np.cumsum(steps)))
        total = cumulative[-1]
        if total == 0:
            return np.repeat(points[:1], num_points, axis=0)
        targets = np.linspace(0.0, total, num_points)
        xs = np.interp(targets, cumulative, points[:, 0])
        ys = np.interp(targets, cumulative, points[:, 1])
        return np.column_stack((xs, ys))

    @staticmethod
    def scale_uniform(points: np.ndarray, size: float) -> np.ndarray:
        """Scale so the larger bounding box side equals size, keeping aspect ratio."""
        if len(points) == 0:
            return points.copy()
        extent = points.max(axis=0) - points.min(axis=0)
        longest = float(extent.max())
        if longest == 0:
            return points.copy()
        return points * (size / longest)

    @staticmethod
    def translate_to_origin(points: np.ndarray) -> np.ndarray:
        """Translate points so the centroid is at the origin."""
        return points - GeometryUtils.centroid(points)

    @staticmethod
    def rotate(points: np.ndarray, angle: float) -> np.ndarray:
        """Rotate points around their centroid."""
        c = GeometryUtils.centroid(points)
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        rotation = np.array([[cos_a, -sin_a], [sin_a, cos_a]])
        return (points - c) @ rotation.T + c

    @staticmethod
    def mean_distance(points1: np.ndarray, points2: np.ndarray) -> float:
        """Average point-to-point distance between two equally sized paths."""
        if points1.shape != points2.shape:
            return float('inf')
        return float(np.mean(np.hypot(*(points1 - points2).T)))
