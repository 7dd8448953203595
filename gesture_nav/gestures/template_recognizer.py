"""
Template Gesture Recognizer

Nearest-neighbour matching of strokes against stored example gestures,
based on the $1 Unistroke Recognizer. Unlike classic $1 the stroke is not
rotated to its indicative angle, so direction is part of the shape: a
left swipe and a right swipe are different gestures.

Reference: https://depts.washington.edu/acelab/proj/dollar/index.html
"""

import json
import logging
import math
import os
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np

from ..config.settings import GestureConfig, RecognitionConfig
from ..utils.gesture_utils import GeometryUtils, PathUtils, PointLike
from .base import RecognizerBackend
from .gesture_types import ALL_GESTURES, DOWN, LEFT, RIGHT, UP, split_compound

logger = logging.getLogger(__name__)

# Golden ratio conjugate used by the angle search
PHI = 0.5 * (-1.0 + math.sqrt(5.0))

DIRECTION_VECTORS = {
    LEFT: (-1.0, 0.0),
    RIGHT: (1.0, 0.0),
    UP: (0.0, -1.0),
    DOWN: (0.0, 1.0),
}


@dataclass
class RecognitionResult:
    """Best template match with its similarity score (0.0-1.0)."""
    name: Optional[str]
    score: float


class GestureTemplate:
    """A named example stroke, stored in normalized form."""

    def __init__(self, name: str, points: Iterable[PointLike], user_defined: bool = False,
                 num_points: int = GestureConfig.TEMPLATE_RESAMPLE_POINTS):
        self.name = name
        self.user_defined = user_defined
        self.points = normalize(PathUtils.to_array(points), num_points)


def normalize(points: np.ndarray,
              num_points: int = GestureConfig.TEMPLATE_RESAMPLE_POINTS,
              size: float = GestureConfig.TEMPLATE_SQUARE_SIZE) -> np.ndarray:
    """Resample, scale and center a stroke. Orientation is preserved."""
    points = GeometryUtils.resample(points, num_points)
    points = GeometryUtils.scale_uniform(points, size)
    return GeometryUtils.translate_to_origin(points)


def stroke_for_gesture(gesture: str, length: float = 200.0) -> np.ndarray:
    """Generate a synthetic example stroke for a gesture name."""
    x, y = 0.0, 0.0
    vertices = [(x, y)]
    for direction in split_compound(gesture):
        vx, vy = DIRECTION_VECTORS[direction]
        x += vx * length
        y += vy * length
        vertices.append((x, y))
    return PathUtils.polyline(vertices)


class TemplateRecognizer(RecognizerBackend):
    """Trainable template matcher for gesture classification."""

    NAME = 'template'

    def __init__(self, config: Optional[RecognitionConfig] = None,
                 templates_path: Optional[str] = None, use_defaults: bool = True):
        self.config = config or RecognitionConfig()
        self.templates: List[GestureTemplate] = []
        self._points: List[Tuple[float, float]] = []

        if use_defaults:
            self._add_default_templates()
        if templates_path:
            self.load_templates(templates_path)

    def _add_default_templates(self):
        """One template per gesture the segment recognizer can produce."""
        for gesture in ALL_GESTURES:
            self.templates.append(GestureTemplate(
                gesture, stroke_for_gesture(gesture), num_points=self.config.resample_points
            ))

    # Session interface

    def start(self, x: float, y: float) -> None:
        self._points = [(x, y)]

    def add_point(self, x: float, y: float) -> None:
        self._points.append((x, y))

    def end(self) -> Optional[str]:
        points, self._points = self._points, []
        result = self.recognize(points)
        if result.name is not None and result.score >= self.config.similarity_threshold:
            return result.name
        logger.debug(f"Rejected best match {result.name} (score {result.score:.3f})")
        return None

    # Matching

    def recognize(self, points: Iterable[PointLike]) -> RecognitionResult:
        """Find the best matching template for a stroke."""
        raw = PathUtils.to_array(points)
        if len(raw) < 2 or not self.templates:
            return RecognitionResult(None, 0.0)
        if GeometryUtils.path_length(raw) < self.config.min_path_length:
            return RecognitionResult(None, 0.0)

        candidate = normalize(raw, self.config.resample_points)

        best_distance = float('inf')
        best_template = None
        for template in self.templates:
            distance = self._distance_at_best_angle(candidate, template.points)
            logger.debug(f"Template {template.name}: distance {distance:.4f}")
            if distance < best_distance:
                best_distance = distance
                best_template = template

        if best_template is None:
            return RecognitionResult(None, 0.0)
        return RecognitionResult(best_template.name, self._distance_to_similarity(best_distance))

    def _distance_to_similarity(self, distance: float) -> float:
        """Convert distance to similarity score (0.0-1.0)."""
        size = GestureConfig.TEMPLATE_SQUARE_SIZE
        half_diagonal = 0.5 * math.sqrt(size ** 2 + size ** 2)
        return max(0.0, 1.0 - distance / half_diagonal)

    def _distance_at_best_angle(self, points: np.ndarray, template_points: np.ndarray) -> float:
        """Find the best angle match using Golden Section Search."""
        theta_a = -self.config.rotation_range
        theta_b = self.config.rotation_range
        threshold = GestureConfig.TEMPLATE_ANGLE_PRECISION

        x1 = PHI * theta_a + (1 - PHI) * theta_b
        f1 = self._distance_at_angle(points, template_points, x1)
        x2 = (1 - PHI) * theta_a + PHI * theta_b
        f2 = self._distance_at_angle(points, template_points, x2)

        while abs(theta_b - theta_a) > threshold:
            if f1 < f2:
                theta_b = x2
                x2, f2 = x1, f1
                x1 = PHI * theta_a + (1 - PHI) * theta_b
                f1 = self._distance_at_angle(points, template_points, x1)
            else:
                theta_a = x1
                x1, f1 = x2, f2
                x2 = (1 - PHI) * theta_a + PHI * theta_b
                f2 = self._distance_at_angle(points, template_points, x2)

        return min(f1, f2)

    def _distance_at_angle(self, points: np.ndarray, template_points: np.ndarray, angle: float) -> float:
        return GeometryUtils.mean_distance(GeometryUtils.rotate(points, angle), template_points)

    # Template management

    def add_template(self, name: str, points: Iterable[PointLike]) -> int:
        """Add a user template, returns count of templates with this name."""
        template = GestureTemplate(name, points, user_defined=True,
                                   num_points=self.config.resample_points)
        self.templates.append(template)
        return sum(1 for t in self.templates if t.name == name)

    def delete_user_templates(self) -> int:
        """Remove all user-defined templates, returns the number remaining."""
        self.templates = [t for t in self.templates if not t.user_defined]
        return len(self.templates)

    def save_templates(self, filename: str):
        """Save user-defined templates to a JSON file."""
        data = {
            'templates': [
                {'name': t.name, 'points': PathUtils.to_dicts(t.points)}
                for t in self.templates if t.user_defined
            ]
        }
        with open(filename, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2)

    def load_templates(self, filename: str) -> int:
        """Load templates from a JSON file, returns how many were loaded.

        Malformed entries are skipped with a warning.
        """
        if not os.path.exists(filename):
            logger.warning(f"Template file '{filename}' not found")
            return 0

        try:
            with open(filename, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.error(f"Error loading templates from '{filename}': {e}")
            return 0

        # Accept both a bare list and {'templates': [...]}
        templates_data = data.get('templates', []) if isinstance(data, dict) else data
        if not isinstance(templates_data, list):
            logger.error(f"Invalid template format in '{filename}'. Expected list of templates.")
            return 0

        loaded = 0
        for i, item in enumerate(templates_data):
            parsed = self._parse_template(i, item)
            if parsed is None:
                continue
            name, points = parsed
            self.add_template(name, points)
            loaded += 1

        logger.info(f"Loaded {loaded} templates from '{filename}'")
        return loaded

    def _parse_template(self, index: int, item) -> Optional[Tuple[str, List[Dict[str, float]]]]:
        if not isinstance(item, dict):
            logger.warning(f"Skipping template {index}: not a dictionary")
            return None
        name = str(item.get('name', '')).strip()
        if not name:
            logger.warning(f"Skipping template {index}: missing name")
            return None
        points = item.get('points')
        if not isinstance(points, list) or len(points) < 2:
            logger.warning(f"Skipping template '{name}': need a list of at least 2 points")
            return None
        try:
            parsed = [{'x': float(p['x']), 'y': float(p['y'])} for p in points]
        except (KeyError, TypeError, ValueError):
            logger.warning(f"Skipping template '{name}': invalid coordinates")
            return None
        return name, parsed
