"""
Lloyd's K-means over 2D points.

The engine runs in explicit phases: ``load`` builds the points, ``initialize``
seeds K groups on the first K points, ``run`` repeats assign + recompute until
no center moves or ``max_iter`` passes have been made.
"""
import logging
import math
import time
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from .errors import ConfigError, DataError
from .group import Group
from .io import read_records
from .point import Point

logger = logging.getLogger(__name__)

DEFAULT_MAX_ITER = 300


@dataclass
class IterationStats:
    iteration: int
    changed: bool
    reassigned: int
    inertia: float


@dataclass
class KMeansResult:
    """Final state of a run, with numpy views for plotting and comparison."""
    ids: np.ndarray
    data: np.ndarray
    labels: np.ndarray
    centers: np.ndarray
    n_iter: int
    converged: bool
    inertia: float
    elapsed_ms: float
    history: List[IterationStats] = field(default_factory=list)


def validate_k(k):
    if isinstance(k, bool) or not isinstance(k, (int, np.integer)) or k < 1:
        raise ConfigError('K must be a positive integer, got %r' % (k,))
    return int(k)


def validate_max_iter(max_iter):
    if isinstance(max_iter, bool) or not isinstance(max_iter, (int, np.integer)) or max_iter < 1:
        raise ConfigError('max_iter must be a positive integer, got %r' % (max_iter,))
    return int(max_iter)


class KMeans:
    def __init__(self, k, max_iter=DEFAULT_MAX_ITER):
        self.k = validate_k(k)
        self.max_iter = validate_max_iter(max_iter)
        self.points: List[Point] = []
        self.groups: List[Group] = []
        self.result: Optional[KMeansResult] = None

    @classmethod
    def from_points(cls, records, k, max_iter=DEFAULT_MAX_ITER):
        """Build an engine from ``(index, x, y)`` records and seed its groups."""
        engine = cls(k, max_iter=max_iter)
        engine.load_records(records)
        engine.initialize()
        return engine

    @classmethod
    def from_file(cls, path, k, max_iter=DEFAULT_MAX_ITER, strict=False):
        engine = cls(k, max_iter=max_iter)
        engine.load(path, strict=strict)
        engine.initialize()
        return engine

    def load(self, path, strict=False):
        self.load_records(read_records(path, strict=strict))

    def load_records(self, records):
        points = []
        seen = set()
        for position, (index, x, y) in enumerate(records):
            if index in seen:
                raise DataError('Duplicate point index %d' % index)
            seen.add(index)
            if not (math.isfinite(x) and math.isfinite(y)):
                raise DataError('Non-finite coordinate for point %d' % index)
            points.append(Point(position, index, x, y))
        if not points:
            raise DataError('No points loaded')

        self.points = points
        self.groups = []
        self.result = None
        logger.info('Loaded %d points', len(points))

    def initialize(self):
        if not self.points:
            raise DataError('No points loaded')
        if self.k > len(self.points):
            raise ConfigError('K (%d) exceeds the number of points (%d)'
                              % (self.k, len(self.points)))

        self.groups = [Group(i + 1, p.x, p.y) for i, p in enumerate(self.points[:self.k])]
        for p in self.points:
            p.set_group(None)
        logger.debug('Seeded %d groups: %s', self.k, [g.center for g in self.groups])

    def assign(self):
        """Assign every point to its nearest group and return how many moved.

        Ties go to the lowest group id since only a strictly smaller
        distance replaces the current best.
        """
        for group in self.groups:
            group.clear_members()

        reassigned = 0
        for point in self.points:
            best = self.groups[0]
            best_distance = point.distance_to(best.center_x, best.center_y)
            for group in self.groups[1:]:
                distance = point.distance_to(group.center_x, group.center_y)
                if distance < best_distance:
                    best_distance = distance
                    best = group
            if point.group_id != best.id:
                reassigned += 1
            point.set_group(best.id)
            best.add_member(point)
        return reassigned

    def update_centers(self):
        changed = False
        for group in self.groups:
            if group.recompute_center(self.points):
                changed = True
        return changed

    def iterate(self):
        """One assign + recompute pass.

        Returns ``(changed, reassigned)``: whether any center moved and how
        many points switched groups.
        """
        if not self.groups:
            raise ConfigError('Groups are not initialized; call initialize() first')
        reassigned = self.assign()
        changed = self.update_centers()
        return changed, reassigned

    def inertia(self):
        total = 0.0
        for group in self.groups:
            for position in group.members:
                distance = self.points[position].distance_to(group.center_x, group.center_y)
                total += distance * distance
        return total

    def run(self):
        if not self.groups:
            self.initialize()

        start = time.time()
        history = []
        converged = False
        for iteration in range(1, self.max_iter + 1):
            changed, reassigned = self.iterate()
            stats = IterationStats(iteration, changed, reassigned, self.inertia())
            history.append(stats)
            logger.debug('Iteration %d: reassigned=%d changed=%s inertia=%.6f',
                         iteration, reassigned, changed, stats.inertia)
            if not changed:
                converged = True
                break

        n_iter = len(history)
        if converged:
            logger.info('Converged after %d iterations', n_iter)
        else:
            logger.warning('Stopped after max_iter=%d iterations without convergence', self.max_iter)

        self.result = KMeansResult(
            ids=np.array([p.id for p in self.points], dtype=int),
            data=self.data(),
            labels=self.labels(),
            centers=self.centers(),
            n_iter=n_iter,
            converged=converged,
            inertia=history[-1].inertia,
            elapsed_ms=(time.time() - start) * 1000,
            history=history,
        )
        return self.result

    def data(self):
        return np.array([[p.x, p.y] for p in self.points], dtype=float)

    def labels(self):
        return np.array([-1 if p.group_id is None else p.group_id for p in self.points], dtype=int)

    def centers(self):
        return np.array([[g.center_x, g.center_y] for g in self.groups], dtype=float)


def fit(records, k, max_iter=DEFAULT_MAX_ITER):
    """Cluster in-memory ``(index, x, y)`` records and return the result."""
    return KMeans.from_points(records, k, max_iter=max_iter).run()
