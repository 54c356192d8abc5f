from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional
import logging

from wecc.coordinate import Point, PointAtInfinity
from wecc.utils import bits_lsb_first

log = logging.getLogger(__name__)


@dataclass
class MultiplicationTrace:
    '''Caller-owned counters of the point operations spent by one scalar multiplication'''
    doublings: int = 0
    additions: int = 0

    @property
    def operations(self) -> int:
        return self.doublings + self.additions


class EllipticCurve(ABC):
    """
        An interface for Elliptic Curves. Only the group law differs between curve models,
        scalar multiplication is built upon it.
    """

    @abstractmethod
    def is_point_on_curve(self, point):
        """Verify if a point is on the curve."""
        pass

    @abstractmethod
    def add_points(self, p1, p2):
        """Add two points on the curve."""
        pass

    @abstractmethod
    def double_point(self, p):
        """Double a point on the curve."""
        pass

    @abstractmethod
    def negate(self, p):
        """Additive inverse of a point on the curve."""
        pass

    def identity(self) -> PointAtInfinity:
        return PointAtInfinity()

    def k_point(self, k: int, P: Point, trace: Optional[MultiplicationTrace] = None) -> Point:
        ''' ECSM (elliptic curve scalar multiplication) of k*P by double-and-add
                scan the bits of k from the least significant one, add the running
                double 2^i*P whenever bit i is set: O(log k) point operations
            e.g. k = 250 = 0b11111010 costs 7 doublings and 6 additions
        '''
        if k < 0:
            return self.k_point(-k, self.negate(P), trace)

        Q = self.identity()
        if k == 0 or P.is_identity_point():
            return Q

        bits = bits_lsb_first(k)
        R = P  # 2^i * P

        for i, bit in enumerate(bits):
            if bit:
                Q = self.add_points(Q, R)
                if trace is not None:
                    trace.additions += 1

            # no doubling is needed past the most significant bit
            if i < len(bits) - 1:
                R = self.double_point(R)
                if trace is not None:
                    trace.doublings += 1

        log.debug('k_point: k=%d (%d bits) on %r', k, len(bits), self)
        return Q

    def k_point_naive(self, k: int, P: Point, trace: Optional[MultiplicationTrace] = None) -> Point:
        ''' Reference k*P by k-1 repeated additions of P, O(k) point operations '''
        if k < 0:
            return self.k_point_naive(-k, self.negate(P), trace)

        if k == 0:
            return self.identity()

        Q = P
        for _ in range(k - 1):
            Q = self.add_points(Q, P)
            if trace is not None:
                trace.additions += 1

        return Q
