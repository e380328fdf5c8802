"""
Conflict Engine

Pairwise platform conflict resolution over an ordered list of bookings.

Two policies are available:

- Priority resolution cancels one booking per colliding pair. A Stoppage
  train beats a Through train; between trains of the same type the later
  arrival gives way. Bookings on an inaccessible platform are cancelled.
- Detection-only resolution reports trains sharing a line, and trains
  sharing a station platform when both platforms are accessible. It never
  changes booking state.

Priority resolution runs in two passes. The pair scan only collects
cancellation candidates; a reduction then settles each booking once, so
the stored reason never depends on which pair happened to be scanned last.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ..interfaces.i_conflict_resolver import (
    IConflictResolver,
    ResolutionPolicy,
    ResolutionResult,
)
from ..models.booking import Booking
from ..arrival_time import parse_arrival_minutes

logger = logging.getLogger(__name__)

STOPPAGE_BUFFER_MINUTES = 30
THROUGH_BUFFER_MINUTES = 10

INACCESSIBLE_REASON = "Assigned platform is inaccessible."


def train_label(index: int) -> str:
    """1-based label used in reasons and reports."""
    return f"Train {index + 1}"


def ensure_bookings_complete(bookings: List[Booking]) -> None:
    """
    Check every booking before a scan starts.

    Raises:
        InvalidBookingError: If a booking has an unset entity
        TimeFormatError: If an arrival time is not a valid HH:MM value
    """
    for booking in bookings:
        booking.ensure_complete()
    for booking in bookings:
        parse_arrival_minutes(booking.arrival_time)


def later_arrival_index(bookings: List[Booking], i: int, j: int) -> int:
    """
    Pick which of two same-type bookings gives way.

    Arrival times are compared as strings. For zero-padded HH:MM values this
    matches numeric order; equal times cancel ``i``.
    """
    if bookings[i].arrival_time < bookings[j].arrival_time:
        return j
    return i


def shared_platform_conflicts(first: Booking, second: Booking) -> bool:
    """
    Decide whether two bookings on the same station platform conflict.

    Only a pair of accessible platforms is a conflict. An inaccessible
    platform is treated as out of use, so double booking it is allowed.
    """
    return first.platform.accessible and second.platform.accessible


@dataclass(frozen=True)
class CancellationCandidate:
    """A cancellation proposed by the pair scan for one booking."""

    index: int
    reason: str
    inaccessible: bool = False


class PriorityResolver(IConflictResolver):
    """Cancels one booking per platform collision, by train-type priority."""

    policy = ResolutionPolicy.PRIORITY

    def __init__(self,
                 stoppage_buffer: int = STOPPAGE_BUFFER_MINUTES,
                 through_buffer: int = THROUGH_BUFFER_MINUTES):
        """
        Args:
            stoppage_buffer: Minimum gap when either train is a Stoppage train
            through_buffer: Minimum gap between two Through trains
        """
        self.stoppage_buffer = stoppage_buffer
        self.through_buffer = through_buffer

    def required_buffer(self, first: Booking, second: Booking) -> int:
        if first.is_stoppage or second.is_stoppage:
            return self.stoppage_buffer
        return self.through_buffer

    def collect_candidates(self, bookings: List[Booking]) -> List[CancellationCandidate]:
        """
        Scan every unordered pair and collect cancellation candidates.

        Returns:
            Candidates in scan order
        """
        minutes = [parse_arrival_minutes(b.arrival_time) for b in bookings]
        candidates: List[CancellationCandidate] = []

        for i in range(len(bookings)):
            for j in range(i + 1, len(bookings)):
                first, second = bookings[i], bookings[j]

                if first.platform.id == second.platform.id:
                    time_diff = abs(minutes[i] - minutes[j])
                    buffer = self.required_buffer(first, second)
                    if time_diff < buffer:
                        candidate = self._overlap_candidate(bookings, i, j)
                        logger.debug(
                            f"{train_label(i)} and {train_label(j)} overlap on platform "
                            f"{first.platform.id} ({time_diff} < {buffer} min), "
                            f"{train_label(candidate.index)} gives way"
                        )
                        candidates.append(candidate)

                for index in (i, j):
                    if not bookings[index].platform.accessible:
                        candidates.append(
                            CancellationCandidate(index, INACCESSIBLE_REASON, inaccessible=True)
                        )

        return candidates

    def _overlap_candidate(self, bookings: List[Booking], i: int, j: int) -> CancellationCandidate:
        first, second = bookings[i], bookings[j]

        if first.is_stoppage and second.is_through:
            return CancellationCandidate(
                j,
                f"Platform overlap, priority given to {train_label(i)} (Stoppage over Through).",
            )
        if first.is_through and second.is_stoppage:
            return CancellationCandidate(
                i,
                f"Platform overlap, priority given to {train_label(j)} (Stoppage over Through).",
            )

        loser = later_arrival_index(bookings, i, j)
        other = j if loser == i else i
        return CancellationCandidate(
            loser,
            f"Platform overlap with {train_label(other)} (Same priority, later arrival).",
        )

    @staticmethod
    def reduce_candidates(candidates: List[CancellationCandidate]) -> Dict[int, str]:
        """
        Settle one reason per booking index.

        An inaccessible platform outranks any overlap; among overlaps the
        first candidate in scan order wins.
        """
        reasons: Dict[int, str] = {}
        for candidate in candidates:
            if candidate.inaccessible:
                reasons[candidate.index] = candidate.reason
            elif candidate.index not in reasons:
                reasons[candidate.index] = candidate.reason
        return reasons

    def resolve(self, bookings: List[Booking]) -> ResolutionResult:
        ensure_bookings_complete(bookings)

        reasons = self.reduce_candidates(self.collect_candidates(bookings))
        for index in sorted(reasons):
            bookings[index].cancel(reasons[index])

        logger.info(
            f"Priority resolution cancelled {len(reasons)} of {len(bookings)} bookings"
        )
        return ResolutionResult(policy=self.policy, bookings=bookings)


class DetectionResolver(IConflictResolver):
    """Reports conflicts without touching booking state."""

    policy = ResolutionPolicy.DETECTION

    def detect(self, bookings: List[Booking]) -> Tuple[List[str], List[str]]:
        """
        Scan every unordered pair for shared lines and shared platforms.

        Returns:
            (conflicts, notes), both in scan order
        """
        ensure_bookings_complete(bookings)

        conflicts: List[str] = []
        notes: List[str] = []

        for i in range(len(bookings)):
            for j in range(i + 1, len(bookings)):
                first, second = bookings[i], bookings[j]
                pair = f"{train_label(i)} and {train_label(j)}"

                if first.line.id == second.line.id:
                    conflicts.append(f"{pair} share Line {first.line.id}.")

                if (first.station.id == second.station.id
                        and first.platform.id == second.platform.id):
                    where = f"Station {first.station.id} Platform {first.platform.id}"
                    if shared_platform_conflicts(first, second):
                        conflicts.append(f"{pair} share {where}, both accessible.")
                    else:
                        notes.append(
                            f"{pair} share {where}, but at least one platform is "
                            f"inaccessible; not treated as a conflict."
                        )

        logger.info(
            f"Detection found {len(conflicts)} conflicts and {len(notes)} notes "
            f"across {len(bookings)} bookings"
        )
        return conflicts, notes

    def resolve(self, bookings: List[Booking]) -> ResolutionResult:
        conflicts, notes = self.detect(bookings)
        return ResolutionResult(
            policy=self.policy,
            bookings=bookings,
            conflicts=conflicts,
            notes=notes,
        )


def resolve_priority(bookings: List[Booking],
                     stoppage_buffer: int = STOPPAGE_BUFFER_MINUTES,
                     through_buffer: int = THROUGH_BUFFER_MINUTES) -> List[Booking]:
    """
    Apply priority resolution and return the annotated bookings.

    The bookings are modified in place and returned in input order.
    """
    return PriorityResolver(stoppage_buffer, through_buffer).resolve(bookings).bookings


def detect_conflicts(bookings: List[Booking]) -> Tuple[List[str], List[str]]:
    """Report conflicts and informational notes without cancelling anything."""
    return DetectionResolver().detect(bookings)


class ConflictEngine:
    """Selects a resolution policy and runs it over a booking list."""

    def __init__(self,
                 default_policy: ResolutionPolicy = ResolutionPolicy.PRIORITY,
                 stoppage_buffer: int = STOPPAGE_BUFFER_MINUTES,
                 through_buffer: int = THROUGH_BUFFER_MINUTES):
        self.default_policy = ResolutionPolicy(default_policy)
        self.stoppage_buffer = stoppage_buffer
        self.through_buffer = through_buffer
        self.logger = logging.getLogger(__name__)

    def get_resolver(self, policy: Optional[ResolutionPolicy] = None) -> IConflictResolver:
        """
        Create the resolver for a policy.

        Args:
            policy: Policy or its string value, the default policy if None
        """
        policy = self.default_policy if policy is None else ResolutionPolicy(policy)
        if policy == ResolutionPolicy.PRIORITY:
            return PriorityResolver(self.stoppage_buffer, self.through_buffer)
        return DetectionResolver()

    def resolve(self, bookings: List[Booking],
                policy: Optional[ResolutionPolicy] = None) -> ResolutionResult:
        resolver = self.get_resolver(policy)
        self.logger.debug(
            f"Resolving {len(bookings)} bookings with {resolver.policy.value} policy"
        )
        return resolver.resolve(bookings)
