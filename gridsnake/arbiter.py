"""Heading arbitration: which proposed direction may replace the current one."""

from collections import namedtuple

from .constants import DIRECTIONS

Decision = namedtuple("Decision", ["direction", "starts_game"])


class DirectionArbiter:
    """
    Decides whether a requested heading is legal.

    Before the game starts any of the four directions is accepted and starts
    the game. Afterwards only perpendicular turns are accepted, which rules out
    both reversing onto the neck and re-requesting the current axis.
    """

    def propose(self, current, requested, started):
        """Return a Decision for an accepted heading, or None when rejected."""
        if requested not in DIRECTIONS:
            return None

        if not started:
            return Decision(requested, True)

        if current is None:
            return None

        rx, ry = requested
        cx, cy = current
        if (rx != 0 and cx == 0) or (ry != 0 and cy == 0):
            return Decision(requested, False)
        return None

    def propose_for(self, requested, state):
        """Arbitrate against a GameState snapshot."""
        return self.propose(state.direction, requested, state.started)
