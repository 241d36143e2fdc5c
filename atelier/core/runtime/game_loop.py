"""
game_loop.py
------------
Fixed timestep accumulator shared by the windowed loop and headless runs.

Responsibilities
----------------
- Clamp variable frame time to avoid spiral-of-death catch-up
- Convert frame time into a whole number of fixed-size ticks
- Keep the leftover fraction for the next frame
"""

from atelier.core.runtime.game_settings import Physics


class FixedTimestep:
    """Accumulator that yields fixed-size ticks from variable frame times."""

    def __init__(self, fixed_dt: float = Physics.FIXED_DT,
                 max_frame_time: float = Physics.MAX_FRAME_TIME):
        """
        Args:
            fixed_dt: Duration of one simulation tick in seconds
            max_frame_time: Upper clamp applied to each incoming frame time
        """
        self.fixed_dt = fixed_dt
        self.max_frame_time = max_frame_time
        self.accumulator = 0.0
        self.total_ticks = 0

    def advance(self, frame_time: float) -> int:
        """
        Add a frame's worth of time and return how many ticks to run.

        Args:
            frame_time: Seconds elapsed since the previous frame

        Returns:
            Number of fixed ticks due this frame
        """
        frame_time = min(max(frame_time, 0.0), self.max_frame_time)
        self.accumulator += frame_time

        ticks = 0
        while self.accumulator >= self.fixed_dt:
            self.accumulator -= self.fixed_dt
            ticks += 1

        self.total_ticks += ticks
        return ticks

    def run(self, frame_time: float, tick) -> int:
        """
        Advance and invoke tick(fixed_dt) once per due tick.

        Returns:
            Number of ticks executed
        """
        ticks = self.advance(frame_time)
        for _ in range(ticks):
            tick(self.fixed_dt)
        return ticks

    @property
    def alpha(self) -> float:
        """Interpolation fraction between the last and next tick."""
        return self.accumulator / self.fixed_dt if self.fixed_dt > 0 else 0.0

    def reset(self):
        self.accumulator = 0.0
        self.total_ticks = 0
