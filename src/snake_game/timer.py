# timer.py
from dataclasses import dataclass, field


@dataclass
class Timer:
    """
    Countdown advanced by elapsed milliseconds.

    - `just_finished` is True only on the tick the elapsed time reaches the duration.
    - A repeating timer rearms right away, keeping the overshoot.
    - A one-shot timer stays `finished` once it has expired.
    """
    duration_ms: float
    repeating: bool = False
    elapsed_ms: float = field(default=0.0, init=False)
    finished: bool = field(default=False, init=False)
    just_finished: bool = field(default=False, init=False)

    def __post_init__(self):
        if self.duration_ms <= 0:
            raise ValueError(f"Timer duration must be positive, got {self.duration_ms}")

    def tick(self, delta_ms: float) -> "Timer":
        was_finished = self.elapsed_ms >= self.duration_ms
        if not was_finished:
            self.elapsed_ms += delta_ms

        self.finished = self.elapsed_ms >= self.duration_ms
        self.just_finished = self.finished and not was_finished

        if self.repeating and self.finished:
            # fire at most once per tick, carry the remainder into the next period
            self.elapsed_ms %= self.duration_ms
        return self

    @property
    def remaining_ms(self) -> float:
        return max(self.duration_ms - self.elapsed_ms, 0.0)

    def reset(self) -> None:
        self.elapsed_ms = 0.0
        self.finished = False
        self.just_finished = False
