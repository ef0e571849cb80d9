"""Pure entry formatting - no I/O dependencies."""

from dataclasses import dataclass


def triangular(n: int) -> int:
    """Sum of a descending rep ladder from n down to 1."""
    return n * (n + 1) // 2


@dataclass(frozen=True)
class SetEntry:
    """Straight sets: fixed reps for a fixed number of sets."""

    exercise: str
    sets: int
    reps: int
    weight: int
    rir: int

    tag = "#set"

    def describe(self) -> str:
        return f"{self.exercise}: {self.sets}x{self.reps} [{self.weight}lbs] ({self.rir} RIR)"

    def to_line(self) -> str:
        return f"{self.tag} {self.describe()}"


@dataclass(frozen=True)
class MaxEntry:
    """A one-rep max."""

    exercise: str
    weight: int

    tag = "#max"

    def describe(self) -> str:
        return f"{self.exercise}: [{self.weight}lbs]"

    def to_line(self) -> str:
        return f"{self.tag} {self.describe()}"


@dataclass(frozen=True)
class MyoEntry:
    """Myo-rep match sets: rest-pause until the target reps are reached."""

    exercise: str
    sets: int
    reps: int
    rests: int
    weight: int

    tag = "#myo"

    def describe(self) -> str:
        return f"{self.exercise}: {self.sets}x{self.reps} [{self.weight}lbs] ({self.rests} rests)"

    def to_line(self) -> str:
        return f"{self.tag} {self.describe()}"


@dataclass(frozen=True)
class DownEntry:
    """
    A down set.

    Start at starting_reps and drop one rep every set until a single rep.
    The logged total is the triangular number of starting_reps.
    """

    exercise: str
    starting_reps: int
    weight: int

    tag = "#down"

    @property
    def total_reps(self) -> int:
        return triangular(self.starting_reps)

    def describe(self) -> str:
        return f"{self.exercise}: {self.total_reps} => {self.starting_reps} [{self.weight}lbs]"

    def to_line(self) -> str:
        return f"{self.tag} {self.describe()}"


Entry = SetEntry | MaxEntry | MyoEntry | DownEntry
