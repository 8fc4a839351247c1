from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class Course:
    number: str
    title: str
    prerequisites: Tuple[str, ...] = field(default_factory=tuple)

    def __str__(self):
        return (
            f"Number: {self.number}\n"
            f"Title: {self.title}\n"
            f"Prerequisites: {', '.join(self.prerequisites)}"
        )
