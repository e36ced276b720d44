"""
Domain Entities - the developer profile and its embedded skill ratings.

Developer is the aggregate root. Skills is a value object owned by it:
it is created, read and replaced only together with its developer and has
no identity of its own.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Tuple

# Fixed display order (labels of the radar chart)
SKILL_NAMES: Tuple[str, ...] = (
    "communicative",
    "efficient",
    "immaculate",
    "problemsolver",
    "timely",
    "tinker",
)


@dataclass(frozen=True)
class Skills:
    """
    Six numeric skill ratings.

    Invariant: all six ratings are present. There is no partial Skills.
    """

    communicative: int
    efficient: int
    immaculate: int
    problemsolver: int
    timely: int
    tinker: int

    def __post_init__(self):
        for name in SKILL_NAMES:
            rating = getattr(self, name)
            if isinstance(rating, bool) or not isinstance(rating, int):
                raise ValueError(f"Skill rating '{name}' must be an integer, got {rating!r}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Skills":
        missing = [name for name in SKILL_NAMES if name not in data]
        if missing:
            raise ValueError(f"Skills missing ratings: {', '.join(missing)}")
        return cls(**{name: data[name] for name in SKILL_NAMES})

    def to_dict(self) -> Dict[str, int]:
        return {name: getattr(self, name) for name in SKILL_NAMES}


@dataclass
class Developer:
    """
    Developer aggregate root.

    Invariants:
    1. experience_years is a non-negative integer
    2. skills is always a complete Skills value object
    3. id is assigned by the store, never by clients (None until persisted)
    """

    name: str
    position: str
    location: str
    experience_years: int
    image_url: str
    skills: Skills
    id: Optional[str] = None

    def __post_init__(self):
        if isinstance(self.skills, dict):
            self.skills = Skills.from_dict(self.skills)
        if not isinstance(self.skills, Skills):
            raise ValueError("Developer requires a complete Skills value")
        if isinstance(self.experience_years, bool) or not isinstance(self.experience_years, int):
            raise ValueError(f"experience_years must be an integer, got {self.experience_years!r}")
        if self.experience_years < 0:
            raise ValueError(f"experience_years cannot be negative: {self.experience_years}")

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["skills"] = self.skills.to_dict()
        return data

    def __repr__(self) -> str:
        return f"Developer(id={self.id}, name={self.name!r}, position={self.position!r})"
