from dataclasses import dataclass

@dataclass(slots=True)
class BoardCompletion:
    """Tag stored next to the ArtBoard once every cell has been filled."""
    filled_count: int
