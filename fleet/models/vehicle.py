from dataclasses import dataclass


@dataclass
class Vehicle:
    """A vehicle record as held by the store.

    ``id`` is assigned by the store on save and never changes afterwards.
    """

    id: int = 0
    brand: str = ""
    model: str = ""
    registration: str = ""
    color: str = ""
    fabrication_year: int = 0
    capacity: int = 0
    max_speed: float = 0.0
    fuel_type: str = ""
    transmission: str = ""
    weight: float = 0.0
    height: float = 0.0
    length: float = 0.0
    width: float = 0.0

    @property
    def key(self) -> tuple[str, str, int]:
        return self.brand, self.model, self.fabrication_year
