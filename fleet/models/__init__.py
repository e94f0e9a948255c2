from fleet.models.vehicle import Vehicle

__all__ = ["Vehicle"]
