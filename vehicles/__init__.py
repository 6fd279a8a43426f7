from vehicles.factory import VehicleModelFactory, create_vehicle_model
from vehicles.model import MaxspeedMode, VehicleModel, VehicleTraits
from vehicles.tables import (
    HighwayBasedInfo,
    LimitEntry,
    SurfaceEntry,
    VehicleModelConfigError,
    validate_tables,
)

__all__ = [
    "HighwayBasedInfo",
    "LimitEntry",
    "MaxspeedMode",
    "SurfaceEntry",
    "VehicleModel",
    "VehicleModelConfigError",
    "VehicleModelFactory",
    "VehicleTraits",
    "create_vehicle_model",
    "validate_tables",
]
