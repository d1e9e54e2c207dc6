from .geometry import Axis, Dimensions, Point3D, centroid
from .building import DimensionalSpec, Opening, WallSide
from .framing import (
    ElementCategory, StructuralElement, FrameModel, FrameStats, GenerationWarning,
)
from .parameters import GenerationConfig, TakeoffConfig, PricingConfig
from .context import BuildingContext, FrameLayout
from .estimate import (
    TakeoffLine, BOMLine, PricedBOM, Estimate, EstimateSnapshot,
)

__all__ = [
    "Axis", "Dimensions", "Point3D", "centroid",
    "DimensionalSpec", "Opening", "WallSide",
    "ElementCategory", "StructuralElement", "FrameModel", "FrameStats", "GenerationWarning",
    "GenerationConfig", "TakeoffConfig", "PricingConfig",
    "BuildingContext", "FrameLayout",
    "TakeoffLine", "BOMLine", "PricedBOM", "Estimate", "EstimateSnapshot",
]
