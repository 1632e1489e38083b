"""Materials take-off: categorized bills of materials from a design."""

from .calculator import calculate_materials, category_functions
from .garage import gross_wall_area, net_wall_area
from .kitchen import countertop_area
from .models import BillOfMaterials, MaterialLineItem

__all__ = [
    "BillOfMaterials",
    "MaterialLineItem",
    "calculate_materials",
    "category_functions",
    "countertop_area",
    "gross_wall_area",
    "net_wall_area",
]
