from bemtheme.transforms.base import Transform, apply_transforms
from bemtheme.transforms.theme import ThemeApplicationTransform

__all__ = ["Transform", "ThemeApplicationTransform", "apply_transforms"]
