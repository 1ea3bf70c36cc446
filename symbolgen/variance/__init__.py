"""Closed sets of themes, grades and weights, and the Variance built from them."""

from symbolgen.variance.grade import Grade
from symbolgen.variance.theme import IconTheme, to_icon_theme
from symbolgen.variance.variance import Variance
from symbolgen.variance.weight import Weight

__all__ = ["Grade", "IconTheme", "Variance", "Weight", "to_icon_theme"]
