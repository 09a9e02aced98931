"""Concrete host surface and frame rendering."""

from .text_view import Fold, TextView, indent_fold_range

__all__ = ["Fold", "TextView", "indent_fold_range"]
