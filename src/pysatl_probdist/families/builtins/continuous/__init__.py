"""
Built-in continuous distribution families.

This module contains implementations of continuous distributions.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_probdist.families.builtins.continuous.gamma import Gamma

__all__ = [
    "Gamma",
]
