"""
PySATL ProbDist
===============

Unit tests for the distribution framework, its numeric primitives and the
built-in families.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
