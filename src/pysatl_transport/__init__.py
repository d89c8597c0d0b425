"""
PySATL Transport
================

One-dimensional distributions on the unit interval, a Monte-Carlo estimator
of the p-Wasserstein distance between them, and density-space /
quantile-space interpolation between pairs of distributions.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .config import *
from .config import __all__ as _config_all
from .distributions import *
from .distributions import __all__ as _distr_all
from .errors import *
from .errors import __all__ as _errors_all
from .io import *
from .io import __all__ as _io_all
from .stats import *
from .stats import __all__ as _stats_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-transport")
__all__ = [
    "__version__",
    *_config_all,
    *_distr_all,
    *_errors_all,
    *_io_all,
    *_stats_all,
    *_types_all,
]

del _config_all
del _distr_all
del _errors_all
del _io_all
del _stats_all
del _types_all
