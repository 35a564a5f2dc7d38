# SPDX-FileCopyrightText: 2020 - 2024 Intel Corporation
#
# SPDX-License-Identifier: Apache-2.0

"""
parallel_reduction sums arrays of doubles with work-group tree reduction
kernels, using either group barriers, lockstep sub-group execution, or a
hybrid of both, on a simulated data-parallel device.
"""

from . import kernel_api
from .kernel_api import Device, NdRange, Range, call_kernel
from .kernels import (
    get_simd_width,
    reduce_barrier,
    reduce_hybrid,
    reduce_pointer_jumping,
    reduce_simd,
)

__version__ = "0.1.0"

__all__ = [
    "call_kernel",
    "get_simd_width",
    "kernel_api",
    "reduce_barrier",
    "reduce_hybrid",
    "reduce_pointer_jumping",
    "reduce_simd",
    "Device",
    "NdRange",
    "Range",
]
