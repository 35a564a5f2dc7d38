# SPDX-FileCopyrightText: 2024 Intel Corporation
#
# SPDX-License-Identifier: Apache-2.0

"""Sum reduction kernels for the kernel_api simulator."""

from .reduce import (
    get_simd_width,
    reduce_barrier,
    reduce_hybrid,
    reduce_pointer_jumping,
    reduce_simd,
)

__all__ = [
    "get_simd_width",
    "reduce_barrier",
    "reduce_hybrid",
    "reduce_pointer_jumping",
    "reduce_simd",
]
