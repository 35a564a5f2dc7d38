# SPDX-FileCopyrightText: 2023 - 2024 Intel Corporation
#
# SPDX-License-Identifier: Apache-2.0

"""
The kernel_api module provides a set of Python classes and functions that are
analogous to the C++ SYCL API, together with a simulated device that executes
kernels written against them. Work-items of a work-group run cooperatively,
synchronizing either through group barriers or, inside a sub-group, through
lockstep execution on volatile local memory.
"""

from .barrier import group_barrier
from .device import Device, get_default_device, set_default_device
from .index_space_ids import Group, Item, NdItem, SubGroup
from .launcher import call_kernel
from .local_accessor import LocalAccessor, volatile
from .memory_enums import MemoryScope
from .ranges import NdRange, Range

__all__ = [
    "call_kernel",
    "get_default_device",
    "group_barrier",
    "set_default_device",
    "volatile",
    "Device",
    "Group",
    "Item",
    "LocalAccessor",
    "MemoryScope",
    "NdItem",
    "NdRange",
    "Range",
    "SubGroup",
]
