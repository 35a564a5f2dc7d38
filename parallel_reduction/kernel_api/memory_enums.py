# SPDX-FileCopyrightText: 2023 - 2024 Intel Corporation
#
# SPDX-License-Identifier: Apache-2.0

"""Enum classes that syntactically represent the SYCL memory enum classes.
"""

from enum import IntEnum


class MemoryScope(IntEnum):
    """
    Analogue of :sycl_memory_scope:`sycl::memory_scope <>` enumeration.

    The integer values of the enums is kept consistent with the corresponding
    implementation in dpcpp.

    """

    WORK_ITEM = 0
    SUB_GROUP = 1
    WORK_GROUP = 2
    DEVICE = 3
    SYSTEM = 4
