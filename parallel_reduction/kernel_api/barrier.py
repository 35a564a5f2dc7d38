# SPDX-FileCopyrightText: 2023 - 2024 Intel Corporation
#
# SPDX-License-Identifier: Apache-2.0

"""Python functions that simulate SYCL's group_barrier function.
"""

from . import simulator_impl
from .index_space_ids import Group
from .memory_enums import MemoryScope


def group_barrier(
    group: Group, fence_scope: MemoryScope = MemoryScope.WORK_GROUP
):
    """Performs a barrier operation across all work-items in a work-group.

    The function is equivalent to the ``sycl::group_barrier`` function. It
    synchronizes work within a group of work-items. All the work-items
    of the group must execute the barrier call before any work-item
    continues execution beyond the barrier.

    The barrier also acts as a memory fence: every local memory write issued
    by any work-item of the group before the barrier is visible to every
    work-item of the group after it.

    Args:
        group (Group): Indicates the work-group inside which the barrier is to
            be executed.
        fence_scope (MemoryScope) (optional): scope of any memory
            consistency operations that are performed by the barrier.
    Raises:
        TypeError: If ``group`` is not a Group.
        ValueError: If ``fence_scope`` is narrower than a work-group.
        NotImplementedError: When called outside an NdRange kernel.
    """
    if not isinstance(group, Group):
        raise TypeError("group_barrier expects the Group of an NdItem")
    if MemoryScope(fence_scope) < MemoryScope.WORK_GROUP:
        raise ValueError(
            f"A group barrier cannot use the {MemoryScope(fence_scope).name} "
            "fence scope"
        )

    simulator_impl.barrier()
