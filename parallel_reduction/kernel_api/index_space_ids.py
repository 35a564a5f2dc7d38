# SPDX-FileCopyrightText: 2024 Intel Corporation
#
# SPDX-License-Identifier: Apache-2.0

"""Implements mock Python classes to represent ``sycl::item``,
``sycl::nd_item``, ``sycl::group`` and ``sycl::sub_group`` for kernel
functions executed by the kernel_api simulator.
"""

from .ranges import Range


class Group:
    # pylint: disable=line-too-long
    """Analogue to the :sycl_group:`sycl::group <>` class.

    Represents a particular work-group within a parallel execution and
    provides API to extract various properties of the work-group. An instance
    of the class is not user-constructible. Users should use
    :func:`parallel_reduction.kernel_api.NdItem.get_group` to access the Group
    to which a work-item belongs.
    """

    def __init__(
        self,
        global_range: Range,
        local_range: Range,
        group_range: Range,
        index: list,
    ):
        self._global_range = global_range
        self._local_range = local_range
        self._group_range = group_range
        self._index = index
        self._leader = False

    def get_group_id(self, dim):
        """Returns a specific coordinate of the multi-dimensional index of a
        group.

        Args:
            dim (int): The dimension for which the group index is returned.
        Returns:
            int: The coordinate for the ``dim`` dimension of the group's
            index within an nd-range.
        Raises:
            ValueError: If ``dim`` is not a dimension of the group index.
        """
        if dim > len(self._index) - 1:
            raise ValueError(
                "Dimension value is out of bounds for the group index"
            )
        return self._index[dim]

    def get_group_range(self, dim):
        """Returns the number of work-groups in the given dimension."""
        return self._group_range[dim]

    def get_local_range(self, dim):
        """Returns the number of work-items of the work-group in the given
        dimension."""
        return self._local_range[dim]

    @property
    def leader(self):
        """Return true if the caller work-item is the leader of the work-group.

        The leader of the work-group is guaranteed to be the work-item with a
        local id of 0.
        """
        return self._leader

    @leader.setter
    def leader(self, is_leader):
        self._leader = is_leader

    @property
    def dimensions(self) -> int:
        """Returns the dimensionality of the range to which the work-group
        belongs."""
        return self._global_range.ndim


class SubGroup:
    """Analogue to the ``sycl::sub_group`` class.

    A sub-group is a set of consecutive work-items of a work-group that the
    device executes in lockstep. Sub-groups are always one-dimensional. The
    last sub-group of a work-group may be smaller than the others when the
    work-group size is not a multiple of the sub-group size.
    """

    def __init__(
        self,
        group_id: int,
        local_id: int,
        local_range: int,
        max_local_range: int,
        group_range: int,
    ):
        self._group_id = group_id
        self._local_id = local_id
        self._local_range = local_range
        self._max_local_range = max_local_range
        self._group_range = group_range

    def get_group_id(self):
        """Returns the index of the sub-group within its work-group."""
        return self._group_id

    def get_local_id(self):
        """Returns the index of the calling work-item within its sub-group."""
        return self._local_id

    def get_local_range(self):
        """Returns the number of work-items in this sub-group."""
        return self._local_range

    def get_max_local_range(self):
        """Returns the largest number of work-items any sub-group of the
        work-group contains, i.e. the lockstep width the device uses for the
        launched work-group size."""
        return self._max_local_range

    def get_group_range(self):
        """Returns the number of sub-groups in the work-group."""
        return self._group_range

    @property
    def leader(self):
        return self._local_id == 0


class Item:
    """Analogue to the :sycl_item:`sycl::item <>` class.

    Identifies the work-item in a parallel execution of a kernel launched with
    the :class:`.Range` index-space class.
    """

    def __init__(self, extent: Range, index: list):
        self._extent = extent
        self._index = index

    def get_linear_id(self):
        """Returns the row-major linearized id of the work item."""
        linear_id = 0
        for dim in range(self.dimensions):
            linear_id = linear_id * self.get_range(dim) + self.get_id(dim)
        return linear_id

    def get_id(self, idx):
        return self._index[idx]

    def get_range(self, idx):
        return self._extent[idx]

    @property
    def dimensions(self) -> int:
        return self._extent.ndim


class NdItem:
    """Analogue to the :sycl_nditem:`sycl::nd_item <>` class.

    Identifies an instance of the function object executing at each point in an
    :class:`.NdRange`.
    """

    def __init__(
        self,
        global_item: Item,
        local_item: Item,
        group: Group,
        sub_group: SubGroup,
    ):
        self._global_item = global_item
        self._local_item = local_item
        self._group = group
        self._sub_group = sub_group
        if self.get_local_linear_id() == 0:
            self._group.leader = True

    def get_global_id(self, idx):
        return self._global_item.get_id(idx)

    def get_global_linear_id(self):
        return self._global_item.get_linear_id()

    def get_local_id(self, idx):
        return self._local_item.get_id(idx)

    def get_local_linear_id(self):
        return self._local_item.get_linear_id()

    def get_local_range(self, idx):
        return self._local_item.get_range(idx)

    def get_group(self):
        """Returns the work-group the work-item belongs to."""
        return self._group

    def get_sub_group(self):
        """Returns the sub-group the work-item belongs to."""
        return self._sub_group

    @property
    def dimensions(self) -> int:
        return self._global_item.dimensions
