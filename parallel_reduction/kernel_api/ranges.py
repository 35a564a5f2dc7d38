# SPDX-FileCopyrightText: 2023 - 2024 Intel Corporation
#
# SPDX-License-Identifier: Apache-2.0

"""Defines types to define the range of execution of a kernel. The types are
designed along the lines of classes defined in the SYCL 2020 spec section 4.9.
"""

from collections.abc import Iterable
from functools import reduce

from parallel_reduction.core.exceptions import (
    UnmatchedNumberOfRangeDimsError,
    UnsupportedGroupWorkItemSizeError,
)


class Range(tuple):
    """Analogue to the :sycl_range:`sycl::range <>` class.

    The range describes the number of elements in each dimension of an index
    space. It can contain 1, 2, or 3 numbers, depending on the dimensionality
    of the index space it describes.
    """

    def __new__(cls, dim0, dim1=None, dim2=None):
        """Constructs a 1, 2, or 3 dimensional range.

        Args:
            dim0 (int): The range of the first dimension.
            dim1 (int, optional): The range of second dimension.
            dim2 (int, optional): The range of the third dimension.

        Raises:
            TypeError: If any of the provided dimensions is not an int.
            ValueError: If dim2 is given without dim1.
        """
        if dim2 is not None and dim1 is None:
            raise ValueError("dim1 of a Range must be set when dim2 is set.")

        _values = []
        for name, dim in (("dim0", dim0), ("dim1", dim1), ("dim2", dim2)):
            if dim is None:
                break
            if not isinstance(dim, int):
                raise TypeError(f"{name} of a Range must be an int.")
            _values.append(dim)

        return super(Range, cls).__new__(cls, tuple(_values))

    def get(self, index):
        """Returns the range of a single dimension.

        Args:
            index (int): The index of the dimension, i.e. [0,2]

        Returns:
            int: The range of the dimension indexed by `index`.
        """
        return self[index]

    def size(self):
        """Returns the number of points in the index space, i.e. the product
        of the extents of every dimension.
        """
        return reduce(lambda a, b: a * b, self, 1)

    @property
    def ndim(self) -> int:
        """Returns the rank of a Range object."""
        return len(self)


def _as_range(value, arg_name):
    if isinstance(value, Range):
        return value
    if isinstance(value, int):
        return Range(value)
    if isinstance(value, Iterable):
        return Range(*value)
    raise TypeError(
        f"Unknown argument type for NdRange {arg_name}, "
        "must be of either type Range or Iterable of int's."
    )


class NdRange:
    """Analogue to the :sycl_ndrange:`sycl::nd_range <>` class.

    The NdRange pairs a global index space with the index space of a single
    work-group. The global range must be evenly divisible by the local range
    in every dimension.
    """

    def __init__(self, global_size, local_size):
        """Constructor for NdRange class.

        Args:
            global_size (Range, int or tuple of int's): The values for
                the global_range.
            local_size (Range, int or tuple of int's): The values for
                the local_range.

        Raises:
            TypeError: If either size is neither a Range, an int nor an
                iterable of ints.
            UnmatchedNumberOfRangeDimsError: If the two ranges have different
                ranks.
            UnsupportedGroupWorkItemSizeError: If a global dimension is not a
                multiple of the corresponding local dimension.
        """
        self._global_range = _as_range(global_size, "global_size")
        self._local_range = _as_range(local_size, "local_size")

        if len(self._local_range) != len(self._global_range):
            raise UnmatchedNumberOfRangeDimsError(
                kernel_name="",
                global_ndims=len(self._global_range),
                local_ndims=len(self._local_range),
            )

        for i, (gr, lr) in enumerate(
            zip(self._global_range, self._local_range)
        ):
            if lr <= 0 or gr % lr != 0:
                raise UnsupportedGroupWorkItemSizeError(
                    kernel_name="",
                    dim=i,
                    work_groups=gr,
                    work_items=lr,
                )

    @property
    def global_range(self):
        """The `global_range` `Range` object."""
        return self._global_range

    @property
    def local_range(self):
        """The `local_range` `Range` object."""
        return self._local_range

    def get_global_range(self):
        return self._global_range

    def get_local_range(self):
        return self._local_range

    def get_group_range(self):
        """Returns a Range with the number of work-groups in each dimension."""
        return Range(
            *(gr // lr for gr, lr in zip(self._global_range, self._local_range))
        )

    def __str__(self):
        return (
            "(" + str(self._global_range) + ", " + str(self._local_range) + ")"
        )

    def __repr__(self):
        return self.__str__()

    def __eq__(self, other):
        if isinstance(other, NdRange):
            return (
                self.global_range == other.global_range
                and self.local_range == other.local_range
            )

        return False
