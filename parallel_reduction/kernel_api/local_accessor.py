# SPDX-FileCopyrightText: 2023 - 2024 Intel Corporation
#
# SPDX-License-Identifier: Apache-2.0

"""Implements a Python analogue to SYCL's local_accessor class. The class is
passed to a kernel function for work-group local memory allocation.

Inside a kernel, local memory can additionally be viewed through
:func:`volatile`, the analogue of an OpenCL ``__local volatile`` pointer.
"""
import numpy

from . import simulator_impl

_SUPPORTED_DTYPES = [
    numpy.float32,
    numpy.float64,
    numpy.int32,
    numpy.int64,
    numpy.int16,
    numpy.int8,
    numpy.uint32,
    numpy.uint64,
    numpy.uint16,
    numpy.uint8,
]


class LocalAccessor:
    """Analogue to the :sycl_local_accessor:`sycl::local_accessor <>` class.

    The class acts as a proxy to allocating device local memory and
    accessing that memory from within a kernel function. Every work-group of
    a launch gets its own, uninitialized, allocation.
    """

    def __init__(self, shape, dtype) -> None:
        """Creates a new LocalAccessor instance of the given shape and dtype."""

        if isinstance(shape, (list, tuple)):
            self._shape = tuple(shape)
        else:
            self._shape = (shape,)

        if not all(isinstance(val, int) and val > 0 for val in self._shape):
            raise TypeError(
                "Argument shape must a positive integer, "
                "or a list/tuple of such integers."
            )

        # Make sure shape has a rank between (1..3)
        if len(self._shape) < 1 or len(self._shape) > 3:
            raise TypeError("LocalAccessor can only have up to 3 dimensions.")

        if dtype not in _SUPPORTED_DTYPES:
            raise TypeError(
                f"Argument dtype {dtype} is not supported. numpy.float32, "
                "numpy.float64, numpy.[u]int8, numpy.[u]int16, numpy.[u]int32, "
                "numpy.[u]int64 are the currently supported dtypes."
            )
        self._dtype = numpy.dtype(dtype)

    @property
    def shape(self):
        return self._shape

    @property
    def dtype(self):
        return self._dtype

    def __getitem__(self, idx_obj):
        raise NotImplementedError(
            "The data of a LocalAccessor object can only be accessed "
            "inside a kernel."
        )

    def __setitem__(self, idx_obj, val):
        raise NotImplementedError(
            "The data of a LocalAccessor object can only be accessed "
            "inside a kernel."
        )


class _LocalAccessorMock:
    """Mock class that is used to represent a local accessor inside a "kernel".

    A LocalAccessor represents a device-only memory allocation and has no
    data container backing it. The launcher converts every LocalAccessor
    kernel argument into a _LocalAccessorMock, backed by a numpy ndarray, once
    per work-group. Plain accesses never yield to the scheduler, so an
    unsynchronized reader may observe a value that another work-item has
    already replaced, or not yet written.
    """

    def __init__(self, local_accessor: LocalAccessor):
        self._data = numpy.empty(
            local_accessor.shape, dtype=local_accessor.dtype
        )

    def __len__(self):
        return len(self._data)

    def __getitem__(self, idx_obj):
        return self._data[idx_obj]

    def __setitem__(self, idx_obj, val):
        self._data[idx_obj] = val


class _VolatileLocalAccessorMock:
    """A view of local memory whose every load and store is a lockstep step.

    After each access the work-item lets the other work-items of its
    sub-group issue their access of the same step, so no work-item can run
    ahead of its sub-group on this memory.
    """

    def __init__(self, local_accessor: _LocalAccessorMock):
        self._data = local_accessor._data

    def __len__(self):
        return len(self._data)

    def __getitem__(self, idx_obj):
        val = self._data[idx_obj]
        simulator_impl.lockstep_step()
        return val

    def __setitem__(self, idx_obj, val):
        self._data[idx_obj] = val
        simulator_impl.lockstep_step()


def volatile(local_accessor):
    """Returns a volatile view of the local memory behind ``local_accessor``.

    The view shares its storage with ``local_accessor``. Values read through
    it are never cached across lockstep steps, which makes unsynchronized
    communication between the work-items of one sub-group well defined.

    Args:
        local_accessor: A local accessor kernel argument.

    Raises:
        NotImplementedError: If called on a LocalAccessor outside a kernel.
        TypeError: If the argument is not a local accessor.
    """
    if isinstance(local_accessor, _VolatileLocalAccessorMock):
        return local_accessor
    if isinstance(local_accessor, _LocalAccessorMock):
        return _VolatileLocalAccessorMock(local_accessor)
    if isinstance(local_accessor, LocalAccessor):
        raise NotImplementedError(
            "A volatile view of a LocalAccessor can only be created "
            "inside a kernel."
        )
    raise TypeError(
        f"Expected a local accessor, got {type(local_accessor).__name__}"
    )
