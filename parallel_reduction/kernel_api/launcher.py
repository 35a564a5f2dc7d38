# SPDX-FileCopyrightText: 2024 Intel Corporation
#
# SPDX-License-Identifier: Apache-2.0

"""Implementation of the simulated kernel launcher functions
"""

import logging
from functools import partial
from inspect import Parameter, signature
from itertools import product
from typing import Union

from parallel_reduction.core.exceptions import (
    InvalidKernelLaunchArgsError,
    UnsupportedWorkItemSizeError,
)

from . import simulator_impl
from .device import Device, get_default_device
from .index_space_ids import Group, Item, NdItem, SubGroup
from .local_accessor import LocalAccessor, _LocalAccessorMock
from .ranges import NdRange, Range


def _kernel_name(kernel_fn):
    return getattr(kernel_fn, "__name__", repr(kernel_fn))


def _check_num_kernel_args(kernel_fn, kernel_args):
    """Verifies that the kernel takes an index-space id followed by exactly
    ``len(kernel_args)`` arguments."""
    params = signature(kernel_fn).parameters.values()
    if any(p.kind == Parameter.VAR_POSITIONAL for p in params):
        return
    expected = len(params) - 1
    if expected != len(kernel_args):
        raise InvalidKernelLaunchArgsError(
            kernel_name=_kernel_name(kernel_fn),
            expected=expected,
            provided=len(kernel_args),
        )


def _range_kernel_launcher(kernel_fn, index_range, *kernel_args):
    """Executes a range kernel.

    Converts the range into a set of index tuple that represent an element in
    the iteration domain over which the kernel will be executed. Then the
    kernel is called sequentially over that set of indices after each index
    value is used to construct an Item object.

    Raises:
        TypeError: If a LocalAccessor is passed as a kernel argument.
    """

    for karg in kernel_args:
        if isinstance(karg, LocalAccessor):
            raise TypeError(
                "LocalAccessor arguments are only supported for NdRange kernels"
            )

    range_sets = [range(ir) for ir in index_range]
    for idx in product(*range_sets):
        kernel_fn(Item(extent=index_range, index=idx), *kernel_args)


def _ndrange_kernel_launcher(kernel_fn, index_range, device, *kernel_args):
    """Executes an nd-range kernel one work-group after another.

    Each work-group gets fresh local memory for every LocalAccessor argument,
    and its work-items are scheduled by
    :func:`parallel_reduction.kernel_api.simulator_impl.execute_work_group`.

    Raises:
        UnsupportedWorkItemSizeError: If the work-group is larger than the
            device supports.
    """
    kernel_name = _kernel_name(kernel_fn)
    global_range = index_range.global_range
    local_range = index_range.local_range
    group_range = index_range.get_group_range()

    wg_size = local_range.size()
    if wg_size > device.max_work_group_size:
        raise UnsupportedWorkItemSizeError(
            kernel_name=kernel_name,
            requested_work_items=wg_size,
            supported_work_items=device.max_work_group_size,
        )

    sg_size = min(device.sub_group_size, wg_size)
    num_sub_groups = (wg_size + sg_size - 1) // sg_size

    logging.debug(
        "launching kernel %s over %s on %s with sub-group size %d",
        kernel_name,
        index_range,
        device.name,
        sg_size,
    )

    local_index_tuples = list(product(*(range(lr) for lr in local_range)))

    # Loop over the groups (parallel loop)
    for gidx in product(*(range(gr) for gr in group_range)):
        group_args = [
            _LocalAccessorMock(karg) if isinstance(karg, LocalAccessor) else karg
            for karg in kernel_args
        ]
        state = simulator_impl.WorkGroupState(kernel_name, gidx, sg_size)

        for local_linear_id, lidx in enumerate(local_index_tuples):
            global_id = [
                g * lr + li for g, lr, li in zip(gidx, local_range, lidx)
            ]
            sg_id, sg_local_id = divmod(local_linear_id, sg_size)
            nd_item = NdItem(
                global_item=Item(extent=global_range, index=global_id),
                local_item=Item(extent=local_range, index=lidx),
                group=Group(global_range, local_range, group_range, gidx),
                sub_group=SubGroup(
                    group_id=sg_id,
                    local_id=sg_local_id,
                    local_range=min(sg_size, wg_size - sg_id * sg_size),
                    max_local_range=sg_size,
                    group_range=num_sub_groups,
                ),
            )
            state.add_work_item(partial(kernel_fn, nd_item, *group_args))

        simulator_impl.execute_work_group(state)


def call_kernel(
    kernel_fn,
    index_range: Union[Range, NdRange],
    *kernel_args,
    device: Device = None,
):
    """Simulates the launching of a kernel function over either a Range or
    NdRange.

    The first parameter of ``kernel_fn`` receives an :class:`.Item` (for a
    Range) or an :class:`.NdItem` (for an NdRange), the remaining parameters
    receive ``kernel_args``.

    Args:
        kernel_fn : A callable function object written using
            :py:mod:`parallel_reduction.kernel_api`.
        index_range (Range|NdRange): An instance of a Range or an NdRange object
        kernel_args (List): The expanded list of actual arguments with which to
            launch the kernel execution.
        device (Device, optional): The simulated device to execute on.
            Defaults to :func:`.get_default_device`.

    Raises:
        ValueError: If the first positional argument is not callable.
        ValueError: If the second positional argument is not a Range or an
            Ndrange object
        InvalidKernelLaunchArgsError: If the number of kernel arguments does
            not match the kernel function.
    """
    if not callable(kernel_fn):
        raise ValueError(
            "Expected the first positional argument to be a function object"
        )
    if not isinstance(index_range, (Range, NdRange)):
        raise ValueError(
            "Expected second positional argument to be Range or NdRange object"
        )

    _check_num_kernel_args(kernel_fn, kernel_args)

    if isinstance(index_range, Range):
        _range_kernel_launcher(kernel_fn, index_range, *kernel_args)
    else:
        if device is None:
            device = get_default_device()
        _ndrange_kernel_launcher(kernel_fn, index_range, device, *kernel_args)
