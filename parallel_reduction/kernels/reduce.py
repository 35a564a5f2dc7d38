# SPDX-FileCopyrightText: 2024 Intel Corporation
#
# SPDX-License-Identifier: Apache-2.0

"""Tree reduction kernels that sum an array of doubles into one partial sum
per work-group.

The halving kernels share the signature
``(nd_item, data, input_length, scratch, results)``, and
``reduce_pointer_jumping`` additionally takes an int32 ``next_slot``
``LocalAccessor`` before ``results``:

- ``data``: the input array, only its first ``input_length`` elements are
  summed;
- ``scratch``: a ``LocalAccessor`` holding at least one float64 per
  work-item;
- ``results``: one slot per work-group, the work-group with id ``g`` stores
  its sum in ``results[g]``.

Summing a whole array takes repeated launches: the ``results`` of one launch
are the ``data`` of the next one, until a single work-group remains. The
kernels do not validate their launch configuration. The halving kernels need a
power of two work-group size, and ``reduce_simd`` additionally requires it to
not exceed the width reported by ``get_simd_width``.
"""

from functools import partial

from parallel_reduction import kernel_api as kapi


def _accumulate(scratch, source, target):
    scratch[target] += scratch[source]


def _load_input(nd_item, data, input_length, scratch):
    global_id = nd_item.get_global_id(0)
    if global_id < input_length:
        scratch[nd_item.get_local_id(0)] = data[global_id]


def _halving_reduce(nd_item, input_length, scratch, active, stop=0, sync=None):
    """Folds the upper half of the ``2 * active`` leading scratch slots onto
    the lower half, halving ``active`` after every round while it is greater
    than ``stop``.

    ``sync`` is called by every work-item after every round. Passing ``None``
    leaves the ordering of the rounds to lockstep execution, which is only
    correct on a volatile view of the scratch and when all participating
    work-items belong to one sub-group.

    Returns:
        int: The active count the loop stopped at.
    """
    local_id = nd_item.get_local_id(0)
    global_id = nd_item.get_global_id(0)
    while active > stop:
        # slots past input_length were never loaded
        if local_id < active and global_id + active < input_length:
            _accumulate(scratch, local_id + active, local_id)
        if sync is not None:
            sync()
        active >>= 1
    return active


def get_simd_width(nd_item: kapi.NdItem, out):
    """Stores the lockstep width of the device in ``out[0]``.

    Launch as a single work-group of the maximum size the device supports,
    a smaller work-group reports at most its own size.
    """
    if nd_item.get_local_id(0) == 0:
        out[0] = nd_item.get_sub_group().get_max_local_range()


def reduce_barrier(nd_item: kapi.NdItem, data, input_length, scratch, results):
    """Reduces each work-group with a group barrier after every round.

    Correct for any power of two work-group size.
    """
    group = nd_item.get_group()

    _load_input(nd_item, data, input_length, scratch)
    kapi.group_barrier(group)

    _halving_reduce(
        nd_item,
        input_length,
        scratch,
        nd_item.get_local_range(0) >> 1,
        sync=partial(kapi.group_barrier, group),
    )

    if nd_item.get_local_id(0) == 0:
        results[group.get_group_id(0)] = scratch[0]


def reduce_simd(nd_item: kapi.NdItem, data, input_length, scratch, results):
    """Reduces each work-group without any barrier, relying on the whole
    work-group executing in lockstep.

    The work-group size must not exceed the lockstep width, otherwise the
    result is undefined.
    """
    vscratch = kapi.volatile(scratch)

    _load_input(nd_item, data, input_length, vscratch)
    _halving_reduce(
        nd_item, input_length, vscratch, nd_item.get_local_range(0) >> 1
    )

    # all lanes reach this point in the same step and store the same value
    results[nd_item.get_group().get_group_id(0)] = vscratch[0]


def reduce_hybrid(nd_item: kapi.NdItem, data, input_length, scratch, results):
    """Reduces each work-group with group barriers until the remaining work
    fits in one sub-group, then finishes in lockstep inside that sub-group.

    Correct for any power of two work-group size.
    """
    group = nd_item.get_group()
    local_id = nd_item.get_local_id(0)

    _load_input(nd_item, data, input_length, scratch)
    kapi.group_barrier(group)

    simd_width = nd_item.get_sub_group().get_max_local_range()
    active = _halving_reduce(
        nd_item,
        input_length,
        scratch,
        nd_item.get_local_range(0) >> 1,
        stop=simd_width,
        sync=partial(kapi.group_barrier, group),
    )

    if local_id >= simd_width:
        return

    vscratch = kapi.volatile(scratch)
    _halving_reduce(nd_item, input_length, vscratch, active)

    if local_id == 0:
        results[group.get_group_id(0)] = vscratch[0]


def reduce_pointer_jumping(
    nd_item: kapi.NdItem, data, input_length, scratch, next_slot, results
):
    """Reduces each work-group by pointer jumping over a linked list of
    scratch slots, with a group barrier after every round.

    ``next_slot`` is a ``LocalAccessor`` holding one int32 per work-item.
    ``next_slot[i]`` points at the next slot not yet accumulated into slot
    ``i``; a pointer at or past the work-group size marks the end of the
    list. Work-item ``i`` stays active while the low bits of ``i`` shifted
    out so far are all zero, so in every round the slot it reads from
    belongs to an idle work-item.

    Correct for any work-group size.
    """
    group = nd_item.get_group()
    group_size = nd_item.get_local_range(0)
    local_id = nd_item.get_local_id(0)
    global_id = nd_item.get_global_id(0)

    if global_id < input_length - 1:
        next_slot[local_id] = local_id + 1
        scratch[local_id] = data[global_id]
    else:
        next_slot[local_id] = group_size
        if global_id == input_length - 1:
            scratch[local_id] = data[global_id]
    kapi.group_barrier(group)

    activity = local_id
    while True:
        # local id 0 rewrites next_slot[0] inside the round
        done = next_slot[0] >= group_size
        kapi.group_barrier(group)
        if done:
            break

        source = next_slot[local_id]
        if not activity & 1 and source < group_size:
            _accumulate(scratch, source, local_id)
            next_slot[local_id] = next_slot[source]
            activity >>= 1
        kapi.group_barrier(group)

    if local_id == 0:
        results[group.get_group_id(0)] = scratch[0]
