# SPDX-FileCopyrightText: 2023 - 2024 Intel Corporation
#
# SPDX-License-Identifier: Apache-2.0

import numpy
import pytest

from parallel_reduction import kernel_api as kapi
from parallel_reduction.core.exceptions import BarrierDivergenceError


def _increment_then_sum(nd_item: kapi.NdItem, a):
    i = nd_item.get_global_id(0)

    a[i] += 1
    kapi.group_barrier(nd_item.get_group(), kapi.MemoryScope.DEVICE)

    if i == 0:
        for idx in range(1, a.size):
            a[0] += a[idx]


def _diverging_kernel(nd_item: kapi.NdItem, a):
    if nd_item.get_local_id(0) % 2 == 0:
        kapi.group_barrier(nd_item.get_group())
    a[nd_item.get_global_id(0)] = 1


@pytest.mark.parametrize("sub_group_size", [1, 4, 16])
def test_group_barrier(sub_group_size):
    """Every work-item reaches the barrier before any continues past it, no
    matter how the work-group is split into sub-groups."""
    N = 16
    a = numpy.ones(N, dtype=numpy.int32)
    device = kapi.Device(max_work_group_size=N, sub_group_size=sub_group_size)

    kapi.call_kernel(
        _increment_then_sum, kapi.NdRange((N,), (N,)), a, device=device
    )

    assert a[0] == N * 2


def test_group_barrier_in_loop():
    def _kernel(nd_item: kapi.NdItem, a, slm):
        i = nd_item.get_local_id(0)
        n = nd_item.get_local_range(0)
        slm[i] = i
        for _ in range(3):
            kapi.group_barrier(nd_item.get_group())
            value = slm[(i + 1) % n]
            kapi.group_barrier(nd_item.get_group())
            slm[i] = value
        kapi.group_barrier(nd_item.get_group())
        a[nd_item.get_global_id(0)] = slm[i]

    a = numpy.empty(8, dtype=numpy.int64)
    slm = kapi.LocalAccessor(8, numpy.int64)
    device = kapi.Device(max_work_group_size=8, sub_group_size=2)

    kapi.call_kernel(_kernel, kapi.NdRange(8, 8), a, slm, device=device)

    assert numpy.array_equal(a, (numpy.arange(8) + 3) % 8)


def test_group_barrier_divergence_is_detected():
    a = numpy.zeros(8)

    with pytest.raises(BarrierDivergenceError):
        kapi.call_kernel(_diverging_kernel, kapi.NdRange(8, 8), a)


def test_group_barrier_rejects_sub_group_scope():
    def _kernel(nd_item: kapi.NdItem):
        kapi.group_barrier(nd_item.get_group(), kapi.MemoryScope.SUB_GROUP)

    with pytest.raises(ValueError):
        kapi.call_kernel(_kernel, kapi.NdRange(4, 4))


def test_group_barrier_requires_group():
    def _kernel(nd_item: kapi.NdItem):
        kapi.group_barrier(nd_item)

    with pytest.raises(TypeError):
        kapi.call_kernel(_kernel, kapi.NdRange(4, 4))


def test_group_barrier_outside_kernel():
    group = kapi.Group(kapi.Range(4), kapi.Range(4), kapi.Range(1), [0])

    with pytest.raises(NotImplementedError):
        kapi.group_barrier(group)
