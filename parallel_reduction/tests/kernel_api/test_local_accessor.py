# SPDX-FileCopyrightText: 2024 Intel Corporation
#
# SPDX-License-Identifier: Apache-2.0

import numpy
import pytest

from parallel_reduction import kernel_api as kapi


def _slm_kernel(nd_item: kapi.NdItem, a, slm):
    i = nd_item.get_global_linear_id()
    j = nd_item.get_local_linear_id()

    slm[j] = 100
    a[i] = slm[j]


def _group_id_kernel(nd_item: kapi.NdItem, a, slm):
    group = nd_item.get_group()
    if group.leader:
        slm[0] = group.get_group_id(0)
    kapi.group_barrier(group)
    a[nd_item.get_global_id(0)] = slm[0]


def test_local_accessor_data_inaccessible_outside_kernel():
    la = kapi.LocalAccessor((100,), dtype=numpy.float32)

    with pytest.raises(NotImplementedError):
        print(la[0])

    with pytest.raises(NotImplementedError):
        la[0] = 10


def test_local_accessor_use_inside_kernel():
    a = numpy.empty(32)
    slm = kapi.LocalAccessor(32, dtype=a.dtype)

    # launches one work group with 32 work item. Each work item initializes its
    # position in the SLM to 100 and then writes it to the global array `a`.
    kapi.call_kernel(_slm_kernel, kapi.NdRange((32,), (32,)), a, slm)

    assert numpy.all(a == 100)


def test_local_accessor_is_private_to_each_work_group():
    a = numpy.empty(32, dtype=numpy.int64)
    slm = kapi.LocalAccessor(1, dtype=numpy.int64)

    kapi.call_kernel(_group_id_kernel, kapi.NdRange((32,), (8,)), a, slm)

    assert numpy.array_equal(a, numpy.repeat(numpy.arange(4), 8))


def test_local_accessor_usage_not_allowed_with_range_kernel():
    a = numpy.empty(32)
    slm = kapi.LocalAccessor(32, dtype=a.dtype)

    with pytest.raises(TypeError):
        kapi.call_kernel(_slm_kernel, kapi.Range(32), a, slm)


@pytest.mark.parametrize("shape", [0, -4, (4, 0), (2, 2, 2, 2), "16"])
def test_local_accessor_rejects_bad_shape(shape):
    with pytest.raises(TypeError):
        kapi.LocalAccessor(shape, dtype=numpy.float64)


def test_local_accessor_rejects_unsupported_dtype():
    with pytest.raises(TypeError):
        kapi.LocalAccessor(16, dtype=numpy.complex128)


def test_local_accessor_properties():
    la = kapi.LocalAccessor((4, 2), dtype=numpy.float64)

    assert la.shape == (4, 2)
    assert la.dtype == numpy.float64
