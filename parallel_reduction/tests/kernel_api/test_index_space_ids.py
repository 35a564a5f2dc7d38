# SPDX-FileCopyrightText: 2024 Intel Corporation
#
# SPDX-License-Identifier: Apache-2.0

import numpy

from parallel_reduction import kernel_api as kapi


def _index_kernel(nd_item: kapi.NdItem, out):
    i = nd_item.get_global_id(0)
    j = nd_item.get_global_id(1)
    group = nd_item.get_group()

    out[i, j, 0] = group.get_group_range(0) * 10 + group.get_group_range(1)
    out[i, j, 1] = group.get_local_range(0) * 10 + group.get_local_range(1)
    out[i, j, 2] = group.dimensions
    out[i, j, 3] = nd_item.dimensions
    out[i, j, 4] = group.leader
    out[i, j, 5] = nd_item.get_sub_group().leader


def test_nd_item_and_group_queries_2d():
    out = numpy.zeros((4, 6, 6), dtype=numpy.int64)
    device = kapi.Device(max_work_group_size=16, sub_group_size=4)

    kapi.call_kernel(
        _index_kernel, kapi.NdRange((4, 6), (2, 3)), out, device=device
    )

    i, j = numpy.meshgrid(numpy.arange(4), numpy.arange(6), indexing="ij")
    assert numpy.all(out[:, :, 0] == 22)
    assert numpy.all(out[:, :, 1] == 23)
    assert numpy.all(out[:, :, 2] == 2)
    assert numpy.all(out[:, :, 3] == 2)
    # local ids (0, 0) lead their work-group
    group_leaders = (i % 2 == 0) & (j % 3 == 0)
    assert numpy.array_equal(out[:, :, 4], group_leaders)
    # local linear ids 0 and 4 lead the two sub-groups
    second_sub_group_leaders = (i % 2 == 1) & (j % 3 == 1)
    assert numpy.array_equal(
        out[:, :, 5], group_leaders | second_sub_group_leaders
    )
