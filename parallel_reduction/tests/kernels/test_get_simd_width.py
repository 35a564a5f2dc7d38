# SPDX-FileCopyrightText: 2024 Intel Corporation
#
# SPDX-License-Identifier: Apache-2.0

import numpy as np
import pytest

from parallel_reduction import kernel_api as kapi
from parallel_reduction.kernels import get_simd_width


def _probe(device, group_size):
    out = np.zeros(1, dtype=np.uint32)
    kapi.call_kernel(
        get_simd_width, kapi.NdRange(group_size, group_size), out, device=device
    )
    return int(out[0])


def test_simd_width_with_max_work_group(device):
    width = _probe(device, device.max_work_group_size)

    assert width == device.sub_group_size
    assert width & (width - 1) == 0
    assert width <= device.max_work_group_size


@pytest.mark.parametrize("group_size", [1, 2, 4, 8, 16])
def test_simd_width_never_exceeds_group_size(device, group_size):
    width = _probe(device, group_size)

    assert width == min(group_size, device.sub_group_size)
    assert width & (width - 1) == 0


def test_simd_width_written_only_by_leader():
    out = np.full(2, 7, dtype=np.uint32)
    device = kapi.Device(max_work_group_size=16, sub_group_size=4)

    kapi.call_kernel(get_simd_width, kapi.NdRange(16, 16), out, device=device)

    assert np.array_equal(out, [4, 7])
