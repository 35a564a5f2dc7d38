#! /usr/bin/env python

# SPDX-FileCopyrightText: 2020 - 2024 Intel Corporation
#
# SPDX-License-Identifier: Apache-2.0

import pytest

from parallel_reduction import kernel_api as kapi

# (max_work_group_size, sub_group_size)
simulated_devices = [
    (16, 4),
    (64, 8),
    (128, 32),
]


@pytest.fixture(
    params=simulated_devices,
    ids=[f"wg{wg}-sg{sg}" for wg, sg in simulated_devices],
)
def device(request):
    max_work_group_size, sub_group_size = request.param
    return kapi.Device(
        name="simulated:gpu:test",
        max_work_group_size=max_work_group_size,
        sub_group_size=sub_group_size,
    )


@pytest.fixture
def restore_default_device():
    yield
    kapi.set_default_device(None)
