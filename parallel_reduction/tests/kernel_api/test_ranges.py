# SPDX-FileCopyrightText: 2024 Intel Corporation
#
# SPDX-License-Identifier: Apache-2.0

import pytest

from parallel_reduction import kernel_api as kapi
from parallel_reduction.core.exceptions import (
    UnmatchedNumberOfRangeDimsError,
    UnsupportedGroupWorkItemSizeError,
)


def test_range_size_and_ndim():
    r = kapi.Range(2, 3, 4)

    assert r.ndim == 3
    assert r.size() == 24
    assert r.get(1) == 3


def test_range_rejects_non_int():
    with pytest.raises(TypeError):
        kapi.Range(2.0)

    with pytest.raises(TypeError):
        kapi.Range(2, "3")


def test_range_rejects_dim2_without_dim1():
    with pytest.raises(ValueError):
        kapi.Range(2, dim2=3)


def test_ndrange_accepts_ints_and_tuples():
    assert kapi.NdRange(64, 16) == kapi.NdRange((64,), kapi.Range(16))


def test_ndrange_group_range():
    ndr = kapi.NdRange((32, 12), (8, 4))

    assert ndr.get_group_range() == (4, 3)


def test_ndrange_unmatched_dims():
    with pytest.raises(UnmatchedNumberOfRangeDimsError):
        kapi.NdRange((16, 16), (4,))


@pytest.mark.parametrize("global_size, local_size", [(10, 4), (16, 0)])
def test_ndrange_indivisible_global_range(global_size, local_size):
    with pytest.raises(UnsupportedGroupWorkItemSizeError):
        kapi.NdRange(global_size, local_size)


def test_ndrange_rejects_unknown_type():
    with pytest.raises(TypeError):
        kapi.NdRange(16.0, 4)
