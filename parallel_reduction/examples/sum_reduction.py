# SPDX-FileCopyrightText: 2020 - 2024 Intel Corporation
#
# SPDX-License-Identifier: Apache-2.0

"""
Demonstrates how a host program sums a whole array with the reduction
kernels. Each launch reduces every work-group to one partial sum, and the
partial sums are fed back into the next launch until a single value remains.

The host probes the device's lockstep width once, picks the work-group size
for every pass and chooses which kernel to run:

- BARRIER: group barriers, maximum size work-groups;
- SIMD: no barriers, work-groups limited to the lockstep width;
- HYBRID: barriers until the active work fits in one sub-group;
- POINTER_JUMPING: group barriers over a linked list of scratch slots.

``measure_times`` compares every mode against a sequential sum on the host.
"""

import time
from enum import Enum

import numpy as np

from parallel_reduction import kernel_api as kapi
from parallel_reduction.kernels import (
    get_simd_width,
    reduce_barrier,
    reduce_hybrid,
    reduce_pointer_jumping,
    reduce_simd,
)


class SyncMode(Enum):
    BARRIER = "barrier"
    SIMD = "simd"
    HYBRID = "hybrid"
    POINTER_JUMPING = "pointer-jumping"


_KERNELS = {
    SyncMode.BARRIER: reduce_barrier,
    SyncMode.SIMD: reduce_simd,
    SyncMode.HYBRID: reduce_hybrid,
    SyncMode.POINTER_JUMPING: reduce_pointer_jumping,
}


def closest_power_of_two(x):
    """Rounds ``x`` up to the nearest power of two."""
    return 1 << (x - 1).bit_length()


def query_simd_width(device):
    group_size = device.max_work_group_size
    out = np.zeros(1, dtype=np.uint32)
    kapi.call_kernel(
        get_simd_width, kapi.NdRange(group_size, group_size), out, device=device
    )
    return int(out[0])


def sum_reduce(data, sync_mode=SyncMode.HYBRID, device=None):
    """Sums ``data`` by launching the ``sync_mode`` kernel until one value
    remains.

    If the input does not fill the last work-group, that work-group is still
    launched at full size and the kernel ignores the elements past the end.
    """
    if device is None:
        device = kapi.get_default_device()
    if len(data) == 0:
        return 0.0

    kernel = _KERNELS[sync_mode]
    max_group_size = closest_power_of_two(device.max_work_group_size + 1) >> 1
    if sync_mode is SyncMode.SIMD:
        max_group_size = min(max_group_size, query_simd_width(device))

    values = np.asarray(data, dtype=np.float64)
    input_length = len(values)
    while True:
        group_size = min(input_length, max_group_size)
        num_groups = (input_length + group_size - 1) // group_size
        if num_groups == 1:
            group_size = closest_power_of_two(group_size)

        results = np.empty(num_groups, dtype=np.float64)
        local_args = [kapi.LocalAccessor(group_size, np.float64)]
        if sync_mode is SyncMode.POINTER_JUMPING:
            local_args.append(kapi.LocalAccessor(group_size, np.int32))

        kapi.call_kernel(
            kernel,
            kapi.NdRange(num_groups * group_size, group_size),
            values,
            input_length,
            *local_args,
            results,
            device=device,
        )

        if num_groups == 1:
            return float(results[0])
        values, input_length = results, num_groups


def cpu_sum(data):
    """Sequentially adds ``data`` on the host."""
    result = 0.0
    for value in data:
        result += value
    return result


def measure_times(size, number_of_runs, device=None, rng=None):
    """Sums ``number_of_runs`` random arrays of ``size`` doubles in every
    mode and on the host, checks the results agree and prints the average
    time of each.

    Returns:
        dict: Average seconds per run, keyed by ``SyncMode`` and ``"cpu"``.
    """
    if rng is None:
        rng = np.random.default_rng()
    total_times = dict.fromkeys([*SyncMode, "cpu"], 0.0)

    for _ in range(number_of_runs):
        data = rng.random(size) - 0.5

        start = time.perf_counter()
        expected = cpu_sum(data)
        total_times["cpu"] += time.perf_counter() - start

        for sync_mode in SyncMode:
            start = time.perf_counter()
            actual = sum_reduce(data, sync_mode, device)
            total_times[sync_mode] += time.perf_counter() - start

            if abs(actual - expected) > 1e-7:
                raise RuntimeError(
                    f"wrong result in {sync_mode.name} mode for {size} "
                    f"elements: expected {expected}, got {actual}"
                )

    average_times = {
        key: total / number_of_runs for key, total in total_times.items()
    }
    print(f"{size} elements, {number_of_runs} runs:")
    for key, seconds in average_times.items():
        name = key.name if isinstance(key, SyncMode) else key
        print(f"{name:>15}: {seconds:.6f}s")
    return average_times


def test_sum_reduce():
    N = 5000
    device = kapi.Device(max_work_group_size=64, sub_group_size=16)
    rng = np.random.default_rng(7)
    data = rng.random(N) - 0.5

    start = time.perf_counter()
    expected = cpu_sum(data)
    elapsed = time.perf_counter() - start
    print("SIMD width:", query_simd_width(device))
    print(f"{'cpu':>15}: {expected} ({elapsed:.3f}s)")

    for sync_mode in SyncMode:
        start = time.perf_counter()
        actual = sum_reduce(data, sync_mode, device)
        elapsed = time.perf_counter() - start
        print(f"{sync_mode.name:>15}: {actual} ({elapsed:.3f}s)")

        assert np.isclose(actual, expected, rtol=0, atol=1e-9)

    print("Done...")


if __name__ == "__main__":
    test_sum_reduce()
    for size in (1024, 32 * 1024):
        measure_times(size, 3)
