# SPDX-FileCopyrightText: 2024 Intel Corporation
#
# SPDX-License-Identifier: Apache-2.0

"""Describes the simulated accelerator on which kernel_api kernels execute.
"""

from parallel_reduction.core import config
from parallel_reduction.core.exceptions import InvalidDeviceConfigError


def _is_power_of_two(value):
    return value > 0 and (value & (value - 1)) == 0


class Device:
    """The capabilities of a simulated data-parallel device.

    A device executes the work-items of a work-group in sub-groups of
    ``sub_group_size`` consecutive work-items. The work-items of a sub-group
    run in lockstep, i.e. every access to volatile local memory is issued by
    all of them before any of them issues its next one. Distinct sub-groups
    only synchronize through group barriers.

    Args:
        name (str): A human readable device name.
        max_work_group_size (int): The largest number of work-items the device
            accepts in a single work-group.
        sub_group_size (int): The native lockstep (SIMD) width of the device.

    Raises:
        InvalidDeviceConfigError: If a size is not positive or the sub-group
            size is not a power of two.
    """

    def __init__(
        self,
        name=None,
        max_work_group_size=None,
        sub_group_size=None,
    ) -> None:
        self._name = config.DEFAULT_DEVICE_NAME if name is None else name
        self._max_work_group_size = (
            config.DEFAULT_MAX_WORK_GROUP_SIZE
            if max_work_group_size is None
            else max_work_group_size
        )
        self._sub_group_size = (
            config.DEFAULT_SUB_GROUP_SIZE
            if sub_group_size is None
            else sub_group_size
        )

        if (
            not isinstance(self._max_work_group_size, int)
            or self._max_work_group_size <= 0
        ):
            raise InvalidDeviceConfigError(
                "max_work_group_size",
                self._max_work_group_size,
                "a positive int",
            )
        if not isinstance(self._sub_group_size, int) or not _is_power_of_two(
            self._sub_group_size
        ):
            raise InvalidDeviceConfigError(
                "sub_group_size",
                self._sub_group_size,
                "a positive power of two",
            )

    @property
    def name(self) -> str:
        return self._name

    @property
    def max_work_group_size(self) -> int:
        return self._max_work_group_size

    @property
    def sub_group_size(self) -> int:
        """The number of work-items executed in lockstep."""
        return self._sub_group_size

    def __repr__(self):
        return (
            f"Device(name={self._name!r}, "
            f"max_work_group_size={self._max_work_group_size}, "
            f"sub_group_size={self._sub_group_size})"
        )


_default_device = None


def get_default_device():
    """Returns the process-wide default device.

    The device is created from the ``parallel_reduction.core.config`` options
    on first use.
    """
    global _default_device
    if _default_device is None:
        _default_device = Device()
    return _default_device


def set_default_device(device):
    """Replaces the process-wide default device. Passing ``None`` makes the
    next call to :func:`get_default_device` rebuild it from the config.
    """
    global _default_device
    if device is not None and not isinstance(device, Device):
        raise TypeError("Expected a Device object or None")
    _default_device = device
