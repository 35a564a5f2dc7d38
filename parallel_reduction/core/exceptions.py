# SPDX-FileCopyrightText: 2020 - 2024 Intel Corporation
#
# SPDX-License-Identifier: Apache-2.0

"""The module defines the custom error classes used in parallel_reduction.
"""


class InvalidKernelLaunchArgsError(Exception):
    """Exception raised when a kernel is dispatched with a number of kernel
    arguments that does not match the kernel function's parameters.

    Every kernel function receives an index-space id (an ``Item`` or an
    ``NdItem``) as its first argument, followed by the arguments passed to
    ``call_kernel``.

    Args:
        kernel_name (str): The kernel function name.
        expected (int): Number of kernel arguments the function accepts.
        provided (int): Number of kernel arguments passed to the launcher.
    """

    def __init__(self, kernel_name, expected, provided) -> None:
        self.message = (
            f'Kernel "{kernel_name}" expects {expected} kernel arguments '
            f"after the index-space id, but {provided} were provided."
        )
        super().__init__(self.message)


class UnmatchedNumberOfRangeDimsError(Exception):
    """Exception raised when the global range and local range have different
    number of dimensions or rank.

    Args:
        kernel_name (str): The kernel function name.
        global_ndims (int): Rank of the global range.
        local_ndims (int): Rank of the local range.
    """

    def __init__(self, kernel_name, global_ndims, local_ndims) -> None:
        self.message = (
            f"Specified global_range for kernel {kernel_name} has "
            f"{global_ndims} dimensions, "
            f"while specified local_range with dimensions of {local_ndims} "
            "doesn't match with global_range."
        )
        super().__init__(self.message)


class UnsupportedWorkItemSizeError(Exception):
    """Exception raised when the number of work items requested for a
    work-group exceeds the number supported by the device.

    Args:
        kernel_name (str): The kernel function name.
        requested_work_items (int): Number of requested work items.
        supported_work_items (int): Supported number of work items.
    """

    def __init__(
        self, kernel_name, requested_work_items, supported_work_items
    ) -> None:
        self.message = (
            f"Attempting to launch kernel {kernel_name} with "
            f"{requested_work_items} work items per work-group is not "
            f"supported. The device supports only {supported_work_items} "
            "work items per work-group."
        )
        super().__init__(self.message)


class UnsupportedGroupWorkItemSizeError(Exception):
    """Exception raised when the value in a specific dimension of a global
    range is not evenly divisible by the value in the corresponding dimension
    in a local range.

    Args:
        kernel_name (str): The kernel function name.
        dim (int): Dimension where the mismatch was identified.
        work_groups (int): Number of requested work groups.
        work_items (int): Number of requested work items in the errant
        dimension of the local range.
    """

    def __init__(self, kernel_name, dim, work_groups, work_items) -> None:
        self.message = (
            f"Attempting to launch kernel {kernel_name} with "
            f"{work_groups} global work groups and {work_items} local work "
            f"items in dimension {dim} is not supported. The global work "
            "groups must be evenly divisible by the local work items."
        )
        super().__init__(self.message)


class BarrierDivergenceError(Exception):
    """Exception raised when a group barrier is not reached by every work-item
    of a work-group.

    On a real device a barrier inside divergent control flow is undefined
    behavior and usually hangs the work-group. The simulator detects the
    situation once every still running work-item waits on the barrier while
    some others have already returned from the kernel.

    Args:
        kernel_name (str): The kernel function name.
        group_id (tuple): Index of the work-group where the divergence was
            detected.
        waiting (int): Number of work-items waiting on the barrier.
        finished (int): Number of work-items that returned without reaching
            the barrier.
    """

    def __init__(self, kernel_name, group_id, waiting, finished) -> None:
        self.message = (
            f"Kernel {kernel_name}: {waiting} work items of work-group "
            f"{group_id} wait on a group barrier that {finished} work items "
            "returned without reaching. A group barrier must be encountered "
            "by all work items of a work-group."
        )
        super().__init__(self.message)


class InvalidDeviceConfigError(Exception):
    """Exception raised when a simulated device is described with sizes that
    no device can have.

    Args:
        attr (str): Name of the errant device attribute.
        value (int): The rejected value.
        reason (str): What the attribute is required to be.
    """

    def __init__(self, attr, value, reason) -> None:
        self.message = (
            f"Device attribute {attr}={value} is invalid, it must be {reason}."
        )
        super().__init__(self.message)
