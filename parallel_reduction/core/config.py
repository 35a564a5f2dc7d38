# SPDX-FileCopyrightText: 2020 - 2024 Intel Corporation
#
# SPDX-License-Identifier: Apache-2.0

"""
The config options describe the default simulated device and toggle extra
debug output of the kernel launcher.

There are two ways of setting these config options:

- Config options can be directly set programmatically, *e.g.*,

    .. code-block:: python

        from parallel_reduction.core import config

        config.DEBUG = 1

- The options can also be set globally using environment flags. The name of the
  environment variable for every config option is annotated next to its
  definition.

    .. code-block:: bash

        export PARALLEL_REDUCTION_SUB_GROUP_SIZE=16

"""

from __future__ import annotations

import logging
import os
from typing import Annotated


def _readenv(name, ctor, default):
    """Read values from system environment variable list.

    Args:
        name (str): The name of the env variable.
        ctor (type): The type of the env variable.
        default (int,float,str): The default value of the env variable.

    Returns:
        int,float,string: The environment variable value of the specified type.
    """

    value = os.environ.get(name)
    if value is None:
        return default() if callable(default) else default
    try:
        return ctor(value)
    except Exception:
        logging.exception(
            "env variable %s defined but failed to parse '%s'", name, value
        )
        return default


DEBUG: Annotated[
    int,
    "Generates extra debug logging from the kernel launcher when set to a "
    "non-zero value",
    "default = 0",
    "ENVIRONMENT FLAG: PARALLEL_REDUCTION_DEBUG",
] = _readenv("PARALLEL_REDUCTION_DEBUG", int, 0)

DEFAULT_DEVICE_NAME: Annotated[
    str,
    "Name reported by the default simulated device",
    'default = "simulated:gpu:0"',
    "ENVIRONMENT FLAG: PARALLEL_REDUCTION_DEVICE_NAME",
] = _readenv("PARALLEL_REDUCTION_DEVICE_NAME", str, "simulated:gpu:0")

DEFAULT_SUB_GROUP_SIZE: Annotated[
    int,
    "Number of work items the default simulated device executes in lockstep, "
    "i.e. its native SIMD width. Must be a power of two.",
    "default = 32",
    "ENVIRONMENT FLAG: PARALLEL_REDUCTION_SUB_GROUP_SIZE",
] = _readenv("PARALLEL_REDUCTION_SUB_GROUP_SIZE", int, 32)

DEFAULT_MAX_WORK_GROUP_SIZE: Annotated[
    int,
    "Largest work-group the default simulated device accepts",
    "default = 256",
    "ENVIRONMENT FLAG: PARALLEL_REDUCTION_MAX_WORK_GROUP_SIZE",
] = _readenv("PARALLEL_REDUCTION_MAX_WORK_GROUP_SIZE", int, 256)
