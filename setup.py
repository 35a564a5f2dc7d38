# SPDX-FileCopyrightText: 2020 - 2024 Intel Corporation
#
# SPDX-License-Identifier: Apache-2.0


import re
from pathlib import Path

from setuptools import find_packages, setup

"""Top level setup.py file.

    This will build the parallel_reduction project. There are two ways to
    install it.

    `install` command:
        ~$ pip install .

    `develop` command:
        ~$ pip install -e .

    To uninstall:
        ~$ pip uninstall parallel-reduction
"""


def get_version():
    """Read __version__ from the package without importing it."""
    init_py = Path(__file__).parent / "parallel_reduction" / "__init__.py"
    match = re.search(
        r'^__version__ = "([^"]+)"', init_py.read_text(), re.MULTILINE
    )
    if not match:
        raise Exception("Unable to find the package version")

    return match.group(1)


# Main setup
setup(
    name="parallel-reduction",
    version=get_version(),
    description=(
        "Barrier, lockstep and hybrid work-group sum reduction kernels "
        "on a simulated data-parallel device"
    ),
    license="Apache 2.0",
    python_requires=">=3.9",
    packages=find_packages(".", include=["parallel_reduction*"]),
    # Needs for examples.
    package_data={"parallel_reduction": ["examples/*.py"]},
    install_requires=[
        "numpy",
        "greenlet",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
