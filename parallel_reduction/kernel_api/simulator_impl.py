# SPDX-FileCopyrightText: 2023 - 2024 Intel Corporation
#
# SPDX-License-Identifier: Apache-2.0

"""Cooperative scheduler that executes the work-items of one work-group.

Every work-item runs inside its own greenlet. A work-item hands control back
to the scheduler in two situations:

- it reached a group barrier, after which it stays parked until every
  work-item of the work-group has reached the barrier;
- it accessed volatile local memory, after which the scheduler lets the other
  work-items of the same sub-group issue their next access first.

Sub-groups are executed one after another, each until all of its work-items
are either parked on a barrier or finished. Inside a sub-group the work-items
are resumed round-robin, so the n-th volatile access of every lane happens
before the (n+1)-th access of any lane, which is the ordering guaranteed by
lockstep hardware.
"""

import logging

from greenlet import getcurrent, greenlet

from parallel_reduction.core import config
from parallel_reduction.core.exceptions import BarrierDivergenceError

_BARRIER = "barrier"
_LOCKSTEP = "lockstep"

_execution_state = None


class _WorkItemTask:
    def __init__(self, run):
        self.glet = greenlet(run)
        self.at_barrier = False

    @property
    def finished(self):
        return self.glet.dead

    @property
    def runnable(self):
        return not self.at_barrier and not self.glet.dead


class WorkGroupState:
    """Bookkeeping for the work-group that is currently being executed.

    Args:
        kernel_name (str): Name of the kernel, used in error messages.
        group_id (tuple): Index of the work-group.
        sub_group_size (int): Number of consecutive work-items that form one
            sub-group.
    """

    def __init__(self, kernel_name, group_id, sub_group_size):
        self.kernel_name = kernel_name
        self.group_id = tuple(group_id)
        self.sub_group_size = sub_group_size
        self.tasks = []
        self.scheduler = None

    def add_work_item(self, run):
        self.tasks.append(_WorkItemTask(run))

    def sub_groups(self):
        size = self.sub_group_size
        return [
            self.tasks[i : i + size] for i in range(0, len(self.tasks), size)
        ]


def get_exec_state():
    if _execution_state is None:
        raise NotImplementedError(
            "Group synchronization and volatile local memory are only "
            "available inside a kernel launched over an NdRange."
        )
    return _execution_state


def _yield_to_scheduler(reason):
    state = get_exec_state()
    if getcurrent() is state.scheduler:
        return
    state.scheduler.switch(reason)


def barrier():
    """Parks the calling work-item until the whole work-group reaches the
    barrier."""
    _yield_to_scheduler(_BARRIER)


def lockstep_step():
    """Ends the calling work-item's current lockstep step."""
    _yield_to_scheduler(_LOCKSTEP)


def _run_sub_group(lanes):
    while True:
        runnable = [t for t in lanes if t.runnable]
        if not runnable:
            return
        for task in runnable:
            reason = task.glet.switch()
            if reason == _BARRIER:
                task.at_barrier = True


def _release_barrier(state):
    waiting = [t for t in state.tasks if t.at_barrier]
    if not waiting:
        return False

    finished = sum(1 for t in state.tasks if t.finished)
    if finished:
        raise BarrierDivergenceError(
            kernel_name=state.kernel_name,
            group_id=state.group_id,
            waiting=len(waiting),
            finished=finished,
        )

    if config.DEBUG:
        logging.debug(
            "kernel %s: work-group %s released from group barrier",
            state.kernel_name,
            state.group_id,
        )
    for task in waiting:
        task.at_barrier = False
    return True


def execute_work_group(state):
    """Runs every work-item registered in ``state`` to completion.

    Raises:
        BarrierDivergenceError: If a group barrier is not reached by all
            work-items of the work-group.
    """
    global _execution_state
    assert _execution_state is None, "work-groups cannot be nested"

    state.scheduler = getcurrent()
    _execution_state = state
    try:
        sub_groups = state.sub_groups()
        while True:
            for lanes in sub_groups:
                _run_sub_group(lanes)
            if not _release_barrier(state):
                break
    finally:
        _execution_state = None
        state.tasks.clear()
