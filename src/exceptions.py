# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Domain exceptions shared by services and the API layer."""


class DataUnavailableError(Exception):
    """The backing store could not answer a read.

    This is a fault, not a policy outcome: callers must never treat it as a
    denial.
    """


class NotFoundError(LookupError):
    """A referenced record does not exist."""

    def __init__(self, entity: str, identifier: object):
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} not found: {identifier}")
