"""
Logging and error classes for meshdata.

Loggers:

- :py:attr:`mylog`: the main logger, for messages meant for users.
- :py:attr:`devlog`: the development logger, tracing structural changes to the
  mesh / group / dataset tree. Disabled unless turned on in the configuration.

Levels, streams and formats of both loggers come from the configuration.
"""
import logging
import sys

from meshdata.utils.config import meshdata_params

# @@ SETTING UP LOGGERS @@ #
streams = dict(
    mylog=getattr(sys, meshdata_params["logging.mylog.stream"]),
    devlog=getattr(sys, meshdata_params["logging.devlog.stream"]),
)
_loggers = dict(mylog=logging.Logger("MeshData"), devlog=logging.Logger("MeshData-DEV"))

_handlers = {}

for k, v in _loggers.items():
    _handlers[k] = logging.StreamHandler(streams[k])
    _handlers[k].setFormatter(logging.Formatter(meshdata_params[f"logging.{k}.format"]))

    v.addHandler(_handlers[k])
    v.setLevel(meshdata_params[f"logging.{k}.level"])
    v.propagate = False

    if k != "mylog":
        v.disabled = not meshdata_params[f"logging.{k}.enabled"]

mylog: logging.Logger = _loggers["mylog"]
""":py:class:`logging.Logger`: the main logger for ``meshdata``."""
devlog: logging.Logger = _loggers["devlog"]
""":py:class:`logging.Logger`: the development logger for ``meshdata``."""


class MeshDataError(Exception):
    """Base class of all errors raised by meshdata."""


class MeshStructureError(MeshDataError):
    """
    The mesh / group / dataset tree is wired incorrectly.

    Raised when a group is created without a mesh, a dataset without a group,
    or when a child is attached to a parent it does not reference.
    """


class DatasetGroupLockedError(MeshDataError):
    """
    A shape property of a group was changed after datasets were created.

    Datasets size their storage from the group's data location and
    scalar/vector flag when they are created, so both are frozen as soon as
    the group owns a dataset.
    """
