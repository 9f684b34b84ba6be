#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

# dateonly - date without time-of-day, on top of the runtime DateTime

# Base types
from .Obj import Obj
from .Enum import Enum

# Errors
from .Err import Err, ParseErr, ArgErr, UnsupportedErr, NameErr

# Environment and logging
from .Env import Env
from .Log import Log, LogLevel, LogRec

# Date/Time
from .DateKind import DateKind
from .TimeZone import TimeZone
from .DateTime import DateTime
from .DateOnly import DateOnly

# Output parameter cell
from .Ref import Ref
