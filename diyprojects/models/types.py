# diyprojects type definitions
# Rev 0.2.0

from __future__ import annotations
from typing import Literal

# Outcome of a single-record service call: success, missing row, or store fault
ResultCode = Literal["ok", "not_found", "persistence_error"]
