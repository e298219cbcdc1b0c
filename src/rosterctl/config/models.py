"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, the [shell] table of
rosterctl.toml only holds overrides.  An empty or missing file reproduces
the stock protocol.
"""

from __future__ import annotations

from pydantic import BaseModel


class ShellConfig(BaseModel):
    """[shell] section: fixed strings of the interactive protocol."""

    model_config = {"frozen": True}

    prompt: str = "Enter command."
    ack: str = "OK"
    farewell: str = "Exiting"
    separator: str = "-" * 13
    all_header: str = "All Employees"
    no_employees: str = "No Employees"
    no_department: str = "No Department found"

