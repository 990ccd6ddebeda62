# dashboard/models/results.py
"""
Result shapes returned by the form actions.

A create/update action returns either a ``Redirect`` (the mutation
committed and the listing view was refreshed) or a state object the form
renders back to the user.
"""

from typing import Dict, List, Optional, Union

from pydantic import BaseModel


class State(BaseModel):
    errors: Optional[Dict[str, List[str]]] = None
    message: Optional[str] = None


class CustomerState(State):
    pass


class Redirect(BaseModel):
    location: str


ActionResult = Union[Redirect, State]
