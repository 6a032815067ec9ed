"""
Core FormNode base class for FormSpec.

This module contains the base model shared by every node of a form
specification tree.
"""

from pydantic import BaseModel, ConfigDict


class FormNode(BaseModel):
    """
    Base class for all form specification node types.

    Nodes are frozen once built: children are stored as tuples owned by
    their parent, so a tree can be read by any number of derivation and
    validation passes without copying.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")
