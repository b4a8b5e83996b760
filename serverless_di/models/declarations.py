"""
Declaration metadata attached to handler and controller classes.

A ``Declaration`` is the tagged value the registrar switches on. The
``@handler`` and ``@controller`` decorators attach one to a class under
``DECLARATION_ATTR``; a ``Declaration`` may also be listed in a module
directly.
"""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

DECLARATION_ATTR = "__serverless_declaration__"


class DeclarationKind(str, Enum):
    """Supported declaration tags."""
    HANDLER = "handler"
    CONTROLLER = "controller"


class Declaration(BaseModel):
    """Handler or controller metadata.

    ``target`` is the class the container constructs. ``methods`` maps action
    names to attribute names on the target and is only meaningful for
    controllers.
    """

    kind: DeclarationKind
    name: str = Field(..., min_length=1)
    target: Any
    methods: Dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


def get_declaration(obj: Any) -> Optional[Declaration]:
    """Return the declaration attached directly to ``obj``, ignoring inherited ones."""
    if isinstance(obj, Declaration):
        return obj
    own = getattr(obj, '__dict__', None) or {}
    declaration = own.get(DECLARATION_ATTR)
    return declaration if isinstance(declaration, Declaration) else None
