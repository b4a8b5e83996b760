"""
Declaration decorators.

    @handler
    class CreateOrder:
        @inject
        def __init__(self, orders: Annotated[TableClientFactory, "orders"]): ...

    @controller
    class Orders:
        @action("create")
        def create(self, event): ...

``@handler`` and ``@controller`` attach a ``Declaration`` to the class and
make its constructor injectable. ``@action`` marks controller methods; the
controller's ``methods`` map is built from those marks.
"""

import inspect
from typing import Any, Callable, Dict, Optional

from injector import inject

from ..models.declarations import DECLARATION_ATTR, Declaration, DeclarationKind

ACTION_ATTR = "__serverless_action__"


def ensure_injectable(cls: type) -> type:
    """Apply ``injector.inject`` to ``cls`` unless its constructor already carries bindings.

    Classes relying on ``object.__init__`` need nothing and are returned as is.
    """
    init = getattr(cls, '__init__', None)
    if not inspect.isfunction(init) or hasattr(init, '__bindings__'):
        return cls
    return inject(cls)


def _collect_actions(cls: type) -> Dict[str, str]:
    methods = {}
    for attr_name, member in inspect.getmembers(cls, inspect.isfunction):
        action_name = getattr(member, ACTION_ATTR, None)
        if action_name is not None:
            methods[action_name] = attr_name
    return methods


def action(name: Optional[str] = None) -> Callable[[Callable], Callable]:
    """Expose a controller method under ``name`` (defaults to the method name)."""
    def decorator(func: Callable) -> Callable:
        setattr(func, ACTION_ATTR, name or func.__name__)
        return func
    return decorator


def handler(cls: Optional[type] = None, *, name: Optional[str] = None) -> Any:
    """Tag a class as a handler, optionally under a custom name."""
    def decorator(target: type) -> type:
        ensure_injectable(target)
        setattr(target, DECLARATION_ATTR, Declaration(
            kind=DeclarationKind.HANDLER,
            name=name or target.__name__,
            target=target,
        ))
        return target
    return decorator(cls) if cls is not None else decorator


def controller(cls: Optional[type] = None, *, name: Optional[str] = None) -> Any:
    """Tag a class as a controller and record its ``@action`` methods."""
    def decorator(target: type) -> type:
        ensure_injectable(target)
        setattr(target, DECLARATION_ATTR, Declaration(
            kind=DeclarationKind.CONTROLLER,
            name=name or target.__name__,
            target=target,
            methods=_collect_actions(target),
        ))
        return target
    return decorator(cls) if cls is not None else decorator
