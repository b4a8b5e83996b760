"""
Tests for declaration decorators (di/decorators.py)
"""

from injector import Injector, inject

from serverless_di.di import action, controller, ensure_injectable, handler
from serverless_di.models import DECLARATION_ATTR, DeclarationKind, get_declaration


class Greeter:
    def greet(self, name):
        return f"hello {name}"


class TestHandlerDecorator:

    def test_attaches_handler_declaration(self):
        @handler
        class SayHello:
            pass

        declaration = get_declaration(SayHello)
        assert declaration.kind == DeclarationKind.HANDLER
        assert declaration.name == "SayHello"
        assert declaration.target is SayHello
        assert declaration.methods == {}

    def test_custom_name(self):
        @handler(name="hello")
        class SayHello:
            pass

        assert get_declaration(SayHello).name == "hello"

    def test_makes_constructor_injectable(self):
        @handler
        class SayHello:
            def __init__(self, greeter: Greeter):
                self.greeter = greeter

        instance = Injector().get(SayHello)

        assert isinstance(instance.greeter, Greeter)


class TestControllerDecorator:

    def test_collects_actions(self):
        @controller
        class Users:
            @action("list")
            def list_users(self, event):
                return []

            @action()
            def get(self, event):
                return {}

            def helper(self):
                return None

        declaration = get_declaration(Users)
        assert declaration.kind == DeclarationKind.CONTROLLER
        assert declaration.methods == {"list": "list_users", "get": "get"}

    def test_declaration_is_not_inherited(self):
        @controller
        class Base:
            pass

        class Child(Base):
            pass

        assert get_declaration(Base) is not None
        assert get_declaration(Child) is None
        assert hasattr(Child, DECLARATION_ATTR)


class TestEnsureInjectable:

    def test_class_without_constructor_is_unchanged(self):
        class Plain:
            pass

        assert ensure_injectable(Plain) is Plain
        assert not hasattr(Plain.__init__, '__bindings__')

    def test_marks_typed_constructor(self):
        class Service:
            def __init__(self, greeter: Greeter):
                self.greeter = greeter

        ensure_injectable(Service)

        assert Service.__init__.__bindings__ == {'greeter': Greeter}

    def test_keeps_existing_bindings(self):
        class Service:
            @inject
            def __init__(self, greeter: Greeter):
                self.greeter = greeter

        bindings = Service.__init__.__bindings__
        ensure_injectable(Service)

        assert Service.__init__.__bindings__ is bindings
