"""
Dependency injection container (DIP)
"""
import inspect
import logging
from typing import TypeVar, Dict, Any, Callable, Type

T = TypeVar('T')

logger = logging.getLogger(__name__)


class Container:
    """
    Maps interfaces to implementations.

    Constructor parameters are resolved from their type annotations; a
    parameter named `session` receives the SQLAlchemy session passed to
    `resolve_with_session`.
    """

    def __init__(self):
        self._singletons: Dict[str, Any] = {}
        self._singleton_types: Dict[str, Type] = {}
        self._transients: Dict[str, Type] = {}
        self._factories: Dict[str, Callable[..., Any]] = {}

    def register_singleton(self, interface: Type[T], implementation: Type[T]):
        """Register a service created once and shared"""
        self._singleton_types[self._get_key(interface)] = implementation

    def register_transient(self, interface: Type[T], implementation: Type[T]):
        """Register a service created on every resolution"""
        self._transients[self._get_key(interface)] = implementation

    def register_instance(self, interface: Type[T], instance: T):
        """Register an already built instance"""
        self._singletons[self._get_key(interface)] = instance

    def register_factory(self, interface: Type[T], factory: Callable[..., T]):
        """Register a callable building the service; it receives the session when one is given"""
        self._factories[self._get_key(interface)] = factory

    def resolve(self, interface: Type[T]) -> T:
        """Resolve a dependency without a database session"""
        return self._resolve(interface, None)

    def resolve_with_session(self, interface: Type[T], session) -> T:
        """Resolve a dependency injecting the database session"""
        return self._resolve(interface, session)

    def is_registered(self, interface: Type[T]) -> bool:
        key = self._get_key(interface)
        return any(key in registry for registry in (
            self._singletons, self._singleton_types, self._transients, self._factories
        ))

    def clear(self):
        self._singletons.clear()
        self._singleton_types.clear()
        self._transients.clear()
        self._factories.clear()
        logger.debug("Container cleared")

    def _resolve(self, interface: Type[T], session) -> T:
        key = self._get_key(interface)

        if key in self._singletons:
            return self._singletons[key]
        if key in self._singleton_types:
            self._singletons[key] = self._create_instance(self._singleton_types[key], session)
            return self._singletons[key]
        if key in self._factories:
            return self._factories[key](session)
        if key in self._transients:
            return self._create_instance(self._transients[key], session)

        raise ValueError(f"Cannot resolve {interface.__name__}: No registration found")

    def _create_instance(self, implementation: Type[T], session) -> T:
        """Build an instance resolving its constructor parameters"""
        kwargs = {}
        for param_name, param in inspect.signature(implementation.__init__).parameters.items():
            if param_name == 'self' or param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
                continue
            if param_name == 'session':
                kwargs[param_name] = session
                continue

            param_type = param.annotation
            if param_type is not inspect.Parameter.empty and self.is_registered(param_type):
                kwargs[param_name] = self._resolve(param_type, session)
            elif param.default is not inspect.Parameter.empty:
                kwargs[param_name] = param.default
            else:
                raise ValueError(f"Cannot resolve parameter {param_name} of type {param_type}")

        return implementation(**kwargs)

    @staticmethod
    def _get_key(interface: Type[T]) -> str:
        return getattr(interface, '__name__', str(interface))


# Global container instance
container = Container()
