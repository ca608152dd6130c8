"""Registry base class and variant registry.

Provides a generic Registry pattern with a register() decorator, get(name)
lookup, and list_all() enumeration. VariantRegistry uses it to look up
concrete Hookable variants by name.
"""


class Registry:
    """Generic class registry.

    Subclasses MUST define their own ``_items = {}`` to avoid sharing
    state across registries, and should set ``_registry_label`` for
    descriptive error messages.

    The ``register()`` decorator supports two calling conventions:

    1. ``@MyRegistry.register("name")`` -- name passed as argument.
    2. ``@MyRegistry.register`` -- name read from the class's ``name``
       attribute (the class is not instantiated).
    """

    _items: dict[str, type] = {}
    _registry_label: str = "item"

    @classmethod
    def register(cls, item_or_name=None):
        """Decorator to register a class.

        Usage:
            @MyRegistry.register("my_name")
            class Foo: ...

            @MyRegistry.register
            class Bar:
                name = "bar"
        """
        # Case 1: @Registry.register("name")
        if isinstance(item_or_name, str):
            name = item_or_name
            def decorator(registered_cls):
                cls._store(name, registered_cls)
                return registered_cls
            return decorator

        # Case 2: @Registry.register applied directly to a class
        if isinstance(item_or_name, type):
            cls._store(cls._name_of(item_or_name), item_or_name)
            return item_or_name

        # Case 3: @Registry.register()
        if item_or_name is None:
            def decorator(registered_cls):
                cls._store(cls._name_of(registered_cls), registered_cls)
                return registered_cls
            return decorator

        raise TypeError(
            f"{cls.__name__}.register() expects a string name, "
            f"a class, or no arguments. Got: {type(item_or_name)}"
        )

    @classmethod
    def _name_of(cls, registered_cls: type) -> str:
        name = getattr(registered_cls, 'name', None)
        if not isinstance(name, str) or not name:
            raise TypeError(
                f"{registered_cls.__name__} needs a string 'name' attribute "
                f"to be registered as a {cls._registry_label}"
            )
        return name

    @classmethod
    def _store(cls, name: str, registered_cls: type):
        existing = cls._items.get(name)
        if existing is not None and existing is not registered_cls:
            raise ValueError(
                f"Duplicate {cls._registry_label} '{name}': "
                f"{existing.__name__} and {registered_cls.__name__}"
            )
        cls._items[name] = registered_cls

    @classmethod
    def get(cls, name: str):
        """Get a registered class by name."""
        if name not in cls._items:
            available = ', '.join(sorted(cls._items.keys()))
            raise ValueError(
                f"Unknown {cls._registry_label}: '{name}'. "
                f"Available: {available}"
            )
        return cls._items[name]

    @classmethod
    def list_all(cls) -> list[str]:
        """List all registered names (sorted)."""
        return sorted(cls._items.keys())


class VariantRegistry(Registry):
    """Registry of concrete Hookable variants.

    Variants register themselves with a name so callers can pick an
    implementation of a shared hook configuration by name.
    """

    _items = {}
    _registry_label = "variant"

    @classmethod
    def create(cls, name: str, *args, **kwargs):
        """Instantiate a registered variant."""
        return cls.get(name)(*args, **kwargs)
