"""A simple name -> class registry."""
from typing import Any, Dict, List, Optional, Type

from sudoku_engine.utils.log import get_logger

logger = get_logger(__name__)


class Registry(object):
    """A registry to map strings to classes.

    Args:
        name (str): Registry name.
    """

    def __init__(self, name: str):
        self._name = name
        self._modules: Dict[str, Type] = {}

    def __len__(self):
        return len(self._modules)

    def __contains__(self, key):
        return key in self._modules

    def __repr__(self):
        return f"{self.__class__.__name__}(name={self._name}, items={list(self._modules)})"

    def list_modules(self) -> List[str]:
        return sorted(self._modules.keys())

    def get(self, module_key: str) -> Optional[Any]:
        """Get the registry record.

        Args:
            module_key (str): The module key.

        Returns:
            The registered class, or None if `module_key` is not registered.
        """
        return self._modules.get(module_key)

    def _register_module(self, module_name: str, module_cls: Type, force: bool = False):
        if module_name in self._modules and not force:
            raise KeyError(f"{module_name} is already registered in {self._name}")
        self._modules[module_name] = module_cls
        logger.debug(f"Registered `{module_name}` in registry `{self._name}`.")

    def register_module(self, module_name: str, module_cls: Optional[Type] = None, force=False):
        """Register a class with `module_name` as its key.

        Can be used as a decorator or as a plain call:

        ```python
        ORDERS = Registry("orders")

        @ORDERS.register_module("ascending")
        class AscendingOrder:
            pass

        ORDERS.register_module("other", OtherOrder)
        ```
        """
        if not isinstance(module_name, str):
            raise TypeError(f"module_name must be str, but got {type(module_name)}")

        if module_cls is not None:
            self._register_module(module_name, module_cls, force=force)
            return module_cls

        def _register(module_cls):
            self._register_module(module_name, module_cls, force=force)
            return module_cls

        return _register
