import importlib.util
import logging
import sys
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


def load_module(script_path: Path, module_name: Optional[str] = None):
    """
    Import a python file as a module.

    Args:
        script_path: Path to the .py file
        module_name: Name to register in sys.modules, defaults to the stem

    Returns:
        The imported module
    """
    script_path = Path(script_path)
    if module_name is None:
        module_name = script_path.stem
    if module_name in sys.modules:
        return sys.modules[module_name]

    spec = importlib.util.spec_from_file_location(
        module_name,
        script_path,
        submodule_search_locations=[str(script_path.parent)]
        if script_path.name == "__init__.py"
        else None,
    )
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    spec.loader.exec_module(module)
    logger.debug("Loaded module %s from %s", module_name, script_path)
    return module


def incrf(start: int = 1):
    """Endless counter, starting at ``start``."""
    i = start
    while True:
        yield i
        i += 1
