# transaction_query/outputs/__init__.py
import logging
from importlib import import_module

logger = logging.getLogger(__name__)

def get_output(name, config):
    try:
        path = config['output_modules'][name]
    except KeyError as exc:
        raise ValueError(f"Unknown output '{name}'") from exc
    logger.debug("Resolving output %s -> %s", name, path)
    module_name, cls_name = path.rsplit('.', 1)
    mod = import_module(module_name)
    return getattr(mod, cls_name)(config)
