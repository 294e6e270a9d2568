""" SETTINGS
"""
import builtins
import logging
from os import environ

FORMAT = '%(asctime)-15s %(name)s %(levelname)s %(message)s'


#
#  ENV
#
def get(var_name, default=None, typ=None):
    val = _strtoval(environ.get(var_name))
    if val is None:
        return default
    if typ and not isinstance(val, bool):
        val = getattr(builtins, typ)(val)
    return val


def _strtoval(string):
    if string:
        lc_string = string.lower()
        if lc_string == 'false':
            return False
        elif lc_string == 'true':
            return True
        elif lc_string == 'none':
            return None
        else:
            return string


#
# CONFIG
#
EPSILON = get('CONVEX_HULL_EPSILON', 1e-9, 'float')
LOG_LEVEL = get('CONVEX_HULL_LOG_LEVEL', 'WARNING', 'str')
BENCHMARK_SEED = get('CONVEX_HULL_BENCHMARK_SEED', None, 'int')


def configure_logging(level=None):
    """ entry points only: library modules just log to their own loggers
    """
    level = level or LOG_LEVEL
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(format=FORMAT, level=level)
