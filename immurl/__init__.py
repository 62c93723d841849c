from ._api import *
from ._builder import *
from ._exceptions import *
from ._models import *
from ._paths import *
from ._queries import *
from ._schemes import *

__all__ = []
__all__ += _api.__all__
__all__ += _builder.__all__
__all__ += _exceptions.__all__
__all__ += _models.__all__
__all__ += _paths.__all__
__all__ += _queries.__all__
__all__ += _schemes.__all__

__version__ = "0.1.0"


__locals = locals()
for __name in __all__:
    if not __name.startswith("__"):
        setattr(__locals[__name], "__module__", "immurl")  # noqa
