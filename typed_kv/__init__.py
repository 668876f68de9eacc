"""
typed-kv is a small key value store for embedding in other programs.

Keys and values are strings, persisted through a pluggable `Driver`, and read
back as typed values on demand:

```python
from typed_kv import Store
from typed_kv.driver import FileDriver

store = Store(driver=FileDriver("settings.env"))
store.load()
port = store.get_u16("port")
```
"""

from .store import Store
from .primitives import TypedValue

__all__ = [
    "Store",
    "TypedValue",
    "driver",
    "validation",
    "config",
    "exceptions",
]
