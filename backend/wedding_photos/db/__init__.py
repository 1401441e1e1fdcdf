from .storage import Storage
from .memory import MemoryStorage
