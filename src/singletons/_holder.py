# Imported on demand by singletons.holder; the module body is the initializer.
from .holder import HolderSingleton

with HolderSingleton.construction_permit():
    INSTANCE = HolderSingleton()
HolderSingleton._singleton_instance = INSTANCE
