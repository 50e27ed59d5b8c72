from program.stores.interfaces import RegistrationStore

__all__ = ["RegistrationStore"]
