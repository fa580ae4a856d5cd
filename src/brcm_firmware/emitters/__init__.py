# src/brcm_firmware/emitters/__init__.py

from .injector import InjectorEmitter
from .index import IndexEmitter
from .manifest import ManifestEmitter

__all__ = ["InjectorEmitter", "IndexEmitter", "ManifestEmitter"]
