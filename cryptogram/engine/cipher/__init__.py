from cryptogram.engine.cipher.generator import CipherGenerator

__all__ = ["CipherGenerator"]
