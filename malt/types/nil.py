from __future__ import annotations


class NilType:
    _instance: NilType | None = None

    def __new__(cls):
        # Singleton: every NilType() is the same Nil
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "nil"
    def __bool__(self): return False

    # Nil is equal only to Nil
    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)


Nil = NilType()
