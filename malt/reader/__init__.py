from malt.reader.parser import tokenize, TokenStream, read_str

__all__ = ["tokenize", "TokenStream", "read_str"]
