from .token_handler import filter_tokens, is_accepted, split_tokens

__all__ = ["split_tokens", "is_accepted", "filter_tokens"]
