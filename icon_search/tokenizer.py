"""Tokenizer shared by the keyword parser and the catalog index."""
from typing import List

import regex

# Runs of punctuation (including "_"), symbols and whitespace. Combining
# marks stay inside their word.
WORD_BOUNDARY = regex.compile(r"[\p{P}\p{S}\s]+")


def tokenize(text: str) -> List[str]:
    """Split text into lowercase word tokens.
    
    Args:
        text: Text to tokenize
        
    Returns:
        List of non-empty lowercase tokens, in order of appearance
    """
    if not text:
        return []
    
    tokens = []
    for piece in WORD_BOUNDARY.split(text):
        token = piece.strip().lower()
        if token:
            tokens.append(token)
    
    return tokens
