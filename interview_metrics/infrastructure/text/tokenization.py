"""
Word tokenization and n-gram generation shared by every scorer.
"""
import re
from typing import List, Sequence

# ASCII word characters only, matching the transcripts the scorers were tuned on
_NON_WORD_RE = re.compile(r"[^\w\s]", re.ASCII)


def tokenize(text: str) -> List[str]:
    """
    Split text into lower-cased word tokens.
    
    Every character that is not a word character or whitespace becomes a
    space, so "don't" yields ["don", "t"].
    """
    if not text:
        return []
    return _NON_WORD_RE.sub(" ", text.lower()).split()


def generate_ngrams(tokens: Sequence[str], n: int) -> List[str]:
    """
    Build contiguous n-grams (stride 1) joined by a single space.
    
    Args:
        tokens: Token sequence in original order
        n: N-gram order, at least 1
        
    Returns:
        max(0, len(tokens) - n + 1) n-grams; empty when tokens are too short
        
    Raises:
        ValueError: If n is smaller than 1
    """
    if n < 1:
        raise ValueError(f"n-gram order must be at least 1, got {n}")
    return [" ".join(tokens[i:i + n]) for i in range(len(tokens) - n + 1)]
