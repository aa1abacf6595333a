"""
Copyright (c) 2015 Genome Research Ltd.

Permission is hereby granted, free of charge, to any person obtaining a copy of
this software and associated documentation files (the "Software"), to deal in
the Software without restriction, including without limitation the rights to
use, copy, modify, merge, publish, distribute, sublicense, and/or sell copies
of the Software, and to permit persons to whom the Software is furnished to do
so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY, FITNESS
FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR
COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER
IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.
"""

import numbers
from typing import NamedTuple

from wordpredictor.errors import InvalidDistribution

class WordProbability(NamedTuple):
    ''' a possible next word, along with its cumulative probability
    '''
    word: str
    cumulative_probability: float

def to_entries(word, pairs):
    """ convert the successors for a word into WordProbability entries
    
    Args:
        word: the word the successors follow, only used in error messages
        pairs: sequence of (word, cumulative probability) pairs, which can be
            WordProbability entries or plain tuples
    
    Returns:
        tuple of WordProbability entries, in the original order
    
    Raises:
        InvalidDistribution if an entry isn't a (word, number) pair
    """
    
    if pairs is None:
        raise InvalidDistribution(f"probability list for word '{word}' is missing")
    
    entries = []
    for pair in pairs:
        try:
            successor, prob = pair
        except (TypeError, ValueError):
            raise InvalidDistribution(f"entries for word '{word}' must be "
                f"(word, probability) pairs, not {pair!r}") from None
        
        # bools are Real numbers too, but never a sensible probability
        if not isinstance(prob, numbers.Real) or isinstance(prob, bool):
            raise InvalidDistribution(f"cumulative probability for word "
                f"'{word}' must be a number, not {prob!r}")
        
        entries.append(WordProbability(successor, float(prob)))
    
    return tuple(entries)
