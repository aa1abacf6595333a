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

import logging

from wordpredictor.errors import InvalidDistribution
from wordpredictor.word_probability import to_entries

# absorbs floating point error in cumulative sums computed by callers
TOLERANCE = 1e-3

def validate(probs, tolerance=TOLERANCE):
    """ check that a table of successor probabilities is well formed
    
    Each word must map to a non-empty list of (word, cumulative probability)
    pairs. The cumulative probabilities must be strictly ascending, each must
    be above zero and at most one, and the final probability must be one.
    The upper bound and the final value are both checked within a tolerance.
    
    Args:
        probs: dict mapping each word to the list of words that could follow
            it, e.g. {'the': [('cat', 0.1), ('dog', 0.5), ('lizard', 1.0)]}
        tolerance: allowed error for the upper bound and final value checks
    
    Raises:
        InvalidDistribution on the first problem found
    """
    
    if not probs:
        raise InvalidDistribution("probability map must not be empty")
    
    for word, pairs in probs.items():
        entries = to_entries(word, pairs)
        if len(entries) == 0:
            raise InvalidDistribution(f"probability list for word '{word}' "
                "must not be empty")
        
        # the comparisons are negated so that NaN values fail each check
        previous = 0.0
        for entry in entries:
            prob = entry.cumulative_probability
            if not 0.0 < prob <= 1.0 + tolerance:
                raise InvalidDistribution(f"cumulative probability for word "
                    f"'{word}' must be > 0 and <= 1.0 (within tolerance), but "
                    f"was {prob}")
            if not prob > previous:
                raise InvalidDistribution(f"cumulative probabilities for word "
                    f"'{word}' must be strictly ascending")
            previous = prob
        
        if not abs(previous - 1.0) <= tolerance:
            raise InvalidDistribution(f"final cumulative probability for word "
                f"'{word}' must be within {tolerance} of 1.0, but was {previous}")
    
    logging.debug(f'validated successor probabilities for {len(probs)} words')
