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

import bisect

from wordpredictor.errors import InvalidDistribution

# weighted random selection, adapted from:
# http://stackoverflow.com/questions/3679694/a-weighted-version-of-random-choice
class WeightedChoice(object):
    """ class for weighted choices among the words that can follow one word.
    
    The cumulative probabilities are stored once, so each choice is a binary
    search, rather than a fresh pass over the list.
    """
    
    def __init__(self, entries):
        """ set up the lists of words and cumulative probabilities
        
        Args:
            entries: sequence of WordProbability entries, with strictly
                ascending cumulative probabilities ending at (or close to) one.
        """
        
        if len(entries) == 0:
            raise InvalidDistribution("can't choose from an empty list of words")
        
        self.words = tuple(x.word for x in entries)
        self.cum_probs = tuple(x.cumulative_probability for x in entries)
    
    def __len__(self):
        return len(self.words)
    
    def __repr__(self):
        pairs = ', '.join(f'({x!r}, {y})' for x, y in zip(self.words, self.cum_probs))
        return f'WeightedChoice([{pairs}])'
    
    def select(self, target):
        """ find the first word whose cumulative probability is >= a target
        
        Args:
            target: number in the range [0, 1)
        
        Returns:
            the word whose cumulative probability interval contains the target
        """
        
        pos = bisect.bisect_left(self.cum_probs, target)
        
        # a final probability just under one (within tolerance) leaves a small
        # gap above it, which belongs to the final word
        return self.words[min(pos, len(self.words) - 1)]
    
    def scan(self, target):
        """ linear equivalent of select(), checking each word in turn
        """
        
        for word, prob in zip(self.words, self.cum_probs):
            if prob >= target:
                return word
        
        return self.words[-1]
    
    def choice(self, rng):
        """ chooses a random word using the cumulative probabilities
        
        Args:
            rng: random number generator, with a random() method returning
                floats in [0, 1). This consumes one draw from it.
        
        Returns:
            the randomly selected word
        """
        
        return self.select(rng.random())
    
    def probabilities(self):
        """ get the probability of selecting each word
        
        Returns:
            list of (word, probability) tuples, in the original order
        """
        
        previous = 0.0
        probs = []
        for word, prob in zip(self.words, self.cum_probs):
            probs.append((word, prob - previous))
            previous = prob
        
        return probs
