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
import random

from wordpredictor.errors import UnknownKey
from wordpredictor.validation import validate
from wordpredictor.weighted_choice import WeightedChoice
from wordpredictor.word_probability import to_entries

class WordPredictor:
    ''' predicts the next word in a sequence, given the previous word
    
    Each word maps to a list of the words that could follow it, stored with
    cumulative probabilities, e.g.
    
        {'the': [('cat', 0.1), ('dog', 0.5), ('lizard', 1.0)],
         'cat': [('sat', 0.6), ('ate', 1.0)]}
    
    Here "cat" follows "the" 10% of the time, "dog" 40% (0.5 - 0.1) and
    "lizard" 50% (1.0 - 0.5).
    
    The random number generator belongs to the predictor, and advances once
    per prediction. It is not locked, so share a predictor between threads
    only if the generator is safe to share.
    '''
    def __init__(self, probs, rng):
        ''' validate the probabilities, and set up a chooser for each word
        
        Args:
            probs: dict mapping each word to a non-empty list of (word,
                cumulative probability) pairs, with strictly ascending
                probabilities ending at one
            rng: random number generator, with a random() method returning
                floats in [0, 1), e.g. random.Random(seed). Use
                WordPredictor.with_fresh_rng() for a new generator.
        
        Raises:
            InvalidDistribution if the probabilities are empty or malformed
        '''
        if rng is None:
            raise TypeError('a random number generator is required, or use '
                'WordPredictor.with_fresh_rng()')
        
        validate(probs)
        self.rng = rng
        self.choices = {word: WeightedChoice(to_entries(word, pairs))
            for word, pairs in probs.items()}
        logging.debug(f'set up word predictor for {len(self.choices)} words')
    
    @classmethod
    def with_fresh_rng(cls, probs, seed=None):
        ''' construct a predictor with its own new random number generator
        
        Args:
            probs: dict of successor probabilities, as for WordPredictor()
            seed: optional seed, for repeatable predictions
        '''
        return cls(probs, random.Random(seed))
    
    def __contains__(self, word):
        return word in self.choices
    
    def __len__(self):
        return len(self.choices)
    
    def __iter__(self):
        return iter(self.choices)
    
    def _lookup(self, word):
        try:
            return self.choices[word]
        except KeyError:
            raise UnknownKey(word) from None
    
    def predict(self, word):
        ''' predict the next word in a sequence, given the previous word
        
        Args:
            word: the previous word in the sequence
        
        Returns:
            the predicted next word
        
        Raises:
            UnknownKey if there are no probabilities for the word. No random
            draw is consumed in that case.
        '''
        return self._lookup(word).choice(self.rng)
    
    def successors(self, word):
        ''' get the words that can follow a word, with their probabilities
        
        Returns:
            list of (word, probability) tuples, e.g. for "the" in the example
            above: [('cat', 0.1), ('dog', 0.4), ('lizard', 0.5)]
        '''
        return self._lookup(word).probabilities()
    
    def generate(self, word, count):
        ''' predict a sequence of words, feeding each prediction back in
        
        Args:
            word: word to start from. This must have successor probabilities.
            count: maximum number of words to predict
        
        Returns:
            iterator of predicted words. This stops early if a predicted word
            has no successor probabilities of its own.
        
        Raises:
            UnknownKey if there are no probabilities for the starting word
        '''
        return self._generate(self._lookup(word), count)
    
    def _generate(self, choices, count):
        for _ in range(count):
            word = choices.choice(self.rng)
            yield word
            if word not in self.choices:
                return
            choices = self.choices[word]
